import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from slowapi import Limiter

from dependencies import get_entry_store
from models.entry import Entry
from models.entry_view import EntryView
from services.entry_store import EntryStore
from utils.json_helpers import DecimalJSONRoute

logger = logging.getLogger(__name__)


def create_router(limiter: Limiter, write_rate_limit: str) -> APIRouter:
    """Build the /entries routes, rate limiting writes with ``limiter``."""
    router = APIRouter(prefix="/entries", tags=["entries"], route_class=DecimalJSONRoute)

    @router.get("", response_model=list[EntryView])
    def list_entries(store: EntryStore = Depends(get_entry_store)):
        return [EntryView.from_entry(e) for e in store.get_all()]

    @router.get("/{iso_code}", response_model=EntryView)
    def get_entry(iso_code: str, store: EntryStore = Depends(get_entry_store)):
        entry = store.get(iso_code)
        if entry is None:
            raise HTTPException(status_code=404, detail="Entry not found")
        return EntryView.from_entry(entry)

    @router.post("", response_model=EntryView, status_code=201)
    @limiter.limit(write_rate_limit)
    def add_entry(request: Request, entry: Entry, store: EntryStore = Depends(get_entry_store)):
        store.add(entry)
        logger.info("Added entry %r", entry.iso_code)
        return EntryView.from_entry(entry)

    return router
