import time
from fastapi import APIRouter, Depends

from dependencies import get_entry_store
from services.entry_store import EntryStore

router = APIRouter()

_start_time = time.time()


@router.get("/health")
def health_check(store: EntryStore = Depends(get_entry_store)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "entries": len(store),
    }
