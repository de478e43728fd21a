from fastapi import Request

from services.entry_store import EntryStore


def get_entry_store(request: Request) -> EntryStore:
    return request.app.state.entry_store
