import pytest
from fastapi.testclient import TestClient

from main import create_app
from services.entry_store import EntryStore


@pytest.fixture
def store():
    return EntryStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store=store)) as c:
        yield c
