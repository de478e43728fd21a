import logging
from pathlib import Path

from models.entry import Entry
from services.entry_store import EntryStore
from utils.json_helpers import loads_decimal

logger = logging.getLogger(__name__)


def load_entries(path: Path) -> list[Entry]:
    """Read a JSON array of entries. Numbers are parsed as Decimal, never float."""
    raw = loads_decimal(Path(path).read_text(encoding="utf-8"))
    return [Entry(**e) for e in raw]


def seed_store(store: EntryStore, path: Path) -> int:
    entries = load_entries(path)
    for entry in entries:
        store.add(entry)
    logger.info("Seeded %d entries from %s", len(entries), path)
    return len(entries)
