import logging
import threading

from models.entry import Entry

logger = logging.getLogger(__name__)


class EntryStore:
    """In-memory collection of entries keyed by ISO code.

    Every public operation holds one lock for its whole duration, so reads
    and writes never interleave. Entries are copied on the way in and on
    the way out; callers never get a reference to a stored instance.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Entry] = {}
        self._lock = threading.Lock()

    def get_all(self) -> list[Entry]:
        with self._lock:
            return [entry.snapshot() for entry in self._entries.values()]

    def get(self, iso_code: str) -> Entry | None:
        with self._lock:
            entry = self._entries.get(iso_code)
            return entry.snapshot() if entry is not None else None

    def add(self, entry: Entry) -> None:
        # Last write wins; the previous entry is replaced, not merged.
        snapshot = entry.snapshot()
        with self._lock:
            replaced = snapshot.iso_code in self._entries
            self._entries[snapshot.iso_code] = snapshot
        logger.debug("Stored entry %r (replaced=%s)", snapshot.iso_code, replaced)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
