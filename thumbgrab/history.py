"""Recently resolved links, most recent first.

The list is bounded, holds at most one entry per original URL, and is
rewritten to the store after every change.
"""

import json
import sys
import threading
import time

from thumbgrab.models import HistoryEntry, VideoMetadata

HISTORY_KEY = "thumb_history"
HISTORY_LIMIT = 12


def now_millis() -> int:
    return int(time.time() * 1000)


def insert_entry(entries: list, entry: HistoryEntry, limit: int = HISTORY_LIMIT) -> list:
    """Return a new list with entry at the front.

    Any older entry for the same original URL is dropped first, then the
    list is cut to limit, evicting the oldest entries.
    """
    key = entry.metadata.original_url
    remaining = [e for e in entries if e.metadata.original_url != key]
    return [entry, *remaining][:limit]


def parse_history(raw: str, limit: int = HISTORY_LIMIT) -> list:
    """Parse persisted history, tolerating bad data.

    Malformed JSON yields an empty list. Malformed entries are skipped.
    Duplicates and overflow from hand-edited storage are dropped, keeping
    the earliest (most recent) occurrence.
    """
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Failed to parse history, starting empty: {e}", file=sys.stderr)
        return []

    if not isinstance(data, list):
        print("Failed to parse history: expected a list, starting empty", file=sys.stderr)
        return []

    entries = []
    seen = set()
    for item in data:
        try:
            entry = HistoryEntry.from_dict(item)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            print(f"Skipping malformed history entry: {e!r}", file=sys.stderr)
            continue
        key = entry.metadata.original_url
        if key in seen:
            continue
        seen.add(key)
        entries.append(entry)

    return entries[:limit]


def serialize_history(entries) -> str:
    return json.dumps([e.to_dict() for e in entries], ensure_ascii=False)


class History:
    """History cache bound to a key-value store.

    Loaded once on construction. add() and clear() persist immediately.
    """

    def __init__(self, store, limit: int = HISTORY_LIMIT, key: str = HISTORY_KEY):
        self.store = store
        self.limit = limit
        self.key = key
        self._lock = threading.Lock()
        self._entries = parse_history(store.get(key), limit)

    @property
    def entries(self) -> tuple:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries)

    def add(self, metadata: VideoMetadata, timestamp: int = None) -> HistoryEntry:
        """Record a resolution and persist the new list."""
        entry = HistoryEntry(
            timestamp=now_millis() if timestamp is None else timestamp,
            metadata=metadata,
        )
        with self._lock:
            self._entries = insert_entry(self._entries, entry, self.limit)
            self.store.set(self.key, serialize_history(self._entries))
        return entry

    def clear(self) -> None:
        with self._lock:
            self._entries = []
            self.store.remove(self.key)

    def to_json(self) -> str:
        return serialize_history(self._entries)
