"""Entry registry: owns every action and data entry seen during a scan.

Action entries point at their data entry by key, never by reference, so
many actions can share one data blob and every entry lives exactly as
long as the registry.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from cachelogstat.models.entry import ACTION_ENTRY_SIZE, Entry, EntryKey


class EntryRegistry:
    """First-write-wins store of cache entries keyed by (key, role)."""

    def __init__(self) -> None:
        self._entries: Dict[EntryKey, Entry] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: EntryKey) -> Optional[Entry]:
        return self._entries.get(key)

    def put_data(self, key: str, t: int, size: int) -> Tuple[Entry, bool]:
        """Insert a data entry unless one exists. Returns (entry, created)."""
        ek = EntryKey(key, "data")
        entry = self._entries.get(ek)
        if entry is not None:
            return entry, False
        entry = Entry(created=t, size=size)
        self._entries[ek] = entry
        return entry, True

    def put_action(self, key: str, t: int, data_key: str) -> Tuple[Entry, bool]:
        """Insert an action entry unless one exists. Returns (entry, created).

        An existing action keeps its original data reference.
        """
        if EntryKey(data_key, "data") not in self._entries:
            raise KeyError(f"data entry {data_key!r} not registered")
        ek = EntryKey(key, "action")
        entry = self._entries.get(ek)
        if entry is not None:
            return entry, False
        entry = Entry(created=t, size=ACTION_ENTRY_SIZE, data_key=data_key)
        self._entries[ek] = entry
        return entry, True

    def action(self, key: str) -> Optional[Entry]:
        return self._entries.get(EntryKey(key, "action"))

    def data_for(self, action: Entry) -> Entry:
        """Resolve the data entry an action entry refers to."""
        if action.data_key is None:
            raise ValueError("entry is not an action entry")
        return self._entries[EntryKey(action.data_key, "data")]
