from enum import Enum
from typing import Any, Dict, Hashable, NamedTuple, Union


class Lookup(Enum):
    UNSET = "unset"    # never looked up
    ABSENT = "absent"  # looked up, nothing there


class Found(NamedTuple):
    value: Any


CacheEntry = Union[Lookup, Found]


class LookupCache:
    """
    Process-scoped memo for remote lookups.

    Keeps "never asked" (`Lookup.UNSET`) apart from "asked, got nothing"
    (`Lookup.ABSENT`). Entries are never evicted. Not thread-safe.
    """

    def __init__(self) -> None:
        self._entries: Dict[Hashable, CacheEntry] = {}

    def get(self, key: Hashable) -> CacheEntry:
        return self._entries.get(key, Lookup.UNSET)

    def put(self, key: Hashable, value: Any) -> None:
        self._entries[key] = Found(value)

    def put_absent(self, key: Hashable) -> None:
        self._entries[key] = Lookup.ABSENT

    def __contains__(self, key: Hashable) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
