"""KeyValueSource Port Interface.

Contract: Enumerate the currently visible keys of a read-only backing store and
look up a single value by key. No mutation, no caching here.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional, Protocol


class KeyValueSource(Protocol):
    # True when every value is a sequence of strings (request parameters).
    multi_valued: bool = False

    def get_keys(self) -> Iterator[str]: ...

    """
    Return an iterator over all keys the store currently exposes. It may be
    lazy; callers that only need to know whether a key exists pull one element.
    """

    def get_property(self, key: str) -> Optional[Any]: ...

    """
    Return the raw value stored under ``key`` or None when absent. A
    multi-valued store returns a list of values; any other store returns the
    value as stored.
    """
