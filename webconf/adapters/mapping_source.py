from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional

from webconf.ports.key_value_source import KeyValueSource


class MappingSource(KeyValueSource):
    """
    Single-valued store over a mapping (context attributes, init parameters).

    Holds a reference to ``values``, so later changes made by the owner of the
    mapping are visible.
    """

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = values

    def get_keys(self) -> Iterator[str]:
        return iter(self._values)

    def get_property(self, key: str) -> Optional[Any]:
        return self._values.get(key)
