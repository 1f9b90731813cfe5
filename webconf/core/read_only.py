"""
Read-only configuration view over a KeyValueSource.

Lookups go to the backing store and string values are split at the configured
list delimiter. Every mutation raises UnsupportedOperationError without
touching the store.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, NoReturn, Optional

from webconf.config.settings import DelimiterSettings
from webconf.errors.errors import UnsupportedOperationError
from webconf.ports.key_value_source import KeyValueSource
from webconf.ports.list_delimiter import ListDelimiterPolicy
from webconf.ports.telemetry import Telemetry
from webconf.utils.utility import split

_LOGGER = logging.getLogger(__name__)

_MISSING = object()


class ReadOnlyConfiguration:
    """
    Generic configuration interface on top of a read-only backing store.

    The store provides ``get_keys`` and ``get_property``; the policy decides
    whether and where string values are split into lists.
    """

    def __init__(
        self,
        source: KeyValueSource,
        policy: Optional[ListDelimiterPolicy] = None,
        *,
        telemetry: Optional[Telemetry] = None,
    ) -> None:
        self._source = source
        self._policy = policy if policy is not None else DelimiterSettings()
        self.telemetry = telemetry

    @property
    def source(self) -> KeyValueSource:
        return self._source

    @property
    def policy(self) -> ListDelimiterPolicy:
        return self._policy

    # --- read accessors -------------------------------------

    def get_keys(self) -> Iterator[str]:
        return iter(self._source.get_keys())

    def is_empty(self) -> bool:
        """Return True if the store exposes no key. Pulls at most one key."""
        return next(self.get_keys(), _MISSING) is _MISSING

    def contains_key(self, key: str) -> bool:
        """
        Return True if a value is stored under ``key``.

        A stored None counts as absent.
        """
        return self.get_property(key) is not None

    def get_property(self, key: str) -> Optional[Any]:
        value = self._source.get_property(key)
        if getattr(self._source, "multi_valued", False) and isinstance(value, (list, tuple)):
            return self._handle_multi_value(value)
        return self.handle_delimiters(value)

    def get(self, key: str, default: Any = None) -> Any:
        value = self.get_property(key)
        return default if value is None else value

    def get_list(self, key: str, default: Optional[list[Any]] = None) -> list[Any]:
        value = self.get_property(key)
        if value is None:
            return [] if default is None else default
        if isinstance(value, (list, tuple)):
            return list(value)
        return [value]

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.get_property(key)
        if value is None:
            return default
        if isinstance(value, (list, tuple)):
            return str(value[0]) if value else default
        return str(value)

    def handle_delimiters(self, value: Any) -> Any:
        """
        Split a string value at the list delimiter.

        Returns the list of parts, or the single part unwrapped when there is
        no delimiter in the value. Non-strings and disabled parsing pass
        ``value`` through unchanged.
        """
        if self._policy.is_delimiter_parsing_disabled() or not isinstance(value, str):
            return value

        parts = split(value, self._policy.get_list_delimiter())
        return parts if len(parts) > 1 else parts[0]

    def _handle_multi_value(self, values: list[Any] | tuple[Any, ...]) -> Optional[Any]:
        if not values:
            return None
        if len(values) == 1:
            return self.handle_delimiters(values[0])

        result: list[Any] = []
        for raw in values:
            handled = self.handle_delimiters(raw)
            if isinstance(handled, list):
                result.extend(handled)
            else:
                result.append(handled)
        return result

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.contains_key(key)

    def __iter__(self) -> Iterator[str]:
        return self.get_keys()

    # --- mutation (always rejected) -------------------------

    def remove_property(self, key: str) -> NoReturn:
        self._reject("remove_property", key)

    def add_property(self, key: str, value: Any) -> NoReturn:
        self.add_property_direct(key, value)

    def add_property_direct(self, key: str, value: Any) -> NoReturn:
        self._reject("add_property_direct", key)

    def clear(self) -> NoReturn:
        self._reject("clear", None)

    def __setitem__(self, key: str, value: Any) -> NoReturn:
        self.add_property(key, value)

    def __delitem__(self, key: str) -> NoReturn:
        self.remove_property(key)

    def _reject(self, operation: str, key: Optional[str]) -> NoReturn:
        _LOGGER.debug(
            "read_only_mutation_rejected",
            extra={
                "event": "read_only_mutation_rejected",
                "operation": operation,
                "config_key": key,
            },
        )
        if self.telemetry is not None:
            self.telemetry.log(
                event="read_only_mutation_rejected",
                operation=operation,
                key=key,
            )
        raise UnsupportedOperationError(operation=operation, key=key)
