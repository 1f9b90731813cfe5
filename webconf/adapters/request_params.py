"""Request parameter store.

Parameters are multi-valued: ``?tag=a&tag=b`` stores ``["a", "b"]`` under
``tag``. Values keep the order in which they appear in the query string.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator, Mapping, Optional, Sequence
from urllib.parse import parse_qs

from webconf.ports.key_value_source import KeyValueSource

_LOGGER = logging.getLogger(__name__)


class RequestParamsSource(KeyValueSource):
    multi_valued = True

    def __init__(self, params: Mapping[str, Sequence[str]]) -> None:
        self._params = params

    @classmethod
    def from_query_string(cls, query: str) -> RequestParamsSource:
        params = parse_qs(query, keep_blank_values=True)
        _LOGGER.debug(
            "request_params_parsed",
            extra={
                "event": "request_params_parsed",
                "params_total": len(params),
            },
        )
        return cls(params)

    @classmethod
    def from_wsgi_environ(cls, environ: Mapping[str, Any]) -> RequestParamsSource:
        return cls.from_query_string(environ.get("QUERY_STRING", "") or "")

    def get_keys(self) -> Iterator[str]:
        return iter(self._params)

    def get_property(self, key: str) -> Optional[list[str]]:
        values = self._params.get(key)
        if values is None:
            return None
        return list(values)
