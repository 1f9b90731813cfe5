from __future__ import annotations

import logging
import os
from typing import Iterator, Mapping, Optional

from webconf.ports.key_value_source import KeyValueSource

_LOGGER = logging.getLogger(__name__)


class EnvSource(KeyValueSource):
    def __init__(
        self,
        prefix: str = "WEBCONF_",
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Expose environment variables starting with ``prefix`` as configuration keys.

        Keys are the variable names without the prefix. ``environ`` defaults to
        the live ``os.environ``.
        """

        if not prefix:
            raise ValueError("Environment prefix must be a non-empty string")
        self._prefix = prefix
        self._environ = os.environ if environ is None else environ

    def get_keys(self) -> Iterator[str]:
        for name in list(self._environ):
            if name.startswith(self._prefix) and len(name) > len(self._prefix):
                yield name[len(self._prefix):]

    def get_property(self, key: str) -> Optional[str]:
        # the bare prefix is never a key
        if not key:
            return None
        env_var = f"{self._prefix}{key}"
        value = self._environ.get(env_var)
        if value is not None:
            _LOGGER.debug(
                "env_property_resolved",
                extra={
                    "event": "env_property_resolved",
                    "config_key": key,
                    "source": "env",
                },
            )
        return value
