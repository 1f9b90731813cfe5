"""
Purpose:
    - Load delimiter settings from a TOML file
    - Apply environment overrides
    - Validate the merged section

Precedence (lowest to highest): defaults, ``[delimiter]`` table, environment.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from webconf.config.settings import DEFAULT_LIST_DELIMITER, DelimiterSettings
from webconf.errors.errors import ConfigurationError
from webconf.ports.telemetry import Telemetry
from webconf.utils.utility import deep_merge, validation_error_parser

_LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "WEBCONF_"
SECTION = "delimiter"
TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
FALSE_STRINGS = frozenset({"0", "false", "no", "off"})


class DelimiterSection(BaseModel):
    model_config = ConfigDict(extra="forbid", strict=True)

    list_delimiter: str = Field(default=DEFAULT_LIST_DELIMITER, min_length=1, max_length=1)
    delimiter_parsing_disabled: bool = False


class SettingsLoader:
    """
    Settings-loader; loading toml file plus environment overrides.
    """

    def __init__(
        self,
        base_dir: str = ".",
        env_prefix: str = ENV_PREFIX,
        telemetry: Optional[Telemetry] = None,
    ) -> None:
        self._base_dir = base_dir
        self._env_prefix = env_prefix
        self.telemetry = telemetry

    def load(self, file_name: str) -> dict[str, Any]:
        path = Path(file_name)
        if not path.is_absolute():
            path = Path(self._base_dir) / file_name

        if not path.exists():
            raise FileNotFoundError(f"Settings file not found: {path}")

        with path.open("rb") as f:
            return tomllib.load(f)

    def env_overrides(self, environ: Optional[Mapping[str, str]] = None) -> dict[str, Any]:
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        delimiter = env.get(f"{self._env_prefix}LIST_DELIMITER")
        if delimiter is not None:
            overrides["list_delimiter"] = delimiter

        disabled_var = f"{self._env_prefix}DELIMITER_PARSING_DISABLED"
        disabled = env.get(disabled_var)
        if disabled is not None:
            overrides["delimiter_parsing_disabled"] = _parse_flag(disabled_var, disabled)

        return overrides

    def load_settings(
        self,
        file_name: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> DelimiterSettings:
        """
        1. Start from DelimiterSection defaults
        2. Merge the ``[delimiter]`` table of ``file_name`` (if given)
        3. Merge environment overrides
        4. Validate and build DelimiterSettings
        """
        merged: Mapping[str, Any] = DelimiterSection().model_dump()
        source = "defaults"

        if file_name is not None:
            file_section = self.load(file_name).get(SECTION, {})
            if not isinstance(file_section, dict):
                raise ConfigurationError(
                    f"[{SECTION}] must be a table",
                    field=SECTION,
                    value=file_section,
                )
            merged = deep_merge(merged, file_section)
            source = "file"

        overrides = self.env_overrides(environ)
        if overrides:
            merged = deep_merge(merged, overrides)
            source = "env"

        try:
            section = DelimiterSection(**merged)
        except ValidationError as e:
            parsed_error = validation_error_parser(e)
            self._log(
                "settings_validation_error",
                step="delimiter_section",
                errors=parsed_error,
            )
            raise ConfigurationError(
                f"Invalid [{SECTION}] settings",
                field=SECTION,
                errors=parsed_error,
            ) from e

        settings = DelimiterSettings(
            list_delimiter=section.list_delimiter,
            delimiter_parsing_disabled=section.delimiter_parsing_disabled,
        )
        self._log(
            "settings_resolved",
            list_delimiter=settings.list_delimiter,
            delimiter_parsing_disabled=settings.delimiter_parsing_disabled,
            last_layer=source,
        )
        return settings

    def _log(self, event: str, **fields: Any) -> None:
        _LOGGER.debug(event, extra={"event": event, **fields})
        if self.telemetry is not None:
            self.telemetry.log(event=event, **fields)


def _parse_flag(name: str, raw: str) -> bool:
    candidate = raw.strip().lower()
    if candidate in TRUE_STRINGS:
        return True
    if candidate in FALSE_STRINGS:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean flag",
        field=name,
        value=raw,
    )
