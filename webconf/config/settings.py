"""
Delimiter settings for read-only configurations.

Provides an immutable, validated dataclass implementing the ListDelimiterPolicy port.
"""

from __future__ import annotations

from dataclasses import dataclass

from webconf.errors.errors import ConfigurationError

DEFAULT_LIST_DELIMITER = ","


@dataclass(frozen=True)
class DelimiterSettings:
    """List splitting behaviour shared by all configurations built from it."""

    list_delimiter: str = DEFAULT_LIST_DELIMITER
    delimiter_parsing_disabled: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.list_delimiter, str) or len(self.list_delimiter) != 1:
            raise ConfigurationError(
                "list_delimiter must be a single character",
                field="list_delimiter",
                value=self.list_delimiter,
            )

    def is_delimiter_parsing_disabled(self) -> bool:
        return self.delimiter_parsing_disabled

    def get_list_delimiter(self) -> str:
        return self.list_delimiter
