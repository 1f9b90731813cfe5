"""ListDelimiterPolicy Port Interface.

Contract: Tell a configuration whether string values are split into lists and
at which character.
"""

from __future__ import annotations

from typing import Protocol


class ListDelimiterPolicy(Protocol):
    def is_delimiter_parsing_disabled(self) -> bool: ...

    def get_list_delimiter(self) -> str: ...
