"""Telemetry Port Interface.

Contract: Log structured events, one event name plus keyword fields.
"""

from __future__ import annotations

from typing import Any, Protocol


class Telemetry(Protocol):
    def log(self, event: str, **fields: Any) -> None: ...

    """
    Record ``event`` with its keyword fields. Sinks decide on format and
    destination; callers never depend on the result.
    """
