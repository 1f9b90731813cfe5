"""
Exceptions for the webconf package.

Exception hierarchy:
- WebConfError (base)
  - UnsupportedOperationError: mutation attempted on a read-only configuration
  - ConfigurationError: invalid delimiter settings
"""

from __future__ import annotations

from typing import Any, Optional

READ_ONLY_MESSAGE = "Read only configuration"


class WebConfError(Exception):
    """Base exception for all webconf errors."""

    def __init__(
        self,
        message: str,
        *,
        component: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.component = component
        self.details = dict(details or {})
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.component:
            parts.append(f"[component={self.component}]")
        if self.details:
            parts.append(f"[details={self.details}]")
        return " ".join(parts)


class UnsupportedOperationError(WebConfError):
    """Raised for every mutation attempt on a read-only configuration."""

    def __init__(
        self,
        message: str = READ_ONLY_MESSAGE,
        *,
        operation: Optional[str] = None,
        key: Optional[str] = None,
        component: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.operation = operation
        self.key = key
        details = dict(details or {})
        if operation:
            details["operation"] = operation
        if key is not None:
            details["key"] = key
        super().__init__(message, component=component, details=details)


class ConfigurationError(WebConfError):
    """Raised when delimiter settings are invalid."""

    def __init__(
        self,
        message: str,
        *,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        errors: Optional[list[dict[str, str]]] = None,
        component: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.field = field
        self.value = value
        self.errors = errors or []
        details = dict(details or {})
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, component=component, details=details)
