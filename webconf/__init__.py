"""
Read-only configuration for web contexts.

Adapts read-only key/value stores (request parameters, context attributes,
the process environment) to a generic configuration interface. Lookups split
string values at a list delimiter; mutations raise UnsupportedOperationError.

Usage:
    from webconf import ReadOnlyConfiguration, RequestParamsSource

    config = ReadOnlyConfiguration(RequestParamsSource.from_query_string("tag=a,b"))
    config.get_property("tag")  # ["a", "b"]
"""

from webconf.adapters.env_source import EnvSource
from webconf.adapters.mapping_source import MappingSource
from webconf.adapters.request_params import RequestParamsSource
from webconf.config.config_loader import SettingsLoader
from webconf.config.settings import DelimiterSettings
from webconf.core.read_only import ReadOnlyConfiguration
from webconf.errors.errors import (
    ConfigurationError,
    UnsupportedOperationError,
    WebConfError,
)
from webconf.utils.utility import split

__all__ = [
    # Main entry point
    "ReadOnlyConfiguration",
    # Sources
    "EnvSource",
    "MappingSource",
    "RequestParamsSource",
    # Settings
    "DelimiterSettings",
    "SettingsLoader",
    # Errors
    "WebConfError",
    "UnsupportedOperationError",
    "ConfigurationError",
    # Utilities
    "split",
]
