"""Common utilities for the status page CLI."""
from .client import (
    StatusPageClient,
    StatusPageError,
    ComponentNotFoundError,
    TransportError,
    UsageError,
    ValidationError,
    pretty_print,
)
from .config import Config, ConfigError, load_config
from .registry import ComponentRegistry

__all__ = [
    "StatusPageClient",
    "StatusPageError",
    "ComponentNotFoundError",
    "TransportError",
    "UsageError",
    "ValidationError",
    "pretty_print",
    "Config",
    "ConfigError",
    "load_config",
    "ComponentRegistry",
]
