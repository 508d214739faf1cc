"""Core errors and port interfaces."""

from config_registry.core.errors import (
    ConfigError,
    InvalidOptionError,
    TreePathError,
    UnknownKeyError,
    ValueConversionError,
)
from config_registry.core.interfaces import (
    DEFAULT_PROVENANCE,
    ParamRetrieverPort,
    ParamStorePort,
    TreeConstructible,
)

__all__ = [
    "DEFAULT_PROVENANCE",
    "ConfigError",
    "InvalidOptionError",
    "ParamRetrieverPort",
    "ParamStorePort",
    "TreeConstructible",
    "TreePathError",
    "UnknownKeyError",
    "ValueConversionError",
]
