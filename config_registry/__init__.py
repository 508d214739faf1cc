"""Configuration Parameter Registry

Typed read-only access to hierarchical configuration values.
"""

__version__ = "0.1.0"

# Errors
from config_registry.core import ConfigError, InvalidOptionError, TreeConstructible

# Typed access
from config_registry.registry import Array2D, ConfigParamRegistry

# Store
from config_registry.store import (
    ArgsRetriever,
    ConfigParamSpec,
    ConfigParamStore,
    EnvRetriever,
    FileRetriever,
)

# Tree
from config_registry.tree import ConfigTree

__all__ = [
    "ArgsRetriever",
    "Array2D",
    "ConfigError",
    "ConfigParamRegistry",
    "ConfigParamSpec",
    "ConfigParamStore",
    "ConfigTree",
    "EnvRetriever",
    "FileRetriever",
    "InvalidOptionError",
    "TreeConstructible",
]
