"""Configuration store and the sources that populate it."""

from config_registry.store.loader import load_config_file
from config_registry.store.param_spec import ConfigParamSpec
from config_registry.store.param_store import DEFAULT_PROVENANCE, ConfigParamStore
from config_registry.store.retrievers import (
    CLI_PROVENANCE,
    ENV_PROVENANCE,
    FILE_PROVENANCE,
    ArgsRetriever,
    EnvRetriever,
    FileRetriever,
    add_param_arguments,
)

__all__ = [
    "CLI_PROVENANCE",
    "DEFAULT_PROVENANCE",
    "ENV_PROVENANCE",
    "FILE_PROVENANCE",
    "ArgsRetriever",
    "ConfigParamSpec",
    "ConfigParamStore",
    "EnvRetriever",
    "FileRetriever",
    "add_param_arguments",
    "load_config_file",
]
