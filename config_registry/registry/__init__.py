"""Typed read-only access to configuration parameters."""

from config_registry.registry.array2d import Array2D
from config_registry.registry.extractors import extract_matrix, extract_vector
from config_registry.registry.param_registry import ConfigParamRegistry, resolve_accessor

__all__ = [
    "Array2D",
    "ConfigParamRegistry",
    "extract_matrix",
    "extract_vector",
    "resolve_accessor",
]
