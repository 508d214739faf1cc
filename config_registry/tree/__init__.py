"""Hierarchical configuration tree and scalar coercion."""

from config_registry.tree.coercion import SCALAR_KINDS, coerce_value, is_element_kind, is_scalar_kind
from config_registry.tree.config_tree import ConfigTree

__all__ = [
    "SCALAR_KINDS",
    "ConfigTree",
    "coerce_value",
    "is_element_kind",
    "is_scalar_kind",
]
