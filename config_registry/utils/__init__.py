"""Utility modules for the configuration registry."""

from config_registry.utils.logging_utils import setup_logging

__all__ = [
    "setup_logging",
]
