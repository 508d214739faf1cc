"""Command-line interface."""

from config_registry.cli.arguments import build_parser, parse_arguments
from config_registry.cli.main import main

__all__ = ["build_parser", "main", "parse_arguments"]
