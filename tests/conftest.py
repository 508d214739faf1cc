"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from config_registry.registry import ConfigParamRegistry
from config_registry.store import ConfigParamStore


@pytest.fixture(autouse=True)
def reset_root_logger() -> Iterator[None]:
    """Remove console/file handlers installed by setup_logging during a test."""

    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)


@pytest.fixture
def sample_data() -> dict[str, Any]:
    """Return nested configuration data covering every retrievable shape."""

    return {
        "run": {
            "name": "calib-2024",
            "workers": 4,
            "timeout": 2.5,
            "verbose": True,
            "seed": "42",
        },
        "channels": [1, 2, 3],
        "labels": ["a", "b"],
        "gain": [[1, 2], [3, 4]],
        "ragged": [[1, 2], [3]],
        "camera": {"name": "front", "height_m": 2.4},
    }


@pytest.fixture
def store(sample_data: dict[str, Any]) -> ConfigParamStore:
    """Return an active store whose keys all come from a file."""

    return ConfigParamStore.from_data(sample_data, provenance="file")


@pytest.fixture
def registry(store: ConfigParamStore) -> ConfigParamRegistry:
    """Return a registry owning the sample store."""

    return ConfigParamRegistry(store)


@pytest.fixture
def yaml_config_path(tmp_path: Path) -> Path:
    """Return the path to a small YAML configuration file."""

    content = """
run:
  name: "from-file"
  workers: 8
channels: [4, 5]
gain:
  - [1.5, 2.5]
  - [3.5, 4.5]
"""
    path = tmp_path / "config.yaml"
    path.write_text(content, encoding="utf-8")
    return path
