"""Shared fixtures for the kernelconfig test suite."""

from __future__ import annotations

from typing import Any

import pytest

from kernelconfig.config import ReadOnlyConfig


@pytest.fixture
def raw_config() -> dict[str, Any]:
    """A nested mapping covering every supported value type."""
    return {
        "app": {
            "name": "shop",
            "debug": False,
            "workers": 4,
            "ratio": 0.75,
            "hosts": ["a.example", "b.example"],
            "database": {"dsn": "sqlite://", "timeout": None},
        },
        "features": [{"name": "beta"}, "legacy"],
        "enabled": True,
    }


@pytest.fixture
def config(raw_config: dict[str, Any]) -> ReadOnlyConfig:
    """A ReadOnlyConfig built from raw_config."""
    return ReadOnlyConfig.from_dict(raw_config)
