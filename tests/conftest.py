"""Shared test fixtures."""

from pathlib import Path

import pytest

from geez_input.binding import type_keys
from geez_input.engine import GeezEngine


@pytest.fixture
def engine() -> GeezEngine:
    """An engine over the default tables."""
    return GeezEngine()


@pytest.fixture
def typed(engine):
    """Replay a key sequence and return the final field text."""
    def _typed(keys: str, before: str = "") -> str:
        return type_keys(keys, engine, before=before).transformed_value
    return _typed


@pytest.fixture
def write_config(tmp_path):
    """Write a geez_input.toml into tmp_path and return its path."""
    def _write(text: str, name: str = "geez_input.toml") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
