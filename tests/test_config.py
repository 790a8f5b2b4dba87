"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from sts_mapgen.config import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.start == (1100.0, 850.0)
    assert settings.end == (1100.0, 150.0)
    assert settings.min_radius == 80.0
    assert settings.penalty == 10000
    assert settings.seed is None


def test_environment_override(monkeypatch):
    monkeypatch.setenv("MAPGEN_MIN_RADIUS", "50")
    monkeypatch.setenv("MAPGEN_SEED", "7")
    settings = Settings(_env_file=None)

    assert settings.min_radius == 50.0
    assert settings.seed == 7


def test_invalid_penalty(monkeypatch):
    monkeypatch.setenv("MAPGEN_PENALTY", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
