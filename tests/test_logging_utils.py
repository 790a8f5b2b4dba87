"""Tests for structlog configuration."""

import pytest
import structlog

from sts_mapgen.utils.logging_utils import configure_logging


@pytest.fixture(autouse=True)
def restore_structlog():
    yield
    structlog.reset_defaults()
    configure_logging("INFO", "json")


@pytest.mark.parametrize("fmt,renderer", [
    ("json", structlog.processors.JSONRenderer),
    ("plain", structlog.dev.ConsoleRenderer),
])
def test_renderer_selection(fmt, renderer):
    """Test that the chosen format decides the final processor."""
    configure_logging("DEBUG", fmt)

    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], renderer)
