"""Shared test configuration."""

import pytest

from devops_tools.cli import configure_logging


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    """Keep log lines on stderr and below the default threshold."""
    configure_logging("critical")
