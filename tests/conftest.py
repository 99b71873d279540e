"""Shared test fixtures for the propconf test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from sink_helpers import RecordingSink

from propconf.loglog import set_loglog
from propconf.variables import MappingProvider


@pytest.fixture
def sink() -> RecordingSink:
    """Returns a fresh RecordingSink."""
    return RecordingSink()


@pytest.fixture
def env() -> MappingProvider:
    """Returns an empty fake environment."""
    return MappingProvider()


@pytest.fixture(autouse=True)
def reset_default_loglog() -> Iterator[None]:
    """Drop the process-wide sink so each test rebuilds it from a clean environment."""
    set_loglog(None)
    yield
    set_loglog(None)
