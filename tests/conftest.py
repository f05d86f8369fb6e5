"""Shared test fixtures."""

from datetime import timezone
from zoneinfo import ZoneInfo

import pytest

from pyjsonextra import TimezoneRegistry


@pytest.fixture
def los_angeles():
    return ZoneInfo("America/Los_Angeles")


@pytest.fixture
def small_registry(los_angeles):
    return TimezoneRegistry({
        "America/Los_Angeles": los_angeles,
        "Etc/UTC": timezone.utc,
    })

