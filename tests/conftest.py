"""Shared fixtures: a fixed local time for deterministic placeholders."""

from datetime import datetime, timedelta, timezone

import pytest

CEST = timezone(timedelta(hours=2), "CEST")

# Monday, day 292 of the year
FIXED = datetime(2026, 10, 19, 14, 5, 9, 123000, tzinfo=CEST)


@pytest.fixture
def fixed_moment() -> datetime:
    return FIXED


@pytest.fixture
def clock():
    """a clock that always returns FIXED"""
    return lambda: FIXED
