from datetime import datetime, timedelta, timezone

import pytest

from expiro import BaseClock

# Tue, 25 Aug 2015 12:00:00 GMT
FROZEN_NOW = datetime(2015, 8, 25, 12, 0, 0, tzinfo=timezone.utc)


class MockedClock(BaseClock):
    def __init__(self, now: datetime = FROZEN_NOW) -> None:
        self._now = now
        self.calls = 0

    def now(self) -> datetime:
        self.calls += 1
        return self._now

    def advance(self, seconds: float) -> None:
        self._now += timedelta(seconds=seconds)


class FakeResponse:
    """Exposes headers through `lookup`, returning None for absent ones."""

    def __init__(self, expires=None, cache_control=None):
        self.expires = expires
        self.cache_control = cache_control

    def lookup(self, name):
        if name == "Expires":
            return self.expires
        if name == "Cache-Control":
            return self.cache_control
        return None


def assert_date_equal(date1: datetime, date2: datetime) -> None:
    assert abs((date1 - date2).total_seconds()) < 1


@pytest.fixture()
def clock() -> MockedClock:
    return MockedClock()
