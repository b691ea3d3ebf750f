from datetime import datetime, timezone

import pytest

from expiro import NonCacheable, Timestamp, Unknown, parse_expires, resolve_expiry
from tests.conftest import MockedClock


def test_absent():
    assert parse_expires(None) == Unknown()


def test_rfc1123_date():
    assert parse_expires("Sun, 07 Sep 2100 09:16:06 GMT") == Timestamp(
        datetime(2100, 9, 7, 9, 16, 6, tzinfo=timezone.utc)
    )


def test_past_date_is_not_sanitized_here():
    assert parse_expires("Thu, 01 Jan 1970 00:00:00 GMT") == Timestamp(datetime(1970, 1, 1, tzinfo=timezone.utc))


def test_iso_date():
    assert parse_expires("2100-09-07T09:16:06+00:00") == Timestamp(
        datetime(2100, 9, 7, 9, 16, 6, tzinfo=timezone.utc)
    )


@pytest.mark.parametrize(
    "value",
    ["foo", "", "0", "-1", "never", "0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"],
)
def test_unparseable_is_non_cacheable(value):
    assert parse_expires(value) == NonCacheable()


def test_iso_date_out_of_range_resolves_to_non_cacheable():
    assert resolve_expiry({"Expires": "0001-01-01T00:00:00+01:00"}, clock=MockedClock()) == NonCacheable()
