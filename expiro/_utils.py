from __future__ import annotations

import calendar
import typing as tp
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_tz

HEADERS_ENCODING = "iso-8859-1"

__all__ = (
    "BaseClock",
    "Clock",
    "add_seconds",
    "now_plus_seconds",
    "parse_date",
)


class BaseClock:
    def now(self) -> datetime:
        """
        Return the current time.

        Should be timezone-aware. Naive values are read as UTC by `utc_now`.
        """
        raise NotImplementedError()


class Clock(BaseClock):
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def utc_now(clock: BaseClock) -> datetime:
    now = clock.now()
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def parse_http_date(date: str) -> tp.Optional[datetime]:
    try:
        parsed = parsedate_tz(date)
    except (IndexError, ValueError):
        return None
    if parsed is None:
        return None
    try:
        timestamp = calendar.timegm(parsed[:6]) - (parsed[9] or 0)
        return datetime.fromtimestamp(timestamp, tz=timezone.utc)
    except (ValueError, OverflowError, OSError):
        return None


def parse_iso_date(date: str) -> tp.Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(date.strip())
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def parse_date(date: str) -> tp.Optional[datetime]:
    """
    Parse a date header value into an aware UTC datetime.

    HTTP-date formats (RFC 1123, RFC 850 and asctime) are tried first,
    then ISO 8601. Returns None when neither matches.

    Examples:
        >>> parse_date("Sun, 07 Sep 2100 09:16:06 GMT")
        datetime.datetime(2100, 9, 7, 9, 16, 6, tzinfo=datetime.timezone.utc)
        >>> parse_date("foo") is None
        True
    """
    return parse_http_date(date) or parse_iso_date(date)


def add_seconds(instant: datetime, seconds: tp.Union[int, float]) -> datetime:
    return instant + timedelta(seconds=seconds)


def now_plus_seconds(seconds: tp.Union[int, float], clock: tp.Optional[BaseClock] = None) -> datetime:
    """
    Return the instant `seconds` from now, according to `clock`.

    Negative values move into the past, so `now_plus_seconds(-time.time())`
    is (approximately) the Unix epoch.
    """
    return add_seconds(utc_now(clock or Clock()), seconds)
