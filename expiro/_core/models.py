from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Union

__all__ = ("ExpiryResult", "NonCacheable", "Timestamp", "Unknown")


@dataclass(frozen=True)
class Timestamp:
    """The response is fresh until `instant` (an aware UTC datetime)."""

    instant: datetime


@dataclass(frozen=True)
class NonCacheable:
    """The response must not be served from a cache."""


@dataclass(frozen=True)
class Unknown:
    """No caching decision could be derived from the headers."""


ExpiryResult = Union[Timestamp, NonCacheable, Unknown]
