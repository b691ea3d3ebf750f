from __future__ import annotations

from datetime import datetime
from typing import Optional

try:
    import httpx
except ImportError as e:
    raise ImportError(
        "httpx is required to use expiro.httpx module. "
        "Please install expiro with the 'httpx' extra, "
        "e.g., 'pip install expiro[httpx]'."
    ) from e

from expiro._core._headers import Headers
from expiro._core._spec import ExpiryResolver
from expiro._core.models import ExpiryResult, Timestamp
from expiro._utils import BaseClock

__all__ = ("get_response_expiry", "get_response_expiry_instant")


def httpx_to_headers(response: httpx.Response) -> Headers:
    return Headers.from_raw(response.headers.multi_items())


def get_response_expiry(response: httpx.Response, clock: Optional[BaseClock] = None) -> ExpiryResult:
    """
    Resolve the expiry of an already received httpx response.

    Only the response headers are read; the body is never touched.
    """
    return ExpiryResolver(clock=clock).resolve(httpx_to_headers(response))


def get_response_expiry_instant(response: httpx.Response, clock: Optional[BaseClock] = None) -> Optional[datetime]:
    result = get_response_expiry(response, clock=clock)
    return result.instant if isinstance(result, Timestamp) else None
