from __future__ import annotations

from datetime import datetime
from typing import Optional

try:
    import requests
except ImportError:  # pragma: no cover
    raise ImportError(
        "The 'requests' library is required to use the requests integration. "
        "Install expiro with 'pip install expiro[requests]'."
    )

from expiro._core._headers import Headers
from expiro._core._spec import ExpiryResolver
from expiro._core.models import ExpiryResult, Timestamp
from expiro._utils import BaseClock

__all__ = ("get_response_expiry", "get_response_expiry_instant")


def requests_to_headers(response: requests.models.Response) -> Headers:
    # requests already folds repeated fields into one comma-separated value.
    return Headers({key: value for key, value in response.headers.items()})


def get_response_expiry(response: requests.models.Response, clock: Optional[BaseClock] = None) -> ExpiryResult:
    return ExpiryResolver(clock=clock).resolve(requests_to_headers(response))


def get_response_expiry_instant(
    response: requests.models.Response, clock: Optional[BaseClock] = None
) -> Optional[datetime]:
    result = get_response_expiry(response, clock=clock)
    return result.instant if isinstance(result, Timestamp) else None
