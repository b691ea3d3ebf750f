from datetime import datetime, timezone

import httpx

from expiro import NonCacheable, Timestamp, Unknown, resolve_expiry
from expiro.httpx import get_response_expiry, get_response_expiry_instant, httpx_to_headers
from tests.conftest import MockedClock


def test_httpx_to_headers_keeps_repeated_fields():
    response = httpx.Response(
        200,
        headers=[
            ("Cache-Control", "max-age=60"),
            ("Cache-Control", "public"),
        ],
    )

    assert httpx_to_headers(response).get_list("cache-control") == ["max-age=60", "public"]


def test_max_age():
    response = httpx.Response(200, headers={"Cache-Control": "max-age=3600"})

    assert get_response_expiry(response, clock=MockedClock()) == Timestamp(
        datetime(2015, 8, 25, 13, 0, 0, tzinfo=timezone.utc)
    )


def test_expires():
    response = httpx.Response(200, headers={"Expires": "Sun, 07 Sep 2100 09:16:06 GMT"})

    assert get_response_expiry_instant(response) == datetime(2100, 9, 7, 9, 16, 6, tzinfo=timezone.utc)


def test_repeated_header_with_no_store():
    response = httpx.Response(
        200,
        headers=[
            ("Cache-Control", "max-age=60"),
            ("cache-control", "no-store"),
        ],
    )

    assert get_response_expiry(response, clock=MockedClock()) == NonCacheable()
    assert get_response_expiry_instant(response, clock=MockedClock()) is None


def test_no_headers():
    assert get_response_expiry(httpx.Response(200)) == Unknown()


def test_headers_object_is_accepted_directly():
    response = httpx.Response(200, headers={"cache-control": "no-cache"})

    assert resolve_expiry(response.headers) == NonCacheable()
