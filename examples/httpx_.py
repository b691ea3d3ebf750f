#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "expiro[httpx]",
# ]
#
# [tool.uv.sources]
# expiro = { path = "../", editable = true }
# ///

import httpx

from expiro import NonCacheable, Timestamp, Unknown
from expiro.httpx import get_response_expiry


def fetch_and_print(client: httpx.Client, url: str):
    print(f"\n➡ Sending request to {url}...")
    response = client.get(url)
    expiry = get_response_expiry(response)

    print(f"📋 Cache-Control: {response.headers.get('cache-control')}")
    print(f"📅 Expires: {response.headers.get('expires')}")
    if isinstance(expiry, Timestamp):
        print(f"⏰ Fresh until: {expiry.instant.isoformat()}")
    elif isinstance(expiry, NonCacheable):
        print("🚫 Must not be cached")
    elif isinstance(expiry, Unknown):
        print("❔ No caching information")


if __name__ == "__main__":
    with httpx.Client() as client:
        fetch_and_print(client, "https://www.google.com/images/srpr/logo11w.png")
        fetch_and_print(client, "https://hishel.com/")
