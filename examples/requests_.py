#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "expiro[requests]",
# ]
#
# [tool.uv.sources]
# expiro = { path = "../", editable = true }
# ///

import requests

from expiro.requests import get_response_expiry_instant

session = requests.Session()


def fetch_and_print(url: str):
    print(f"\n➡ Sending request to {url}...")
    response = session.get(url)
    expires_at = get_response_expiry_instant(response)

    print(f"📋 Cache-Control: {response.headers.get('cache-control')}")
    print(f"⏰ Expires At: {expires_at.isoformat() if expires_at else 'not cacheable'}")


if __name__ == "__main__":
    fetch_and_print("https://www.google.com/images/srpr/logo11w.png")
