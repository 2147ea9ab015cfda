#!/usr/bin/env python3
"""
rest-options — client example

Reads a few settings from a running rest-options service.

Required environment variables:
    REST_OPTIONS_URL     — Base URL of the service (e.g. http://localhost:8001)
    REST_OPTIONS_API_KEY — Key printed by ``rest-options generate-key``

Usage:
    export REST_OPTIONS_URL="http://localhost:8001"
    export REST_OPTIONS_API_KEY="..."
    python examples/fetch_options.py blogname timezone
"""

from __future__ import annotations

import os
import sys

import httpx


def fetch_options(base_url: str, api_key: str, names: list[str]) -> dict:
    resp = httpx.post(
        f"{base_url.rstrip('/')}/rest-options/v1/get-options",
        headers={"x-api-key": api_key},
        json={"options": names},
        timeout=10.0,
    )
    payload = resp.json()
    if resp.status_code != 200:
        raise SystemExit(f"[{payload['code']}] {payload['message']}")
    return payload["data"]["options"]


def main() -> None:
    names = sys.argv[1:] or ["blogname"]
    options = fetch_options(
        os.environ["REST_OPTIONS_URL"], os.environ["REST_OPTIONS_API_KEY"], names
    )

    for name in names:
        if name not in options:
            print(f"  {name}: (not permitted)")
        else:
            print(f"  {name}: {options[name]!r}")


if __name__ == "__main__":
    main()
