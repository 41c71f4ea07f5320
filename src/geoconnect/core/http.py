"""
HTTP helpers.

The only outbound HTTP call in GeoConnect is the location resolver. Keeping the
transport here gives tests a single seam to monkeypatch.

Design goals:
- Deterministic defaults (timeout + User-Agent).
- Raise on non-2xx so callers decide how to fail (the resolver treats failure as "no result").
"""

from __future__ import annotations

from typing import Any

import httpx

from geoconnect import __version__

DEFAULT_USER_AGENT = f"geoconnect/{__version__} (+https://local)"


def post_json(
    url: str,
    *,
    payload: dict[str, Any],
    headers: dict[str, str] | None = None,
    timeout_seconds: float = 15,
) -> Any:
    """POST `payload` as a JSON body and return the decoded JSON response.

    Raises:
        httpx.HTTPError: On transport errors or non-2xx status codes.
        ValueError: If the response body is not valid JSON.
    """
    request_headers = {"User-Agent": DEFAULT_USER_AGENT}
    if headers:
        request_headers.update(headers)

    with httpx.Client(timeout=timeout_seconds) as client:
        resp = client.post(url, json=payload, headers=request_headers)
        resp.raise_for_status()
        return resp.json()
