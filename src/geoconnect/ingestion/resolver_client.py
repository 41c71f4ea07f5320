"""
Location resolver client.

Turning free text ("my house in Mexico City") into coordinates is done by an
external service. GeoConnect only needs an opaque `resolve(text)` that returns a
`ResolvedLocation` or None; this module provides that contract plus an HTTP
adapter for a JSON endpoint.

Expected endpoint contract:
- request:  POST {"query": "<text>"}
- response: {"valid": true, "lat": 19.43, "lng": -99.13, "name": "Mexico City"}
            or {"valid": false}

Any failure (transport, non-2xx, bad JSON, invalid payload) is logged and reported
as "no result". There is no retry and no coordinate range check here.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

import httpx
from pydantic import ValidationError

from geoconnect.config.settings import Settings
from geoconnect.core.http import post_json
from geoconnect.domain.models import ResolvedLocation

logger = logging.getLogger(__name__)


class LocationResolver(Protocol):
    def resolve(self, text: str) -> ResolvedLocation | None: ...


def parse_resolver_payload(payload: Any) -> ResolvedLocation | None:
    """Validate a resolver response body; None unless it is a valid location."""
    if not isinstance(payload, dict) or not payload.get("valid"):
        return None
    try:
        return ResolvedLocation.model_validate(
            {"lat": payload.get("lat"), "lng": payload.get("lng"), "name": payload.get("name")}
        )
    except ValidationError as e:
        logger.warning("Resolver returned an unusable payload: %s", e.errors(include_url=False))
        return None


class HttpLocationResolver:
    """Resolves free text through the configured HTTP endpoint."""

    def __init__(self, settings: Settings):
        self._settings = settings

    @property
    def enabled(self) -> bool:
        return bool(self._settings.resolver.base_url)

    def resolve(self, text: str) -> ResolvedLocation | None:
        query = text.strip()
        if not query:
            return None
        if not self.enabled:
            logger.warning("Location resolver is not configured (set GEOCONNECT_RESOLVER_URL)")
            return None

        resolver = self._settings.resolver
        headers = {"Authorization": f"Bearer {resolver.api_key}"} if resolver.api_key else None
        try:
            logger.info("Resolving location for query=%r", query)
            payload = post_json(
                str(resolver.base_url),
                payload={"query": query},
                headers=headers,
                timeout_seconds=resolver.timeout_seconds,
            )
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Location lookup failed for query=%r: %s", query, e)
            return None

        location = parse_resolver_payload(payload)
        if location is None:
            logger.info("No location found for query=%r", query)
        return location
