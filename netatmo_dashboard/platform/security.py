"""API key guard for the dashboard routes."""

from __future__ import annotations

import logging
import secrets

from fastapi import Depends, HTTPException, Request, Security
from fastapi.security import APIKeyHeader

from ..settings import Settings, get_settings

logger = logging.getLogger(__name__)

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def api_key_matches(candidate: str | None, expected: str) -> bool:
    """Compare keys in constant time; a missing key never matches."""
    if not candidate:
        return False
    return secrets.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def verify_api_key(
    request: Request,
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    if not api_key_matches(x_api_key, settings.api_key):
        logger.warning("Rejected request to %s without a valid API key", request.url.path)
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})


__all__ = ["api_key_header", "api_key_matches", "verify_api_key"]
