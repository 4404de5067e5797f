from __future__ import annotations

import logging

from fastapi import HTTPException

from ..errors import (
    ConfigurationMissingError,
    DataFetchError,
    NetatmoDashboardError,
    TokenRefreshError,
)

logger = logging.getLogger(__name__)


def to_http_exception(exc: NetatmoDashboardError, config_id: str) -> HTTPException:
    """Map an invocation failure to the response returned to the caller."""

    if isinstance(exc, ConfigurationMissingError):
        status_code = 404
    elif isinstance(exc, (TokenRefreshError, DataFetchError)):
        status_code = 502
    else:
        status_code = 500
    logger.error("Dashboard invocation for %s failed: %s", config_id, exc)
    return HTTPException(
        status_code=status_code,
        detail={"error": exc.kind, "message": str(exc), "input": config_id},
    )
