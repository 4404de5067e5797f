"""Failures that abort a dashboard invocation."""

from __future__ import annotations

from typing import Optional


class NetatmoDashboardError(RuntimeError):
    """Base class for all invocation failures."""

    kind = "error"


class ConfigurationMissingError(NetatmoDashboardError):
    """Raised when no credentials are known for an identity."""

    kind = "configuration_missing"


class StorageIOError(NetatmoDashboardError):
    """Raised when the credential file cannot be read or written."""

    kind = "storage_io"


class StorageCorruptError(NetatmoDashboardError):
    """Raised when the credential file exists but does not hold valid credentials."""

    kind = "storage_corrupt"


class TokenRefreshError(NetatmoDashboardError):
    """Raised when the provider rejects or garbles a refresh-token grant."""

    kind = "token_refresh"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class DataFetchError(NetatmoDashboardError):
    """Raised when the station data request fails or returns garbage."""

    kind = "data_fetch"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


__all__ = [
    "NetatmoDashboardError",
    "ConfigurationMissingError",
    "StorageIOError",
    "StorageCorruptError",
    "TokenRefreshError",
    "DataFetchError",
]
