"""Ports for the Netatmo application layer."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ...models.credentials import CredentialRecord, TokenSet


@runtime_checkable
class NetatmoClientPort(Protocol):
    """Port that exposes the Netatmo API calls used by the application."""

    async def refresh_tokens(self, record: CredentialRecord) -> TokenSet:
        """Exchange the record's refresh token for a new token pair."""

    async def get_stations_data(self, access_token: str) -> dict[str, Any]:
        """Return the raw ``getstationsdata`` response."""


__all__ = ["NetatmoClientPort"]
