from __future__ import annotations

import asyncio
import logging
from typing import Dict

from ...credentials.application import (
    CredentialCache,
    CredentialRegistry,
    CredentialStorePort,
)
from ...models.station import DashboardPayload
from ..domain.compact import transform
from .ports import NetatmoClientPort

logger = logging.getLogger(__name__)


class IdentityLocks:
    """Hands out one ``asyncio.Lock`` per identity."""

    def __init__(self) -> None:
        self._locks: Dict[str, asyncio.Lock] = {}

    def __call__(self, identity: str) -> asyncio.Lock:
        lock = self._locks.get(identity)
        if lock is None:
            lock = self._locks[identity] = asyncio.Lock()
        return lock


class StationDashboardCoordinator:
    """Coordinates credential rotation, the station fetch and the transform.

    Load, refresh and save run under a per-identity lock so overlapping
    invocations in one process never spend the same refresh token twice.
    """

    def __init__(
        self,
        client: NetatmoClientPort,
        store: CredentialStorePort,
        cache: CredentialCache,
        locks: IdentityLocks,
    ) -> None:
        self._client = client
        self._credentials = CredentialRegistry(store, cache)
        self._locks = locks

    async def rotate_access_token(self, identity: str) -> str:
        """Refresh the identity's tokens, persist the rotation and return the access token."""
        async with self._locks(identity):
            record = self._credentials.load(identity)
            tokens = await self._client.refresh_tokens(record)
            self._credentials.update(identity, record.rotate(tokens.refresh_token))
        logger.info("Rotated Netatmo refresh token for %s", identity)
        return tokens.access_token

    async def build_dashboard(self, identity: str) -> DashboardPayload:
        access_token = await self.rotate_access_token(identity)
        raw = await self._client.get_stations_data(access_token)
        return DashboardPayload(compact=transform(raw), detailed=raw)

    async def process_input(self, identity: str) -> dict:
        """Run one invocation and return the emitted message."""
        dashboard = await self.build_dashboard(identity)
        return dashboard.to_message()


__all__ = ["IdentityLocks", "StationDashboardCoordinator"]
