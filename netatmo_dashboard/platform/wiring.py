"""FastAPI dependency wiring for the dashboard use cases."""

from __future__ import annotations

from functools import lru_cache
from typing import AsyncIterator

import httpx
from fastapi import Depends

from ..credentials.application import (
    CredentialCache,
    CredentialRegistry,
    CredentialStorePort,
)
from ..credentials.infrastructure import (
    InMemoryCredentialCache,
    create_json_credential_store,
)
from ..netatmo.application import IdentityLocks, StationDashboardCoordinator
from ..netatmo.infrastructure import create_netatmo_client_adapter
from ..settings import Settings, get_settings


@lru_cache()
def get_credential_cache() -> CredentialCache:
    """Process-wide credential registry."""
    return InMemoryCredentialCache()


@lru_cache()
def get_identity_locks() -> IdentityLocks:
    return IdentityLocks()


def provide_credential_store(
    settings: Settings = Depends(get_settings),
) -> CredentialStorePort:
    return create_json_credential_store(path=settings.credentials_path)


def provide_credential_registry(
    store: CredentialStorePort = Depends(provide_credential_store),
    cache: CredentialCache = Depends(get_credential_cache),
) -> CredentialRegistry:
    return CredentialRegistry(store, cache)


async def provide_station_dashboard_coordinator(
    settings: Settings = Depends(get_settings),
    store: CredentialStorePort = Depends(provide_credential_store),
    cache: CredentialCache = Depends(get_credential_cache),
    locks: IdentityLocks = Depends(get_identity_locks),
) -> AsyncIterator[StationDashboardCoordinator]:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as http_client:
        client = create_netatmo_client_adapter(
            http_client=http_client, settings=settings
        )
        yield StationDashboardCoordinator(client, store, cache, locks)


__all__ = [
    "get_credential_cache",
    "get_identity_locks",
    "provide_credential_store",
    "provide_credential_registry",
    "provide_station_dashboard_coordinator",
]
