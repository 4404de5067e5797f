"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from netatmo_dashboard import main
from netatmo_dashboard.credentials.application import CredentialStorePort
from netatmo_dashboard.credentials.infrastructure import InMemoryCredentialCache
from netatmo_dashboard.models.credentials import CredentialRecord, TokenSet
from netatmo_dashboard.netatmo.application import IdentityLocks, NetatmoClientPort
from netatmo_dashboard.platform.wiring import (
    get_credential_cache,
    get_identity_locks,
    provide_credential_store,
    provide_station_dashboard_coordinator,
)
from netatmo_dashboard.netatmo import StationDashboardCoordinator
from netatmo_dashboard.settings import Settings, get_settings


class CredentialStoreFake(CredentialStorePort):
    """In-memory credential store that records every save."""

    def __init__(self, initial: Optional[Dict[str, CredentialRecord]] = None) -> None:
        self.records: Dict[str, CredentialRecord] = dict(initial or {})
        self.saves: list[tuple[str, CredentialRecord]] = []
        self.load_error: Exception | None = None
        self.save_error: Exception | None = None

    def load(self, identity: str) -> Optional[CredentialRecord]:
        if self.load_error:
            raise self.load_error
        return self.records.get(identity)

    def save(self, identity: str, record: CredentialRecord) -> None:
        if self.save_error:
            raise self.save_error
        self.saves.append((identity, record))
        self.records[identity] = record


@dataclass
class _Expectation:
    returns: Any = None
    raises: Exception | None = None


class NetatmoClientFake(NetatmoClientPort):
    """Fake Netatmo client exposing expectation helpers."""

    def __init__(self) -> None:
        self._expected_refresh: list[_Expectation] = []
        self._expected_fetch: list[_Expectation] = []
        self.refreshed_with: list[CredentialRecord] = []
        self.fetched_with: list[str] = []

    def expect_refresh_tokens(
        self, *, returns: TokenSet | None = None, raises: Exception | None = None
    ) -> "NetatmoClientFake":
        self._expected_refresh.append(_Expectation(returns, raises))
        return self

    def expect_get_stations_data(
        self, *, returns: Dict[str, Any] | None = None, raises: Exception | None = None
    ) -> "NetatmoClientFake":
        self._expected_fetch.append(_Expectation(returns, raises))
        return self

    async def refresh_tokens(self, record: CredentialRecord) -> TokenSet:
        self.refreshed_with.append(record)
        expectation = self._expected_refresh.pop(0)
        if expectation.raises:
            raise expectation.raises
        return expectation.returns

    async def get_stations_data(self, access_token: str) -> Dict[str, Any]:
        self.fetched_with.append(access_token)
        expectation = self._expected_fetch.pop(0)
        if expectation.raises:
            raise expectation.raises
        return expectation.returns


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        netatmo_api_url="https://netatmo.example.com",
        credentials_path=tmp_path / "credentials.json",
        http_timeout=5.0,
    )


@pytest.fixture
def record() -> CredentialRecord:
    return CredentialRecord(
        client_id="client-id", client_secret="client-secret", refresh_token="refresh-0"
    )


@pytest.fixture
def store_fake() -> CredentialStoreFake:
    return CredentialStoreFake()


@pytest.fixture
def credential_cache() -> InMemoryCredentialCache:
    return InMemoryCredentialCache()


@pytest.fixture
def netatmo_client_fake() -> NetatmoClientFake:
    return NetatmoClientFake()


@pytest.fixture
def coordinator(
    netatmo_client_fake: NetatmoClientFake,
    store_fake: CredentialStoreFake,
    credential_cache: InMemoryCredentialCache,
) -> StationDashboardCoordinator:
    return StationDashboardCoordinator(
        netatmo_client_fake, store_fake, credential_cache, IdentityLocks()
    )


@pytest.fixture
def app(
    settings: Settings,
    coordinator: StationDashboardCoordinator,
    store_fake: CredentialStoreFake,
    credential_cache: InMemoryCredentialCache,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_credential_cache: lambda: credential_cache,
        get_identity_locks: IdentityLocks,
        provide_credential_store: lambda: store_fake,
        provide_station_dashboard_coordinator: lambda: coordinator,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url="http://testserver"
    ) as api_client:
        yield api_client
