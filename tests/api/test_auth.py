"""Authentication and schema contract tests."""

from __future__ import annotations

import httpx
import pytest

from netatmo_dashboard.platform.security import api_key_matches
from netatmo_dashboard.settings import Settings

pytestmark = pytest.mark.asyncio


@pytest.mark.parametrize(
    ("headers", "expected_status"),
    [
        pytest.param({}, 401, id="missing"),
        pytest.param({"x-api-key": "wrong"}, 401, id="invalid"),
        pytest.param({"x-api-key": "test"}, 401, id="prefix"),
        pytest.param("valid", 200, id="valid"),
    ],
)
async def test_api_schema_auth_contract(
    client: httpx.AsyncClient, settings: Settings, headers: dict[str, str] | str, expected_status: int
) -> None:
    """The API schema endpoint enforces the x-api-key contract."""

    request_headers = (
        {"x-api-key": settings.api_key} if isinstance(headers, str) else headers
    )

    response = await client.get("/v2/api-schema", headers=request_headers)

    assert response.status_code == expected_status


@pytest.mark.parametrize(
    "method, path",
    [
        pytest.param("GET", "/v2/dashboard/node-0123456789abcdef", id="dashboard"),
        pytest.param("GET", "/v2/credentials/node-0123456789abcdef", id="credentials"),
    ],
)
async def test_routes_require_api_key(
    client: httpx.AsyncClient, method: str, path: str
) -> None:
    response = await client.request(method, path)

    assert response.status_code == 401
    assert response.json() == {"detail": {"error": "Unauthorized"}}


async def test_openapi_schema(client: httpx.AsyncClient, settings: Settings) -> None:
    """The generated schema defines the API key security scheme only once."""

    response = await client.get("/v2/api-schema", headers={"x-api-key": settings.api_key})

    assert response.status_code == 200
    schema = response.json()

    assert schema["components"]["securitySchemes"]["ApiKeyAuth"]["name"] == "x-api-key"
    assert "/v2/dashboard/{config_id}" in schema["paths"]
    for path_item in schema["paths"].values():
        for operation in path_item.values():
            if isinstance(operation, dict) and "parameters" in operation:
                assert all(parameter["name"] != "x-api-key" for parameter in operation["parameters"])


@pytest.mark.parametrize(
    "candidate, expected",
    [
        pytest.param("test-key", True, id="exact"),
        pytest.param("test-key ", False, id="trailing_space"),
        pytest.param("", False, id="empty"),
        pytest.param(None, False, id="missing"),
        pytest.param("tëst-key", False, id="non_ascii"),
    ],
)
def test_api_key_matches(candidate: str | None, expected: bool) -> None:
    assert api_key_matches(candidate, "test-key") is expected
