from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ...errors import DataFetchError, TokenRefreshError
from ...models.credentials import CredentialRecord, TokenSet
from ...settings import Settings
from ..application.ports import NetatmoClientPort

logger = logging.getLogger(__name__)


class NetatmoClientAdapter(NetatmoClientPort):
    """HTTP client for the Netatmo weather station API.

    Holds no credentials of its own; callers persist whatever
    ``refresh_tokens`` returns.
    """

    def __init__(self, http_client: httpx.AsyncClient, settings: Settings) -> None:
        self._http_client = http_client
        self._settings = settings

    async def refresh_tokens(self, record: CredentialRecord) -> TokenSet:
        payload = {
            "grant_type": "refresh_token",
            "refresh_token": record.refresh_token,
            "client_id": record.client_id,
            "client_secret": record.client_secret,
        }

        try:
            response = await self._http_client.post(
                f"{self._settings.netatmo_api_url}/oauth2/token",
                data=payload,
                headers={"User-Agent": self._settings.user_agent},
                timeout=self._settings.http_timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Netatmo token request failed: %s", exc)
            raise TokenRefreshError(
                f"Unable to refresh the access token: {exc}"
            ) from exc

        if response.status_code != 200:
            logger.warning(
                "Netatmo token endpoint answered %s", response.status_code
            )
            raise TokenRefreshError(
                f"Unable to refresh the access token: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return TokenSet.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise TokenRefreshError(
                f"Malformed token response: {response.text}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    async def get_stations_data(self, access_token: str) -> dict[str, Any]:
        headers = {
            "Authorization": f"Bearer {access_token}",
            "User-Agent": self._settings.user_agent,
        }
        try:
            response = await self._http_client.get(
                f"{self._settings.netatmo_api_url}/api/getstationsdata",
                headers=headers,
                timeout=self._settings.http_timeout,
            )
        except httpx.HTTPError as exc:
            logger.warning("Netatmo station request failed: %s", exc)
            raise DataFetchError(f"Unable to fetch station data: {exc}") from exc

        if response.status_code != 200:
            logger.warning(
                "Netatmo station endpoint answered %s", response.status_code
            )
            raise DataFetchError(
                f"Unable to fetch station data: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise DataFetchError(
                f"Malformed station response: {response.text}",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        if not isinstance(data, dict) or not isinstance(data.get("body"), dict):
            raise DataFetchError(
                f"Malformed station response: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )
        return data


def create_netatmo_client_adapter(
    *, http_client: httpx.AsyncClient, settings: Settings
) -> NetatmoClientPort:
    """Create a Netatmo client adapter without FastAPI dependencies."""
    return NetatmoClientAdapter(http_client, settings)
