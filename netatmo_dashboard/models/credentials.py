from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CredentialRecord(BaseModel):
    """OAuth client credentials and the current refresh token for one identity."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "client_id": "5f1a0c7e2d9b4a0012345678",
                "client_secret": "s3cr3t",
                "refresh_token": "5f1a0c7e2d9b4a0012345678|0123456789abcdef",
            }
        }
    )

    client_id: str = Field(..., description="Netatmo application client id")
    client_secret: str = Field(..., description="Netatmo application client secret")
    refresh_token: str = Field(..., description="Most recently issued refresh token")

    def rotate(self, refresh_token: str) -> "CredentialRecord":
        """Return a copy carrying the provider's newly issued refresh token."""
        return self.model_copy(update={"refresh_token": refresh_token})


class TokenSet(BaseModel):
    """Result of a refresh-token grant. Never persisted verbatim."""

    access_token: str
    refresh_token: str
    expires_in: Optional[int] = None
