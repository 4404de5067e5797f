from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..credentials.application import CredentialRegistry, identity_from_config_id
from ..errors import NetatmoDashboardError
from ..models.credentials import CredentialRecord
from ..platform.wiring import provide_credential_registry
from .utils import to_http_exception

router: APIRouter = APIRouter()


@router.get("/credentials/{config_id}")
async def get_credentials_status(
    config_id: str,
    registry: CredentialRegistry = Depends(provide_credential_registry),
) -> Dict[str, Any]:
    """Load stored credentials into the runtime cache and report whether any exist."""
    identity = identity_from_config_id(config_id)
    try:
        configured = registry.prime(identity) is not None
    except NetatmoDashboardError as exc:
        raise to_http_exception(exc, config_id) from exc
    return {"identity": identity, "configured": configured}


@router.put("/credentials/{config_id}")
async def put_credentials(
    config_id: str,
    record: CredentialRecord,
    registry: CredentialRegistry = Depends(provide_credential_registry),
) -> Dict[str, str]:
    """Store client credentials and the initial refresh token."""
    identity = identity_from_config_id(config_id)
    try:
        registry.update(identity, record)
    except NetatmoDashboardError as exc:
        raise to_http_exception(exc, config_id) from exc
    return {"identity": identity, "status": "ok"}
