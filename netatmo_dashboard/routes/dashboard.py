from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ..credentials.application import identity_from_config_id
from ..errors import NetatmoDashboardError
from ..netatmo import StationDashboardCoordinator
from ..platform.wiring import provide_station_dashboard_coordinator
from .utils import to_http_exception

router: APIRouter = APIRouter()


@router.get("/dashboard/{config_id}")
async def get_dashboard(
    config_id: str,
    service: StationDashboardCoordinator = Depends(
        provide_station_dashboard_coordinator
    ),
) -> Dict[str, Any]:
    """Refresh credentials, fetch station data and return compact and detailed views."""
    try:
        return await service.process_input(identity_from_config_id(config_id))
    except NetatmoDashboardError as exc:
        raise to_http_exception(exc, config_id) from exc
