from .coordinator import IdentityLocks, StationDashboardCoordinator
from .ports import NetatmoClientPort

__all__ = ["IdentityLocks", "StationDashboardCoordinator", "NetatmoClientPort"]
