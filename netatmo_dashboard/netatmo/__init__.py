"""Netatmo integration package."""

from .application.coordinator import StationDashboardCoordinator
from .domain.compact import transform

__all__ = [
    "StationDashboardCoordinator",
    "transform",
]
