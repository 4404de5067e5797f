"""Flatten a ``getstationsdata`` response into the compact dashboard view."""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ...models.station import (
    NOT_AVAILABLE,
    ComfortModuleSummary,
    CompactSummary,
    OutdoorSummary,
    RainSummary,
)

MAIN_STATION = "NAMain"
OUTDOOR_MODULE = "NAModule1"
RAIN_GAUGE = "NAModule3"
COMFORT_MODULE = "NAModule4"


def reading(data: Optional[Mapping[str, Any]], key: str) -> Any:
    """Return ``data[key]`` or the ``N.N.`` sentinel when it is unusable.

    Missing keys, ``None`` and the literal string ``"undefined"`` all count as
    unusable.
    """
    if data is None:
        return NOT_AVAILABLE
    value = data.get(key)
    if value is None or value == "undefined":
        return NOT_AVAILABLE
    return value


def _reachable(device: Mapping[str, Any]) -> Any:
    return device.get("reachable") or "false"


def transform(raw: Mapping[str, Any]) -> CompactSummary:
    """Build a :class:`CompactSummary` from the raw station response.

    Only ``NAMain`` devices are inspected. When several are present, later ones
    overwrite the fields of earlier ones and all their comfort modules are
    collected. A response without a main station yields an empty summary.
    """
    summary = CompactSummary(outdoor=OutdoorSummary(), rain=RainSummary(), modules=[])
    body = raw.get("body") or {}

    for station in body.get("devices") or []:
        if station.get("type") != MAIN_STATION:
            continue

        summary.reachable = _reachable(station)
        summary.station_name = station.get("station_name")
        summary.last_status_store = station.get("last_status_store")

        dashboard = station.get("dashboard_data")
        summary.temperature = reading(dashboard, "Temperature")
        summary.temperature_trend = reading(dashboard, "temp_trend")
        summary.co2 = reading(dashboard, "CO2")
        summary.humidity = reading(dashboard, "Humidity")
        summary.noise = reading(dashboard, "Noise")
        summary.pressure = reading(dashboard, "Pressure")
        summary.pressure_trend = reading(dashboard, "pressure_trend")

        for module in station.get("modules") or []:
            module_type = module.get("type")
            if module_type == OUTDOOR_MODULE:
                _apply_outdoor(summary.outdoor, module, dashboard)
            elif module_type == RAIN_GAUGE:
                _apply_rain(summary.rain, module)
            elif module_type == COMFORT_MODULE:
                summary.modules.append(_comfort_module(module))

    return summary


def _apply_outdoor(
    outdoor: OutdoorSummary,
    module: Mapping[str, Any],
    station_dashboard: Optional[Mapping[str, Any]],
) -> None:
    outdoor.reachable = _reachable(module)
    outdoor.battery_percent = reading(module, "battery_percent")
    outdoor.rf_status = reading(module, "rf_status")

    dashboard = module.get("dashboard_data")
    if dashboard is None:
        outdoor.temperature = NOT_AVAILABLE
        outdoor.humidity = NOT_AVAILABLE
        outdoor.temperature_trend = NOT_AVAILABLE
        return

    outdoor.temperature = reading(dashboard, "Temperature")
    outdoor.humidity = reading(dashboard, "Humidity")
    # The dashboard has always reported the station's trend here.
    outdoor.temperature_trend = reading(station_dashboard, "temp_trend")


def _apply_rain(rain: RainSummary, module: Mapping[str, Any]) -> None:
    rain.reachable = _reachable(module)
    rain.battery_percent = reading(module, "battery_percent")
    rain.rf_status = reading(module, "rf_status")

    dashboard = module.get("dashboard_data")
    rain.rain = reading(dashboard, "Rain")
    rain.sum_rain_24 = reading(dashboard, "sum_rain_24")
    rain.sum_rain_1 = reading(dashboard, "sum_rain_1")


def _comfort_module(module: Mapping[str, Any]) -> ComfortModuleSummary:
    dashboard: Optional[Dict[str, Any]] = module.get("dashboard_data")
    return ComfortModuleSummary(
        name=module.get("module_name") or NOT_AVAILABLE,
        data_type=module.get("data_type") or NOT_AVAILABLE,
        battery_percent=reading(module, "battery_percent"),
        rf_status=reading(module, "rf_status"),
        reachable=_reachable(module),
        dashboard_data=dashboard if dashboard is not None else NOT_AVAILABLE,
        temperature=reading(dashboard, "Temperature"),
        humidity=reading(dashboard, "Humidity"),
        co2=reading(dashboard, "CO2"),
        min_temp=reading(dashboard, "min_temp"),
        max_temp=reading(dashboard, "max_temp"),
        date_min_temp=reading(dashboard, "date_min_temp"),
        date_max_temp=reading(dashboard, "date_max_temp"),
    )


__all__ = [
    "MAIN_STATION",
    "OUTDOOR_MODULE",
    "RAIN_GAUGE",
    "COMFORT_MODULE",
    "reading",
    "transform",
]
