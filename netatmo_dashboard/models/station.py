from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

# Sentinel used wherever a reading is not available.
NOT_AVAILABLE = "N.N."


class _Summary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Serialize using the dashboard key names, omitting fields never set."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class OutdoorSummary(_Summary):
    """Outdoor temperature/humidity sensor (``NAModule1``)."""

    reachable: Any = None
    battery_percent: Any = None
    rf_status: Any = None
    temperature: Any = None
    humidity: Any = None
    temperature_trend: Any = Field(None, alias="temperatureTrend")


class RainSummary(_Summary):
    """Rain gauge (``NAModule3``)."""

    reachable: Any = None
    battery_percent: Any = None
    rf_status: Any = None
    rain: Any = None
    sum_rain_24: Any = None
    sum_rain_1: Any = None


class ComfortModuleSummary(_Summary):
    """Indoor CO2/comfort module (``NAModule4``)."""

    name: Any = NOT_AVAILABLE
    data_type: Any = NOT_AVAILABLE
    battery_percent: Any = None
    rf_status: Any = None
    reachable: Any = None
    dashboard_data: Any = NOT_AVAILABLE
    temperature: Any = NOT_AVAILABLE
    humidity: Any = Field(NOT_AVAILABLE, alias="Humidity")
    co2: Any = Field(NOT_AVAILABLE, alias="CO2")
    min_temp: Any = NOT_AVAILABLE
    max_temp: Any = NOT_AVAILABLE
    date_min_temp: Any = NOT_AVAILABLE
    date_max_temp: Any = NOT_AVAILABLE


class CompactSummary(_Summary):
    """Flattened view of the main station and its modules."""

    reachable: Any = None
    station_name: Any = None
    last_status_store: Any = None
    temperature: Any = None
    temperature_trend: Any = Field(None, alias="temperatureTrend")
    co2: Any = None
    humidity: Any = None
    noise: Any = None
    pressure: Any = None
    pressure_trend: Any = Field(None, alias="pressureTrend")
    outdoor: OutdoorSummary = Field(default_factory=OutdoorSummary)
    rain: RainSummary = Field(default_factory=RainSummary)
    modules: List[ComfortModuleSummary] = Field(default_factory=list)

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(
            by_alias=True,
            exclude_unset=True,
            exclude={"outdoor", "rain", "modules"},
        )
        payload["outdoor"] = self.outdoor.to_payload()
        payload["rain"] = self.rain.to_payload()
        payload["modules"] = [module.to_payload() for module in self.modules]
        return payload


class DashboardPayload(BaseModel):
    """The ``compact`` and ``detailed`` views produced for one invocation."""

    compact: CompactSummary
    detailed: Dict[str, Any]

    def to_message(self) -> Dict[str, Any]:
        return {
            "payload": {
                "compact": self.compact.to_payload(),
                "detailed": self.detailed,
            }
        }
