"""Planting advisor: input-mode handling around the risk engine.

Rainfall either comes from manual entry or from a weather lookup. When a
lookup fails and manual rainfall was supplied, the advisor falls back to
manual mode instead of failing the whole request.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from planting_risk.domain import (
    Assessment,
    UnknownSoilType,
    InvalidRainfall,
    WeatherLookupError,
    assess,
    lookup,
    parse_rainfall,
)
from planting_risk.ingestion.weather_client import WeatherAPIClient, WeatherReport

logger = logging.getLogger(__name__)

MANUAL = "manual"
API = "api"


@dataclass(frozen=True)
class Advice:
    assessment: Assessment
    input_mode: str
    weather: Optional[WeatherReport] = None
    fallback_reason: Optional[str] = None

    def to_dict(self) -> Dict:
        return {
            "input_mode": self.input_mode,
            "fallback_reason": self.fallback_reason,
            "weather": self.weather.to_dict() if self.weather else None,
            "assessment": self.assessment.to_dict(),
        }


class PlantingAdvisor:

    def __init__(self, weather_client: Optional[WeatherAPIClient] = None):
        self._weather_client = weather_client

    @property
    def weather_client(self) -> WeatherAPIClient:
        # built lazily so manual-only use never needs weather settings
        if self._weather_client is None:
            self._weather_client = WeatherAPIClient()
        return self._weather_client

    def advise(self, soil_id: str, rainfall_text: Optional[str] = None,
               location: Optional[str] = None) -> Advice:
        """Resolve rainfall, assess it once and return the advice.

        Raises
        ------
        UnknownSoilType
            Blank or uncatalogued soil id.
        InvalidRainfall
            Manual rainfall missing or unparseable.
        WeatherLookupError
            Lookup failed and no manual rainfall is available to fall back on.
        """
        if not soil_id or not str(soil_id).strip():
            raise UnknownSoilType(soil_id, "Please select a soil type")
        lookup(soil_id)

        if location:
            try:
                report = self.weather_client.lookup(location)
            except WeatherLookupError as e:
                if rainfall_text is None or not str(rainfall_text).strip():
                    raise
                logger.warning("Falling back to manual rainfall: %s", e)
                return self._manual(soil_id, rainfall_text,
                                    fallback_reason=str(e))
            return Advice(
                assessment=assess(report.rainfall_mm, soil_id),
                input_mode=API,
                weather=report,
            )

        return self._manual(soil_id, rainfall_text)

    def _manual(self, soil_id: str, rainfall_text, fallback_reason: Optional[str] = None) -> Advice:
        if rainfall_text is None:
            raise InvalidRainfall(rainfall_text, "Please enter valid rainfall data")
        rainfall = parse_rainfall(rainfall_text)
        return Advice(
            assessment=assess(rainfall, soil_id),
            input_mode=MANUAL,
            fallback_reason=fallback_reason,
        )
