"""Error taxonomy shared by the risk engine and its collaborators."""
from __future__ import annotations

from typing import Any


class PlantingRiskError(Exception):
    """Base class for every error raised by this package."""


class UnknownSoilType(PlantingRiskError):
    """Soil identifier is not one of the fixed catalog entries."""

    def __init__(self, soil_id: Any, message: str | None = None):
        self.soil_id = soil_id
        super().__init__(message or f"Unknown soil type: {soil_id!r}")


class InvalidRainfall(PlantingRiskError, ValueError):
    """Rainfall value is not a finite, non-negative number."""

    def __init__(self, value: Any, message: str | None = None):
        self.value = value
        super().__init__(message or f"Invalid rainfall value: {value!r}")


class WeatherLookupError(PlantingRiskError):
    """Remote weather lookup failed or returned an unusable payload."""


class MissingLocation(WeatherLookupError):
    """Weather lookup requested without a location."""
