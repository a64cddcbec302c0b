"""Core flood-risk domain: soil catalog, scoring engine and errors."""

from .errors import (
    PlantingRiskError,
    UnknownSoilType,
    InvalidRainfall,
    WeatherLookupError,
    MissingLocation,
)
from .soils import SoilClassification, SOIL_TYPES, lookup, list_soils
from .risk_engine import (
    RiskLevel,
    Assessment,
    assess,
    banded_score,
    classify,
    parse_rainfall,
)

__all__ = [
    "PlantingRiskError",
    "UnknownSoilType",
    "InvalidRainfall",
    "WeatherLookupError",
    "MissingLocation",
    "SoilClassification",
    "SOIL_TYPES",
    "lookup",
    "list_soils",
    "RiskLevel",
    "Assessment",
    "assess",
    "banded_score",
    "classify",
    "parse_rainfall",
]
