"""Soil drainage catalog.

Five fixed soil classifications ordered from poorest to best drainage. The
id mapping is built once at import time and exposed read-only.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import UnknownSoilType

__all__ = ["SoilClassification", "SOIL_TYPES", "lookup", "list_soils"]


@dataclass(frozen=True)
class SoilClassification:
    """A soil class with its display label and drainage coefficient."""
    id: str
    label: str
    drainage_coefficient: float  # higher = water clears faster

    @property
    def name(self) -> str:
        """Label without the drainage descriptor, e.g. 'Sandy Loam'."""
        return self.label.split(" (")[0]


SOIL_TYPES: Tuple[SoilClassification, ...] = (
    SoilClassification("clay", "Clay (Poor drainage)", 1.0),
    SoilClassification("silt", "Silt (Poor drainage)", 1.5),
    SoilClassification("loam", "Loam (Moderate drainage)", 3.0),
    SoilClassification("sandy-loam", "Sandy Loam (Good drainage)", 4.0),
    SoilClassification("sand", "Sand (Excellent drainage)", 5.0),
)

_BY_ID: Mapping[str, SoilClassification] = MappingProxyType(
    {soil.id: soil for soil in SOIL_TYPES})


def lookup(soil_id: str) -> SoilClassification:
    """Resolve a soil id, raising UnknownSoilType when it is not catalogued."""
    try:
        return _BY_ID[soil_id]
    except (KeyError, TypeError):
        raise UnknownSoilType(soil_id) from None


def list_soils() -> Tuple[SoilClassification, ...]:
    return SOIL_TYPES
