"""Flood-risk scoring for planting decisions.

Pure computational utilities (no I/O, no logging). Rainfall in mm over 24
hours is scaled by a band multiplier that grows with rainfall, then divided by
the soil drainage coefficient:

    rainfall < 20        score = rainfall / d
    20 <= rainfall < 50  score = rainfall * 1.5 / d
    rainfall >= 50       score = rainfall * 2 / d

The score is then bucketed into Low / Moderate / High / Very High tiers;
only Low and Moderate are considered safe for planting.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Dict, Tuple

from .errors import InvalidRainfall
from .soils import lookup

__all__ = [
    "RiskLevel",
    "Assessment",
    "assess",
    "banded_score",
    "classify",
    "parse_rainfall",
]


class RiskLevel(str, Enum):
    """Ordered flood-risk tiers."""
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"


# (band lower bound on rainfall mm, multiplier), highest band first
RAINFALL_BANDS: Tuple[Tuple[float, float], ...] = (
    (50.0, 2.0),
    (20.0, 1.5),
    (float("-inf"), 1.0),
)

# (upper bound on risk score, tier, safe); the last tier is open-ended
RISK_TIERS: Tuple[Tuple[float, RiskLevel, bool], ...] = (
    (10.0, RiskLevel.LOW, True),
    (20.0, RiskLevel.MODERATE, True),
    (35.0, RiskLevel.HIGH, False),
    (float("inf"), RiskLevel.VERY_HIGH, False),
)

MESSAGES: Dict[RiskLevel, str] = {
    RiskLevel.LOW: ("Excellent conditions for planting. Soil drainage is "
                    "adequate for current rainfall levels."),
    RiskLevel.MODERATE: ("Safe to plant, but monitor weather conditions. "
                         "Consider raised beds if rainfall increases."),
    RiskLevel.HIGH: ("Not safe to plant. High flood risk due to poor "
                     "drainage and significant rainfall."),
    RiskLevel.VERY_HIGH: ("Dangerous flood conditions. Avoid planting and "
                          "consider flood protection measures."),
}


@dataclass(frozen=True)
class Assessment:
    """Outcome of a single risk assessment."""
    rainfall_mm: float
    soil_label: str
    soil_name: str
    risk_score: float
    risk_level: RiskLevel
    safe: bool
    message: str

    @property
    def verdict(self) -> str:
        return "Safe to Plant" if self.safe else "Not Safe – High Flood Risk"

    def to_dict(self) -> Dict:
        return {
            "rainfall_mm": self.rainfall_mm,
            "soil_label": self.soil_label,
            "soil_name": self.soil_name,
            "risk_score": self.risk_score,
            "risk_level": self.risk_level.value,
            "safe": self.safe,
            "message": self.message,
            "verdict": self.verdict,
        }


def _check_rainfall(rainfall_mm) -> float:
    # bool is an int subclass but never a rainfall amount
    if isinstance(rainfall_mm, bool) or not isinstance(rainfall_mm, Real):
        raise InvalidRainfall(rainfall_mm)
    try:
        value = float(rainfall_mm)
    except OverflowError:
        raise InvalidRainfall(rainfall_mm) from None
    if not math.isfinite(value):
        raise InvalidRainfall(rainfall_mm)
    if value < 0:
        raise InvalidRainfall(
            rainfall_mm, f"Rainfall cannot be negative: {rainfall_mm}")
    return value


def banded_score(rainfall_mm: float, drainage_coefficient: float) -> float:
    """Raw risk score for rainfall (mm/24h) on soil with the given drainage."""
    for lower, multiplier in RAINFALL_BANDS:
        if rainfall_mm >= lower:
            return (rainfall_mm * multiplier) / drainage_coefficient
    # unreachable for real numbers; NaN falls through every comparison
    raise InvalidRainfall(rainfall_mm)


def classify(risk_score: float) -> Tuple[RiskLevel, bool]:
    """Map a risk score to its tier and planting-safety flag."""
    for upper, level, safe in RISK_TIERS:
        if risk_score < upper:
            return level, safe
    return RiskLevel.VERY_HIGH, False


def assess(rainfall_mm: float, soil_id: str) -> Assessment:
    """Assess flood risk for planting.

    Parameters
    ----------
    rainfall_mm : float
        Rainfall over 24 hours in millimeters. Must be finite and >= 0.
    soil_id : str
        One of the catalog soil ids (``clay``, ``silt``, ``loam``,
        ``sandy-loam``, ``sand``).

    Returns
    -------
    Assessment
        Score, tier, safety flag and advisory message.

    Raises
    ------
    UnknownSoilType
        If ``soil_id`` is not catalogued.
    InvalidRainfall
        If ``rainfall_mm`` is not a finite, non-negative number, or is
        so large that its score overflows.
    """
    soil = lookup(soil_id)
    rainfall = _check_rainfall(rainfall_mm)
    score = banded_score(rainfall, soil.drainage_coefficient)
    if not math.isfinite(score):
        raise InvalidRainfall(
            rainfall_mm, f"Rainfall too large to score: {rainfall_mm}")
    level, safe = classify(score)
    return Assessment(
        rainfall_mm=rainfall,
        soil_label=soil.label,
        soil_name=soil.name,
        risk_score=score,
        risk_level=level,
        safe=safe,
        message=MESSAGES[level],
    )


def parse_rainfall(text) -> float:
    """Parse free-form rainfall input (e.g. form or CLI text) into mm."""
    if text is None:
        raise InvalidRainfall(text, "Please enter valid rainfall data")
    if isinstance(text, Real) and not isinstance(text, bool):
        return _check_rainfall(text)
    try:
        value = float(str(text).strip())
    except ValueError:
        raise InvalidRainfall(text, "Please enter valid rainfall data") from None
    return _check_rainfall(value)
