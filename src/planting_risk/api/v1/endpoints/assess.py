"""Flood-risk assessment endpoints.

- POST /assess: score a known rainfall amount against a soil type.
- POST /advise: full planting flow; rainfall comes either from manual entry
  or from a weather lookup for a location, falling back to the manual value
  if the lookup fails.

Domain errors map to HTTP status codes: unknown soil 404, invalid rainfall or
missing location 422, weather lookup failure 502.
"""
from __future__ import annotations

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from planting_risk.auth.auth import verify_token
from planting_risk.domain import (
    Assessment,
    InvalidRainfall,
    MissingLocation,
    UnknownSoilType,
    WeatherLookupError,
    assess,
)
from planting_risk.api.v1.endpoints.weather import WeatherResponse
from planting_risk.services.advisor import PlantingAdvisor

router = APIRouter()


class AssessRequest(BaseModel):
    # Rainfall over 24 hours [mm]
    rainfall_mm: float = Field(..., examples=[45.0])
    # Soil catalog id
    soil_id: str = Field(..., examples=["loam"])


class AssessmentResponse(BaseModel):
    rainfall_mm: float
    soil_label: str  # e.g. "Loam (Moderate drainage)"
    soil_name: str  # label without drainage descriptor, e.g. "Loam"
    risk_score: float  # rounded to one decimal for display
    risk_level: str  # Low, Moderate, High, Very High
    safe: bool
    verdict: str
    message: str

    @classmethod
    def from_assessment(cls, a: Assessment) -> "AssessmentResponse":
        return cls(
            rainfall_mm=a.rainfall_mm,
            soil_label=a.soil_label,
            soil_name=a.soil_name,
            risk_score=round(a.risk_score, 1),
            risk_level=a.risk_level.value,
            safe=a.safe,
            verdict=a.verdict,
            message=a.message,
        )


class AdviseRequest(BaseModel):
    soil_id: str = Field(..., examples=["clay"])
    # Free-form manual rainfall entry [mm]
    rainfall: Optional[str] = Field(None, examples=["45"])
    # City name for a weather lookup
    location: Optional[str] = Field(None, examples=["Nairobi"])


class AdviseResponse(BaseModel):
    input_mode: str  # "manual" or "api"
    fallback_reason: Optional[str]
    weather: Optional[WeatherResponse]
    assessment: AssessmentResponse


def _to_http(exc: Exception) -> HTTPException:
    if isinstance(exc, UnknownSoilType):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, (InvalidRainfall, MissingLocation)):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=502, detail=str(exc))


@router.post("/assess", response_model=AssessmentResponse)
def assess_risk(request: AssessRequest, token: str = Depends(verify_token)):
    """Assess planting flood risk for a rainfall amount and soil type."""
    try:
        result = assess(request.rainfall_mm, request.soil_id)
    except (UnknownSoilType, InvalidRainfall) as e:
        raise _to_http(e)
    return AssessmentResponse.from_assessment(result)


@router.post("/advise", response_model=AdviseResponse)
def advise(request: AdviseRequest, token: str = Depends(verify_token)):
    """Resolve rainfall (manual or weather lookup) and assess planting risk."""
    advisor = PlantingAdvisor()
    try:
        advice = advisor.advise(
            request.soil_id,
            rainfall_text=request.rainfall,
            location=request.location,
        )
    except (UnknownSoilType, InvalidRainfall, WeatherLookupError) as e:
        raise _to_http(e)

    return AdviseResponse(
        input_mode=advice.input_mode,
        fallback_reason=advice.fallback_reason,
        weather=WeatherResponse.from_report(advice.weather) if advice.weather else None,
        assessment=AssessmentResponse.from_assessment(advice.assessment),
    )
