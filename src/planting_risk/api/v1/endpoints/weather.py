"""Current weather lookup endpoint.

Thin wrapper around ``WeatherAPIClient.lookup``. The rainfall figure in the
response is a placeholder estimate.
"""
from __future__ import annotations

from typing import Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from planting_risk.auth.auth import verify_token
from planting_risk.domain import MissingLocation, WeatherLookupError
from planting_risk.ingestion.weather_client import WeatherAPIClient, WeatherReport

router = APIRouter()


class WeatherResponse(BaseModel):
    location: str
    temperature_c: float
    humidity_pct: float
    description: str
    rainfall_mm: float  # placeholder estimate, one decimal
    observed_at: Optional[str]

    @classmethod
    def from_report(cls, report: WeatherReport) -> "WeatherResponse":
        return cls(**report.to_dict())


@router.get("/weather", response_model=WeatherResponse)
def get_weather(location: str = Query("", description="City name, e.g. Nairobi"),
                token: str = Depends(verify_token)):
    """Fetch current conditions for a location.

    Raises
    ------
    HTTPException
        422 if no location is given, 502 if the upstream lookup fails.
    """
    client = WeatherAPIClient()
    try:
        report = client.lookup(location)
    except MissingLocation as e:
        raise HTTPException(status_code=422, detail=str(e))
    except WeatherLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return WeatherResponse.from_report(report)
