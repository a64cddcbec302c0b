"""Weather API client for current conditions at a named location.

Wraps an OpenWeatherMap-compatible ``/weather`` endpoint and converts its
payload into a ``WeatherReport``. The rainfall figure attached to a report is
a placeholder estimate, not a measurement: the current-conditions payload
carries no 24 hour rainfall total, so an estimator supplies it.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, Optional

import pytz
import requests

from planting_risk.auth.config import settings
from planting_risk.domain.errors import MissingLocation, WeatherLookupError

logger = logging.getLogger(__name__)

LOOKUP_FAILED = "Location not found or API error"


@dataclass(frozen=True)
class WeatherReport:
    """Current conditions for a location plus an estimated 24h rainfall."""
    location: str
    temperature_c: float
    humidity_pct: float
    description: str
    rainfall_mm: float
    observed_at: Optional[str] = None  # UTC ISO-8601

    def to_dict(self) -> Dict:
        return asdict(self)


class PlaceholderRainfallEstimator:
    """Uniform random rainfall in [0, 100) mm, rounded to one decimal."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def estimate(self, payload: Dict) -> float:
        return round(self.rng.random() * 100, 1)


class WeatherAPIClient:
    """Client for the external current-weather API.

    Attributes
    ----------
    api_url : str
        Current-weather endpoint URL.
    api_key : str, optional
        Key sent as the ``appid`` query parameter.
    units : str
        Unit system requested (``metric`` gives Celsius).
    timeout : float
        Request timeout in seconds.
    estimator : PlaceholderRainfallEstimator
        Source of the rainfall figure attached to each report.
    """

    def __init__(self, api_url: Optional[str] = None, api_key: Optional[str] = None,
                 units: Optional[str] = None, timeout: Optional[float] = None,
                 estimator: Optional[PlaceholderRainfallEstimator] = None):
        self.api_url = api_url or settings.WEATHER_API_URL
        self.api_key = api_key if api_key is not None else settings.WEATHER_API_KEY
        self.units = units or settings.WEATHER_UNITS
        self.timeout = timeout if timeout is not None else settings.WEATHER_TIMEOUT_SECONDS
        self.estimator = estimator or PlaceholderRainfallEstimator()

    def fetch_current_weather(self, location: str) -> Dict:
        """Fetch the raw current-weather payload for ``location``.

        Raises
        ------
        MissingLocation
            If ``location`` is empty or blank.
        WeatherLookupError
            If no API key is configured, the request fails or the response
            is not a 2xx JSON document.
        """
        if not location or not str(location).strip():
            raise MissingLocation("Please enter a location")
        if not self.api_key:
            raise WeatherLookupError("WEATHER_API_KEY is not configured")

        params = {"q": str(location).strip(), "appid": self.api_key, "units": self.units}
        logger.info("Fetching current weather for %r", params["q"])
        try:
            response = requests.get(self.api_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning("Weather lookup for %r failed: %s", params["q"], e)
            raise WeatherLookupError(LOOKUP_FAILED) from e

    def to_report(self, payload: Dict) -> WeatherReport:
        """Convert a raw payload into a ``WeatherReport``."""
        try:
            name = payload["name"]
            temp = float(payload["main"]["temp"])
            humidity = float(payload["main"]["humidity"])
            description = payload["weather"][0]["description"]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            logger.warning("Unexpected weather payload: %s", e)
            raise WeatherLookupError(LOOKUP_FAILED) from e

        observed_at = None
        if payload.get("dt") is not None:
            dt_utc = datetime.fromtimestamp(int(payload["dt"]), tz=pytz.UTC)
            observed_at = dt_utc.strftime("%Y-%m-%dT%H:%M:%SZ")

        return WeatherReport(
            location=name,
            temperature_c=temp,
            humidity_pct=humidity,
            description=description,
            rainfall_mm=self.estimator.estimate(payload),
            observed_at=observed_at,
        )

    def lookup(self, location: str) -> WeatherReport:
        """Fetch and convert current weather for ``location``."""
        report = self.to_report(self.fetch_current_weather(location))
        logger.info("Weather for %s: %.1f°C, %s, est. rainfall %.1f mm",
                    report.location, report.temperature_c, report.description,
                    report.rainfall_mm)
        return report
