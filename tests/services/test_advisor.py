import pytest

from planting_risk.domain import (
    InvalidRainfall,
    RiskLevel,
    UnknownSoilType,
    WeatherLookupError,
)
from planting_risk.ingestion.weather_client import WeatherReport
from planting_risk.services.advisor import API, MANUAL, PlantingAdvisor


class StubWeatherClient:
    def __init__(self, report=None, error=None):
        self.report = report
        self.error = error
        self.calls = []

    def lookup(self, location):
        self.calls.append(location)
        if self.error:
            raise self.error
        return self.report


REPORT = WeatherReport(location="Nairobi", temperature_c=21.0, humidity_pct=70,
                       description="light rain", rainfall_mm=60.0)


def test_manual_mode():
    advice = PlantingAdvisor(StubWeatherClient()).advise("loam", rainfall_text="15")
    assert advice.input_mode == MANUAL
    assert advice.weather is None
    assert advice.fallback_reason is None
    assert advice.assessment.risk_score == pytest.approx(5.0)
    assert advice.assessment.risk_level is RiskLevel.LOW


def test_api_mode_uses_weather_rainfall():
    stub = StubWeatherClient(report=REPORT)
    advice = PlantingAdvisor(stub).advise("silt", location="Nairobi")
    assert stub.calls == ["Nairobi"]
    assert advice.input_mode == API
    assert advice.weather is REPORT
    assert advice.assessment.risk_score == pytest.approx(80.0)
    assert advice.assessment.safe is False
    assert advice.to_dict()["weather"]["location"] == "Nairobi"


def test_lookup_failure_falls_back_to_manual():
    stub = StubWeatherClient(error=WeatherLookupError("Location not found or API error"))
    advice = PlantingAdvisor(stub).advise("sand", rainfall_text="45", location="Atlantis")
    assert advice.input_mode == MANUAL
    assert advice.fallback_reason == "Location not found or API error"
    assert advice.assessment.risk_level is RiskLevel.MODERATE


def test_lookup_failure_without_manual_rainfall_propagates():
    stub = StubWeatherClient(error=WeatherLookupError("down"))
    with pytest.raises(WeatherLookupError):
        PlantingAdvisor(stub).advise("sand", location="Atlantis")


@pytest.mark.parametrize("soil_id", ["", None, "peat"])
def test_soil_is_validated_before_lookup(soil_id):
    stub = StubWeatherClient(report=REPORT)
    with pytest.raises(UnknownSoilType):
        PlantingAdvisor(stub).advise(soil_id, location="Nairobi")
    assert stub.calls == []


@pytest.mark.parametrize("text", [None, "", "lots"])
def test_manual_rainfall_must_parse(text):
    with pytest.raises(InvalidRainfall):
        PlantingAdvisor(StubWeatherClient()).advise("clay", rainfall_text=text)
