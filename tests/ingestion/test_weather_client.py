import random
import pytest
import requests

from planting_risk.domain.errors import MissingLocation, WeatherLookupError
from planting_risk.ingestion import weather_client as wc
from planting_risk.ingestion.weather_client import (
    PlaceholderRainfallEstimator,
    WeatherAPIClient,
)

PAYLOAD = {
    "name": "Nairobi",
    "dt": 1760870400,
    "main": {"temp": 21.4, "humidity": 68},
    "weather": [{"description": "light rain"}],
}


class FixedEstimator:
    def estimate(self, payload):
        return 42.0


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


def _client(**kwargs):
    return WeatherAPIClient(api_url="http://weather.test/weather", api_key="k",
                            estimator=FixedEstimator(), **kwargs)


def test_lookup_builds_report(monkeypatch):
    calls = {}

    def fake_get(url, params=None, timeout=None):
        calls.update(url=url, params=params, timeout=timeout)
        return FakeResponse(PAYLOAD)

    monkeypatch.setattr(wc.requests, "get", fake_get)
    report = _client(timeout=5).lookup("  Nairobi ")

    assert calls["url"] == "http://weather.test/weather"
    assert calls["params"] == {"q": "Nairobi", "appid": "k", "units": "metric"}
    assert calls["timeout"] == 5
    assert report.location == "Nairobi"
    assert report.temperature_c == pytest.approx(21.4)
    assert report.humidity_pct == 68
    assert report.description == "light rain"
    assert report.rainfall_mm == 42.0
    assert report.observed_at == "2025-10-19T10:40:00Z"


@pytest.mark.parametrize("location", ["", "   ", None])
def test_missing_location(location):
    with pytest.raises(MissingLocation):
        _client().fetch_current_weather(location)


def test_missing_api_key():
    client = WeatherAPIClient(api_key="", estimator=FixedEstimator())
    with pytest.raises(WeatherLookupError, match="WEATHER_API_KEY"):
        client.fetch_current_weather("Nairobi")


def test_http_error_becomes_lookup_error(monkeypatch):
    monkeypatch.setattr(wc.requests, "get",
                        lambda *a, **k: FakeResponse({"cod": "404"}, status_code=404))
    with pytest.raises(WeatherLookupError, match="Location not found"):
        _client().lookup("Atlantis")


def test_connection_error_becomes_lookup_error(monkeypatch):
    def boom(*a, **k):
        raise requests.exceptions.ConnectionError("offline")

    monkeypatch.setattr(wc.requests, "get", boom)
    with pytest.raises(WeatherLookupError):
        _client().lookup("Nairobi")


def test_malformed_payload():
    with pytest.raises(WeatherLookupError):
        _client().to_report({"name": "Nairobi", "main": {}})


def test_payload_without_timestamp():
    payload = {k: v for k, v in PAYLOAD.items() if k != "dt"}
    assert _client().to_report(payload).observed_at is None


def test_placeholder_estimator_range_and_precision():
    est = PlaceholderRainfallEstimator(rng=random.Random(7))
    values = [est.estimate({}) for _ in range(200)]
    assert all(0.0 <= v <= 100.0 for v in values)
    assert all(round(v, 1) == v for v in values)
    again = PlaceholderRainfallEstimator(rng=random.Random(7))
    assert [again.estimate({}) for _ in range(200)] == values
