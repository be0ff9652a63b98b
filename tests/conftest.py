# -*- coding: utf-8 -*-
"""
Shared fixtures: a weatherapi.com style payload and a provider client backed
by httpx.MockTransport.
"""
import copy

import httpx
import pytest

from core.utils.api_client import WeatherAPIClient

LAST_UPDATED_EPOCH = 1729346400

LONDON_PAYLOAD = {
    "location": {
        "name": "London",
        "region": "City of London, Greater London",
        "country": "United Kingdom",
        "tz_id": "Europe/London",
    },
    "current": {
        "last_updated_epoch": LAST_UPDATED_EPOCH,
        "temp_c": 14.2,
        "feelslike_c": 13.1,
        "condition": {
            "text": "Partly cloudy",
            "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png",
            "code": 1003,
        },
        "wind_kph": 15.1,
        "wind_dir": "SW",
        "pressure_mb": 1012.0,
        "humidity": 77,
        "uv": 3.0,
    },
    "forecast": {
        "forecastday": [{
            "date": "2024-10-19",
            "day": {
                "maxtemp_c": 17.4,
                "mintemp_c": 10.9,
                "avgtemp_c": 14.0,
                "daily_chance_of_rain": 86,
            },
            "astro": {
                "sunrise": "07:26 AM",
                "sunset": "06:03 PM",
            },
        }],
    },
}

NOT_FOUND_BODY = {"error": {"code": 1006, "message": "No matching location found."}}

KNOWN_CITIES = {"london": LONDON_PAYLOAD}


@pytest.fixture
def london_payload():
    return copy.deepcopy(LONDON_PAYLOAD)


@pytest.fixture
def provider_requests():
    """Requests seen by the fake provider, in order."""
    return []


@pytest.fixture
def provider_transport(provider_requests):
    def handler(request: httpx.Request) -> httpx.Response:
        provider_requests.append(request)
        city = request.url.params.get("q", "").strip().lower()
        if city in KNOWN_CITIES:
            return httpx.Response(200, json=KNOWN_CITIES[city])
        return httpx.Response(400, json=NOT_FOUND_BODY)

    return httpx.MockTransport(handler)


@pytest.fixture
def weather_client(provider_transport):
    return WeatherAPIClient(
        api_key="test-key",
        api_host="weatherapi-com.p.rapidapi.com",
        transport=provider_transport,
    )
