# -*- coding: utf-8 -*-
"""
Weather lookup: one provider call, reshaped into a ForecastView.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

import httpx

from core.models.weather_response import ForecastView
from core.utils.api_client import WeatherAPIClient

logger = logging.getLogger("data_fetcher")


def _absolute_url(url: str) -> str:
    # The provider returns protocol-relative icon links ("//cdn...")
    if url.startswith("//"):
        return "https:" + url
    return url


def process_weather(payload: Dict[str, Any]) -> ForecastView:
    """
    Reshapes the nested provider payload into a flat ForecastView.

    Raises KeyError / IndexError / TypeError / ValueError when the payload
    does not have the expected shape.
    """
    location = payload["location"]
    current = payload["current"]
    today = payload["forecast"]["forecastday"][0]
    day = today["day"]
    astro = today["astro"]

    return ForecastView(
        city=location["name"],
        country=location["country"],
        last_updated=datetime.fromtimestamp(current["last_updated_epoch"]),
        condition=current["condition"]["text"],
        icon_url=_absolute_url(current["condition"]["icon"]),
        temp_c=current["temp_c"],
        feels_like_c=current["feelslike_c"],
        humidity=current["humidity"],
        pressure_mb=current["pressure_mb"],
        wind_kph=current["wind_kph"],
        wind_dir=current["wind_dir"],
        uv=current["uv"],
        max_temp_c=day["maxtemp_c"],
        min_temp_c=day["mintemp_c"],
        avg_temp_c=day["avgtemp_c"],
        chance_of_rain=day["daily_chance_of_rain"],
        sunrise=astro["sunrise"],
        sunset=astro["sunset"],
    )


async def fetch_weather(client: WeatherAPIClient, city: str) -> Optional[ForecastView]:
    """
    Gets today's forecast for a city.

    Args:
        client (WeatherAPIClient): Provider client
        city (str): User input, unvalidated

    Returns:
        ForecastView, or None when the provider call fails for any reason
        (unknown city, provider error, network error)
    """
    try:
        payload = await client.get_forecast(city, days=1)
    except httpx.HTTPError as e:
        logger.warning("❌ Lookup failed for %r: %r", city, e)
        return None

    view = process_weather(payload)
    logger.info("✅ Forecast ready for %s, %s", view.city, view.country)
    return view
