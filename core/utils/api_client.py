# -*- coding: utf-8 -*-
"""
Client for the weatherapi.com forecast API behind the RapidAPI gateway.

One GET per lookup:
    https://{host}/forecast.json?q=<city>&days=1
with the X-RapidAPI-Key / X-RapidAPI-Host headers.

No caching and no retries. Timeouts are whatever httpx defaults to.
"""
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger("api_client")

FORECAST_PATH = "/forecast.json"


class WeatherAPIClient:
    """Thin async wrapper around the forecast endpoint."""

    def __init__(self, api_key: str, api_host: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.api_host = api_host
        self.base_url = f"https://{api_host}"
        # Injected in tests (httpx.MockTransport)
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "X-RapidAPI-Key": self.api_key,
            "X-RapidAPI-Host": self.api_host,
        }

    async def get_forecast(self, city: str, days: int = 1) -> Dict[str, Any]:
        """
        Requests the forecast for a city.

        Args:
            city (str): Free text, passed through to the provider as-is
            days (int): Number of forecast days

        Returns:
            dict: Decoded JSON payload

        Raises:
            httpx.HTTPError: Transport failure or a non-2xx provider response
        """
        params = {"q": city, "days": str(days)}
        async with httpx.AsyncClient(base_url=self.base_url, headers=self.headers, transport=self._transport) as client:
            response = await client.get(FORECAST_PATH, params=params)
            response.raise_for_status()
        logger.debug("Forecast received for %r (%s)", city, response.status_code)
        return response.json()
