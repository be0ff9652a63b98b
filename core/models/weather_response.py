# core/models/weather_response.py
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ForecastView:
    """Flat display record for one forecast lookup. Built per request."""
    city: str
    country: str
    last_updated: datetime

    # Current conditions
    condition: str
    icon_url: str
    temp_c: float
    feels_like_c: float
    humidity: int
    pressure_mb: float
    wind_kph: float
    wind_dir: str
    uv: float

    # Today
    max_temp_c: float
    min_temp_c: float
    avg_temp_c: float
    chance_of_rain: int
    sunrise: str
    sunset: str
