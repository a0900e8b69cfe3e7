from __future__ import annotations

# OpenWeatherMap 5 day / 3 hour forecast endpoint.
FORECAST_URL: str = "https://api.openweathermap.org/data/2.5/forecast"
DEFAULT_CITY: str = "Kaluga"
DEFAULT_DISPLAY_TZ: str = "UTC"

ENV_API_TOKEN: str = "OPENWEATHER_API_TOKEN"
ENV_CITY: str = "WEATHER_CITY"
ENV_DISPLAY_TZ: str = "WEATHER_DISPLAY_TZ"

KELVIN_OFFSET: float = 273.15

# Chart ticks are only labelled at these local hours (minute must be 0).
TICK_HOURS: frozenset[int] = frozenset({0, 12})

# Single user-facing message for every fetch failure.
FETCH_FAILED_MESSAGE: str = "Network response was not ok"
