from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Union

import requests

from config import WeatherConfig
from constants import FETCH_FAILED_MESSAGE
from models import ForecastData, WeatherError

logger = logging.getLogger(__name__)


class ForecastFetchError(WeatherError):
    """Transport failure, non-2xx status, or a body that is not JSON."""


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Ready:
    data: ForecastData


@dataclass(frozen=True)
class Failed:
    reason: str


ViewState = Union[Loading, Ready, Failed]


def fetch_forecast(
    config: WeatherConfig, session: Optional[requests.Session] = None
) -> ForecastData:
    """
    Issue the single forecast GET for ``config.city`` and parse the body.

    Raises ForecastFetchError for transport/status/JSON problems and
    ForecastShapeError when the JSON is not a forecast document.
    """
    http = session or requests
    logger.info("Fetching forecast for %s", config.city)
    try:
        response = http.get(config.base_url, params=config.query_params())
    except requests.RequestException as e:
        raise ForecastFetchError(f"Request failed: {e}") from e

    if not 200 <= response.status_code < 300:
        raise ForecastFetchError(f"HTTP {response.status_code} from forecast API")

    try:
        payload = response.json()
    except ValueError as e:
        raise ForecastFetchError("Forecast response is not valid JSON") from e

    data = ForecastData.from_dict(payload)
    logger.info("Received %d forecast items for %s", len(data.items), data.city.name)
    return data


def load_forecast(
    config: WeatherConfig,
    fetch: Callable[[WeatherConfig], ForecastData] = fetch_forecast,
) -> ViewState:
    """Run the fetch once and settle the view into Ready or Failed."""
    try:
        return Ready(fetch(config))
    except WeatherError as e:
        # Every cause collapses into one user-facing message.
        logger.warning("Forecast load failed: %s", e)
        return Failed(FETCH_FAILED_MESSAGE)
