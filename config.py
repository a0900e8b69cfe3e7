from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from constants import (
    DEFAULT_CITY,
    DEFAULT_DISPLAY_TZ,
    ENV_API_TOKEN,
    ENV_CITY,
    ENV_DISPLAY_TZ,
    FORECAST_URL,
)


@dataclass(frozen=True)
class WeatherConfig:
    """Everything the fetch routine needs, passed in explicitly."""

    api_token: str
    city: str = DEFAULT_CITY
    display_timezone: str = DEFAULT_DISPLAY_TZ
    base_url: str = FORECAST_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WeatherConfig":
        """
        Build a config from the process environment (after loading a local
        .env file), or from ``environ`` when given. A missing token is not an
        error here; the API answers 401 and the page shows the failure.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ
        return cls(
            api_token=environ.get(ENV_API_TOKEN, ""),
            city=environ.get(ENV_CITY) or DEFAULT_CITY,
            display_timezone=environ.get(ENV_DISPLAY_TZ) or DEFAULT_DISPLAY_TZ,
        )

    def query_params(self) -> dict[str, str]:
        return {"q": self.city, "appid": self.api_token}
