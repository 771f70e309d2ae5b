from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.openweathermap.org"


@dataclass
class WeatherSettings:
    """Configuration for the OpenWeather API client used by the proxy."""
    api_key: str
    base_url: str = DEFAULT_BASE_URL
    geocode_limit: int = 5  # enforced server side, callers cannot raise it
    timeout: float = 10.0

    @staticmethod
    def from_env() -> 'WeatherSettings':
        """Create Weather settings from environment variables."""
        api_key = os.environ.get('OPENWEATHER_API_KEY', '')
        if not api_key:
            logging.getLogger(__name__).warning(
                "OPENWEATHER_API_KEY is not set in env; proxy will fail."
            )
        base_url = os.environ.get('OPENWEATHER_BASE_URL', DEFAULT_BASE_URL)
        limit = int(os.environ.get('GEOCODE_LIMIT', '5'))
        timeout = float(os.environ.get('OPENWEATHER_TIMEOUT', '10'))
        return WeatherSettings(
            api_key=api_key,
            base_url=base_url.rstrip('/'),
            geocode_limit=limit,
            timeout=timeout,
        )
