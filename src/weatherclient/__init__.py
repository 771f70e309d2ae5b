"""
OpenWeather API client and the HTTP proxy routes built on it.
Keeps the API key on the server; the browser only ever talks to the routes.
"""

__all__ = ['WeatherClient', 'WeatherError', 'WeatherSettings']

from .client import WeatherClient, WeatherError
from .config import WeatherSettings
