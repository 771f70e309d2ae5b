from __future__ import annotations
from typing import Dict, List, Any
import logging
import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from .config import WeatherSettings

GEOCODE_PATH = "/geo/1.0/direct"
ONE_CALL_PATH = "/data/3.0/onecall"


class WeatherError(Exception):
    """Upstream replied with a non-success status or an unusable body."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class WeatherClient:
    """
    Client for the OpenWeather geocoding and One Call APIs.
    Holds the API key so that it never leaves the server.
    """

    def __init__(self, settings: WeatherSettings):
        self.settings = settings
        self._client = httpx.Client(timeout=settings.timeout, follow_redirects=True)
        self._log = logging.getLogger(__name__)

    # ---------------- Internal Helpers -----------------
    @retry(reraise=True, stop=stop_after_attempt(3), wait=wait_exponential(multiplier=0.2, max=2), retry=retry_if_exception_type(httpx.TransportError))
    def _get(self, path: str, params: Dict[str, Any]) -> Any:
        url = f"{self.settings.base_url}{path}"
        query = dict(params)
        query['appid'] = self.settings.api_key
        resp = self._client.get(url, params=query)
        if resp.status_code >= 400:
            # Never echo the request URL, it carries the key
            raise WeatherError(resp.status_code, f"Error {resp.status_code} from {path}")
        return resp.json()

    @staticmethod
    def _map_location(item: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'name': item.get('name'),
            'lat': item.get('lat'),
            'lon': item.get('lon'),
            'country': item.get('country'),
            'state': item.get('state') or None,
        }

    # ---------------- Public API -----------------
    def geocode(self, query: str) -> List[Dict[str, Any]]:
        """
        Resolve a free-text place name into candidate locations.

        Args:
            query: Place name as typed by the user

        Returns:
            List of ``{name, lat, lon, country, state}`` dicts, at most
            ``settings.geocode_limit`` long
        """
        params = {'q': query, 'limit': str(self.settings.geocode_limit)}
        data = self._get(GEOCODE_PATH, params) or []
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise WeatherError(502, f"Unexpected geocode payload from {GEOCODE_PATH}")
        self._log.debug("Geocode %r returned %s candidates", query, len(data))
        return [self._map_location(item) for item in data]

    def one_call(self, lat: float, lon: float, units: str = 'metric',
                 exclude: str = 'minutely') -> Dict[str, Any]:
        """
        Get current conditions and forecast for a coordinate.

        Args:
            lat: Latitude
            lon: Longitude
            units: 'metric', 'imperial' or 'standard'
            exclude: Comma separated One Call blocks to leave out

        Returns:
            The upstream payload, unmodified
        """
        params = {
            'lat': str(lat),
            'lon': str(lon),
            'units': units,
            'exclude': exclude,
        }
        return self._get(ONE_CALL_PATH, params)

    def close(self):
        self._client.close()
