from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging
import httpx

from .config import SearchSettings
from .models import LocationCandidate


class TransportError(Exception):
    """Network failure or non-success reply from the proxy."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ProxyClient:
    """
    Async client for the weather proxy routes.

    ``lookup`` is meant to run inside its own task: cancelling that task
    aborts the HTTP request instead of letting it finish in the background.
    """

    def __init__(self, settings: SearchSettings, client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self._client = client or httpx.AsyncClient(base_url=settings.proxy_base_url, timeout=settings.timeout)
        self._log = logging.getLogger(__name__)

    async def _get(self, path: str, params: Dict[str, Any]) -> Any:
        try:
            resp = await self._client.get(path, params=params)
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {path} failed: {e}") from e
        if resp.status_code >= 400:
            raise TransportError(f"Proxy returned {resp.status_code} for {path}", resp.status_code)
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(f"Non-JSON response for {path}: {resp.text[:200]}") from e

    async def lookup(self, query: str) -> List[LocationCandidate]:
        """Geocode ``query`` through ``/api/geocode``."""
        self._log.debug("Geocode lookup -> %r", query)
        data = await self._get('/api/geocode', {'q': query})
        if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
            raise TransportError(f"Unexpected geocode payload for {query!r}")
        try:
            results = [LocationCandidate.from_dict(item) for item in data]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise TransportError(f"Malformed geocode item for {query!r}: {e}") from e
        self._log.debug("Geocode lookup <- %s candidates for %r", len(results), query)
        return results

    async def fetch_weather(self, lat: float, lon: float, units: str = 'metric',
                            exclude: str = 'minutely') -> Dict[str, Any]:
        """Full One Call payload for a coordinate, via ``/api/weather``."""
        params = {'lat': str(lat), 'lon': str(lon), 'units': units, 'exclude': exclude}
        return await self._get('/api/weather', params)

    async def aclose(self):
        await self._client.aclose()
