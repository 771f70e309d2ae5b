"""
HTTP handlers for the weather proxy.

Two routes, both thin request/response mappings over ``WeatherClient``:

  GET /api/geocode?q=<text>
  GET /api/weather?lat=<lat>&lon=<lon>[&units=metric][&exclude=minutely]

The Azure Functions under ``functions/`` call straight into these.
"""
from __future__ import annotations

import json
import logging
import math
from typing import Any, Optional

import azure.functions as func

from .client import WeatherClient, WeatherError
from .config import WeatherSettings

CORS_HEADERS = {'Access-Control-Allow-Origin': '*'}


def _json(payload: Any, status_code: int = 200) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(payload),
        status_code=status_code,
        headers=dict(CORS_HEADERS),
        mimetype='application/json',
    )


def _parse_coord(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _client_for(client: Optional[WeatherClient]) -> tuple[WeatherClient, bool]:
    """Return (client, owned); owned clients are closed after the request."""
    if client is not None:
        return client, False
    return WeatherClient(WeatherSettings.from_env()), True


def geocode(req: func.HttpRequest, client: Optional[WeatherClient] = None) -> func.HttpResponse:
    q = (req.params.get('q') or '').strip()
    if not q:
        return _json({'error': 'Missing query param q'}, 400)

    client, owned = _client_for(client)
    try:
        return _json(client.geocode(q))
    except WeatherError as e:
        logging.warning(f"Geocode upstream error {e.status_code} for q={q!r}")
        return _json({'error': 'Upstream error', 'status': e.status_code}, 502)
    except Exception:
        logging.exception("Proxy error")
        return _json({'error': 'Proxy failed'}, 500)
    finally:
        if owned:
            client.close()


def weather(req: func.HttpRequest, client: Optional[WeatherClient] = None) -> func.HttpResponse:
    lat = _parse_coord(req.params.get('lat'))
    lon = _parse_coord(req.params.get('lon'))
    units = req.params.get('units') or 'metric'
    exclude = req.params.get('exclude') or 'minutely'

    if lat is None or lon is None:
        return _json({'error': 'Missing or invalid lat/lon'}, 400)

    client, owned = _client_for(client)
    try:
        # Full payload, the caller decides what to read
        return _json(client.one_call(lat, lon, units=units, exclude=exclude))
    except WeatherError as e:
        logging.warning(f"Weather upstream error {e.status_code} for {lat},{lon}")
        return _json({'error': 'Upstream error', 'status': e.status_code}, 502)
    except Exception:
        logging.exception("Weather proxy error")
        return _json({'error': 'Proxy failed'}, 500)
    finally:
        if owned:
            client.close()
