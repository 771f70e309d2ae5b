import azure.functions as func
import logging
import os
import sys

# Ensure src package path precedes functions duplicates
SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

from weatherclient import routes

def main(req: func.HttpRequest) -> func.HttpResponse:
    """HTTP-triggered proxy for /api/weather; the OpenWeather key is added server side."""
    logging.info(f"weather proxy request for lat={req.params.get('lat')} lon={req.params.get('lon')}")
    return routes.weather(req)
