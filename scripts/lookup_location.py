"""Resolve a place name through the weather proxy and print the matches.

Usage (example):
    python scripts/lookup_location.py "Paris" --weather --units imperial

Runs the same search pipeline as the search box (coordinator + dedupe) against
PROXY_BASE_URL, so it doubles as a smoke test for a deployed proxy.
"""
from __future__ import annotations
import argparse
import asyncio
import logging
import os

from dotenv import load_dotenv

from locationsearch.client import ProxyClient
from locationsearch.config import SearchSettings
from locationsearch.coordinator import SearchCoordinator

logger = logging.getLogger("locationsearch.lookup")
logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))


def print_status(state: str, message: str):
    if message:
        print(f"[{state}] {message}")


async def run(args) -> int:
    settings = SearchSettings.from_env()
    client = ProxyClient(settings)
    coordinator = SearchCoordinator(client.lookup, on_status=print_status)
    try:
        results = await coordinator.search(args.query)
        if not results:
            return 1
        for idx, candidate in enumerate(results):
            print(f"{idx}: {candidate.label} ({candidate.lat:.4f}, {candidate.lon:.4f})")
        if args.weather:
            first = results[0]
            logger.info("Fetching weather for %s", first.label)
            payload = await client.fetch_weather(first.lat, first.lon, units=args.units)
            current = payload.get('current', {})
            description = ', '.join(w.get('description', '') for w in current.get('weather', []))
            print(f"Now in {first.label}: {current.get('temp')}° {description}".rstrip())
        return 0
    finally:
        await client.aclose()


def main():
    load_dotenv(os.path.join(os.path.dirname(__file__), '..', '.env'))
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('query', help='Place name to search for')
    parser.add_argument('--weather', action='store_true', help='Also fetch current weather for the first match')
    parser.add_argument('--units', default='metric', choices=['metric', 'imperial', 'standard'])
    args = parser.parse_args()
    if not args.query.strip():
        parser.error("query must not be blank")
    raise SystemExit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
