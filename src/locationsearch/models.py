from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class LocationCandidate:
    """One geocoding match as returned by the proxy."""
    name: str
    country: str
    lat: float
    lon: float
    state: Optional[str] = None

    @staticmethod
    def from_dict(item: Mapping[str, Any]) -> 'LocationCandidate':
        return LocationCandidate(
            name=item.get('name') or '',
            country=item.get('country') or '',
            lat=float(item['lat']),
            lon=float(item['lon']),
            state=item.get('state') or None,
        )

    @property
    def label(self) -> str:
        """Text written back into the search box, e.g. ``Paris, US, Texas``."""
        return ', '.join(p for p in (self.name, self.country, self.state) if p)
