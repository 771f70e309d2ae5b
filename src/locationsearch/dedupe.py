from __future__ import annotations

from typing import Any, List, Sequence


def _field(item: Any, name: str) -> str:
    value = item.get(name) if isinstance(item, dict) else getattr(item, name, None)
    return str(value or '').strip().lower()


def candidate_key(item: Any) -> str:
    """Normalised identity of a location: ``name|country|state``, case-insensitive."""
    return f"{_field(item, 'name')}|{_field(item, 'country')}|{_field(item, 'state')}"


def dedupe(candidates: Sequence[Any]) -> List[Any]:
    """Drop repeated locations, keeping the first occurrence of each key.

    Order of the kept items is preserved. Works on ``LocationCandidate``
    objects and on raw dicts alike; anything that is not a list or tuple
    yields ``[]``.
    """
    if not isinstance(candidates, (list, tuple)):
        return []
    seen = set()
    out = []
    for item in candidates:
        key = candidate_key(item)
        if key in seen:
            continue
        seen.add(key)
        out.append(item)
    return out
