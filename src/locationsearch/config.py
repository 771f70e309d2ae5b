from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class SearchSettings:
    """Configuration for the location search client side."""
    proxy_base_url: str = 'http://localhost:7071'
    debounce_ms: int = 350
    timeout: float = 10.0

    @staticmethod
    def from_env() -> 'SearchSettings':
        """Create search settings from environment variables."""
        base_url = os.environ.get('PROXY_BASE_URL', 'http://localhost:7071')
        debounce_ms = int(os.environ.get('SEARCH_DEBOUNCE_MS', '350'))
        timeout = float(os.environ.get('PROXY_TIMEOUT', '10'))
        return SearchSettings(
            proxy_base_url=base_url.rstrip('/'),
            debounce_ms=debounce_ms,
            timeout=timeout,
        )
