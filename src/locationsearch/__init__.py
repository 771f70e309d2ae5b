"""
Location search autocomplete: debounced input, cancellable geocoding
lookups, deduplicated results and a keyboard/pointer driven suggestion list.
"""

__all__ = [
    'LocationCandidate', 'ProxyClient', 'TransportError', 'SearchSettings',
    'SearchCoordinator', 'EmptyQueryError', 'SuggestionList',
    'SearchSession', 'SearchListener', 'Debouncer', 'debounce',
    'dedupe', 'candidate_key',
]

from .client import ProxyClient, TransportError
from .config import SearchSettings
from .coordinator import EmptyQueryError, SearchCoordinator
from .debounce import Debouncer, debounce
from .dedupe import candidate_key, dedupe
from .models import LocationCandidate
from .session import SearchListener, SearchSession
from .suggestions import SuggestionList
