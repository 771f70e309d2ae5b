"""
Search coordinator: one logical "current query" per input field.

Starting a search cancels whatever lookup is still in flight, and a finished
lookup is only reported when its query is still the latest one issued. Both
rules together mean an older response can never overwrite a newer one, no
matter in which order the network completes them.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, List, Optional

from .client import TransportError
from .dedupe import dedupe

IDLE = 'idle'
SEARCHING = 'searching'
NO_RESULTS = 'no-results'
ERROR = 'error'

NO_RESULTS_MESSAGE = 'There are no locations matching your search term'
ERROR_MESSAGE = 'Failed to fetch locations. Please try again.'

StatusCallback = Callable[[str, str], None]


class EmptyQueryError(ValueError):
    """Raised when ``search`` is called with blank input."""


class SearchCoordinator:
    def __init__(self, lookup: Callable[[str], Awaitable[List[Any]]],
                 on_status: Optional[StatusCallback] = None):
        """
        Args:
            lookup: Async geocoding call, e.g. ``ProxyClient.lookup``
            on_status: Receives ``(state, message)`` on every visible status change
        """
        self._lookup = lookup
        self._on_status = on_status or (lambda state, message: None)
        self._latest_query: Optional[str] = None
        self._pending: Optional[asyncio.Task] = None
        self._log = logging.getLogger(__name__)

    @property
    def latest_query(self) -> Optional[str]:
        return self._latest_query

    @property
    def pending(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def is_current(self, query: str) -> bool:
        """True while ``query`` is still the most recently issued one."""
        return query == self._latest_query

    def _cancel_pending(self):
        if self.pending:
            self._log.debug("Aborting lookup superseded by %r", self._latest_query)
            self._pending.cancel()
        self._pending = None

    def reset(self):
        """Forget the current query and abort its lookup (input was cleared)."""
        self._latest_query = None
        self._cancel_pending()

    async def search(self, query: str) -> Optional[List[Any]]:
        """Look up ``query`` and return its deduplicated candidates.

        Returns ``None`` when the lookup failed, was superseded, or finished
        after a newer query was issued. Only failures of the current query
        produce a status change; stale outcomes are dropped silently.
        """
        trimmed = (query or '').strip()
        if not trimmed:
            raise EmptyQueryError("search query is empty")

        self._latest_query = trimmed
        self._cancel_pending()
        task = asyncio.ensure_future(self._lookup(trimmed))
        self._pending = task
        self._on_status(SEARCHING, f'Searching for "{trimmed}"...')

        try:
            raw = await task
        except asyncio.CancelledError:
            if task.cancelled() and self._pending is not task:
                # Superseded by a newer search; not an error
                self._log.debug("Lookup for %r aborted", trimmed)
                return None
            raise
        except TransportError as e:
            if self.is_current(trimmed):
                self._log.warning("Lookup for %r failed: %s", trimmed, e)
                self._on_status(ERROR, ERROR_MESSAGE)
            else:
                self._log.debug("Ignoring failure of stale lookup %r: %s", trimmed, e)
            return None
        finally:
            if self._pending is task:
                self._pending = None

        results = dedupe(raw)
        if not self.is_current(trimmed):
            self._log.debug("Discarding stale results for %r", trimmed)
            return None
        if results:
            self._on_status(IDLE, '')
        else:
            self._on_status(NO_RESULTS, NO_RESULTS_MESSAGE)
        return results
