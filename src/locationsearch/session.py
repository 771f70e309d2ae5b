"""
One search box worth of state: debouncer, coordinator and suggestion list.

The session consumes raw UI events (``on_input``, ``on_key``, ``on_pointer``,
``on_outside_click``) and reports back through a ``SearchListener``. It knows
nothing about any particular UI toolkit.
"""
from __future__ import annotations

import logging
from typing import Any, List, Optional

from .coordinator import ERROR, IDLE, SearchCoordinator
from .debounce import Debouncer
from .suggestions import SuggestionList


class SearchListener:
    """Rendering side of a session. Override what you need; the rest are no-ops."""

    def on_status_change(self, state: str, message: str) -> None:
        pass

    def on_suggestions_change(self, items: List[Any], highlight_index: int) -> None:
        pass

    def on_selection(self, candidate: Any) -> None:
        pass


class SearchSession:
    def __init__(self, geocoder, listener: Optional[SearchListener] = None, debounce_ms: int = 350):
        self.listener = listener or SearchListener()
        self.coordinator = SearchCoordinator(geocoder.lookup, on_status=self._status)
        self.suggestions = SuggestionList(
            on_change=self.listener.on_suggestions_change,
            on_select=self.listener.on_selection,
        )
        self._debounced = Debouncer(self._handle_input, debounce_ms)
        self._log = logging.getLogger(__name__)

    def _status(self, state: str, message: str):
        if state == ERROR:
            # A failed lookup never leaves a half-updated list behind
            self.suggestions.close()
        self.listener.on_status_change(state, message)

    # ---------------- Input events -----------------
    def on_input(self, text: str):
        """Raw text-change event from the search box."""
        self._debounced(text)

    def on_key(self, key: str):
        if not self.suggestions.is_open:
            return
        if key == 'ArrowDown':
            self.suggestions.move_highlight(1)
        elif key == 'ArrowUp':
            self.suggestions.move_highlight(-1)
        elif key == 'Enter':
            self.suggestions.select_highlighted()
        elif key == 'Escape':
            self.suggestions.close()

    def on_pointer(self, kind: str, index: int):
        """Pointer ``"hover"`` or ``"click"`` on the rendered row ``index``."""
        if kind == 'hover':
            self.suggestions.set_highlight(index)
        elif kind == 'click':
            self.suggestions.select(index)

    def on_outside_click(self):
        if self.suggestions.is_open:
            self.suggestions.close()

    # ---------------- Internals -----------------
    def _handle_input(self, text: str):
        query = (text or '').strip()
        if not query:
            self.coordinator.reset()
            self.suggestions.close()
            self.listener.on_status_change(IDLE, '')
            return None
        return self._run_search(query)

    async def _run_search(self, query: str):
        results = await self.coordinator.search(query)
        if results is not None and self.coordinator.is_current(query):
            self.suggestions.replace_list(results)
        return results

    async def aclose(self):
        """Stop listening: drop any scheduled search and abort the pending one."""
        self._debounced.cancel()
        self.coordinator.reset()
