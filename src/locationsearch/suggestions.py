from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Union

ChangeCallback = Callable[[List[Any], int], None]
SelectCallback = Callable[[Any], None]
DIRECTIONS = {'down': 1, 'up': -1, 1: 1, -1: -1}


class SuggestionList:
    """
    Open/closed state of the suggestion dropdown plus its highlighted row.

    Closed: nothing shown. Open: ``items`` shown (possibly empty, which the
    renderer shows as a "No matches" row) with ``highlight_index`` in
    ``[-1, len(items) - 1]``; ``-1`` means no row is highlighted.
    """

    def __init__(self, on_change: Optional[ChangeCallback] = None,
                 on_select: Optional[SelectCallback] = None):
        self._on_change = on_change or (lambda items, index: None)
        self._on_select = on_select or (lambda candidate: None)
        self._items: List[Any] = []
        self._highlight = -1
        self._open = False
        self._log = logging.getLogger(__name__)

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def items(self) -> List[Any]:
        return list(self._items)

    @property
    def highlight_index(self) -> int:
        return self._highlight

    def _changed(self):
        self._on_change(list(self._items), self._highlight)

    def replace_list(self, items: List[Any]):
        self._items = list(items)
        self._highlight = -1
        self._open = True
        self._changed()

    def close(self):
        self._items = []
        self._highlight = -1
        self._open = False
        self._changed()

    def move_highlight(self, direction: Union[int, str]):
        """Step the highlight down (``+1``/``"down"``) or up, wrapping around."""
        step = DIRECTIONS.get(direction) if isinstance(direction, (int, str)) else None
        if step is None:
            raise ValueError(f"unknown highlight direction: {direction!r}")
        if not self._open or not self._items:
            return
        count = len(self._items)
        if step > 0:
            nxt = self._highlight + 1 if self._highlight + 1 < count else 0
        else:
            nxt = self._highlight - 1 if self._highlight - 1 >= 0 else count - 1
        self.set_highlight(nxt)

    def set_highlight(self, index: int):
        """Highlight ``index``; anything out of range clears the highlight."""
        if not self._open:
            return
        self._highlight = index if 0 <= index < len(self._items) else -1
        self._changed()

    def select(self, index: int) -> Optional[Any]:
        """Pick row ``index``, close, and emit it. ``-1`` just closes."""
        if not self._open:
            return None
        if index == -1:
            self.close()
            return None
        if not 0 <= index < len(self._items):
            return None
        chosen = self._items[index]
        self.close()
        self._log.debug("Selected %r", chosen)
        self._on_select(chosen)
        return chosen

    def select_highlighted(self) -> Optional[Any]:
        return self.select(self._highlight)
