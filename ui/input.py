"""
Gridloop — ui/input.py
Non-blocking keyboard polling.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Iterable, Optional

import tcod

logger = logging.getLogger(__name__)


class EventInput:
    """
    Reads at most one key per frame from the tcod event queue.

    Every call to poll() drains the whole queue: the first KeyDown is returned,
    the rest are discarded so held keys never pile up as input lag. A Quit
    event anywhere in the queue raises the stop flag.
    """
    def __init__(
        self,
        context: Optional[tcod.context.Context] = None,
        events: Callable[[], Iterable[Any]] = tcod.event.get,
    ):
        self.context = context
        self._events = events
        self.quit_requested = False

    def bind(self, context: tcod.context.Context) -> None:
        self.context = context

    def poll(self) -> Optional[tcod.event.KeySym]:
        key: Optional[tcod.event.KeySym] = None
        discarded = 0
        for event in self._events():
            if self.context is not None:
                self.context.convert_event(event)

            if isinstance(event, tcod.event.Quit):
                self.quit_requested = True
            elif isinstance(event, tcod.event.KeyDown):
                if key is None:
                    key = event.sym
                else:
                    discarded += 1

        if discarded:
            logger.debug("Discarded %d queued key presses", discarded)
        return key
