"""
Gridloop — engine/game.py
Base class for games driven by the GameRunner.
==============================================
Version:     0.1
Stack:       Python 3.12
Status:      Stable contract.

A game owns all simulation state. The runner constructs it once with the
interior size of the play region and then, every frame, asks it to advance,
hands it at most one action, and reads its entities, status text and delay.

Actions are declared with the @action decorator. The set is collected per
class when the subclass is created, so dispatch never probes for arbitrary
attributes at runtime:

    class Snake(Game):
        @action
        def left(self) -> None:
            ...
"""

from __future__ import annotations
from typing import Any, Callable, ClassVar, FrozenSet, Mapping, Sequence

import tcod

from ui.drawables import Drawable

_ACTION_MARK = "__gridloop_action__"


def action(func: Callable[[Any], None]) -> Callable[[Any], None]:
    """Declares a zero-argument method as an input action named after the method."""
    setattr(func, _ACTION_MARK, True)
    return func


class Game:
    """
    Protocol for a game driven by the runner.
    Subclasses override the capabilities they need.
    """
    actions: ClassVar[FrozenSet[str]] = frozenset()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        names = set()
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if callable(member) and getattr(member, _ACTION_MARK, False):
                    names.add(name)
        cls.actions = frozenset(names)

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height

    def entities(self) -> Sequence[Drawable]:
        """Drawables for this frame, drawn in order."""
        return ()

    def input_map(self) -> Mapping[tcod.event.KeySym, str]:
        return {}

    def advance(self) -> None:
        """Advance the simulation by one frame."""
        pass

    def exit_message(self) -> str:
        return "Game over."

    def status_text(self) -> str:
        return ""

    def frame_delay(self) -> float:
        """Seconds to wait between frames."""
        return 0.1

    def dispatch(self, name: str) -> bool:
        """Runs a declared action. Returns False for names the game does not declare."""
        if name not in self.actions:
            return False
        handler: Callable[[], None] = getattr(self, name)
        handler()
        return True


GameFactory = Callable[[int, int], Game]
