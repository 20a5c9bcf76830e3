"""
Gridloop — ui/drawables.py
Drawable entity variants and the fixed colour set.
==================================================
Version:     0.1
Stack:       Python 3.12 | dataclasses
Status:      Stable contract between games and the renderer.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Mapping, Tuple, Union

RGB = Tuple[int, int, int]


class Color(Enum):
    WHITE = "white"
    RED = "red"
    BLUE = "blue"
    GREEN = "green"
    CYAN = "cyan"
    MAGENTA = "magenta"
    YELLOW = "yellow"


# Foreground colours registered at startup, all drawn over black.
DEFAULT_PALETTE: Dict[Color, RGB] = {
    Color.WHITE: (255, 255, 255),
    Color.RED: (255, 0, 0),
    Color.BLUE: (0, 0, 255),
    Color.GREEN: (0, 255, 0),
    Color.CYAN: (0, 255, 255),
    Color.MAGENTA: (255, 0, 255),
    Color.YELLOW: (255, 255, 0),
}


def validate_palette(palette: Mapping[Color, RGB]) -> Dict[Color, RGB]:
    """Returns a copy of the palette, raising if a colour has no RGB entry."""
    missing = [c.name for c in Color if c not in palette]
    if missing:
        raise ValueError(f"Palette is missing colours: {', '.join(missing)}")
    return {c: tuple(palette[c]) for c in Color}


@dataclass(frozen=True)
class Glyph:
    x: int
    y: int
    char: str
    color: Color = Color.WHITE

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Glyph char must be a single character, got {self.char!r}")


@dataclass(frozen=True)
class Texture:
    x: int
    y: int
    rows: Tuple[str, ...] = field(default_factory=tuple)
    color: Color = Color.WHITE

    def __post_init__(self) -> None:
        # Accept any iterable of strings, store as an immutable tuple.
        object.__setattr__(self, "rows", tuple(self.rows))

    @classmethod
    def from_rows(cls, x: int, y: int, rows: Iterable[str], color: Color = Color.WHITE) -> "Texture":
        return cls(x=x, y=y, rows=tuple(rows), color=color)


Drawable = Union[Glyph, Texture]
