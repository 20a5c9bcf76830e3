"""
Gridloop — ui/renderer.py
TCOD Renderer: play plane and status box surface.
=================================================
Version:     0.2
Stack:       Python 3.12 | tcod | numpy
Status:      Production-ready.

The surface owns a root console the size of the whole screen and two bordered
regions stacked vertically: the play region on top and a fixed-height status
region directly below it. Regions are written through interior coordinates,
flushed onto the root console and presented through a tcod context.
"""

from __future__ import annotations
import logging
from typing import Mapping, Optional, Tuple

import numpy as np
import tcod

from ui.drawables import Color, DEFAULT_PALETTE, RGB, validate_palette

logger = logging.getLogger(__name__)

# Top-left, top, top-right, left, middle, right, bottom-left, bottom, bottom-right.
BORDER_DECORATION = "+-+| |+-+"
STATUS_HEIGHT = 5
STATUS_ANCHOR: Tuple[int, int] = (2, 3)
BACKGROUND: RGB = (0, 0, 0)


class SurfaceDimensionError(ValueError):
    """Raised when the screen cannot hold both bordered regions."""


def _is_control(c: str) -> bool:
    return ord(c) < 32 or ord(c) == 127


def has_control_chars(text: str) -> bool:
    return any(_is_control(c) for c in text)


def first_line(text: str) -> str:
    """Text up to the first control character; tcod would treat a newline as a line break."""
    for i, c in enumerate(text):
        if _is_control(c):
            return text[:i]
    return text


class Region:
    """
    A bordered rectangular character buffer placed at (row, col) on screen.
    """
    def __init__(self, name: str, width: int, height: int, row: int, col: int, border_fg: RGB):
        self.name = name
        self.width = width
        self.height = height
        self.row = row
        self.col = col
        self.console = tcod.console.Console(width, height)
        self.console.draw_frame(
            0, 0, width, height,
            clear=True,
            fg=border_fg,
            bg=BACKGROUND,
            decoration=BORDER_DECORATION,
        )

    @property
    def interior_width(self) -> int:
        return self.width - 2

    @property
    def interior_height(self) -> int:
        return self.height - 2

    @property
    def rows(self) -> range:
        """Screen rows covered by this region."""
        return range(self.row, self.row + self.height)

    def interior_contains(self, row: int, col: int, length: int = 1) -> bool:
        return (
            0 <= row < self.interior_height
            and 0 <= col
            and col + length <= self.interior_width
        )

    def __repr__(self) -> str:
        return f"Region({self.name!r}, {self.width}x{self.height} @ ({self.row}, {self.col}))"


class Renderer:
    """
    Manages the tcod root console and the play/status regions.
    """
    def __init__(
        self,
        width: int,
        height: int,
        status_height: int = STATUS_HEIGHT,
        palette: Optional[Mapping[Color, RGB]] = None,
        title: str = "Gridloop",
        status_anchor: Tuple[int, int] = STATUS_ANCHOR,
    ):
        if height <= status_height:
            raise SurfaceDimensionError(
                f"Screen height {height} must exceed status height {status_height}"
            )
        if height - status_height < 3 or status_height < 3 or width < 3:
            raise SurfaceDimensionError(
                f"Screen {width}x{height} with status height {status_height} leaves no interior"
            )
        anchor_row, anchor_col = status_anchor
        if not (1 <= anchor_row <= status_height - 2 and 1 <= anchor_col <= width - 2):
            raise SurfaceDimensionError(
                f"Status anchor {status_anchor} is outside the {width}x{status_height} status interior"
            )

        self.width = width
        self.height = height
        self.title = title
        self.palette = validate_palette(palette if palette is not None else DEFAULT_PALETTE)
        self.status_anchor = status_anchor
        border_fg = self.palette[Color.WHITE]

        self.root_console = tcod.console.Console(width, height)
        self.play = Region("play", width, height - status_height, 0, 0, border_fg)
        self.status = Region("status", width, status_height, height - status_height, 0, border_fg)
        logger.debug("Surface initialised: %r, %r", self.play, self.status)

    def write_glyph(self, region: Region, row: int, col: int, glyph: str, color: Color = Color.WHITE) -> None:
        """Writes glyph text at interior (row, col) of the region."""
        if has_control_chars(glyph):
            raise ValueError(f"Glyph text {glyph!r} contains control characters")
        if not region.interior_contains(row, col, len(glyph)):
            raise IndexError(
                f"Write of {glyph!r} at ({row}, {col}) is outside the "
                f"{region.interior_width}x{region.interior_height} interior of {region.name}"
            )
        region.console.print(col + 1, row + 1, glyph, fg=self.palette[color], bg=BACKGROUND)

    def write_status(self, text: str) -> None:
        """Writes the status line at the fixed anchor, cut short of the right border."""
        row, col = self.status_anchor
        text = first_line(text)
        room = self.status.width - 1 - col
        if room <= 0 or not text:
            return
        self.status.console.print(col, row, text[:room], fg=self.palette[Color.WHITE], bg=BACKGROUND)

    def flush(self, region: Region) -> None:
        """Copies the region's buffer onto the root console at its screen offset."""
        region.console.blit(self.root_console, dest_x=region.col, dest_y=region.row)

    def present(self, context: tcod.context.Context) -> None:
        """Present the root console to the screen."""
        context.present(self.root_console)

    def clear_interior(self, region: Region) -> None:
        """Blanks every interior cell, leaving the border as drawn at construction."""
        region.console.ch[1:-1, 1:-1] = ord(" ")
        region.console.fg[1:-1, 1:-1] = np.array(self.palette[Color.WHITE], dtype=np.uint8)
        region.console.bg[1:-1, 1:-1] = np.array(BACKGROUND, dtype=np.uint8)

    def clear(self) -> None:
        """Clear the interiors of both regions."""
        self.clear_interior(self.play)
        self.clear_interior(self.status)
