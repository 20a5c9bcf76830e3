"""
Gridloop — ui/projection.py
Maps drawable entities onto the play region for one frame.
"""

from __future__ import annotations
from typing import Iterable

from ui.drawables import Drawable, Glyph, Texture
from ui.renderer import Renderer, has_control_chars


class DrawableBoundsError(IndexError):
    """Raised when a game hands over an entity that does not fit the play interior."""


class DrawableGlyphError(ValueError):
    """Raised when a glyph or texture row contains control characters such as newlines."""


def _check_bounds(drawable: Drawable, renderer: Renderer) -> None:
    play = renderer.play
    if isinstance(drawable, Texture):
        rows = drawable.rows
    else:
        rows = (drawable.char,)

    for i, row in enumerate(rows):
        if has_control_chars(row):
            raise DrawableGlyphError(f"{drawable!r} has control characters in row {i}")
        if not play.interior_contains(drawable.y + i, drawable.x, len(row)):
            raise DrawableBoundsError(
                f"{drawable!r} does not fit the "
                f"{play.interior_width}x{play.interior_height} play interior"
            )


def project(drawable: Drawable, renderer: Renderer) -> None:
    """
    Writes one entity onto the play region.
    Textures are drawn one row per line starting at (y, x); glyphs at (y, x).
    """
    _check_bounds(drawable, renderer)
    if isinstance(drawable, Texture):
        for index, row in enumerate(drawable.rows):
            renderer.write_glyph(renderer.play, drawable.y + index, drawable.x, row, drawable.color)
    elif isinstance(drawable, Glyph):
        renderer.write_glyph(renderer.play, drawable.y, drawable.x, drawable.char, drawable.color)
    else:
        raise TypeError(f"Not a drawable: {drawable!r}")


def project_all(drawables: Iterable[Drawable], renderer: Renderer) -> int:
    """Projects entities in order; later ones overwrite earlier ones. Returns the count drawn."""
    count = 0
    for drawable in drawables:
        project(drawable, renderer)
        count += 1
    return count
