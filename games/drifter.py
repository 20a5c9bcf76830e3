"""
Gridloop — games/drifter.py
Example game: steer a ship through falling stars.
"""

from __future__ import annotations
import random
from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence

import tcod

from engine.game import Game, action
from ui.drawables import Color, Drawable, Glyph, Texture

SHIP_ROWS = (" ^ ", "/#\\")
SHIP_WIDTH = len(SHIP_ROWS[0])
SHIP_HEIGHT = len(SHIP_ROWS)
STAR_COLORS = (Color.WHITE, Color.CYAN, Color.YELLOW, Color.MAGENTA)

MIN_DELAY = 0.02
MAX_DELAY = 0.5
DELAY_STEP = 0.02

K = tcod.event.KeySym
KEY_ACTIONS = {
    K.LEFT: "left", K.A: "left",
    K.RIGHT: "right", K.D: "right",
    K.UP: "up", K.W: "up",
    K.DOWN: "down", K.S: "down",
    K.EQUALS: "speed_up", K.KP_PLUS: "speed_up",
    K.MINUS: "slow_down", K.KP_MINUS: "slow_down",
}


@dataclass
class Star:
    x: int
    y: int
    color: Color


class Drifter(Game):
    def __init__(self, width: int, height: int, star_count: Optional[int] = None, seed: Optional[int] = None):
        if width < SHIP_WIDTH or height < SHIP_HEIGHT:
            raise ValueError(f"Drifter needs at least {SHIP_WIDTH}x{SHIP_HEIGHT} cells, got {width}x{height}")
        super().__init__(width, height)
        self.rng = random.Random(seed)
        self.ship_x = (width - SHIP_WIDTH) // 2
        self.ship_y = height - SHIP_HEIGHT
        self.delay = 0.1
        self.frames = 0
        self.hits = 0

        if star_count is None:
            star_count = max(1, width * height // 60)
        self.stars: List[Star] = [
            Star(self.rng.randrange(width), self.rng.randrange(height), self.rng.choice(STAR_COLORS))
            for _ in range(star_count)
        ]

    # --- actions

    @action
    def left(self) -> None:
        self.ship_x = max(0, self.ship_x - 1)

    @action
    def right(self) -> None:
        self.ship_x = min(self.width - SHIP_WIDTH, self.ship_x + 1)

    @action
    def up(self) -> None:
        self.ship_y = max(0, self.ship_y - 1)

    @action
    def down(self) -> None:
        self.ship_y = min(self.height - SHIP_HEIGHT, self.ship_y + 1)

    @action
    def speed_up(self) -> None:
        self.delay = max(MIN_DELAY, round(self.delay - DELAY_STEP, 3))

    @action
    def slow_down(self) -> None:
        self.delay = min(MAX_DELAY, round(self.delay + DELAY_STEP, 3))

    # --- runner capabilities

    def input_map(self) -> Mapping[tcod.event.KeySym, str]:
        return KEY_ACTIONS

    def advance(self) -> None:
        self.frames += 1
        for star in self.stars:
            star.y += 1
            if star.y >= self.height:
                star.y = 0
                star.x = self.rng.randrange(self.width)
            if self._hits_ship(star):
                self.hits += 1

    def _hits_ship(self, star: Star) -> bool:
        return (
            self.ship_x <= star.x < self.ship_x + SHIP_WIDTH
            and self.ship_y <= star.y < self.ship_y + SHIP_HEIGHT
        )

    def entities(self) -> Sequence[Drawable]:
        drawables: List[Drawable] = [Glyph(s.x, s.y, "*", s.color) for s in self.stars]
        # Ship last so it covers any star on the same cell.
        drawables.append(Texture(self.ship_x, self.ship_y, SHIP_ROWS, Color.GREEN))
        return drawables

    def status_text(self) -> str:
        return f"Frames: {self.frames}  Hits: {self.hits}  Delay: {self.delay:.2f}s  [arrows/WASD] move  [+/-] speed"

    def frame_delay(self) -> float:
        return self.delay

    def exit_message(self) -> str:
        return f"You drifted for {self.frames} frames and took {self.hits} hits."
