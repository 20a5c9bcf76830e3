"""
Gridloop — engine/loop.py
Main Frame Loop: drives a Game through advance, input, render and pacing.
=========================================================================
Version:     0.2
Stack:       Python 3.12 | tcod
Status:      Integration entry point.

One frame:
    1. advance the game
    2. poll at most one key and dispatch its action
    3. project the game's entities onto the play region
    4. write the status line
    5. flush both regions and present
    6. clear both interiors
    7. sleep for the game's frame delay

The display context is held in a `with` block for the whole run, so it is
closed on every exit path before the exit message is printed.
"""

from __future__ import annotations

import logging
import time
from enum import Enum, auto
from typing import Any, Callable, ContextManager, Optional, Protocol

import tcod

from engine.game import Game, GameFactory
from ui.input import EventInput
from ui.projection import project_all
from ui.renderer import Renderer

logger = logging.getLogger(__name__)


class RunnerState(Enum):
    RUNNING = auto()
    TERMINATING = auto()


class InputSource(Protocol):
    quit_requested: bool

    def bind(self, context: Any) -> None: ...

    def poll(self) -> Optional[tcod.event.KeySym]: ...


ContextFactory = Callable[..., ContextManager[Any]]


def new_context(columns: int, rows: int, title: str, vsync: bool) -> tcod.context.Context:
    """Opens the tcod display; closing it hands the terminal back."""
    return tcod.context.new(columns=columns, rows=rows, title=title, vsync=vsync)


class GameRunner:
    """
    Central loop controller owning the Renderer and a single Game instance.
    """
    def __init__(
        self,
        renderer: Renderer,
        game_cls: GameFactory,
        context_factory: ContextFactory = new_context,
        input_source: Optional[InputSource] = None,
        sleep: Callable[[float], None] = time.sleep,
        vsync: bool = False,
    ):
        self.renderer = renderer
        self.context_factory = context_factory
        self.input: InputSource = input_source if input_source is not None else EventInput()
        self.sleep = sleep
        self.vsync = vsync
        self.state = RunnerState.RUNNING
        self.frame = 0
        self.context: Optional[Any] = None

        play = renderer.play
        self.game: Game = game_cls(play.interior_width, play.interior_height)
        logger.info(
            "Game %s started on a %dx%d play interior",
            type(self.game).__name__, play.interior_width, play.interior_height,
        )

    @property
    def running(self) -> bool:
        return self.state is RunnerState.RUNNING

    def stop(self) -> None:
        """Requests termination; the current frame still completes."""
        if self.running:
            logger.info("Stop requested at frame %d", self.frame)
        self.state = RunnerState.TERMINATING

    def run(self) -> None:
        """Main blocking loop. Returns after a stop request; re-raises faults."""
        try:
            with self.context_factory(
                columns=self.renderer.width,
                rows=self.renderer.height,
                title=self.renderer.title,
                vsync=self.vsync,
            ) as context:
                self.context = context
                self.input.bind(context)
                while self.running:
                    self.step()
        except KeyboardInterrupt:
            logger.info("Interrupted at frame %d", self.frame)
            raise
        except Exception:
            logger.exception("Frame %d failed", self.frame)
            raise
        finally:
            self.state = RunnerState.TERMINATING
            self.context = None
            print()
            print(self.game.exit_message())

    def step(self) -> None:
        """Runs one frame."""
        self.frame += 1
        game = self.game
        renderer = self.renderer

        game.advance()
        self.handle_input()

        drawn = project_all(game.entities(), renderer)
        renderer.write_status(game.status_text())

        renderer.flush(renderer.play)
        renderer.flush(renderer.status)
        if self.context is not None:
            renderer.present(self.context)

        renderer.clear()

        delay = game.frame_delay()
        logger.debug("Frame %d: %d entities, sleeping %.3fs", self.frame, drawn, delay)
        self.sleep(delay)

    def handle_input(self) -> None:
        key = self.input.poll()
        if self.input.quit_requested:
            self.stop()
        if key is None:
            return

        name = self.game.input_map().get(key)
        if name is None:
            logger.debug("Unmapped key %r", key)
            return
        if not self.game.dispatch(name):
            logger.debug("Game does not declare action %r", name)
