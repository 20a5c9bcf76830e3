"""
Gridloop — run.py
Main entry point: runs the Drifter demo inside the frame loop.
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from engine.config import ConfigError, load_config
from engine.logging_conf import setup_logging
from engine.loop import GameRunner
from games.drifter import Drifter
from ui.renderer import Renderer

logger = logging.getLogger("gridloop")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Gridloop frame loop demo")
    parser.add_argument("--config", type=Path, help="Path to a TOML config file")
    parser.add_argument("--width", type=int, help="Screen width in cells")
    parser.add_argument("--height", type=int, help="Screen height in cells")
    parser.add_argument("--status-height", type=int, help="Rows reserved for the status box")
    parser.add_argument("--log-level", help="Logging level, e.g. DEBUG")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        cfg = load_config(args.config).with_overrides(
            width=args.width,
            height=args.height,
            status_height=args.status_height,
            log_level=args.log_level,
        )
    except (ConfigError, FileNotFoundError, ValidationError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    setup_logging(cfg)

    try:
        renderer = Renderer(
            width=cfg.width,
            height=cfg.height,
            status_height=cfg.status_height,
            title=cfg.title,
            status_anchor=cfg.status_anchor,
        )
        runner = GameRunner(renderer, Drifter, vsync=cfg.vsync)
    except ValueError as e:
        logger.error("Startup failed: %s", e)
        return 1

    try:
        runner.run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
