"""
Gridloop — engine/logging_conf.py
Central logging setup: console plus an optional rotating file log.
"""

import logging
from logging.handlers import RotatingFileHandler

from engine.config import RunnerConfig

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ROTATE_BYTES = 5 * 1024 * 1024
ROTATE_KEEP = 3


def setup_logging(cfg: RunnerConfig) -> None:
    level = getattr(logging, cfg.log_level, logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if cfg.log_file:
        handler = RotatingFileHandler(
            cfg.log_file,
            maxBytes=ROTATE_BYTES,
            backupCount=ROTATE_KEEP,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)
