from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "lrc_maker"


def setup_logging(debug: bool) -> logging.Logger:
    """
    Configure the root handler and set the level on the package logger only,
    so --debug shows parser/config messages without third-party noise.
    """
    level = logging.DEBUG if debug else logging.WARNING
    # Allow env override, e.g. LRC_MAKER_LOG_LEVEL=info
    level_name = os.getenv("LRC_MAKER_LOG_LEVEL")
    if level_name:
        env_level = getattr(logging, level_name.upper(), None)
        if isinstance(env_level, int):
            level = env_level

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    return logger
