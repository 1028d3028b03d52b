from __future__ import annotations

import logging
import sys

HANDLER_NAME = "tempconv.stderr"


def setup_logging(level: str = "INFO") -> None:
    """Configure stdlib logging for tempconv.

    Logs go to stderr; stdout carries only the tables. Calling again only
    changes the level.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger("tempconv")
    root.setLevel(numeric_level)

    for existing in root.handlers:
        if existing.get_name() == HANDLER_NAME:
            existing.setLevel(numeric_level)
            return

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)
    handler.setLevel(numeric_level)
    root.addHandler(handler)
