"""
Root logging setup, called once on startup.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op once the root logger has a handler.
    logging.basicConfig(format=LOG_FORMAT)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
