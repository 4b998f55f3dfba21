"""Logging setup for the game."""

import logging
import sys
from datetime import datetime


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace("flappy_plane.", "")
        msg = record.getMessage()
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        return f"{ts} [{record.levelname[0]}] {name}: {msg}"


def setup_logging(level: str = "INFO"):
    """Installs the terminal handler on the package logger."""
    root = logging.getLogger("flappy_plane")
    root.setLevel(level.upper())
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(HumanFormatter())
    root.addHandler(handler)
