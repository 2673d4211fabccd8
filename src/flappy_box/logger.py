"""Logging setup for flappy_box."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

ROOT_NAME = "flappy_box"


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",     # grey
        "INFO": "\033[36m",      # cyan
        "WARNING": "\033[33m",   # yellow
        "ERROR": "\033[31m",     # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def __init__(self, color: bool = True) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace(f"{ROOT_NAME}.", "")
        line = f"{ts} [{record.levelname[0]}] {name}: {record.getMessage()}"
        if not self.color:
            return line
        return f"{self.COLORS.get(record.levelname, '')}{line}{self.RESET}"


def setup_logging(level: str = "info") -> None:
    """Configure the flappy_box root logger. Call once from the entry point."""
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter(color=sys.stderr.isatty()))
    root.addHandler(console)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the flappy_box namespace."""
    if name == ROOT_NAME or name.startswith(f"{ROOT_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")
