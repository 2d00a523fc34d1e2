"""Logging setup for the MCP server.

The stdio transport owns stdout, so every handler here writes to stderr or a file.
"""
import logging
import sys
from pathlib import Path

from productivity_suite.core.config import LOG_FILE, LOG_LEVEL

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


class _NoiseFilter(logging.Filter):
    """Keep our own logs, only let third-party loggers through at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("productivity_suite"):
            return True
        return record.levelno >= logging.WARNING


def setup_logging(level: str = LOG_LEVEL, log_file: str | Path = LOG_FILE) -> None:
    """
    Configure root logging.

    Args:
        level: Level name for the stderr handler (e.g. "INFO", "DEBUG")
        log_file: Optional path; when set, everything at DEBUG goes there too

    Call once, before the server starts.
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    console.setFormatter(fmt)
    console.addFilter(_NoiseFilter())
    root.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(fmt)
        root.addHandler(file_handler)

    logging.captureWarnings(True)
