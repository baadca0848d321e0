"""
Logging setup for Gomoku scripts.

Library modules only create loggers; handlers are installed here.
"""
import logging

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(level="WARNING") -> None:
    """Send log records of ``level`` and above to stderr."""
    if isinstance(level, str):
        name = level
        level = getattr(logging, name.upper(), None)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
