"""Package-wide logging for spgraph.

All modules log through children of the ``spgraph`` logger obtained with
:func:`get_logger`. The parent carries the only handler and the only level,
so one call to :func:`set_global_log_level` retunes the whole package.
"""

import logging
import sys
from typing import Optional, Union

ROOT_LOGGER_NAME = "spgraph"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Install the single handler on the ``spgraph`` logger.

    Only the first call takes effect; later calls return immediately until
    :func:`reset_logging` runs.

    Args:
        level: Initial package log level.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.
        handler: Destination; defaults to a stdout ``StreamHandler``.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(level)

    handler = handler or logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)
    # pytest's caplog listens on the global root
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that defers its level to ``spgraph``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: Union[int, str]) -> None:
    """Set the level of every spgraph logger.

    Args:
        level: A ``logging`` level number or a case-insensitive level name
            such as ``"debug"``.

    Raises:
        ValueError: If ``level`` is a name ``logging`` does not know.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level '{level}'.")
        level = resolved

    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the package handler and level so setup can run again."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
