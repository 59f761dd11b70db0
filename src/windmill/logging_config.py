"""
Logging Configuration
=====================
Console (and optional file) logging for the `windmill` package.

`--log-level` on the command line is passed straight through as a level name;
unknown names fall back to INFO instead of aborting the demo.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "windmill"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'

# marks handlers installed here, so re-running setup replaces only those
_HANDLER_TAG = "_windmill_handler"


def parse_level(name: Optional[str], default: int = logging.INFO) -> int:
    """Map a level name such as 'debug' (or a numeric string) to its logging constant."""
    if not name:
        return default
    name = name.strip()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name.upper())
    if isinstance(level, int):
        return level
    return default


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a stdout handler (and a file handler if `log_file` is given) to the
    package logger.

    Calling it again swaps the previous windmill handlers for new ones, so the
    demo can be reconfigured without doubling every line.

    Args:
        level: Logging level, either a constant or a name like "debug".
        log_file: Optional path; the file is overwritten on every start.

    Returns:
        The configured package logger.
    """
    if isinstance(level, str):
        level = parse_level(level)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in [h for h in logger.handlers if getattr(h, _HANDLER_TAG, False)]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}"
                 + (f", also to {log_file}" if log_file else ""))
    return logger
