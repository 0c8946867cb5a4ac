"""Console and file logging for the curve editor scripts."""

import logging
import sys
from typing import List, Optional

PACKAGE_LOGGER = "bce"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Route the records of all bce modules to stdout and optionally to log_file.

    Handlers installed by an earlier call are replaced, handlers added by
    someone else are left alone.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path of a log file, truncated on every call.

    Returns:
        logging.Logger: The configured package logger
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(level)

    for handler in [h for h in package_logger.handlers if getattr(h, "_bce_handler", False)]:
        package_logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler._bce_handler = True  # type: ignore[attr-defined]
        package_logger.addHandler(handler)

    package_logger.debug("Logging to stdout%s", f" and {log_file}" if log_file else "")
    return package_logger
