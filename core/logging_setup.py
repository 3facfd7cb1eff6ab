from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(module)s:%(lineno)d] [%(funcName)s] %(message)s"

# Shared by every handler this module installs; Streamlit reruns the page
# script but keeps imported modules, so the identity survives reruns.
_FORMATTER = logging.Formatter(LOG_FORMAT)


def _is_own_handler(handler: logging.Handler) -> bool:
    return isinstance(handler, logging.StreamHandler) and handler.formatter is _FORMATTER


def setup_logging(level: str = "INFO", *, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configure the root logger for the calculator.

    Args:
        level (str): Root logger level name, e.g. "INFO" or "DEBUG"
        log_file (str, optional): Also write to this file, rotated at 1MB

    Returns:
        logging.Logger: Configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace handlers from an earlier run, leave everyone else's alone
    for handler in root_logger.handlers[:]:
        if _is_own_handler(handler):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(_FORMATTER)
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(_FORMATTER)
        root_logger.addHandler(file_handler)

    return root_logger
