"""Logging configuration for the resume intake pipeline."""

import logging
import os
import sys
from typing import Optional

_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Third-party loggers that flood output on ordinary resumes
_NOISY_LOGGERS = ("pdfplumber", "pdfminer", "PIL", "httpx")


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        if level is None:
            level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
            if not isinstance(level, int):
                level = logging.INFO
    if level is not None:
        logger.setLevel(level)
    return logger


def quiet_third_party_loggers(level: int = logging.ERROR) -> None:
    """Raise the level of chatty PDF/imaging/HTTP loggers."""
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level)
