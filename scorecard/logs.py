"""Loggers for the scorecard engine: one stdout handler, key=value lines."""

import logging
import sys

from .config import LOG_LEVEL


class StructuredFormatter(logging.Formatter):
    # fields passed as extra={"extra_data": {...}} are appended, e.g. record_id=uc_...
    def format(self, record: logging.LogRecord) -> str:
        fields = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.module,
            "message": record.getMessage(),
        }
        fields.update(getattr(record, "extra_data", {}))
        return " ".join(f"{k}={v}" for k, v in fields.items())


def get_logger(name: str) -> logging.Logger:
    """Logger at SCORECARD_LOG_LEVEL; the handler is attached only once per name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return logger
