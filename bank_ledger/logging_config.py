"""
Structured Logging Configuration Module

Ledger operations log through stdlib logging. Records carry optional
action/resource/extra attributes which the JSON formatter emits as fields
and the text formatter appends to the message.
"""

import logging
import json
from datetime import datetime, timezone
from typing import Dict, Optional

# Structured attributes log_action attaches to a record
LEDGER_FIELDS = ("action", "resource", "extra")

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _ledger_fields(record: logging.LogRecord) -> Dict[str, object]:
    fields = {}
    for name in LEDGER_FIELDS:
        value = getattr(record, name, None)
        if value is not None:
            fields[name] = value
    return fields


class JSONFormatter(logging.Formatter):
    """One JSON object per record"""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(_ledger_fields(record))

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Plain lines with the ledger fields appended as key=value pairs"""

    def __init__(self):
        super().__init__(TEXT_FORMAT)

    def format(self, record):
        line = super().format(record)
        fields = _ledger_fields(record)
        if not fields:
            return line
        return line + " " + " ".join(f"{key}={value}" for key, value in fields.items())


def setup_logging(level: str = "INFO", logger_name: str = "bank_ledger",
                  fmt: str = "json", log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach a single handler to the ledger's logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...)
        logger_name: Logger to configure; child loggers inherit it
        fmt: "json" or "text"
        log_file: Write to this file instead of stderr

    Returns:
        The configured logger
    """
    handler = logging.FileHandler(log_file) if log_file else logging.StreamHandler()
    handler.setFormatter(TextFormatter() if fmt == "text" else JSONFormatter())

    logger = logging.getLogger(logger_name)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def get_logger(name: str = "bank_ledger") -> logging.Logger:
    return logging.getLogger(name)


def log_action(logger: logging.Logger, level: str, message: str,
               action: Optional[str] = None, resource: Optional[str] = None,
               extra: Optional[dict] = None):
    """
    Log a ledger action with structured fields.

    Args:
        logger: Logger instance
        level: Level name (info, warning, ...)
        message: Human readable message
        action: Ledger operation, e.g. "add_transaction"
        resource: Affected entity, e.g. "account:AC001"
        extra: Additional structured data
    """
    fields = {"action": action, "resource": resource, "extra": extra}
    logger.log(
        getattr(logging, level.upper()), message,
        extra={key: value for key, value in fields.items() if value}
    )
