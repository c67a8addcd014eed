"""
Centralized logging for the Catalog Service.

One process-wide logger writing structured entries:
- correlation ID of the current request on every entry
- colored console lines in development, JSON lines otherwise
- optional JSON file output
- exception type and message attached under metadata.error
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from app.core.config import config
from app.middleware.correlation_id import get_correlation_id

# Entry fields carried on the LogRecord via `extra`
ENTRY_FIELDS = ("service", "environment", "correlationId", "metadata")


def _error_details(error: Union[str, BaseException]) -> Dict[str, str]:
    if isinstance(error, BaseException):
        return {"type": type(error).__name__, "message": str(error)}
    return {"message": str(error)}


class StructuredLogger:
    """
    Thin wrapper over a stdlib logger that attaches service context.

    Usage:
        logger.info("Created product", metadata={"event": "create_product", "product_id": pid})
        logger.error("Upload failed", error=exc, metadata={"event": "image_upload_failed"})
    """

    def __init__(self, name: str = config.service_name):
        self.service_name = config.service_name
        self.environment = config.environment
        self._logger = logging.getLogger(name)
        self._configure()

    def _configure(self):
        self._logger.handlers.clear()
        self._logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
        self._logger.propagate = False

        if config.log_to_console:
            handler = logging.StreamHandler(sys.stdout)
            use_json = config.log_format.lower() == "json"
            handler.setFormatter(JSONFormatter() if use_json else ConsoleFormatter())
            self._logger.addHandler(handler)

        if config.log_to_file:
            log_dir = os.path.dirname(config.log_file_path)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            handler = logging.FileHandler(config.log_file_path)
            handler.setFormatter(JSONFormatter())
            self._logger.addHandler(handler)

    def _emit(
        self,
        level: int,
        message: str,
        metadata: Optional[Dict[str, Any]],
        error: Optional[Union[str, BaseException]],
        correlation_id: Optional[str],
    ):
        if not self._logger.isEnabledFor(level):
            return

        if error is not None:
            metadata = {**(metadata or {}), "error": _error_details(error)}

        self._logger.log(level, message, extra={
            "service": self.service_name,
            "environment": self.environment,
            "correlationId": correlation_id or get_correlation_id(),
            "metadata": metadata,
        })

    def debug(self, message: str, metadata: Optional[Dict[str, Any]] = None, correlation_id: Optional[str] = None):
        self._emit(logging.DEBUG, message, metadata, None, correlation_id)

    def info(self, message: str, metadata: Optional[Dict[str, Any]] = None, correlation_id: Optional[str] = None):
        self._emit(logging.INFO, message, metadata, None, correlation_id)

    def warning(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[Union[str, BaseException]] = None,
        correlation_id: Optional[str] = None,
    ):
        self._emit(logging.WARNING, message, metadata, error, correlation_id)

    def error(
        self,
        message: str,
        metadata: Optional[Dict[str, Any]] = None,
        error: Optional[Union[str, BaseException]] = None,
        correlation_id: Optional[str] = None,
    ):
        self._emit(logging.ERROR, message, metadata, error, correlation_id)


class JSONFormatter(logging.Formatter):
    """One JSON object per line"""

    def format(self, record):
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for field in ENTRY_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                entry[field] = value
        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored single-line output for local development"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        correlation_id = getattr(record, "correlationId", None)

        line = f"{color}[{timestamp}] {record.levelname}{self.RESET}"
        if correlation_id:
            line += f" [{correlation_id}]"
        line += f" - {record.getMessage()}"

        metadata = getattr(record, "metadata", None)
        if metadata:
            line += f" {json.dumps(metadata, default=str)}"
        return line


# Create and export the logger instance
logger = StructuredLogger()
