"""Structured JSON logging"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "bankintegration"


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = SERVICE_NAME


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Configure structured JSON logging (stderr by default, stdout carries report output)"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_fetch(
    request_id: str,
    account: str,
    outcome: str,
    duration_ms: float,
    status_code: Optional[int] = None,
) -> None:
    """Log structured report fetch outcome"""
    logging.getLogger("bankintegration.fetch").info(
        "Report fetch completed",
        extra={
            "request_id": request_id,
            "account": account,
            "step": "report_fetch",
            "outcome": outcome,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )
