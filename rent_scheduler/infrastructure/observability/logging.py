"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from rent_scheduler.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_schedule(
    request_id: str,
    frequency: str,
    payment_method: str,
    payment_count: int,
    duration_ms: float,
) -> None:
    """Log structured schedule outcome for analysis"""
    logging.info(
        "Schedule generated",
        extra={
            "request_id": request_id,
            "step": "schedule_complete",
            "frequency": frequency,
            "payment_method": payment_method,
            "payment_count": payment_count,
            "duration_ms": duration_ms,
        },
    )


def log_rejection(request_id: str, error: Exception) -> None:
    """Log an input rejected by schedule validation"""
    logging.warning(
        f"Schedule input rejected: {error}",
        extra={
            "request_id": request_id,
            "step": "validation",
            "error_type": type(error).__name__,
        },
    )
