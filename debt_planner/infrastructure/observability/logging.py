"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from debt_planner.config import settings


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


def log_plan(
    request_id: str,
    user_id: str,
    strategy: str,
    months_to_debt_free: int,
    converged: bool,
    duration_ms: float,
) -> None:
    """Log structured plan outcome; capped plans go out as warnings"""
    level = logging.INFO if converged else logging.WARNING
    logging.log(
        level,
        "Plan computed" if converged else "Plan hit month cap without reaching zero",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "plan_complete",
            "strategy": strategy,
            "months_to_debt_free": months_to_debt_free,
            "converged": converged,
            "duration_ms": duration_ms,
        },
    )
