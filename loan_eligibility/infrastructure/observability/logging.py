"""Structured JSON logging for eligibility evaluations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO
from pythonjsonlogger import jsonlogger
from loan_eligibility.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None, stream: TextIO | None = None) -> None:
    """
    Route root logging through one JSON handler.

    Level falls back to settings.log_level (LOAN_ELIGIBILITY_LOG_LEVEL).
    Handlers installed by an earlier call are replaced; handlers owned by
    the host application are left alone.
    """
    root = logging.getLogger()
    root.setLevel((level or settings.log_level).upper())

    for existing in [h for h in root.handlers if isinstance(h.formatter, CustomJsonFormatter)]:
        root.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)


def log_evaluation(
    request_id: str,
    status: str,
    score: int,
    recommendation_count: int,
    duration_ms: float,
) -> None:
    """Log structured evaluation outcome for analysis"""
    logging.info(
        "Eligibility evaluated",
        extra={
            "request_id": request_id,
            "step": "evaluation_complete",
            "eligibility_status": status,
            "eligibility_score": score,
            "recommendation_count": recommendation_count,
            "duration_ms": duration_ms,
        },
    )
