"""Structured JSON logging on stderr.

stdout is reserved for the rendered result, so diagnostics never mix
with the JSON or Markdown output.
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger


# Run ID for correlating all log entries of one invocation
RUN_ID = str(uuid.uuid4())


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds run_id and standardized fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["run_id"] = RUN_ID
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure structured JSON logging for the application.

    Args:
        verbose: Log at INFO instead of WARNING.

    Returns:
        logging.Logger: Configured root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    # Remove existing handlers to avoid duplicates
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    json_handler = logging.StreamHandler(sys.stderr)
    json_handler.setFormatter(CustomJsonFormatter("%(message)s"))
    logger.addHandler(json_handler)

    return logger


def log_rdns_operation(
    ip: str,
    address: str,
    record_name: str,
    zone: str,
    operation: str,
    records_changed: int,
    duration_ms: int,
) -> None:
    """Log the outcome of a read or write run.

    Args:
        ip: IP address as supplied by the user.
        address: Address recovered from record_name, in canonical form.
        record_name: Reverse name of the PTR record.
        zone: Zone name the record lives in.
        operation: One of: read, created, updated.
        records_changed: Number of records created or updated.
        duration_ms: Processing time in milliseconds.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "rDNS operation completed",
        extra={
            "ip": ip,
            "address": address,
            "record_name": record_name,
            "zone": zone,
            "operation": operation,
            "records_changed": records_changed,
            "duration_ms": duration_ms,
        },
    )


def log_zone_resolution(
    reverse_name: str,
    zone: str,
    nameserver: str,
    record_type: str,
) -> None:
    """Log the zone found for a reverse name by the SOA query.

    Args:
        reverse_name: Fully-qualified reverse name that was queried.
        zone: Zone name taken from the first returned record.
        nameserver: Resolver the query was sent to.
        record_type: Type of the record the zone name was taken from.
    """
    logger = logging.getLogger(__name__)
    logger.info(
        "Zone resolved",
        extra={
            "reverse_name": reverse_name,
            "zone": zone,
            "nameserver": nameserver,
            "record_type": record_type,
        },
    )
