"""Unit tests for structured logging."""

import json
import logging

from cloudflare_rdns.services.logger import (
    RUN_ID,
    CustomJsonFormatter,
    log_rdns_operation,
    log_zone_resolution,
)


def test_formatter_adds_standard_fields():
    """Test that every record carries run_id, level, logger and timestamp."""
    formatter = CustomJsonFormatter("%(message)s")
    record = logging.LogRecord(
        name="cloudflare_rdns.services.soa_resolver",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Zone resolved",
        args=(),
        exc_info=None,
    )
    record.zone = "2.0.192.in-addr.arpa"

    entry = json.loads(formatter.format(record))

    assert entry["message"] == "Zone resolved"
    assert entry["run_id"] == RUN_ID
    assert entry["level"] == "INFO"
    assert entry["logger"] == "cloudflare_rdns.services.soa_resolver"
    assert entry["zone"] == "2.0.192.in-addr.arpa"
    assert "timestamp" in entry


def test_log_zone_resolution_fields(caplog):
    """Test the zone resolution event carries the query details."""
    with caplog.at_level(logging.INFO, logger="cloudflare_rdns.services.logger"):
        log_zone_resolution(
            reverse_name="1.2.0.192.in-addr.arpa",
            zone="2.0.192.in-addr.arpa",
            nameserver="1.1.1.1",
            record_type="SOA",
        )

    record = caplog.records[-1]
    assert record.getMessage() == "Zone resolved"
    assert record.reverse_name == "1.2.0.192.in-addr.arpa"
    assert record.zone == "2.0.192.in-addr.arpa"
    assert record.nameserver == "1.1.1.1"
    assert record.record_type == "SOA"


def test_log_rdns_operation_fields(caplog):
    """Test the operation event carries the canonical address."""
    with caplog.at_level(logging.INFO, logger="cloudflare_rdns.services.logger"):
        log_rdns_operation(
            ip="2001:0db8::0001",
            address="2001:db8::1",
            record_name="1." + "0." * 23 + "8.b.d.0.1.0.0.2.ip6.arpa",
            zone="8.b.d.0.1.0.0.2.ip6.arpa",
            operation="created",
            records_changed=1,
            duration_ms=12,
        )

    record = caplog.records[-1]
    assert record.address == "2001:db8::1"
    assert record.operation == "created"
    assert record.records_changed == 1
