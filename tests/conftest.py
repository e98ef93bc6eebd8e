"""pytest fixtures for testing."""

import pytest
from unittest.mock import Mock


@pytest.fixture
def sample_ptr_record():
    """PTR record for 192.0.2.1 as listed by Cloudflare."""
    from cloudflare_rdns.models.dns_record import DNSRecord

    return DNSRecord(
        id="rec-1",
        name="1.2.0.192.in-addr.arpa",
        type="PTR",
        content="host.example.com",
        zone_id="zone-123",
    )


@pytest.fixture
def mock_client():
    """Mock Cloudflare client hosting 2.0.192.in-addr.arpa with no records."""
    mock = Mock()
    mock.zone_id_by_name.return_value = "zone-123"
    mock.list_dns_records.return_value = []
    return mock


@pytest.fixture
def mock_zone_resolver():
    """Mock SOA resolver that places every name in 2.0.192.in-addr.arpa."""
    mock = Mock()
    mock.resolve_zone.return_value = "2.0.192.in-addr.arpa"
    return mock
