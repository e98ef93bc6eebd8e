"""PTR record read/write orchestration."""

import logging
import time

from cloudflare_rdns.models.dns_record import DNSRecord
from cloudflare_rdns.models.ptr_change import ChangeAction, PTRChange, PTRLocation
from cloudflare_rdns.services.cloudflare_client import CloudflareClient
from cloudflare_rdns.services.logger import log_rdns_operation
from cloudflare_rdns.services.soa_resolver import SOAResolver
from cloudflare_rdns.utils.ip_utils import address_from_reverse_name, reverse_name


logger = logging.getLogger(__name__)

PTR_RECORD_TYPE = "PTR"


class RDNSService:
    """Reads and writes the PTR record of a single IP address.

    Errors from address parsing, zone resolution and the API are raised
    to the caller unchanged.
    """

    def __init__(self, client: CloudflareClient, zone_resolver: SOAResolver):
        self.client = client
        self.zone_resolver = zone_resolver

    def locate(self, ip: str) -> PTRLocation:
        """Find the Cloudflare zone and record name for an IP.

        Raises:
            InvalidAddress: If ip does not parse.
            ResolutionFailed: If the SOA query fails.
            NoSOARecord: If the SOA reply carries no records.
            ZoneNotFound: If Cloudflare does not host the resolved zone.
        """
        record_name = reverse_name(ip)
        zone_name = self.zone_resolver.resolve_zone(record_name)
        zone_id = self.client.zone_id_by_name(zone_name)
        return PTRLocation(
            ip=ip, record_name=record_name, zone_name=zone_name, zone_id=zone_id
        )

    def get_ptr(self, ip: str) -> DNSRecord | None:
        """Return the PTR record for ip, or None if there is none.

        Only the first matching record is returned.
        """
        start = time.time()
        location = self.locate(ip)
        records = self.client.list_dns_records(location.zone_id, location.record_name)

        if len(records) > 1:
            logger.warning(
                f"{len(records)} records found for {location.record_name} "
                f"({address_from_reverse_name(location.record_name)}), using the first"
            )

        log_rdns_operation(
            ip=ip,
            address=address_from_reverse_name(location.record_name),
            record_name=location.record_name,
            zone=location.zone_name,
            operation="read",
            records_changed=0,
            duration_ms=int((time.time() - start) * 1000),
        )
        return records[0] if records else None

    def set_ptr(self, ip: str, content: str) -> PTRChange:
        """Create the PTR record for ip, or update every existing match.

        Updates run in listing order, one call per record; the first
        failure propagates and the remaining records are left untouched.
        """
        start = time.time()
        location = self.locate(ip)
        records = self.client.list_dns_records(location.zone_id, location.record_name)

        if not records:
            created = self.client.create_dns_record(
                location.zone_id, location.record_name, PTR_RECORD_TYPE, content
            )
            change = PTRChange(
                location=location,
                action=ChangeAction.CREATED,
                content=content,
                records=[created],
            )
        else:
            updated = []
            for record in records:
                updated.append(
                    self.client.update_dns_record(location.zone_id, record, content)
                )
            change = PTRChange(
                location=location,
                action=ChangeAction.UPDATED,
                content=content,
                records=updated,
            )

        log_rdns_operation(
            ip=ip,
            address=address_from_reverse_name(location.record_name),
            record_name=location.record_name,
            zone=location.zone_name,
            operation=change.action.value,
            records_changed=len(change.records),
            duration_ms=int((time.time() - start) * 1000),
        )
        return change
