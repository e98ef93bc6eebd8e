"""PTR lookup and change result models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from cloudflare_rdns.models.dns_record import DNSRecord


@dataclass
class PTRLocation:
    """Where the PTR record for an IP lives.

    Attributes:
        ip: IP address as supplied by the user.
        record_name: Fully-qualified reverse name of the record.
        zone_name: Zone of authority resolved via SOA.
        zone_id: Cloudflare identifier of that zone.
    """

    ip: str
    record_name: str
    zone_name: str
    zone_id: str


class ChangeAction(Enum):
    """Write-mode outcome."""

    CREATED = "created"
    UPDATED = "updated"


@dataclass
class PTRChange:
    """Result of a write-mode run.

    Attributes:
        location: Where the PTR record lives.
        action: Whether a record was created or existing ones were updated.
        content: Hostname written to the record(s).
        records: Records as returned by the API, in the order written.
    """

    location: PTRLocation
    action: ChangeAction
    content: str
    records: List[DNSRecord] = field(default_factory=list)

    def is_created(self) -> bool:
        return self.action == ChangeAction.CREATED
