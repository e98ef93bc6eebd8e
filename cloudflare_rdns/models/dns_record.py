"""Cloudflare DNS record model."""

from dataclasses import dataclass
from typing import Any, Dict


REQUIRED_FIELDS = ("id", "name", "type")


@dataclass
class DNSRecord:
    """A DNS record as returned by the Cloudflare API.

    Attributes:
        id: Provider-assigned record identifier.
        name: Fully-qualified record name (e.g., "1.2.0.192.in-addr.arpa").
        type: Record type (e.g., "PTR").
        content: Record content; for PTR records the target hostname.
        zone_id: Identifier of the zone holding the record.
    """

    id: str
    name: str
    type: str
    content: str
    zone_id: str | None = None

    @classmethod
    def from_api(cls, result: Dict[str, Any]) -> "DNSRecord":
        """Build a record from one entry of an API "result" payload.

        Args:
            result: Record object decoded from the API response.

        Returns:
            DNSRecord: Parsed record.

        Raises:
            ValueError: If result is not an object or lacks id, name or type.
        """
        if not isinstance(result, dict):
            raise ValueError(f"expected an object, got {type(result).__name__}")

        missing = [key for key in REQUIRED_FIELDS if not result.get(key)]
        if missing:
            raise ValueError(f"missing {', '.join(missing)}")

        return cls(
            id=result["id"],
            name=result["name"],
            type=result["type"],
            content=result.get("content") or "",
            zone_id=result.get("zone_id"),
        )
