"""Zone-boundary resolution via live SOA queries.

Reverse zones are not always delegated on octet or nibble boundaries, so
the zone that Cloudflare must host is found by asking a public recursive
resolver for the SOA of the full reverse name and reading back the owner
name of the first record it returns.
"""

import dns.exception
import dns.message
import dns.query
import dns.rdataclass
import dns.rdatatype

from cloudflare_rdns.errors import NoSOARecord, ResolutionFailed
from cloudflare_rdns.services.logger import log_zone_resolution


DEFAULT_NAMESERVER = "1.1.1.1"
DEFAULT_TIMEOUT = 3.0
DNS_PORT = 53


class SOAResolver:
    """Finds the zone of authority for a reverse DNS name.

    Sends a single SOA question over UDP with a bounded wait. There is no
    retry: a timeout or transport error fails the lookup immediately.
    """

    def __init__(
        self,
        nameserver: str = DEFAULT_NAMESERVER,
        timeout: float = DEFAULT_TIMEOUT,
        port: int = DNS_PORT,
    ):
        self.nameserver = nameserver
        self.timeout = timeout
        self.port = port

    def query(self, name: str) -> dns.message.Message:
        """Send an SOA query for name and return the parsed reply.

        Raises:
            ResolutionFailed: On timeout, socket error or unparsable reply.
        """
        try:
            request = dns.message.make_query(
                name, dns.rdatatype.SOA, dns.rdataclass.IN
            )
            return dns.query.udp(
                request, self.nameserver, timeout=self.timeout, port=self.port
            )
        except dns.exception.Timeout:
            raise ResolutionFailed(
                f"SOA query for {name} to {self.nameserver} timed out "
                f"after {self.timeout}s"
            ) from None
        except (dns.exception.DNSException, OSError) as e:
            raise ResolutionFailed(
                f"SOA query for {name} to {self.nameserver} failed: {e}"
            ) from e

    def resolve_zone(self, name: str) -> str:
        """Resolve the zone name that should contain name.

        The owner name of the first RRset found in the answer section,
        then the authority section, is used regardless of its type. This
        covers resolvers that return the SOA in the authority section of
        a negative answer.

        Args:
            name: Fully-qualified reverse name.

        Returns:
            str: Zone name without the trailing root dot.

        Raises:
            ResolutionFailed: If the query fails.
            NoSOARecord: If the reply has no answer or authority records.
        """
        response = self.query(name)

        rrsets = list(response.answer) + list(response.authority)
        if not rrsets:
            raise NoSOARecord(f"No SOA record found for {name}")

        zone = rrsets[0].name.to_text()
        if zone.endswith("."):
            zone = zone[:-1]

        if not zone:
            # Owner was the root; there is nothing a provider could host
            raise NoSOARecord(f"No SOA record found for {name} below the root")

        log_zone_resolution(
            reverse_name=name,
            zone=zone,
            nameserver=self.nameserver,
            record_type=dns.rdatatype.to_text(rrsets[0].rdtype),
        )
        return zone

