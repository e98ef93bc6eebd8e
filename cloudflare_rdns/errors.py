"""Error taxonomy for rDNS operations.

Lower layers raise these; only the CLI entry point turns them into
rendered output and an exit code.
"""


class RDNSError(Exception):
    """Base class for all errors reported by the tool."""


class ConfigError(RDNSError):
    """Configuration file missing, unparsable or invalid."""


class AuthError(RDNSError):
    """Cloudflare client could not be built from the supplied credentials."""


class InvalidAddress(RDNSError):
    """Input is not a valid IPv4 or IPv6 literal."""


class ZoneResolutionError(RDNSError):
    """The zone owning a reverse name could not be determined."""


class ResolutionFailed(ZoneResolutionError):
    """SOA query failed (transport, timeout or malformed reply)."""


class NoSOARecord(ZoneResolutionError):
    """SOA query succeeded but carried no usable owner name."""


class ZoneNotFound(ZoneResolutionError):
    """Cloudflare hosts no zone with the resolved name."""


class ProviderAPIError(RDNSError):
    """A Cloudflare API call failed.

    Attributes:
        status_code: HTTP status of the failed call, if a response arrived.
        errors: Error messages reported by the API envelope.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        errors: list[str] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.errors = errors or []
