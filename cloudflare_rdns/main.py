"""Main entry point for Cloudflare rDNS."""

import argparse
import logging
import sys

from cloudflare_rdns.config import DEFAULT_CONFIG_PATH, Config
from cloudflare_rdns.errors import (
    AuthError,
    ConfigError,
    InvalidAddress,
    ProviderAPIError,
    RDNSError,
    ZoneResolutionError,
)
from cloudflare_rdns.models.output_data import OUTPUT_FORMATS, OutputData, details
from cloudflare_rdns.services.cloudflare_client import CloudflareClient
from cloudflare_rdns.services.logger import setup_logging
from cloudflare_rdns.services.output_reporter import OutputReporter
from cloudflare_rdns.services.rdns_service import RDNSService
from cloudflare_rdns.services.soa_resolver import SOAResolver


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cloudflare-rdns",
        description="Read or set the PTR record of an IP address hosted on Cloudflare.",
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help="path to the configuration file",
    )
    parser.add_argument(
        "--output",
        default="json",
        choices=OUTPUT_FORMATS,
        help="output format: json or markdown",
    )
    parser.add_argument("--ip", default="", help="IP address for rDNS operation")
    parser.add_argument(
        "--check-api",
        action="store_true",
        help="fetch your user details from the Cloudflare API and exit",
    )
    parser.add_argument(
        "--set-rdns",
        default="",
        metavar="HOSTNAME",
        help="set or update rDNS to this value",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="log diagnostics to stderr"
    )
    return parser


def check_api(client: CloudflareClient, reporter: OutputReporter) -> int:
    """Print the identity behind the configured credentials."""
    try:
        user = client.user_details()
    except ProviderAPIError as e:
        reporter.emit(details(False, "Error fetching user details", str(e)))
        return 1

    reporter.emit(
        OutputData(
            success=True,
            message="API credentials are valid",
            data={"id": user.get("id"), "email": user.get("email")},
        )
    )
    return 0


def get_rdns(service: RDNSService, ip: str, reporter: OutputReporter) -> int:
    """Report the current PTR record of ip."""
    try:
        record = service.get_ptr(ip)
    except InvalidAddress as e:
        reporter.emit(details(False, "Invalid IP address", str(e)))
        return 1
    except ZoneResolutionError as e:
        reporter.emit(details(False, "Error to get rDNS Zone", str(e)))
        return 1
    except ProviderAPIError as e:
        reporter.emit(details(False, "Error fetching rDNS", str(e)))
        return 1

    if record is None:
        reporter.emit(OutputData(success=True, message="No PTR record found for IP"))
    else:
        reporter.emit(details(True, record.name, record.content))
    return 0


def set_rdns(
    service: RDNSService, ip: str, hostname: str, reporter: OutputReporter
) -> int:
    """Create or update the PTR record of ip."""
    try:
        change = service.set_ptr(ip, hostname)
    except InvalidAddress as e:
        reporter.emit(details(False, "Invalid IP address", str(e)))
        return 1
    except ZoneResolutionError as e:
        reporter.emit(details(False, "Error to get rDNS Zone", str(e)))
        return 1
    except ProviderAPIError as e:
        reporter.emit(details(False, "Error updating rDNS", str(e)))
        return 1

    verb = "created" if change.is_created() else "updated"
    reporter.emit(details(True, f"RDNS {verb} for {ip}", change.content))
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main execution function.

    Returns:
        int: Exit code (0 for success, 1 for any reported failure).
    """
    args = build_parser().parse_args(argv)

    setup_logging(verbose=args.verbose)
    reporter = OutputReporter(args.output)

    try:
        config = Config.from_file(args.config)
        logger.info(f"Configuration loaded from {args.config}")

        try:
            client = CloudflareClient.from_config(config)
        except AuthError as e:
            reporter.emit(details(False, "Error creating Cloudflare API instance", str(e)))
            return 1

        if args.check_api:
            return check_api(client, reporter)

        if not args.ip:
            reporter.emit(OutputData(success=False, message="Please provide the IP address to update"))
            return 1

        service = RDNSService(
            client,
            SOAResolver(nameserver=config.dns_resolver, timeout=config.dns_timeout),
        )

        if args.set_rdns:
            return set_rdns(service, args.ip, args.set_rdns, reporter)
        return get_rdns(service, args.ip, reporter)

    except ConfigError as e:
        reporter.emit(details(False, "Error loading config file", str(e)))
        return 1
    except RDNSError as e:
        reporter.emit(details(False, "Error", str(e)))
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        reporter.emit(details(False, "Unexpected error", str(e)))
        return 1


if __name__ == "__main__":
    sys.exit(main())
