"""IP address utilities for reverse DNS names."""

import ipaddress

from cloudflare_rdns.errors import InvalidAddress


IPV4_REVERSE_DOMAIN = "in-addr.arpa"
IPV6_REVERSE_DOMAIN = "ip6.arpa"


def parse_ip(ip: str) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    """Parse an IP literal.

    Args:
        ip: IPv4 or IPv6 address in textual form.

    Returns:
        The parsed address object.

    Raises:
        InvalidAddress: If ip is not a string or does not parse.
    """
    # ipaddress also accepts integers and bytes; only text is an IP literal here
    if not isinstance(ip, str):
        raise InvalidAddress(f"Invalid IP address: {ip!r}")

    try:
        return ipaddress.ip_address(ip)
    except ValueError:
        raise InvalidAddress(f"Invalid IP address: {ip!r}") from None


def reverse_name(ip: str) -> str:
    """Build the fully-qualified reverse DNS name for an IP address.

    IPv4 octets are reversed under in-addr.arpa. IPv6 addresses are
    normalized, expanded to 32 nibbles and reversed under ip6.arpa.
    The result carries no trailing root dot.

    Args:
        ip: IPv4 or IPv6 address in textual form.

    Returns:
        str: Reverse name, e.g. "1.2.0.192.in-addr.arpa".

    Raises:
        InvalidAddress: If ip is not a valid IP literal.

    Examples:
        >>> reverse_name("192.0.2.1")
        '1.2.0.192.in-addr.arpa'
        >>> reverse_name("2001:db8::1").endswith("8.b.d.0.1.0.0.2.ip6.arpa")
        True
    """
    addr = parse_ip(ip)

    if addr.version == 4:
        octets = [str(octet) for octet in addr.packed]
        return ".".join(reversed(octets)) + "." + IPV4_REVERSE_DOMAIN

    nibbles = addr.packed.hex()
    return ".".join(reversed(nibbles)) + "." + IPV6_REVERSE_DOMAIN


def address_from_reverse_name(name: str) -> str:
    """Recover the IP address encoded in a full reverse name.

    Args:
        name: Reverse name as produced by reverse_name(); a trailing dot
            is accepted.

    Returns:
        str: Address in ipaddress' canonical textual form.

    Raises:
        InvalidAddress: If name is not a complete in-addr.arpa or
            ip6.arpa name.
    """
    name = name.lower().rstrip(".")

    if name.endswith("." + IPV4_REVERSE_DOMAIN):
        labels = name[: -len(IPV4_REVERSE_DOMAIN) - 1].split(".")
        if len(labels) != 4:
            raise InvalidAddress(f"Not a full IPv4 reverse name: {name}")
        text = ".".join(reversed(labels))
    elif name.endswith("." + IPV6_REVERSE_DOMAIN):
        labels = name[: -len(IPV6_REVERSE_DOMAIN) - 1].split(".")
        if len(labels) != 32 or any(len(label) != 1 for label in labels):
            raise InvalidAddress(f"Not a full IPv6 reverse name: {name}")
        digits = "".join(reversed(labels))
        text = ":".join(digits[i : i + 4] for i in range(0, 32, 4))
    else:
        raise InvalidAddress(f"Not a reverse DNS name: {name}")

    return str(parse_ip(text))
