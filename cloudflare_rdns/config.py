"""Configuration module for Cloudflare rDNS.

Loads and validates the YAML configuration file.
"""

import ipaddress
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from cloudflare_rdns.errors import ConfigError


DEFAULT_CONFIG_PATH = "./CloudflareRDNS.yaml"


@dataclass
class Config:
    """Application configuration loaded from a YAML file."""

    # Cloudflare Credentials
    api_token: str
    email: str
    key: str
    use_token: bool

    # DNS Configuration
    dns_resolver: str = "1.1.1.1"
    dns_timeout: float = 3.0

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> "Config":
        """Load configuration from a YAML file.

        Args:
            path: Path to the configuration file.

        Raises:
            ConfigError: If the file is missing, unparsable or invalid.

        Returns:
            Config: Validated configuration instance.
        """
        try:
            with open(path, encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            raise ConfigError(f"Error reading config file: {e}") from e

        try:
            data = yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing config file: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Error parsing config file: expected a mapping")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a validated configuration from already-parsed values.

        Raises:
            ConfigError: If a value has the wrong type or is out of range.
        """
        # Cloudflare Credentials
        api_token = cls._get_str(data, "api_token")
        email = cls._get_str(data, "email")
        key = cls._get_str(data, "key")

        use_token = data.get("use_token", False)
        if not isinstance(use_token, bool):
            raise ConfigError("use_token must be true or false")

        # DNS Configuration
        dns_resolver = str(data.get("dns_resolver", "1.1.1.1"))
        try:
            ipaddress.ip_address(dns_resolver)
        except ValueError:
            raise ConfigError(
                f"dns_resolver must be an IP address, got {dns_resolver!r}"
            ) from None

        dns_timeout = data.get("dns_timeout", 3)
        if isinstance(dns_timeout, bool) or not isinstance(dns_timeout, (int, float)):
            raise ConfigError("dns_timeout must be a number of seconds")
        if not 1 <= dns_timeout <= 60:
            raise ConfigError("dns_timeout must be between 1 and 60 seconds")

        return cls(
            api_token=api_token,
            email=email,
            key=key,
            use_token=use_token,
            dns_resolver=dns_resolver,
            dns_timeout=float(dns_timeout),
        )

    @staticmethod
    def _get_str(data: Dict[str, Any], key: str) -> str:
        """Get an optional string value, treating null as empty.

        Raises:
            ConfigError: If the value is present but not a string.
        """
        value = data.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise ConfigError(f"{key} must be a string")
        return value
