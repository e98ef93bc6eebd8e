"""Unit tests for configuration validation."""

import pytest

from cloudflare_rdns.config import Config
from cloudflare_rdns.errors import ConfigError


def write_config(tmp_path, content):
    path = tmp_path / "CloudflareRDNS.yaml"
    path.write_text(content)
    return path


def test_config_from_file_token_mode(tmp_path):
    """Test loading a token-mode configuration with defaults."""
    path = write_config(tmp_path, "use_token: true\napi_token: token-abc\n")

    config = Config.from_file(path)

    assert config.use_token is True
    assert config.api_token == "token-abc"
    assert config.email == ""
    assert config.key == ""
    assert config.dns_resolver == "1.1.1.1"  # Default
    assert config.dns_timeout == 3.0  # Default


def test_config_from_file_key_mode(tmp_path):
    """Test loading an email + key configuration with DNS overrides."""
    path = write_config(
        tmp_path,
        "email: ops@example.com\nkey: key-123\ndns_resolver: 8.8.8.8\ndns_timeout: 5\n",
    )

    config = Config.from_file(path)

    assert config.use_token is False  # Default
    assert config.email == "ops@example.com"
    assert config.key == "key-123"
    assert config.dns_resolver == "8.8.8.8"
    assert config.dns_timeout == 5.0


def test_config_missing_file(tmp_path):
    """Test that a missing file raises ConfigError."""
    with pytest.raises(ConfigError, match="Error reading config file"):
        Config.from_file(tmp_path / "missing.yaml")


def test_config_unparsable_yaml(tmp_path):
    """Test that invalid YAML raises ConfigError."""
    path = write_config(tmp_path, "api_token: [unclosed\n")

    with pytest.raises(ConfigError, match="Error parsing config file"):
        Config.from_file(path)


def test_config_not_a_mapping(tmp_path):
    """Test that a YAML list is rejected."""
    path = write_config(tmp_path, "- api_token\n- email\n")

    with pytest.raises(ConfigError, match="expected a mapping"):
        Config.from_file(path)


def test_config_empty_file(tmp_path):
    """Test that an empty file yields empty credentials."""
    config = Config.from_file(write_config(tmp_path, ""))

    assert config.api_token == ""
    assert config.use_token is False


def test_config_invalid_use_token():
    """Test that a non-boolean use_token raises ConfigError."""
    with pytest.raises(ConfigError, match="use_token must be true or false"):
        Config.from_dict({"use_token": "yes please"})


def test_config_invalid_credential_type():
    """Test that non-string credentials raise ConfigError."""
    with pytest.raises(ConfigError, match="api_token must be a string"):
        Config.from_dict({"api_token": 12345})


def test_config_invalid_resolver():
    """Test that a hostname resolver is rejected."""
    with pytest.raises(ConfigError, match="dns_resolver must be an IP address"):
        Config.from_dict({"dns_resolver": "dns.google"})


@pytest.mark.parametrize("timeout", [0, 61, "5", True])
def test_config_invalid_timeout(timeout):
    """Test that dns_timeout must be a number between 1 and 60."""
    with pytest.raises(ConfigError, match="dns_timeout"):
        Config.from_dict({"dns_timeout": timeout})
