"""Cloudflare API client for zone and DNS record management."""

import logging
from typing import Any, Dict, List, Optional

import requests

from cloudflare_rdns.config import Config
from cloudflare_rdns.errors import AuthError, ProviderAPIError, ZoneNotFound
from cloudflare_rdns.models.dns_record import DNSRecord


logger = logging.getLogger(__name__)

CF_API_BASE = "https://api.cloudflare.com/client/v4"


class CloudflareClient:
    """Thin client over the Cloudflare v4 REST API.

    Every call is a single synchronous request. Failures are raised as
    ProviderAPIError with the messages from the API envelope; nothing is
    retried.
    """

    def __init__(
        self,
        api_token: str | None = None,
        email: str | None = None,
        api_key: str | None = None,
        use_token: bool = True,
        base_url: str = CF_API_BASE,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the client.

        Args:
            api_token: Scoped API token (token mode).
            email: Account email (key mode).
            api_key: Global API key (key mode).
            use_token: Selects token mode over key mode.
            base_url: API base URL.
            session: Optional pre-built requests session.

        Raises:
            AuthError: If the credentials for the selected mode are missing.
        """
        if use_token:
            if not api_token:
                raise AuthError("API token is required when use_token is set")
            headers = {"Authorization": f"Bearer {api_token}"}
        else:
            if not email or not api_key:
                raise AuthError("Email and API key are required when use_token is not set")
            headers = {"X-Auth-Email": email, "X-Auth-Key": api_key}

        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update(headers)
        self.session.headers["Content-Type"] = "application/json"

    @classmethod
    def from_config(cls, config: Config) -> "CloudflareClient":
        """Build a client from the loaded configuration."""
        return cls(
            api_token=config.api_token,
            email=config.email,
            api_key=config.key,
            use_token=config.use_token,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Perform an API call and unwrap the response envelope.

        Returns:
            The "result" member of the envelope.

        Raises:
            ProviderAPIError: On transport failure, non-JSON body or an
                envelope reporting success=false.
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, params=params, json=payload)
        except requests.RequestException as e:
            logger.error(f"Cloudflare {method} {path} failed: {e}")
            raise ProviderAPIError(f"Request to Cloudflare failed: {e}") from e

        try:
            body = response.json()
        except ValueError:
            raise ProviderAPIError(
                f"Cloudflare returned a non-JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from None

        if not isinstance(body, dict) or not body.get("success", False):
            errors = _error_messages(body)
            message = "; ".join(errors) or f"HTTP {response.status_code}"
            logger.error(
                f"Cloudflare {method} {path} returned an error",
                extra={"status_code": response.status_code, "errors": errors},
            )
            raise ProviderAPIError(
                message, status_code=response.status_code, errors=errors
            )

        return body.get("result")

    def user_details(self) -> Dict[str, Any]:
        """Fetch the user the credentials belong to."""
        user = self._request("GET", "/user")
        if not isinstance(user, dict):
            raise ProviderAPIError("Cloudflare returned a malformed user object")
        return user

    def zone_id_by_name(self, name: str) -> str:
        """Look up a zone identifier by zone name.

        Raises:
            ZoneNotFound: If no zone with that name is visible to the account.
            ProviderAPIError: If the API call fails.
        """
        zones = _as_list(self._request("GET", "/zones", params={"name": name}))
        if not zones:
            raise ZoneNotFound(f"Zone {name} could not be found")
        if not isinstance(zones[0], dict) or not zones[0].get("id"):
            raise ProviderAPIError(f"Cloudflare returned a zone without an id for {name}")
        return zones[0]["id"]

    def list_dns_records(self, zone_id: str, name: str) -> List[DNSRecord]:
        """List records in a zone whose name matches exactly.

        Returns:
            List[DNSRecord]: Records in API listing order.
        """
        results = self._request(
            "GET", f"/zones/{zone_id}/dns_records", params={"name": name}
        )
        return [_to_record(result) for result in _as_list(results)]

    def create_dns_record(
        self, zone_id: str, name: str, record_type: str, content: str
    ) -> DNSRecord:
        """Create a record in a zone."""
        result = self._request(
            "POST",
            f"/zones/{zone_id}/dns_records",
            payload={"name": name, "type": record_type, "content": content},
        )
        return _to_record(result)

    def update_dns_record(
        self, zone_id: str, record: DNSRecord, content: str
    ) -> DNSRecord:
        """Change the content of an existing record, keeping its type."""
        result = self._request(
            "PATCH",
            f"/zones/{zone_id}/dns_records/{record.id}",
            payload={"type": record.type, "content": content},
        )
        return _to_record(result)


def _error_messages(body: Any) -> List[str]:
    if not isinstance(body, dict):
        return []
    return [
        f"{error.get('code')}: {error.get('message')}"
        if error.get("code") is not None
        else str(error.get("message"))
        for error in body.get("errors") or []
        if isinstance(error, dict)
    ]


def _as_list(result: Any) -> List[Any]:
    """Treat a null result as empty and reject anything that is not a list."""
    if result is None:
        return []
    if not isinstance(result, list):
        raise ProviderAPIError("Cloudflare returned a malformed result list")
    return result


def _to_record(result: Any) -> DNSRecord:
    try:
        return DNSRecord.from_api(result)
    except ValueError as e:
        raise ProviderAPIError(f"Cloudflare returned a malformed DNS record: {e}") from e
