"""Productboard API client wrapper.

Centralized Productboard REST client: authentication, query encoding,
`{"data": ...}` body envelopes and error mapping.
"""

import json
from typing import Any, Mapping, NoReturn

import httpx

from pb_obs.logging import get_logger

from .exceptions import ProductboardConfigError, error_for_status
from .paths import stringify

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://api.productboard.com"
ALLOWED_DOMAIN = "productboard.com"


def is_allowed_host(host: str) -> bool:
    """True for productboard.com and its subdomains."""
    host = host.lower().rstrip(".")
    return host == ALLOWED_DOMAIN or host.endswith(f".{ALLOWED_DOMAIN}")


def encode_query(params: Mapping[str, Any] | None) -> str:
    """Encode query parameters, skipping None values."""
    if not params:
        return ""
    query = httpx.QueryParams(
        [(key, stringify(value)) for key, value in params.items() if value is not None]
    )
    return str(query)


def parse_retry_after(value: str | None) -> int | None:
    """Parse a delta-seconds `retry-after` header."""
    if value is None:
        return None
    value = value.strip()
    return int(value) if value.isdigit() else None


class ProductboardClient:
    """Productboard API client.

    Provides:
    - Bearer authentication and API version pinning
    - Base URL restricted to productboard.com hosts
    - Error handling and exception mapping
    - Injectable httpx transport for tests

    Every request opens its own short-lived `httpx.AsyncClient`; the instance
    only holds configuration, so concurrent calls share no state.
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout_seconds: float | None = None,
        api_version: str = "1",
    ):
        """Initialize Productboard client.

        Args:
            token: Productboard API access token
            base_url: API base URL (defaults to https://api.productboard.com)
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            timeout_seconds: Request timeout, None disables timeouts
            api_version: Value of the X-Version header

        Raises:
            ProductboardConfigError: Empty token or non-Productboard base URL
        """
        if not token or not token.strip():
            raise ProductboardConfigError("Productboard API token is required")

        base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        try:
            host = httpx.URL(base_url).host
        except httpx.InvalidURL as e:
            raise ProductboardConfigError(f"Invalid base_url {base_url!r}: {e}") from e
        if not is_allowed_host(host):
            raise ProductboardConfigError(
                f"Invalid base_url {base_url!r}: must be a {ALLOWED_DOMAIN} domain"
            )

        self._token = token
        self.base_url = base_url
        self.transport = transport
        self.timeout_seconds = timeout_seconds
        self.api_version = api_version

    def _get_headers(self) -> dict[str, str]:
        """Get request headers with authentication."""
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "X-Version": self.api_version,
        }

    def _handle_error(self, response: httpx.Response, path: str) -> NoReturn:
        """Map a non-2xx response to a ProductboardAPIError."""
        status = response.status_code

        try:
            error_data = response.json()
        except ValueError:
            error_data = {}
        if not isinstance(error_data, dict):
            error_data = {}

        message = error_data.get("message")
        if not isinstance(message, str):
            message = f"HTTP {status}"

        retry_after = None
        if status == 429:
            retry_after = parse_retry_after(response.headers.get("retry-after"))

        logger.warning(
            "productboard_api_error",
            status=status,
            path=path,
            retry_after=retry_after,
        )
        raise error_for_status(status, message, retry_after)

    async def _request(
        self,
        method: str,
        path: str,
        body: Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        """Send one request and return the parsed JSON body.

        Returns:
            Parsed response body, or None for 204 / empty responses

        Raises:
            ProductboardAPIError: Non-2xx response (subclass per status)
            httpx.TransportError: Network failure, propagated as-is
        """
        url = f"{self.base_url}{path}"
        query = encode_query(params)
        if query:
            url = f"{url}?{query}"

        content = None
        if body is not None:
            content = json.dumps({"data": dict(body)})

        logger.debug("productboard_request", method=method, path=path)

        async with httpx.AsyncClient(
            transport=self.transport, timeout=self.timeout_seconds
        ) as client:
            response = await client.request(
                method, url, headers=self._get_headers(), content=content
            )

            if not response.is_success:
                self._handle_error(response, path)

            if response.status_code == 204 or not response.content:
                return None

            return response.json()

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> Any:
        """GET with optional query parameters."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        """POST, wrapping `body` as {"data": body} when given."""
        return await self._request("POST", path, body=body)

    async def put(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        """PUT, wrapping `body` as {"data": body} when given."""
        return await self._request("PUT", path, body=body)

    async def patch(self, path: str, body: Mapping[str, Any] | None = None) -> Any:
        """PATCH, wrapping `body` as {"data": body} when given."""
        return await self._request("PATCH", path, body=body)

    async def delete(self, path: str) -> Any:
        """DELETE, never with a body."""
        return await self._request("DELETE", path)
