"""
services/ip_service.py

Responsibility: Fetches the current public IP address of the host machine from
one of the supported lookup services, and issues the simple GET requests that
lookup relies on.
Does NOT: retry, cache results, or query several services at once.
"""

from __future__ import annotations

import ipaddress
import json
import logging
import re

import httpx

from exceptions import AddressFormatError, IpFetchError, LookupUrlError, ResponseParseError
from lookup.lookup_service import (
    DEFAULT_LOOKUP_SERVICE,
    ResponseFormat,
    get_address_field,
    get_lookup_url,
    get_response_format,
    resolve_service,
)
from lookup.user_agent import DEFAULT_USER_AGENT, UserAgent, get_user_agent, resolve_user_agent

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT_MS = 4000
DEFAULT_READ_TIMEOUT_MS = 4000

# Body lines are concatenated without a separator, so every terminator is dropped.
_LINE_BREAK = re.compile(r"[\r\n]")

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class IpService:
    """
    Resolves the host machine's current public IP address.

    A long-lived httpx.Client may be injected so the service is testable
    without real network calls (use respx.mock in tests). Without one, every
    request opens and closes its own client.

    Collaborators:
        - httpx.Client: optional; must be kept alive externally when injected
    """

    def __init__(self, http_client: httpx.Client | None = None) -> None:
        """
        Initialises the service with an optional shared HTTP client.

        Args:
            http_client: A long-lived httpx.Client instance, or None to open
                         a short-lived client per request.
        """
        self._client = http_client

    # ---------------------------------------------------------------------------
    # Raw HTTP
    # ---------------------------------------------------------------------------

    def simple_http_get(
        self,
        url: str,
        user_agent: UserAgent = DEFAULT_USER_AGENT,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_MS,
        read_timeout: int = DEFAULT_READ_TIMEOUT_MS,
    ) -> str:
        """
        Issues a GET request and returns the response body as a single line.

        Args:
            url: The absolute URL to request.
            user_agent: Browser profile whose string is sent as User-Agent.
            connect_timeout: Connection timeout in milliseconds; 0 waits forever.
            read_timeout: Read timeout in milliseconds, also bounding writes;
                          0 waits forever.

        Returns:
            The decoded body with all line breaks removed.

        Raises:
            IpFetchError: On any transport failure, timeout or non-2xx status.
            LookupUrlError: If `url` cannot be parsed.
        """
        user_agent = resolve_user_agent(user_agent)
        headers = {"User-Agent": get_user_agent(user_agent)}
        timeout = httpx.Timeout(_seconds(read_timeout), connect=_seconds(connect_timeout))

        logger.debug(
            "GET %s user_agent=%s connect_timeout=%sms read_timeout=%sms",
            url,
            user_agent.name,
            connect_timeout,
            read_timeout,
        )
        try:
            if self._client is not None:
                response = self._get(self._client, url, headers, timeout)
            else:
                with httpx.Client() as client:
                    response = self._get(client, url, headers, timeout)
        except httpx.InvalidURL as exc:
            raise LookupUrlError(f"Malformed URL {url!r}: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            logger.warning("%s returned status %s", url, exc.response.status_code)
            raise IpFetchError(
                f"{url} returned status {exc.response.status_code}."
            ) from exc
        except httpx.RequestError as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise IpFetchError(f"Could not reach {url}: {exc}") from exc

        return _LINE_BREAK.sub("", response.text)

    @staticmethod
    def _get(
        client: httpx.Client, url: str, headers: dict[str, str], timeout: httpx.Timeout
    ) -> httpx.Response:
        response = client.get(url, headers=headers, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
        return response

    # ---------------------------------------------------------------------------
    # Public IP lookup
    # ---------------------------------------------------------------------------

    def get_public_ip(
        self,
        service: object = DEFAULT_LOOKUP_SERVICE,
        user_agent: UserAgent = DEFAULT_USER_AGENT,
        connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_MS,
        read_timeout: int = DEFAULT_READ_TIMEOUT_MS,
    ) -> IPAddress:
        """
        Returns the public IP address reported by a lookup service.

        Args:
            service: The LookupService to query; unrecognized values use IPIFY.
            user_agent: Browser profile sent as User-Agent.
            connect_timeout: Connection timeout in milliseconds; 0 waits forever.
            read_timeout: Read timeout in milliseconds; 0 waits forever.

        Returns:
            An IPv4Address or IPv6Address.

        Raises:
            IpFetchError: If the lookup service cannot be read.
            ResponseParseError: If a JSON service returns an unusable body.
            AddressFormatError: If the reported value is not an IP address.
        """
        service = resolve_service(service)
        body = self.simple_http_get(
            get_lookup_url(service), user_agent, connect_timeout, read_timeout
        )

        if get_response_format(service) is ResponseFormat.JSON:
            literal = _extract_json_field(body, get_address_field(service), service.name)
        else:
            literal = body.strip()

        try:
            address = ipaddress.ip_address(literal)
        except ValueError as exc:
            raise AddressFormatError(
                f"{service.name} reported {literal!r}, which is not an IP address."
            ) from exc

        logger.debug("Current public IP from %s: %s", service.name, address)
        return address


def _seconds(milliseconds: int) -> float | None:
    """Converts a millisecond timeout to seconds; 0 means no timeout."""
    return milliseconds / 1000 if milliseconds else None


def _extract_json_field(body: str, field: str | None, service_name: str) -> str:
    """Parses a JSON object body and returns one of its fields as text."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise ResponseParseError(f"{service_name} returned invalid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ResponseParseError(f"{service_name} returned JSON that is not an object.")
    if field not in data:
        raise ResponseParseError(f"{service_name} response has no {field!r} field.")
    return str(data[field])
