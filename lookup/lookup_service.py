"""
lookup/lookup_service.py

Responsibility: Defines the supported public IP lookup services and the static
tables describing each one (endpoint URL, response format, address field).
Does NOT: make HTTP calls or parse response bodies.
"""

from __future__ import annotations

import enum
import logging

import httpx

from exceptions import LookupUrlError

logger = logging.getLogger(__name__)


class LookupService(enum.Enum):
    """Supported public IP lookup services."""

    IPIFY = "ipify"
    WTFISMYIP = "wtfismyip"
    IPINFO_DOT_IO = "ipinfo.io"
    ICANHAZIP = "icanhazip"
    TRACKIP = "trackip"


class ResponseFormat(enum.Enum):
    """Type of response body returned by an HTTP endpoint."""

    JSON = "json"
    HTML = "html"
    TEXT = "text"
    XML = "xml"


DEFAULT_LOOKUP_SERVICE = LookupService.IPIFY

# ---------------------------------------------------------------------------
# Static tables, one entry per LookupService
# ---------------------------------------------------------------------------

_LOOKUP_URLS: dict[LookupService, str] = {
    LookupService.IPIFY: "https://api.ipify.org/?format=json",
    LookupService.WTFISMYIP: "https://wtfismyip.com/json",
    LookupService.IPINFO_DOT_IO: "https://ipinfo.io/json",
    LookupService.ICANHAZIP: "https://icanhazip.com",
    LookupService.TRACKIP: "https://www.trackip.net/ip?json",
}

_RESPONSE_FORMATS: dict[LookupService, ResponseFormat] = {
    LookupService.IPIFY: ResponseFormat.JSON,
    LookupService.WTFISMYIP: ResponseFormat.JSON,
    LookupService.IPINFO_DOT_IO: ResponseFormat.JSON,
    LookupService.ICANHAZIP: ResponseFormat.TEXT,
    LookupService.TRACKIP: ResponseFormat.JSON,
}

# NOTE: field names are defined by each provider's API and differ in casing.
_ADDRESS_FIELDS: dict[LookupService, str | None] = {
    LookupService.IPIFY: "ip",
    LookupService.WTFISMYIP: "YourFuckingIPAddress",
    LookupService.IPINFO_DOT_IO: "ip",
    LookupService.ICANHAZIP: None,
    LookupService.TRACKIP: "IP",
}


def resolve_service(service: object) -> LookupService:
    """
    Returns `service` if it is a LookupService, otherwise the default service.

    Unrecognized values never raise; they are treated as IPIFY.
    """
    if isinstance(service, LookupService):
        return service
    logger.debug("Unrecognized lookup service %r, using %s", service, DEFAULT_LOOKUP_SERVICE.name)
    return DEFAULT_LOOKUP_SERVICE


def get_lookup_url(service: object = DEFAULT_LOOKUP_SERVICE) -> str:
    """
    Returns the endpoint URL of a public IP lookup service.

    Args:
        service: A LookupService member. Anything else falls back to IPIFY.

    Returns:
        The absolute URL of the lookup endpoint.

    Raises:
        LookupUrlError: If the endpoint URL cannot be parsed.
    """
    url = _LOOKUP_URLS[resolve_service(service)]
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        raise LookupUrlError(f"Malformed lookup URL {url!r}: {exc}") from exc
    return url


def get_response_format(service: object = DEFAULT_LOOKUP_SERVICE) -> ResponseFormat:
    """Returns the response format of a lookup service (JSON unless told otherwise)."""
    return _RESPONSE_FORMATS[resolve_service(service)]


def get_address_field(service: object = DEFAULT_LOOKUP_SERVICE) -> str | None:
    """Returns the JSON field holding the address, or None for text services."""
    return _ADDRESS_FIELDS[resolve_service(service)]
