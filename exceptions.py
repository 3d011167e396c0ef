"""
exceptions.py

Responsibility: Defines all custom exception classes used across the application.
Does NOT: contain business logic, logging, or HTTP handling.
"""

from __future__ import annotations


class PublicIpError(Exception):
    """
    Base class for every failure raised while resolving the public IP address.

    Callers that do not care which step failed can catch this single type.
    """


class IpFetchError(PublicIpError):
    """
    Raised by IpService when a lookup endpoint cannot be read.

    This covers DNS resolution failures, connect/read timeouts, connection
    resets and non-2xx responses from the upstream lookup service.
    """


class ResponseParseError(PublicIpError):
    """
    Raised when a JSON lookup service returns a body that is not a JSON object
    or that lacks the service's address field.
    """


class AddressFormatError(PublicIpError):
    """
    Raised when the literal extracted from a lookup response is not a valid
    IPv4 or IPv6 address.
    """


class LookupUrlError(PublicIpError):
    """
    Raised by get_lookup_url() if an endpoint URL cannot be constructed.
    """
