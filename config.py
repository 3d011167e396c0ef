"""
config.py

Responsibility: Builds the lookup settings from environment variables,
falling back to defaults for anything missing or unusable.
Does NOT: make HTTP calls or configure logging handlers.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from lookup.lookup_service import DEFAULT_LOOKUP_SERVICE, LookupService
from lookup.user_agent import DEFAULT_USER_AGENT, UserAgent
from services.ip_service import DEFAULT_CONNECT_TIMEOUT_MS, DEFAULT_READ_TIMEOUT_MS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LookupConfig:
    """Settings for a single public IP lookup."""

    service: LookupService = DEFAULT_LOOKUP_SERVICE
    user_agent: UserAgent = DEFAULT_USER_AGENT
    # Milliseconds
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT_MS
    read_timeout: int = DEFAULT_READ_TIMEOUT_MS
    log_level: str = "INFO"


def _enum_member(enum_cls, raw: str | None, default, var: str):
    if not raw:
        return default
    try:
        return enum_cls[raw.strip().upper()]
    except KeyError:
        logger.warning("⚠️ Unknown %s=%r, using %s", var, raw, default.name)
        return default


def _timeout_ms(raw: str | None, default: int, var: str) -> int:
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("⚠️ %s=%r is not an integer, using %s", var, raw, default)
        return default
    if value < 0:
        logger.warning("⚠️ %s must not be negative, using %s", var, default)
        return default
    return value


def load_log_level(environ: Mapping[str, str] | None = None) -> str:
    """Returns the LOG_LEVEL setting, upper-cased, defaulting to INFO."""
    env = os.environ if environ is None else environ
    return (env.get("LOG_LEVEL") or "INFO").upper()


def load_config(environ: Mapping[str, str] | None = None) -> LookupConfig:
    """
    Reads lookup settings from the environment.

    Recognised variables: PUBLIC_IP_SERVICE, PUBLIC_IP_USER_AGENT,
    PUBLIC_IP_CONNECT_TIMEOUT_MS, PUBLIC_IP_READ_TIMEOUT_MS, LOG_LEVEL.
    Service and user agent are matched by enum name, case-insensitively.
    A timeout of 0 means no timeout.

    Args:
        environ: Mapping to read from; defaults to os.environ.

    Returns:
        A LookupConfig with invalid values replaced by defaults.
    """
    env = os.environ if environ is None else environ
    return LookupConfig(
        service=_enum_member(
            LookupService, env.get("PUBLIC_IP_SERVICE"), DEFAULT_LOOKUP_SERVICE, "PUBLIC_IP_SERVICE"
        ),
        user_agent=_enum_member(
            UserAgent, env.get("PUBLIC_IP_USER_AGENT"), DEFAULT_USER_AGENT, "PUBLIC_IP_USER_AGENT"
        ),
        connect_timeout=_timeout_ms(
            env.get("PUBLIC_IP_CONNECT_TIMEOUT_MS"), DEFAULT_CONNECT_TIMEOUT_MS, "PUBLIC_IP_CONNECT_TIMEOUT_MS"
        ),
        read_timeout=_timeout_ms(
            env.get("PUBLIC_IP_READ_TIMEOUT_MS"), DEFAULT_READ_TIMEOUT_MS, "PUBLIC_IP_READ_TIMEOUT_MS"
        ),
        log_level=load_log_level(env),
    )
