"""
lookup/user_agent.py

Responsibility: Provides fixed browser User-Agent strings for outgoing requests.
Does NOT: make HTTP calls.
"""

from __future__ import annotations

import enum


class UserAgent(enum.Enum):
    """Browser / operating system combinations with a known User-Agent string."""

    CHROME_LINUX_X64 = "chrome-linux-x64"
    CHROME_WIN10_X64 = "chrome-win10-x64"
    CHROME_WIN7_X64 = "chrome-win7-x64"
    CHROME_MACOSX = "chrome-macosx"
    FIREFOX_LINUX_X64 = "firefox-linux-x64"
    FIREFOX_WIN10_X64 = "firefox-win10-x64"
    FIREFOX_WIN7_X64 = "firefox-win7-x64"
    FIREFOX_MACOSX = "firefox-macosx"
    IE11_WIN10_X64 = "ie11-win10-x64"
    IE11_WIN8_X64 = "ie11-win8-x64"
    IE11_WIN7_X64 = "ie11-win7-x64"
    IE9_WINVISTA = "ie9-winvista"
    SAFARI_MACOSX = "safari-macosx"
    SAFARI_IOS = "safari-ios"


DEFAULT_USER_AGENT = UserAgent.FIREFOX_LINUX_X64

# NOTE: literals must stay byte-for-byte identical; FIREFOX_LINUX_X64 has
# always carried a Windows Firefox 48 string.
_USER_AGENTS: dict[UserAgent, str] = {
    UserAgent.CHROME_LINUX_X64: (
        "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/56.0.2924.87 Safari/537.36"
    ),
    UserAgent.CHROME_WIN10_X64: (
        "Mozilla/5.0 (Windows NT 10.0; WOW64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/56.0.2924.87 Safari/537.36"
    ),
    UserAgent.CHROME_WIN7_X64: (
        "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/56.0.2924.87 Safari/537.36"
    ),
    UserAgent.CHROME_MACOSX: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_3) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/56.0.2924.87 Safari/537.36"
    ),
    UserAgent.FIREFOX_LINUX_X64: "Mozilla/5.0 (Windows NT 6.1; rv:48.0) Gecko/20100101 Firefox/48.0",
    UserAgent.FIREFOX_WIN10_X64: "Mozilla/5.0 (Windows NT 10.0; WOW64; rv:51.0) Gecko/20100101 Firefox/51.0",
    UserAgent.FIREFOX_WIN7_X64: "Mozilla/5.0 (Windows NT 6.1; WOW64; rv:51.0) Gecko/20100101 Firefox/51.0",
    UserAgent.FIREFOX_MACOSX: "Mozilla/5.0 (Macintosh; Intel Mac OS X 10.12; rv:51.0) Gecko/20100101 Firefox/51.0",
    UserAgent.IE11_WIN10_X64: "Mozilla/5.0 (Windows NT 10.0; WOW64; Trident/7.0; rv:11.0) like Gecko",
    UserAgent.IE11_WIN8_X64: "Mozilla/5.0 (Windows NT 6.3; WOW64; Trident/7.0; rv:11.0) like Gecko",
    UserAgent.IE11_WIN7_X64: "Mozilla/5.0 (Windows NT 6.1; WOW64; Trident/7.0; rv:11.0) like Gecko",
    UserAgent.IE9_WINVISTA: "Mozilla/5.0 (compatible; MSIE 9.0; Windows NT 6.0; Trident/5.0; Trident/5.0)",
    UserAgent.SAFARI_MACOSX: (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_12_3) AppleWebKit/602.4.8 "
        "(KHTML, like Gecko) Version/10.0.3 Safari/602.4.8"
    ),
    UserAgent.SAFARI_IOS: (
        "Mozilla/5.0 (iPad; CPU OS 10_2_1 like Mac OS X) AppleWebKit/602.4.6 "
        "(KHTML, like Gecko) Version/10.0 Mobile/14D27 Safari/602.1"
    ),
}


def resolve_user_agent(profile: object) -> UserAgent:
    """Returns `profile` if it is a UserAgent, otherwise the default profile."""
    if isinstance(profile, UserAgent):
        return profile
    return DEFAULT_USER_AGENT


def get_user_agent(profile: object = DEFAULT_USER_AGENT) -> str:
    """
    Returns the User-Agent string for a browser profile.

    Args:
        profile: A UserAgent member. Anything else falls back to FIREFOX_LINUX_X64.

    Returns:
        The literal User-Agent header value.
    """
    return _USER_AGENTS[resolve_user_agent(profile)]
