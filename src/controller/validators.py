"""Field validators for WiFi settings.

Every validator is a pure predicate ``(value: str) -> bool``. They never
raise: anything that is not a matching string is simply invalid.
"""

from __future__ import annotations

import ipaddress
import re
from typing import Callable

from constants import MAX_HOSTNAME_LENGTH, MAX_LABEL_LENGTH

Validator = Callable[[str], bool]

_LABEL_RE = re.compile(r'^[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?$')


def is_ip(value: str) -> bool:
    """Check value is a dotted-quad IPv4 address literal.

    Syntax only, no reachability check. The device only stores IPv4
    addresses, so IPv6 literals are rejected, as are CIDR suffixes and
    surrounding whitespace.

    Args:
        value: String value from input field

    Returns:
        True if value parses as an IPv4 address
    """
    if not isinstance(value, str) or value != value.strip():
        return False
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_hostname(value: str) -> bool:
    """Check hostname format per RFC 1123.

    Valid hostnames:
    - One or more dot-separated labels, 253 characters max in total
    - Each label 1-63 characters, alphanumeric and hyphens
    - Labels start and end with alphanumeric
    - A single trailing dot is allowed (fully qualified form)

    Args:
        value: String value from input field

    Returns:
        True if value is a valid hostname
    """
    if not isinstance(value, str) or not value:
        return False
    if value.endswith("."):
        value = value[:-1]
    if not value or len(value) > MAX_HOSTNAME_LENGTH:
        return False
    return all(
        len(label) <= MAX_LABEL_LENGTH and _LABEL_RE.match(label)
        for label in value.split(".")
    )


def max_length(limit: int) -> Validator:
    """Build a validator accepting strings of at most ``limit`` characters."""

    def check(value: str) -> bool:
        return isinstance(value, str) and len(value) <= limit

    return check


def optional(validator: Validator) -> Validator:
    """Wrap a validator so that an empty value always passes.

    Used for fields that are checked when filled in but never mandatory,
    like the DNS servers.
    """

    def check(value: str) -> bool:
        if value == "" or value is None:
            return True
        return validator(value)

    return check
