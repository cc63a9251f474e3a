"""Derivation of the active validation schema from the current mode flags.

Two switches shape the form:
- whether a scanned network is selected (SSID comes from the selection,
  password only matters for encrypted networks)
- whether static IP is enabled (address fields exist at all)

compose_schema() turns those into an ordered mapping of field name to
FieldRule. It is a pure function of its arguments and builds fresh rules on
every call, so the form can simply recompute it after each edit.
"""

from __future__ import annotations

from dataclasses import dataclass

from constants import MAX_PASSWORD_LENGTH, MAX_SSID_LENGTH
from controller.validators import Validator, is_hostname, is_ip, max_length, optional
from model import WiFiNetwork, WiFiSettings


@dataclass(frozen=True)
class FieldRule:
    """How one active field is checked."""

    required: bool
    validator: Validator
    message: str  # shown when a non-empty value fails the validator


def password_required(selected: WiFiNetwork | None) -> bool:
    """Password is needed unless the selected network is known to be open."""
    return selected is None or not selected.is_open


def compose_schema(
    selected: WiFiNetwork | None,
    settings: WiFiSettings,
) -> dict[str, FieldRule]:
    """Compute the active fields and how to validate them.

    Fields missing from the result are neither required nor validated, and
    whatever they hold can never block a save.

    Args:
        selected: Network picked from a scan, or None for manual entry
        settings: Settings being edited (only its static_ip_config flag is read)

    Returns:
        Ordered mapping of field name to FieldRule, in form display order
    """
    schema: dict[str, FieldRule] = {}

    # A selected network supplies the SSID; it is shown, not edited
    if selected is None:
        schema["ssid"] = FieldRule(
            required=True,
            validator=max_length(MAX_SSID_LENGTH),
            message=f"SSID must be {MAX_SSID_LENGTH} characters or less",
        )

    schema["password"] = FieldRule(
        required=password_required(selected),
        validator=max_length(MAX_PASSWORD_LENGTH),
        message=f"Password must be {MAX_PASSWORD_LENGTH} characters or less",
    )

    schema["hostname"] = FieldRule(
        required=True,
        validator=is_hostname,
        message="Not a valid hostname",
    )

    if settings.static_ip_config:
        for name in ("local_ip", "gateway_ip", "subnet_mask"):
            schema[name] = FieldRule(required=True, validator=is_ip, message="Must be an IP address")
        for name in ("dns_ip_1", "dns_ip_2"):
            schema[name] = FieldRule(required=False, validator=optional(is_ip), message="Must be an IP address")

    return schema
