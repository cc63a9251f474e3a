"""Shared limits for WiFi settings fields."""

MAX_SSID_LENGTH = 32
MAX_PASSWORD_LENGTH = 64
MAX_HOSTNAME_LENGTH = 253
MAX_LABEL_LENGTH = 63

# Shown in place of a password anywhere it could be printed or logged
REDACTED = "********"
