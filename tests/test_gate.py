"""Tests for validating settings against a schema."""

from controller.gate import FieldError, InvalidFormat, MissingRequired, ValidationResult, validate
from controller.schema import compose_schema
from model import WiFiSettings


def check(settings, selected=None):
    return validate(compose_schema(selected, settings), settings)


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_is_ok(self):
        """No errors means ok and truthy."""
        result = ValidationResult()
        assert result.ok is True
        assert bool(result) is True

    def test_with_errors_not_ok(self):
        """Any error means not ok and falsy."""
        result = ValidationResult({"ssid": MissingRequired("ssid", label="SSID")})
        assert result.ok is False
        assert bool(result) is False
        assert result.messages() == {"ssid": "SSID is required"}

    def test_missing_without_label(self):
        """Field name is used when no label is known."""
        assert MissingRequired("ssid").message == "ssid is required"

    def test_base_error_message(self):
        """The base error has a generic message of its own."""
        assert FieldError("local_ip").message == "local_ip is invalid"


class TestValidate:
    """Tests for validate function."""

    def test_valid_settings_pass(self, valid_settings):
        """A filled-in manual DHCP form passes."""
        assert check(valid_settings).ok

    def test_empty_form_reports_all_required(self):
        """Every required field is reported at once, not just the first."""
        result = check(WiFiSettings())
        assert set(result.errors) == {"ssid", "password", "hostname"}
        assert all(isinstance(e, MissingRequired) for e in result.errors.values())

    def test_missing_message_uses_label(self):
        """Missing message names the field by its label."""
        result = check(WiFiSettings(ssid="x", password="y"))
        assert result.messages() == {"hostname": "Hostname is required"}

    def test_ssid_too_long(self, valid_settings):
        """A 33-character SSID fails with the length message."""
        valid_settings.ssid = "s" * 33
        result = check(valid_settings)
        assert isinstance(result.errors["ssid"], InvalidFormat)
        assert result.messages()["ssid"] == "SSID must be 32 characters or less"

    def test_ssid_at_limit(self, valid_settings):
        """A 32-character SSID passes."""
        valid_settings.ssid = "s" * 32
        assert check(valid_settings).ok

    def test_password_too_long(self, valid_settings):
        """A 65-character password fails."""
        valid_settings.password = "p" * 65
        assert check(valid_settings).messages() == {
            "password": "Password must be 64 characters or less"
        }

    def test_invalid_hostname(self, valid_settings):
        """Hostname format is checked."""
        valid_settings.hostname = "bad_host"
        assert check(valid_settings).messages() == {"hostname": "Not a valid hostname"}

    def test_whitespace_counts_as_present(self, valid_settings):
        """Whitespace is a value: not missing, but checked by the validator."""
        valid_settings.hostname = " "
        result = check(valid_settings)
        assert isinstance(result.errors["hostname"], InvalidFormat)

    def test_static_fields_ignored_when_disabled(self, valid_settings):
        """Garbage in inactive static fields can't block a save."""
        valid_settings.local_ip = "not-an-ip"
        valid_settings.gateway_ip = "also bad"
        assert check(valid_settings).ok

    def test_static_fields_required_when_enabled(self, valid_settings):
        """Enabling static IP makes the address fields required."""
        valid_settings.static_ip_config = True
        result = check(valid_settings)
        assert set(result.errors) == {"local_ip", "gateway_ip", "subnet_mask"}

    def test_static_invalid_address(self, static_settings):
        """Malformed addresses are reported with the IP message."""
        static_settings.gateway_ip = "192.168.1"
        assert check(static_settings).messages() == {"gateway_ip": "Must be an IP address"}

    def test_dns_optional(self, static_settings):
        """Empty DNS fields pass, malformed ones don't."""
        static_settings.dns_ip_1 = ""
        static_settings.dns_ip_2 = ""
        assert check(static_settings).ok
        static_settings.dns_ip_2 = "dns"
        assert set(check(static_settings).errors) == {"dns_ip_2"}

    def test_selected_network_skips_ssid(self, secured_network):
        """With a selected network the SSID field is never looked at."""
        settings = WiFiSettings(ssid="", password="secret", hostname="device")
        assert check(settings, secured_network).ok

    def test_open_network_allows_empty_password(self, open_network):
        """Empty password is fine for an open network."""
        settings = WiFiSettings(hostname="device")
        assert check(settings, open_network).ok

    def test_open_network_still_checks_length(self, open_network):
        """A too-long password is rejected even when not required."""
        settings = WiFiSettings(hostname="device", password="p" * 65)
        assert set(check(settings, open_network).errors) == {"password"}

    def test_secured_network_requires_password(self, secured_network):
        """Encrypted networks need a password."""
        settings = WiFiSettings(hostname="device")
        assert set(check(settings, secured_network).errors) == {"password"}

    def test_settings_not_modified(self, static_settings):
        """Validation never changes the settings."""
        before = static_settings.copy()
        static_settings.local_ip = "x"
        before.local_ip = "x"
        check(static_settings)
        assert static_settings == before

    def test_errors_in_schema_order(self):
        """Errors follow the form's display order."""
        result = check(WiFiSettings(static_ip_config=True))
        assert list(result.errors) == [
            "ssid", "password", "hostname", "local_ip", "gateway_ip", "subnet_mask",
        ]


class TestModeToggles:
    """Validation across static IP toggles."""

    def test_leftover_invalid_address_ignored(self, valid_settings):
        """Invalid leftovers don't block once static IP is turned off."""
        valid_settings.static_ip_config = True
        valid_settings.local_ip = "999.999.999.999"
        assert "local_ip" in check(valid_settings).errors

        valid_settings.static_ip_config = False
        assert check(valid_settings).ok
        assert valid_settings.local_ip == "999.999.999.999"

    def test_enabling_requires_local_ip(self, valid_settings):
        """Enabling static IP with an empty local IP reports it missing."""
        valid_settings.static_ip_config = True
        assert isinstance(check(valid_settings).errors["local_ip"], MissingRequired)

        valid_settings.local_ip = "10.0.0.5"
        assert "local_ip" not in check(valid_settings).errors

    def test_dns_not_an_ip(self, static_settings):
        """A non-empty DNS value must be an address."""
        static_settings.dns_ip_1 = "not-an-ip"
        assert isinstance(check(static_settings).errors["dns_ip_1"], InvalidFormat)
