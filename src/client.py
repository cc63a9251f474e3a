"""REST client for the device's WiFi settings API."""

from __future__ import annotations

import logging
import time
from typing import Any

import requests

from model import WiFiNetwork, WiFiSettings
from model.serializers import PayloadError, from_payload, networks_from_payload, to_payload

log = logging.getLogger(__name__)

WIFI_SETTINGS_PATH = "/rest/wifiSettings"
SCAN_NETWORKS_PATH = "/rest/scanNetworks"
LIST_NETWORKS_PATH = "/rest/listNetworks"
SIGN_IN_PATH = "/rest/signIn"

DEFAULT_TIMEOUT = 10.0


class DeviceError(Exception):
    """Raised when the device can't be reached or answers with an error."""


class DeviceAuthError(DeviceError):
    """Raised when the device rejects our credentials or token."""


class DeviceUnavailable(DeviceError):
    """Raised on connection failures and timeouts."""


class DeviceClient:
    """Talks to one device over HTTP.

    Example usage:
        client = DeviceClient("http://192.168.4.1", token=token)
        settings = client.get_wifi_settings()
        settings.hostname = "device-01"
        client.update_wifi_settings(to_payload(settings))
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        verify_tls: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.verify = verify_tls
        self.session.headers["Accept"] = "application/json"
        if token:
            self.set_token(token)

    def set_token(self, token: str) -> None:
        """Use a bearer token for all following requests."""
        self.session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        url = f"{self.base_url}{path}"
        log.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except (requests.ConnectionError, requests.Timeout) as e:
            raise DeviceUnavailable(f"Cannot reach {self.base_url}: {e}") from e
        except requests.RequestException as e:
            raise DeviceError(f"Request to {url} failed: {e}") from e

        if response.status_code in (401, 403):
            raise DeviceAuthError(f"{method} {path}: not authorized ({response.status_code})")
        if response.status_code >= 400:
            raise DeviceError(f"{method} {path}: HTTP {response.status_code}")
        return response

    def _json(self, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise DeviceError(f"Device sent invalid JSON: {e}") from e

    # =========================================================================
    # Authentication
    # =========================================================================

    def sign_in(self, username: str, password: str) -> str:
        """Exchange credentials for an access token and start using it."""
        response = self._request("POST", SIGN_IN_PATH, json={"username": username, "password": password})
        token = self._json(response).get("access_token")
        if not token:
            raise DeviceAuthError("Sign-in response had no access_token")
        self.set_token(token)
        log.info(f"Signed in to {self.base_url} as {username}")
        return token

    # =========================================================================
    # WiFi Settings
    # =========================================================================

    def get_wifi_settings(self) -> WiFiSettings:
        """Load the device's current settings."""
        response = self._request("GET", WIFI_SETTINGS_PATH)
        try:
            return from_payload(self._json(response))
        except PayloadError as e:
            raise DeviceError(f"Unexpected settings payload: {e}") from e

    def update_wifi_settings(self, payload: dict[str, Any] | WiFiSettings) -> WiFiSettings:
        """Persist settings and return what the device stored."""
        if isinstance(payload, WiFiSettings):
            payload = to_payload(payload)
        response = self._request("POST", WIFI_SETTINGS_PATH, json=payload)
        log.info(f"Saved WiFi settings to {self.base_url}")
        try:
            return from_payload(self._json(response))
        except PayloadError as e:
            raise DeviceError(f"Unexpected settings payload: {e}") from e

    # =========================================================================
    # Network Discovery
    # =========================================================================

    def scan_networks(self) -> None:
        """Ask the device to start a network scan."""
        self._request("GET", SCAN_NETWORKS_PATH)

    def list_networks(self) -> list[WiFiNetwork] | None:
        """Fetch scan results, or None while the scan is still running."""
        response = self._request("GET", LIST_NETWORKS_PATH)
        if response.status_code == 202:
            return None
        try:
            return networks_from_payload(self._json(response))
        except PayloadError as e:
            raise DeviceError(f"Unexpected network list: {e}") from e

    def discover_networks(self, attempts: int = 10, interval: float = 1.0) -> list[WiFiNetwork]:
        """Start a scan and poll until the device has results."""
        self.scan_networks()
        for _ in range(attempts):
            networks = self.list_networks()
            if networks is not None:
                log.info(f"Scan found {len(networks)} networks")
                return networks
            time.sleep(interval)
        raise DeviceUnavailable(f"Network scan did not finish after {attempts} attempts")
