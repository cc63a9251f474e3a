"""Command-line interface for netcfg."""

import argparse
import getpass
import json
import sys
from dataclasses import dataclass
from pathlib import Path

from client import DeviceClient, DeviceError
from config import AppConfig, ConfigError, load_config
from controller import EditSession
from model import WiFiEncryptionType, WiFiNetwork
from model.serializers import PayloadError, from_payload, settings_to_summary

NETCFG_VERSION = "0.3.0"


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    config: AppConfig
    check_path: Path | None
    show: bool
    network_ssid: str | None
    network_open: bool


def print_error_box(title: str, *lines: str) -> None:
    """Print a formatted error box to stderr.

    Args:
        title: The error title (will be prefixed with "Error: ")
        *lines: Additional lines to print in the box
    """
    print("=" * 60, file=sys.stderr)
    print(f"Error: {title}", file=sys.stderr)
    print("", file=sys.stderr)
    for line in lines:
        print(line, file=sys.stderr)
    print("=" * 60, file=sys.stderr)


class NetcfgHelpFormatter(argparse.RawDescriptionHelpFormatter):
    """Custom formatter that shows our structured help."""

    def format_help(self) -> str:
        lines = [
            "netcfg - Edit a device's WiFi settings from the terminal.",
            f"Version: {NETCFG_VERSION}",
            "",
            "Core:",
            "  netcfg [--device URL]                 Edit settings in the TUI",
            "  netcfg --show                         Print the device's current settings",
            "  netcfg --check FILE                   Validate a settings JSON file offline",
            "",
            "Connection:",
            "  --device URL                          Device base URL (default http://192.168.4.1)",
            "  --token TOKEN                         Bearer token for the device API",
            "  --username NAME                       Sign in (password is prompted)",
            "  --timeout SECONDS                     Request timeout",
            "  --insecure                            Skip TLS certificate checks",
            "  --config PATH                         Config file (default ~/.config/netcfg/config.json)",
            "",
            "Check Options:",
            "  --network-ssid SSID                   Validate as if this scanned network were selected",
            "  --network-open                        ...and that network is open (no password)",
            "",
            "Environment:",
            "  NETCFG_DEVICE, NETCFG_TOKEN, NETCFG_TIMEOUT override the config file.",
            "",
            "Examples:",
            "",
            "  netcfg --device http://10.0.0.42 --username admin",
            "  netcfg --check settings.json",
            "  netcfg --check settings.json --network-ssid CoffeeShop --network-open",
        ]
        return "\n".join(lines) + "\n"


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for netcfg CLI."""
    parser = argparse.ArgumentParser(
        prog="netcfg",
        formatter_class=NetcfgHelpFormatter,
        add_help=True,
    )
    parser.add_argument("--version", action="version", version=f"netcfg {NETCFG_VERSION}")

    # Connection options
    parser.add_argument("--device", metavar="URL", help=argparse.SUPPRESS)
    parser.add_argument("--token", metavar="TOKEN", help=argparse.SUPPRESS)
    parser.add_argument("--username", metavar="NAME", help=argparse.SUPPRESS)
    parser.add_argument("--timeout", metavar="SECONDS", type=float, help=argparse.SUPPRESS)
    parser.add_argument("--insecure", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--config", metavar="PATH", help=argparse.SUPPRESS)

    # Standalone actions
    parser.add_argument("--show", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--check", metavar="FILE", help=argparse.SUPPRESS)
    parser.add_argument("--network-ssid", metavar="SSID", help=argparse.SUPPRESS)
    parser.add_argument("--network-open", action="store_true", help=argparse.SUPPRESS)

    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments and resolve the effective config.

    Returns:
        ParsedArgs with the merged config and the requested action.
    """
    parser = create_parser()
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    try:
        config = load_config(Path(args.config).expanduser() if args.config else None)
    except ConfigError as e:
        print_error_box("Invalid config file", str(e))
        sys.exit(1)

    config = config.with_overrides(
        device_url=args.device,
        token=args.token,
        username=args.username,
        timeout=args.timeout,
        verify_tls=False if args.insecure else None,
    )

    if args.network_open and not args.network_ssid:
        parser.error("--network-open requires --network-ssid")

    return ParsedArgs(
        config=config,
        check_path=Path(args.check) if args.check else None,
        show=args.show,
        network_ssid=args.network_ssid,
        network_open=args.network_open,
    )


def check_file(path: Path, network_ssid: str | None = None, network_open: bool = False) -> int:
    """Validate a settings file and print any problems.

    Returns:
        Process exit code: 0 if valid, 1 otherwise
    """
    try:
        settings = from_payload(json.loads(path.read_text()))
    except (OSError, ValueError) as e:
        print_error_box(f"Cannot read {path}", str(e))
        return 1
    except PayloadError as e:
        print_error_box(f"Invalid settings in {path}", str(e))
        return 1

    selected = None
    if network_ssid is not None:
        selected = WiFiNetwork(
            ssid=network_ssid,
            encryption_type=WiFiEncryptionType.OPEN if network_open else WiFiEncryptionType.WPA2_PSK,
        )

    result = EditSession(settings, selected).validate()
    if result.ok:
        print(f"{path}: OK")
        return 0
    for name, message in result.messages().items():
        print(f"{path}: {name}: {message}")
    return 1


def connect(config: AppConfig) -> DeviceClient:
    """Create a client and sign in if a username was given."""
    client = DeviceClient(
        config.device_url,
        token=config.token,
        timeout=config.timeout,
        verify_tls=config.verify_tls,
    )
    if config.username and not config.token:
        password = getpass.getpass(f"Password for {config.username}@{config.device_url}: ")
        client.sign_in(config.username, password)
    return client


def show_settings(client: DeviceClient) -> int:
    """Print the device's settings, password redacted."""
    settings = client.get_wifi_settings()
    print(settings_to_summary(settings))
    return 0


def main() -> None:
    """Main entry point."""
    args = parse_args()

    if args.check_path is not None:
        sys.exit(check_file(args.check_path, args.network_ssid, args.network_open))

    try:
        client = connect(args.config)
        if args.show:
            sys.exit(show_settings(client))
    except DeviceError as e:
        print_error_box("Device request failed", str(e), "", f"Device: {args.config.device_url}")
        sys.exit(1)

    from app import WiFiSettingsApp

    app = WiFiSettingsApp(client)
    app.run()

    if app.saved:
        print("Settings saved. The device may reconnect to the new network.")
    else:
        print("No changes saved.")


if __name__ == "__main__":
    main()
