"""CLI entry point for switch port operations, standalone-capable.

Examples:
  # Switch identity (read community, default: public)
  portops port 192.168.1.1 sysname

  # List ports with their ifAdminStatus OIDs
  portops port 192.168.1.1 list --json

  # Shut down / bring up a port by name (write community, default: private)
  portops port --community private 192.168.1.1 down gi1/0/5
  portops port 192.168.1.1 up gi1/0/5

  # Raw OID addressing, as used by the HTTP /port route
  portops port 192.168.1.1 set .1.3.6.1.2.1.2.2.1.7.16793600 off
"""

from __future__ import annotations

import argparse
import json
import os
import sys

from loguru import logger
from tabulate import tabulate

from portops import configure_logging
from portops.config import PortOpsConfig
from portops.exceptions import SwitchError
from portops.models import PortState
from portops.session import SwitchSession, open_session

CONTROL_COMMANDS = ("up", "down", "set")


def cmd_sysname(session: SwitchSession, args: argparse.Namespace) -> None:
    """Print the switch's sysName."""
    sysname = session.get_sysname()
    if args.json:
        print(json.dumps({"switch": session.address, "sysname": sysname}))
    else:
        print(sysname)


def cmd_list(session: SwitchSession, args: argparse.Namespace) -> None:
    """List ports and their control OIDs."""
    ports = session.enumerate_ports()
    if args.json:
        print(json.dumps([p.model_dump(by_alias=True) for p in ports], indent=2))
        return
    if not ports:
        print(f"No interfaces reported by {session.address}")
        return
    rows = [[p.index, p.name, p.control_oid] for p in ports]
    print(tabulate(rows, headers=["ifIndex", "Port", "OID"], tablefmt="simple"))


def cmd_up_down(session: SwitchSession, args: argparse.Namespace) -> None:
    """Bring a named port up or down."""
    session.enumerate_ports()
    ack = session.set_port_state(args.name, args.command)
    _print_ack(ack.message, ack.model_dump(mode="json"), args)


def cmd_set(session: SwitchSession, args: argparse.Namespace) -> None:
    """Set a port up or down by raw ifAdminStatus OID."""
    ack = session.set_admin_status(args.oid, args.ops)
    _print_ack(ack.message, ack.model_dump(mode="json"), args)


def _print_ack(message: str, payload: dict, args: argparse.Namespace) -> None:
    if args.json:
        print(json.dumps({"code": 200, "message": message, **payload}))
    else:
        print(message)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for port operations."""
    parser = argparse.ArgumentParser(
        prog="portops-port",
        description="Discover switch ports and set them administratively up/down via SNMPv2c",
    )
    parser.add_argument("host", help="Switch IP address or hostname")
    parser.add_argument(
        "-c",
        "--community",
        help="SNMP community (default: public for sysname/list, private for up/down/set)",
    )
    parser.add_argument("--snmp-port", type=int, help="SNMP UDP port (default: 161)")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("--retries", type=int, help="Transport retries per request")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of tables")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("sysname", help="Show the switch's sysName")
    subparsers.add_parser("list", help="List ports and their control OIDs")

    up = subparsers.add_parser("up", help="Bring a port administratively up")
    up.add_argument("name", help="Port name as listed by 'list'")

    down = subparsers.add_parser("down", help="Bring a port administratively down")
    down.add_argument("name", help="Port name as listed by 'list'")

    set_parser = subparsers.add_parser("set", help="Set a port by raw ifAdminStatus OID")
    set_parser.add_argument("oid", help="Control OID, e.g. .1.3.6.1.2.1.2.2.1.7.4")
    set_parser.add_argument("ops", choices=["on", "off"], help="on = up, off = down")

    return parser


def main(args: list[str] | None = None) -> None:
    """Main entry point for the port CLI."""
    parser = build_parser()
    parsed = parser.parse_args(args)

    if not parsed.command:
        parser.print_help()
        sys.exit(1)

    configure_logging(level="DEBUG" if parsed.verbose else os.getenv("LOGURU_LEVEL", "WARNING"))

    config = PortOpsConfig.from_env(port=parsed.snmp_port, timeout=parsed.timeout, retries=parsed.retries)
    community = parsed.community
    if community is None:
        community = config.write_community if parsed.command in CONTROL_COMMANDS else config.read_community

    handlers = {
        "sysname": cmd_sysname,
        "list": cmd_list,
        "up": cmd_up_down,
        "down": cmd_up_down,
        "set": cmd_set,
    }

    try:
        with open_session(parsed.host, community, config) as session:
            handlers[parsed.command](session, parsed)
    except SwitchError as e:
        logger.debug(f"{parsed.command} on {parsed.host} failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
