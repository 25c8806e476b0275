"""Orchestrator CLI: dispatches to sub-CLIs.

Sub-commands:
  port   Port discovery and admin up/down on one switch
  serve  HTTP facade (/ports, /port, /sysname)

Each sub-CLI configures logging itself (``-v`` or ``LOGURU_LEVEL``).

Examples:
  portops port 192.168.1.1 list

  portops port 192.168.1.1 down gi1/0/5

  portops serve --bind 0.0.0.0 --port 8080
"""

from __future__ import annotations

import sys

from portops import __version__

COMMANDS = {
    "port": ("portops.cli", "Port discovery and admin up/down"),
    "serve": ("portops.api", "HTTP facade for port operations"),
}


def _print_usage() -> None:
    print(f"usage: portops <command> [options]   (portops {__version__})\n")
    print("Available commands:")
    for cmd, (_, desc) in COMMANDS.items():
        print(f"  {cmd:14s}  {desc}")
    print("\nRun 'portops <command> --help' for command-specific options.")


def main() -> None:
    """Main entry point: dispatch to sub-CLI."""
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        _print_usage()
        sys.exit(0 if len(sys.argv) >= 2 else 1)

    command = sys.argv[1]
    if command not in COMMANDS:
        print(f"portops: unknown command '{command}'\n", file=sys.stderr)
        _print_usage()
        sys.exit(1)

    module_path, _ = COMMANDS[command]

    from importlib import import_module

    module = import_module(module_path)
    module.main(sys.argv[2:])


if __name__ == "__main__":
    main()
