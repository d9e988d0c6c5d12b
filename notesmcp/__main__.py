"""
notesmcp CLI - start the Apple Notes MCP server.

Usage:
    notesmcp [--account NAME] [--timeout SECONDS] [--log-level LEVEL]
"""

import argparse
import logging
import sys

from notesmcp.config import LOG_LEVELS, get_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notesmcp",
        description="Apple Notes tools over the Model Context Protocol (stdio)",
    )
    parser.add_argument("--account", "-a", help="Notes account (default: APPLE_NOTES_ACCOUNT or iCloud)")
    parser.add_argument("--timeout", "-t", type=float, help="AppleScript timeout in seconds")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Log level (stderr)")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = get_config()
    except ValueError as e:
        print(f"notesmcp: {e}", file=sys.stderr)
        sys.exit(2)

    if args.timeout is not None and args.timeout <= 0:
        print("notesmcp: --timeout must be > 0", file=sys.stderr)
        sys.exit(2)

    # stdout carries the MCP protocol; logs go to stderr
    logging.basicConfig(
        level=getattr(logging, args.log_level or config["log_level"]),
        stream=sys.stderr,
    )

    from notesmcp.mcp.server import main as serve

    serve(account=args.account, timeout=args.timeout)


if __name__ == "__main__":
    main()
