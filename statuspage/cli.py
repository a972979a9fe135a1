#!/usr/bin/env python3
"""Command-line entry point for the status page client.

Usage:
    statuspage components [name] [status]
    statuspage incidents [open status message name | update status message]

Configuration is read from ~/.statuspage.yml:

    oauth: <api token>
    base_url: https://api.statuspage.io/v1/pages/
    page: <page id>

Environment Variables:
    STATUSPAGE_CONFIG: Alternative config file path
    STATUSPAGE_OAUTH: API token, overrides the config file
    STATUSPAGE_LOG_LEVEL: Logging level for diagnostics (default WARNING)
"""
import argparse
import logging
import os
import sys
from enum import Enum
from typing import List, Optional, Sequence

from statuspage.common import (
    ComponentNotFoundError,
    ComponentRegistry,
    ConfigError,
    StatusPageClient,
    TransportError,
    UsageError,
    ValidationError,
    load_config,
)
from statuspage.components import components
from statuspage.incidents import incidents

log = logging.getLogger(__name__)


class Command(Enum):
    COMPONENTS = "components"
    INCIDENTS = "incidents"
    UNKNOWN = None

    @classmethod
    def parse(cls, word: Optional[str]) -> "Command":
        try:
            return cls(word)
        except ValueError:
            return cls.UNKNOWN


def dispatch(client: StatusPageClient, registry: ComponentRegistry, args: Sequence[str]) -> None:
    """Run the command named by the first argument with the rest as its arguments."""
    args = list(args)
    command = Command.parse(args.pop(0) if args else None)

    if command is Command.COMPONENTS:
        components(client, registry, *args)
    elif command is Command.INCIDENTS:
        incidents(client, *args)
    else:
        print("Command not recognized")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="statuspage",
        description="Read and update a hosted status page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  statuspage components
  statuspage components web major
  statuspage incidents open identified "investigating root cause" "DB latency"
  statuspage incidents update monitoring "fix deployed"
        """,
    )
    parser.add_argument("command", nargs="?", help="components or incidents")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Command arguments")
    return parser


def _configure_logging() -> None:
    level = os.getenv("STATUSPAGE_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main function."""
    argv = sys.argv[1:] if argv is None else list(argv)
    parsed, unknown = build_parser().parse_known_args(argv)
    _configure_logging()

    if unknown:
        # A leading option-like word is just another unrecognized command.
        args = argv
    else:
        args = [parsed.command] + parsed.args if parsed.command else []

    try:
        config = load_config()
    except ConfigError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1

    client = StatusPageClient(config)
    try:
        registry = ComponentRegistry.build(client)
        dispatch(client, registry, args)
    except ComponentNotFoundError as e:
        log.debug("%s", e)
        print("Invalid component name")
        return 1
    except ValidationError as e:
        print(f"Validation Error: {e}", file=sys.stderr)
        return 1
    except UsageError as e:
        print(f"Usage Error: {e}", file=sys.stderr)
        return 2
    except TransportError as e:
        print(f"Transport Error: {e}", file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
