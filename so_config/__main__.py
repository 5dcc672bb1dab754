"""Command line entry point for managing the so configuration."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import ConfigError, ConfigStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage the so configuration file")
    parser.add_argument(
        "--set-api-key",
        metavar="KEY",
        help="Store a Stack Exchange API key.",
    )
    parser.add_argument(
        "--print-config-path",
        action="store_true",
        help="Print the location of the configuration file and exit.",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        help="Use this directory instead of the per-user configuration directory.",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        store = ConfigStore(args.config_dir)

        if args.print_config_path:
            sys.stdout.write(f"{store.path}\n")
            return 0

        if args.set_api_key is not None:
            store.set_api_key(args.set_api_key)
            return 0

        sys.stdout.write(store.user_config().to_yaml())
    except ConfigError as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
