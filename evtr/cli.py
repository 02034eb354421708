"""Command-line handling run before the interface starts."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Sequence

from evtr import config

_VERSION = "0.1.0"


class StartupAction(Enum):
    """What to do after the command line has been handled."""

    RUN = "run"
    EXIT = "exit"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evtr",
        description="A terminal UI for inspecting Linux evdev input devices",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {_VERSION}")
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Read config from PATH, or write generated config to PATH",
    )
    parser.add_argument(
        "--generate-config",
        action="store_true",
        help="Write a starter config file to the resolved config path",
    )
    parser.add_argument(
        "--print-config-path",
        action="store_true",
        help="Print the config path that --generate-config would use",
    )
    parser.add_argument(
        "--print-default-config",
        action="store_true",
        help="Print the default config TOML to stdout",
    )
    return parser


def initialize(argv: Sequence[str] | None = None) -> StartupAction:
    """Handle the command line and install the runtime configuration."""
    args = _parser().parse_args(argv)

    if args.generate_config:
        target = config.resolved_write_path(args.config)
        config.write_default_config(target)
        print(f"wrote default config to {target}")
        return StartupAction.EXIT

    if args.print_config_path:
        print(config.resolved_write_path(args.config))
        return StartupAction.EXIT

    if args.print_default_config:
        sys.stdout.write(config.render_default_config())
        return StartupAction.EXIT

    config.install_runtime(config.load(args.config))
    return StartupAction.RUN