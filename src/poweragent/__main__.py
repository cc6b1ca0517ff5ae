"""
Command line entry point: load `config.properties` and show the result.

Usage:
    python -m poweragent [--root DIR] [--check METHOD ...]
"""

import sys
import argparse
from typing import List, Optional

import yaml

from .config.parser import load_config_or_exit
from .logging_config import configure_logging
from .models.agent_properties import LoggerLevel
from .tools.filesystem import LocalFileSystem


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="poweragent",
        description="Load the power agent's config.properties and print the effective settings."
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Directory containing config.properties (default: current directory)"
    )
    parser.add_argument(
        "--check",
        nargs="+",
        default=[],
        metavar="METHOD",
        help="Fully qualified method names to test against the filter prefixes"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    # Handler must exist before loading so a fatal diagnostic reaches stderr
    configure_logging(LoggerLevel.INFO)
    properties = load_config_or_exit(LocalFileSystem(args.root))
    configure_logging(properties.logger_level)

    sys.stdout.write(yaml.safe_dump(properties.to_dict(), default_flow_style=False, sort_keys=False))

    for method_name in args.check:
        verdict = "filtered" if properties.filters_method(method_name) else "profiled"
        sys.stdout.write(f"{method_name}: {verdict}\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
