#!/usr/bin/env python3
"""
Java Entry Scanner
------------------
Parses Java code with Tree-sitter and reports the files whose first top-level
class or interface either
- carries one of the configured annotations, or
- implements one of the configured interfaces, directly or through
  interfaces declared elsewhere in the scanned tree.

USAGE EXAMPLES
--------------
# 1) Scan with ./scan-config.json:
java-scanner

# 2) Explicit config and directory:
java-scanner --config ci/scan-config.json --dir services/orders/src/main/java
"""

import argparse
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

from java_scanner.errors import ConfigLoadError
from java_scanner.inputs.config import DEFAULT_CONFIG_PATH, load_config
from java_scanner.outputs.output import write_result
from java_scanner.scanner import JavaFileScanner

logger = logging.getLogger(__name__)

CONFIG_HELP = """\
Config file format (JSON):
{
  "scanDir": "./src/main/java",
  "annotations": ["org.springframework.stereotype.Service", ...],
  "interfaces": ["com.example.MyInterface", ...],
  "excludeAbstract": true
}
"""


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr; stdout carries only the JSON result."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="java-scanner",
        description="Scan Java sources for configured annotations and interfaces.",
        epilog=CONFIG_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    # a flag without its value is ignored, like any argument not listed here
    parser.add_argument(
        "--config",
        nargs="?",
        default=str(DEFAULT_CONFIG_PATH),
        const=str(DEFAULT_CONFIG_PATH),
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH}).",
    )
    parser.add_argument("--dir", dest="scan_dir", nargs="?", help="Directory to scan (overrides config).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    return parser


def main(argv=None) -> int:
    args, ignored = build_parser().parse_known_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    if ignored:
        logger.warning("Ignoring unrecognized arguments: %s", " ".join(ignored))

    try:
        config = load_config(args.config)
    except ConfigLoadError as e:
        logger.error("%s", e)
        return 1

    if args.scan_dir:
        config = config.with_scan_dir(args.scan_dir)

    result = JavaFileScanner(config).scan()
    write_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
