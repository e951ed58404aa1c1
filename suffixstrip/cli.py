"""Command-line front end for suffixstrip."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .core.config import ConfigManager, ConfigError
from .core.constants import APP_NAME, APP_VERSION
from .core.logging_config import setup_logging, log_query
from .core.psl_loader import load_rules
from .matching.public_suffix import PublicSuffix, PublicSuffixError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 2


def _cmd_strip(args: argparse.Namespace, psl: PublicSuffix, config: ConfigManager) -> int:
    for domain in args.domains:
        result = psl.strip(domain)
        log_query("strip", domain, result)
        print(result)
    return EXIT_OK


def _cmd_suffix(args: argparse.Namespace, psl: PublicSuffix, config: ConfigManager) -> int:
    parts = args.parts
    if parts is None:
        parts = config.settings.get("default_additional_parts", 0)

    for domain in args.domains:
        result = psl.suffix(domain, parts)
        log_query("suffix", domain, result)
        print(result)
    return EXIT_OK


def _cmd_registrable(args: argparse.Namespace, psl: PublicSuffix, config: ConfigManager) -> int:
    for domain in args.domains:
        result = psl.registrable_domain(domain)
        log_query("registrable", domain, result)
        print(result or "")
    return EXIT_OK


def _cmd_info(args: argparse.Namespace, psl: PublicSuffix, config: ConfigManager) -> int:
    counts = psl.rules.to_dict()
    print(f"[{APP_NAME}] rules OK")
    print(f"  config    : {config.config_path}")
    print(f"  psl file  : {config.settings.get('psl_path') or 'bundled'}")
    print(f"  exact     : {counts['exact']}")
    print(f"  wildcards : {counts['wildcards']}")
    print(f"  excluded  : {counts['excluded']}")
    print(f"  custom    : {len(config.custom_rules)}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Find the public suffix boundary of domain names.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("--config", default=None, help="Path to config.json")
    parser.add_argument("--psl", default=None, help="Public Suffix List file to use")
    parser.add_argument("--debug", action="store_true", help="Log debug output to the console")

    subparsers = parser.add_subparsers(dest="command", required=True)

    strip = subparsers.add_parser("strip", help="Strip the public suffix from domains")
    strip.add_argument("domains", nargs="+")
    strip.set_defaults(handler=_cmd_strip)

    suffix = subparsers.add_parser("suffix", help="Print the public suffix with extra labels")
    suffix.add_argument("domains", nargs="+")
    suffix.add_argument(
        "-n", "--parts",
        type=int,
        default=None,
        help="Additional labels to keep left of the suffix (default from config)",
    )
    suffix.set_defaults(handler=_cmd_suffix)

    registrable = subparsers.add_parser("registrable", help="Print the registrable domain")
    registrable.add_argument("domains", nargs="+")
    registrable.set_defaults(handler=_cmd_registrable)

    info = subparsers.add_parser("info", help="Show the loaded rule counts")
    info.set_defaults(handler=_cmd_info)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line entry point.

    Returns:
        Exit code (0 for success, 2 for configuration or query errors)
    """
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config)
        setup_logging(debug_mode=args.debug or config.settings.get("debug_logging", False))

        if args.psl:
            config.update_settings(psl_path=args.psl)

        psl = PublicSuffix(load_rules(config))
        return args.handler(args, psl, config)
    except (ConfigError, PublicSuffixError) as e:
        logger.error("Command '%s' failed: %s", args.command, e)
        print(f"{APP_NAME}: error: {e}", file=sys.stderr)
        return EXIT_ERROR
