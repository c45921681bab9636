#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse

from hookscan.__version__ import __version__
from hookscan.interfaces.cli.commands.analyze_cli import cmd_analyze


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="hookscan",
        description="hookscan - CLI tool for analyzing React state management patterns",
        epilog="Examples:\n"
        "  hookscan analyze src                       # Summary and top 10 components\n"
        "  hookscan analyze src -v                    # Include per-line details\n"
        "  hookscan analyze src -o state.json         # Also save the JSON result\n"
        "  hookscan analyze src --config hookscan.yaml  # Extra patterns / exclusions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "--log-level",
        default=None,
        help="logging level for diagnostics on stderr (default: from config, WARNING)",
    )

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'hookscan <command> --help' for command-specific help)",
    )

    # analyze: Scan a directory
    s = sub.add_parser("analyze", help="Analyze React code in the specified path")
    s.add_argument("path", help="directory path to analyze")
    s.add_argument("-o", "--output", metavar="FILE", help="output file path for JSON results")
    s.add_argument("-v", "--verbose", action="store_true", help="verbose output")
    s.add_argument("--config", metavar="FILE", help="YAML config file (default: ./hookscan.yaml if present)")
    s.set_defaults(func=cmd_analyze)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
