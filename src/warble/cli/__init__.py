"""Warble CLI: view tree validation.

Entry point registered as ``warble`` in ``pyproject.toml``::

    [project.scripts]
    warble = "warble.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``warble`` command."""
    parser = argparse.ArgumentParser(
        prog="warble",
        description="Warble: convention-based HTML views with layouts, partials and streams.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- warble check -----------------------------------------------------
    check_parser = subparsers.add_parser(
        "check",
        help="Build the view registry from a directory and list its views",
    )
    check_parser.add_argument("root", help="View root directory")
    check_parser.add_argument(
        "--ext",
        action="append",
        dest="extensions",
        default=None,
        help="Markup extension to include (repeatable, default: .html)",
    )
    check_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print the summary line",
    )
    check_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log registry construction",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "check":
        from warble.cli._check import run_check

        run_check(args)
