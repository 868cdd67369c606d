"""``warble check``: build a view tree's registry and report on it.

Exits with code 1 if the tree cannot be scanned or compiled, the same
condition that stops an application at startup.
"""

import argparse
import logging
import sys

from warble.config import ViewsConfig
from warble.errors import ConfigurationError, ScanError
from warble.views.discovery import build_registry
from warble.views.types import ViewRegistry


def run_check(args: argparse.Namespace) -> None:
    """Build the registry for ``args.root`` and print its views."""
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = ViewsConfig(root=args.root, extensions=tuple(args.extensions or (".html",)))

    try:
        registry = build_registry(config)
    except (ConfigurationError, ScanError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not args.quiet:
        _print_listing(registry)
    print(
        f"OK: {len(registry.pages)} pages, {len(registry.partials)} partials, "
        f"{len(registry.layouts)} layouts"
    )


def _print_listing(registry: ViewRegistry) -> None:
    sections = (
        ("pages", sorted(registry.pages)),
        ("partials", sorted(registry.partials)),
        ("layouts", list(registry.layouts)),
    )
    for title, names in sections:
        print(f"{title} ({len(names)}):")
        for name in names:
            print(f"  {name}")
