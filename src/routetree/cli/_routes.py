"""``routetree routes`` — list every route in a tree.

Resolves an import string to a route tree and prints all terminal
routes with their full pattern, name, and handler.
"""

import argparse
import sys

from routetree.cli._resolve import load_resolver
from routetree.errors import ConfigurationError


def handler_label(handler: object) -> str:
    module = getattr(handler, "__module__", None)
    name = getattr(handler, "__qualname__", None) or getattr(handler, "__name__", None)
    if name is None:
        return repr(handler)
    return f"{module}.{name}" if module else name


def run_routes(args: argparse.Namespace) -> None:
    """List routes for a route tree.

    Prints a table of PATTERN, NAME, and HANDLER in declaration order,
    which is also the order resolution tries them in.
    """
    try:
        resolver = load_resolver(args.target)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = resolver.routes
    if not routes:
        print("No routes registered.")
        return

    rows = [(r.pattern, r.name or "-", handler_label(r.handler)) for r in routes]

    # Column widths
    max_pattern = max(max(len(r[0]) for r in rows), 7)  # "PATTERN" header
    max_name = max(max(len(r[1]) for r in rows), 4)  # "NAME" header

    fmt = f"{{:<{max_pattern}}}  {{:<{max_name}}}  {{}}"
    print(fmt.format("PATTERN", "NAME", "HANDLER"))
    sep_len = max_pattern + max_name + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for pattern, name, handler in rows:
        print(fmt.format(pattern, name, handler))
