"""``routetree resolve`` and ``routetree reverse`` — one-off lookups.

Both exit with code 1 when the lookup fails, so they can be used in
scripts to assert that a URL layout still holds.
"""

import argparse
import sys

from routetree.cli._resolve import load_resolver
from routetree.cli._routes import handler_label
from routetree.errors import ConfigurationError
from routetree.routing.resolver import Resolver
from routetree.routing.route import ReverseFailure, RouteMatch


def _load(target: str) -> Resolver:
    try:
        return load_resolver(target)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _parse_params(pairs: list[str]) -> dict[str, str]:
    params: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            print(f"Error: expected KEY=VALUE, got {pair!r}", file=sys.stderr)
            raise SystemExit(2)
        params[key] = value
    return params


def run_resolve(args: argparse.Namespace) -> None:
    """Print the handler, route name, pattern and parameters for a path."""
    resolver = _load(args.target)
    result = resolver.resolve(args.path)
    if not isinstance(result, RouteMatch):
        print(f"No route matches {args.path!r}", file=sys.stderr)
        raise SystemExit(1)

    print(f"handler: {handler_label(result.handler)}")
    print(f"name:    {result.name or '-'}")
    print(f"pattern: {result.pattern}")
    print(f"params:  {result.params!r}")


def run_reverse(args: argparse.Namespace) -> None:
    """Print the path built for a named route."""
    resolver = _load(args.target)
    result = resolver.reverse(args.name, _parse_params(args.params))
    if isinstance(result, ReverseFailure):
        print(f"Error: reverse for {result.name!r} failed: {result.reason}", file=sys.stderr)
        raise SystemExit(1)
    print(result)
