"""routetree CLI — inspect a route tree from the command line.

Entry point registered as ``routetree`` in ``pyproject.toml``::

    [project.scripts]
    routetree = "routetree.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routetree`` command."""
    parser = argparse.ArgumentParser(
        prog="routetree",
        description="routetree — hierarchical path resolution for web applications.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log resolver activity to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    target_help = "Import string (e.g. mysite.urls or mysite.urls:resolver)"

    # -- routetree routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List every route in the tree")
    routes_parser.add_argument("target", help=target_help)

    # -- routetree resolve ------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Show which handler a path resolves to")
    resolve_parser.add_argument("target", help=target_help)
    resolve_parser.add_argument("path", help="Request path (e.g. /blog/posts/3/)")

    # -- routetree reverse ------------------------------------------------
    reverse_parser = subparsers.add_parser("reverse", help="Build the path for a named route")
    reverse_parser.add_argument("target", help=target_help)
    reverse_parser.add_argument("name", help="Route name")
    reverse_parser.add_argument(
        "params",
        nargs="*",
        metavar="KEY=VALUE",
        help="Placeholder values",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from routetree.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from routetree.cli._lookup import run_resolve

        run_resolve(args)
    elif args.command == "reverse":
        from routetree.cli._lookup import run_reverse

        run_reverse(args)
