"""Building route tables from static configuration.

The project-level table delegates prefixes to app-level tables::

    # blog/urls.py
    urlpatterns = [
        path("", views.post_list, name="post-list"),
        path("posts/<int:id>/", views.post_detail, name="post-detail"),
    ]

    # project/urls.py
    urlpatterns = [
        path("", views.home, name="home"),
        path("blog/", include("blog.urls")),
    ]

Plain ``(pattern, target[, name])`` triples work too, with nested lists
standing in for ``include()``::

    build_table([
        ("", home, "home"),
        ("blog/", [("", post_list, "post-list")]),
    ])
"""

import importlib
import logging
import types
from collections.abc import Iterable
from typing import Any

from routetree.errors import ConfigurationError
from routetree.routing.pattern import RoutePattern
from routetree.routing.route import RouteEntry, RouteTable

logger = logging.getLogger("routetree.conf")


def path(pattern: str, target: Any, name: str | None = None) -> RouteEntry:
    """Create a route entry.

    *target* is a handler, a ``RouteTable`` (usually from ``include()``),
    or a list of entries/triples that is built into a nested table.
    """
    if isinstance(target, list | tuple):
        target = build_table(target)
    return RouteEntry(RoutePattern(pattern), target, name)


def include(arg: Any) -> RouteTable:
    """Turn an app-level route configuration into a ``RouteTable``.

    Accepts a ``RouteTable``, a list of entries or triples, a module with
    a ``urlpatterns`` attribute, or the dotted import path of such a module.
    """
    if isinstance(arg, RouteTable):
        return arg

    if isinstance(arg, str):
        try:
            module = importlib.import_module(arg)
        except ImportError as exc:
            msg = f"include({arg!r}): {exc}"
            raise ConfigurationError(msg) from exc
    elif isinstance(arg, types.ModuleType):
        module = arg
    else:
        return build_table(arg)

    patterns = getattr(module, "urlpatterns", None)
    if patterns is None:
        msg = f"include(): module {module.__name__!r} has no 'urlpatterns'."
        raise ConfigurationError(msg)
    table = build_table(patterns)
    logger.debug("included %s (%d entries)", module.__name__, len(table))
    return table


def _entry_from_item(index: int, item: Any) -> RouteEntry:
    if isinstance(item, RouteEntry):
        return item
    if not isinstance(item, list | tuple) or len(item) not in (2, 3):
        msg = f"Route #{index}: expected (pattern, target[, name]), got {item!r}."
        raise ConfigurationError(msg)
    pattern, target, *rest = item
    if not isinstance(pattern, str):
        msg = f"Route #{index}: pattern must be a string, got {pattern!r}."
        raise ConfigurationError(msg)
    return path(pattern, target, rest[0] if rest else None)


def build_table(config: Iterable[Any]) -> RouteTable:
    """Build a ``RouteTable`` from an ordered route configuration.

    Each item is a ``RouteEntry`` or a ``(pattern, target[, name])``
    triple. Raises ``ConfigurationError`` for anything malformed,
    including duplicate names anywhere in the resulting tree.
    """
    if isinstance(config, RouteTable):
        return config
    if isinstance(config, str | bytes) or not isinstance(config, Iterable):
        msg = f"Route configuration must be a list of routes, got {type(config).__name__}."
        raise ConfigurationError(msg)
    return RouteTable(tuple(_entry_from_item(i, item) for i, item in enumerate(config)))
