"""Path resolution and reverse lookup over a route tree.

``resolve()`` and ``reverse()`` are pure functions over an immutable
``RouteTable``; they may be called from any number of threads or tasks
without locking. ``Resolver`` wraps the process-wide root table with
configuration, logging, and exception-raising conveniences for the
HTTP layer.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from routetree.config import DEFAULT_CONFIG, RoutingConfig
from routetree.errors import ConfigurationError, NoReverseMatch, NotFound
from routetree.routing.conf import build_table
from routetree.routing.route import (
    Handler,
    MatchResult,
    NoMatch,
    ReverseFailure,
    RouteEntry,
    RouteMatch,
    RouteTable,
    join_patterns,
)

logger = logging.getLogger("routetree.resolver")


def split_path(path: str) -> list[str]:
    """Strip leading/trailing slashes and split into segments.

    ``""`` and ``"/"`` both give ``[]``, the root of a table. Interior
    empty segments (``"a//b"``) are kept; no pattern matches them.
    """
    stripped = path.strip("/")
    if not stripped:
        return []
    return stripped.split("/")


def resolve(table: RouteTable, path: str) -> MatchResult:
    """Resolve *path* against *table*.

    Entries are tried in declaration order. A terminal entry must match
    the whole remaining path. A delegating entry only has to match a
    prefix; the rest of the path is then resolved in its nested table
    and that outcome is final, even when it is a ``NoMatch``. Sibling
    entries after an entered prefix are never tried.
    """
    parts = split_path(path)
    start = 0
    params: dict[str, Any] = {}
    prefixes: list[RouteEntry] = []
    current = table

    while True:
        for entry in current.entries:
            if entry.is_include:
                hit = entry.pattern.match_prefix(parts, start)
                if hit is None:
                    continue
                found, consumed = hit
                params.update(found)
                prefixes.append(entry)
                start += consumed
                current = entry.target  # type: ignore[assignment]
                break

            found = entry.pattern.match_full(parts, start)
            if found is not None:
                return RouteMatch(
                    handler=entry.target,  # type: ignore[arg-type]
                    params={**params, **found},
                    entry=entry,
                    prefixes=tuple(prefixes),
                )
        else:
            return NoMatch(path)


def _format_path(segments: list[str], config: RoutingConfig) -> str:
    body = "/".join(segments)
    if not body:
        return "/" if config.leading_slash or config.trailing_slash else ""
    if config.leading_slash:
        body = "/" + body
    if config.trailing_slash:
        body += "/"
    return body


def reverse(
    table: RouteTable,
    name: str,
    params: Mapping[str, Any] | None = None,
    *,
    config: RoutingConfig | None = None,
) -> str | ReverseFailure:
    """Build the path for the route called *name*.

    Placeholder values come from *params* and are substituted in declared
    order, prefixes first. Returns a ``ReverseFailure`` when the name is
    unknown, a value is missing or does not pass its converter, or
    *params* holds a key no placeholder uses.
    """
    config = config or DEFAULT_CONFIG
    chain = table.lookup(name)
    if chain is None:
        return ReverseFailure(name, "no route with this name")

    values = dict(params or {})
    expected = [p for entry in chain for p in entry.pattern.param_names]
    missing = [p for p in expected if p not in values]
    if missing:
        return ReverseFailure(name, f"missing parameter {missing[0]!r}")
    unexpected = sorted(set(values) - set(expected), key=str)
    if unexpected:
        return ReverseFailure(name, f"unexpected parameter {unexpected[0]!r}")

    segments: list[str] = []
    for entry in chain:
        try:
            segments.extend(entry.pattern.format(values))
        except (ValueError, TypeError) as exc:
            return ReverseFailure(name, f"invalid parameter value: {exc}")
    return _format_path(segments, config)


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """A terminal route as seen from the root: full pattern, name, handler."""

    pattern: str
    name: str | None
    handler: Handler


def iter_routes(table: RouteTable, _chain: tuple[RouteEntry, ...] = ()) -> Iterator[RouteInfo]:
    """Yield every terminal route in declaration order, depth first."""
    for entry in table.entries:
        chain = (*_chain, entry)
        if entry.is_include:
            yield from iter_routes(entry.target, chain)  # type: ignore[arg-type]
        else:
            yield RouteInfo(pattern=join_patterns(chain), name=entry.name, handler=entry.target)  # type: ignore[arg-type]


class Resolver:
    """The process-wide root of a route tree.

    Usage::

        resolver = Resolver([
            path("", home, name="home"),
            path("blog/", include("blog.urls")),
        ])
        match = resolver.resolve("/blog/posts/3/")
        if match:
            response = match.dispatch(request)
        url = resolver.reverse("post-detail", {"id": 3})
    """

    __slots__ = ("_config", "_root")

    def __init__(
        self,
        root: RouteTable | Iterable[Any],
        config: RoutingConfig | None = None,
    ) -> None:
        if not isinstance(root, RouteTable):
            root = build_table(root)
        self._config = config or DEFAULT_CONFIG
        if root.depth > self._config.max_depth:
            msg = f"Route tree is {root.depth} levels deep; max_depth is {self._config.max_depth}."
            raise ConfigurationError(msg)
        self._root = root
        logger.info(
            "route tree ready: %d routes, %d named, depth %d",
            sum(1 for _ in iter_routes(root)),
            len(root.names),
            root.depth,
        )

    @property
    def root(self) -> RouteTable:
        return self._root

    @property
    def config(self) -> RoutingConfig:
        return self._config

    @property
    def routes(self) -> list[RouteInfo]:
        """Every terminal route, with prefixes joined into the pattern."""
        return list(iter_routes(self._root))

    def resolve(self, path: str) -> MatchResult:
        result = resolve(self._root, path)
        if self._config.debug:
            if result:
                logger.debug("resolved %r -> %s %r", path, result.pattern, result.params)
            else:
                logger.debug("no route for %r", path)
        return result

    def resolve_or_404(self, path: str) -> RouteMatch:
        """Resolve *path*, raising ``NotFound`` when nothing matches."""
        result = self.resolve(path)
        if isinstance(result, NoMatch):
            raise NotFound(f"No route matches {path!r}")
        return result

    def reverse(self, name: str, params: Mapping[str, Any] | None = None) -> str | ReverseFailure:
        result = reverse(self._root, name, params, config=self._config)
        if isinstance(result, ReverseFailure) and self._config.debug:
            logger.debug("reverse %r failed: %s", name, result.reason)
        return result

    def url_for(self, name: str, /, **params: Any) -> str:
        """Reverse *name*, raising ``NoReverseMatch`` on failure."""
        result = self.reverse(name, params)
        if isinstance(result, ReverseFailure):
            raise NoReverseMatch(result)
        return result
