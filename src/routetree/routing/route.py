"""Route tables and match results.

``RouteEntry`` and ``RouteTable`` are built once at startup and never
change afterwards. ``RouteMatch``, ``NoMatch`` and ``ReverseFailure`` are
the values returned by ``resolve()`` and ``reverse()``.
"""

import inspect
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, TypeAlias

from routetree.errors import ConfigurationError
from routetree.routing.pattern import RoutePattern

Handler: TypeAlias = Callable[..., Any]


@dataclass(frozen=True, slots=True, eq=False)
class RouteEntry:
    """One row of a route table.

    ``target`` is either a handler (terminal entry) or a nested
    ``RouteTable`` (delegating entry). Only terminal entries may be named.
    """

    pattern: RoutePattern
    target: "Handler | RouteTable"
    name: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", RoutePattern(self.pattern))
        elif not isinstance(self.pattern, RoutePattern):
            msg = f"Route pattern must be a string, got {type(self.pattern).__name__}."
            raise ConfigurationError(msg)

        if self.name is not None and (not isinstance(self.name, str) or not self.name):
            msg = f"Route name must be a non-empty string, got {self.name!r}."
            raise ConfigurationError(msg)

        if isinstance(self.target, RouteTable):
            if self.name is not None:
                msg = (
                    f"Route {self.pattern.raw!r} delegates to a nested table and cannot "
                    f"be named ({self.name!r}); name the routes inside it instead."
                )
                raise ConfigurationError(msg)
            if self.pattern.is_catch_all:
                msg = f"Prefix {self.pattern.raw!r} cannot end in a multi-segment placeholder."
                raise ConfigurationError(msg)
        elif not callable(self.target):
            msg = (
                f"Route {self.pattern.raw!r} target must be a callable or a RouteTable, "
                f"got {type(self.target).__name__}."
            )
            raise ConfigurationError(msg)

    @property
    def is_include(self) -> bool:
        """True for a delegating (prefix) entry."""
        return isinstance(self.target, RouteTable)

    def __repr__(self) -> str:
        kind = "include" if self.is_include else getattr(self.target, "__name__", "handler")
        if self.name:
            return f"RouteEntry({self.pattern.raw!r}, {kind}, name={self.name!r})"
        return f"RouteEntry({self.pattern.raw!r}, {kind})"


@dataclass(frozen=True, slots=True, eq=False)
class RouteTable:
    """An ordered, immutable sequence of route entries.

    Construction validates the whole subtree: duplicate route names and
    a placeholder name reused along one prefix chain are configuration
    errors. Nested tables are validated when they are built, so a parent
    only has to merge their indexes.
    """

    entries: tuple[RouteEntry, ...] = ()
    depth: int = field(init=False, default=1)
    _index: dict[str, tuple[RouteEntry, ...]] = field(init=False, repr=False)
    _chain_params: frozenset[frozenset[str]] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        entries = tuple(self.entries)
        for entry in entries:
            if not isinstance(entry, RouteEntry):
                msg = f"RouteTable entries must be RouteEntry objects, got {entry!r}."
                raise ConfigurationError(msg)

        index: dict[str, tuple[RouteEntry, ...]] = {}
        chain_params: set[frozenset[str]] = set()
        depth = 1

        for entry in entries:
            own = frozenset(entry.pattern.param_names)
            if not entry.is_include:
                chain_params.add(own)
                if entry.name is not None:
                    _add_name(index, entry.name, (entry,))
                continue

            child: RouteTable = entry.target  # type: ignore[assignment]
            depth = max(depth, child.depth + 1)
            for params in child._chain_params:
                clash = own & params
                if clash:
                    msg = (
                        f"Prefix {entry.pattern.raw!r} and a nested route both capture "
                        f"{sorted(clash)[0]!r}."
                    )
                    raise ConfigurationError(msg)
                chain_params.add(own | params)
            for name, chain in child._index.items():
                _add_name(index, name, (entry, *chain))

        object.__setattr__(self, "entries", entries)
        object.__setattr__(self, "depth", depth)
        object.__setattr__(self, "_index", index)
        object.__setattr__(self, "_chain_params", frozenset(chain_params))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self.entries)

    @property
    def names(self) -> tuple[str, ...]:
        """Every route name in the subtree, in declaration order."""
        return tuple(self._index)

    def lookup(self, name: str) -> tuple[RouteEntry, ...] | None:
        """Return the chain of entries leading to the route *name*.

        The chain starts with an entry of this table and ends with the
        terminal entry carrying the name. ``None`` if the name is unknown.
        """
        return self._index.get(name)


def _add_name(index: dict[str, tuple[RouteEntry, ...]], name: str, chain: tuple[RouteEntry, ...]) -> None:
    if name in index:
        first = "/".join(str(e.pattern) for e in index[name])
        second = "/".join(str(e.pattern) for e in chain)
        msg = f"Duplicate route name {name!r} (used by {first!r} and {second!r})."
        raise ConfigurationError(msg)
    index[name] = chain


@dataclass(frozen=True, slots=True, eq=False)
class RouteMatch:
    """Result of a successful resolution."""

    handler: Handler
    params: dict[str, Any]
    entry: RouteEntry
    prefixes: tuple[RouteEntry, ...] = ()

    def __bool__(self) -> bool:
        return True

    @property
    def name(self) -> str | None:
        return self.entry.name

    @property
    def pattern(self) -> str:
        """The full pattern that matched, prefixes included."""
        return join_patterns((*self.prefixes, self.entry))

    def dispatch(self, request: Any) -> Any:
        """Call the handler with the request and the extracted parameters."""
        return self.handler(request, **self.params)

    async def dispatch_async(self, request: Any) -> Any:
        """Like ``dispatch`` but awaits the result when the handler is async."""
        result = self.handler(request, **self.params)
        if inspect.isawaitable(result):
            result = await result
        return result


@dataclass(frozen=True, slots=True)
class NoMatch:
    """Result of a failed resolution. Falsy."""

    path: str

    def __bool__(self) -> bool:
        return False


MatchResult: TypeAlias = RouteMatch | NoMatch


@dataclass(frozen=True, slots=True)
class ReverseFailure:
    """Result of a failed reverse lookup. Falsy."""

    name: str
    reason: str

    def __bool__(self) -> bool:
        return False


def join_patterns(chain: Iterable[RouteEntry]) -> str:
    """Render a chain of entries as one pattern: ``/blog/posts/<int:id>``."""
    parts = [str(e.pattern) for e in chain if not e.pattern.is_empty]
    return "/" + "/".join(parts)
