"""routetree exception hierarchy.

Shared across pattern parsing, table construction and the Resolver so
every module raises and catches the same types.

Only configuration problems are raised during normal operation. A path
that matches nothing, or a reverse lookup that cannot be satisfied, is
returned as a value; ``NotFound`` and ``NoReverseMatch`` exist for callers
that prefer exceptions (see ``Resolver.resolve_or_404`` and
``Resolver.url_for``).
"""

from dataclasses import dataclass
from typing import Any


class RouteTreeError(Exception):
    """Base for all routetree-specific errors."""


class ConfigurationError(RouteTreeError):
    """Raised when the route configuration is invalid.

    Malformed patterns, duplicate route names and unknown converters are
    all detected while the tables are being built, before any request
    is resolved.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(RouteTreeError):
    """An error that maps directly to an HTTP status code.

    The resolver never raises these on its own; they are provided for the
    HTTP-serving collaborator that turns a failed lookup into a response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class NoReverseMatch(RouteTreeError):  # noqa: N818 — conventional name in web frameworks
    """A named route could not be turned back into a path.

    Carries the ``ReverseFailure`` value that describes why.
    """

    def __init__(self, failure: Any) -> None:
        self.failure = failure
        super().__init__(f"Reverse for {failure.name!r} failed: {failure.reason}")
