"""Route patterns — parsing, matching, and formatting.

A pattern is a ``/``-separated list of segments. Each segment is either
a literal or a whole-segment placeholder::

    "posts/<int:id>"      -> [literal "posts", placeholder id (int)]
    "tags/<slug>"         -> placeholder without a type uses ``str``
    "files/<path:rest>"   -> ``path`` swallows the remaining segments

Leading and trailing slashes are ignored, so ``"posts/<int:id>/"`` and
``"/posts/<int:id>"`` are the same pattern. Malformed patterns raise
``ConfigurationError`` when parsed.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from routetree.errors import ConfigurationError
from routetree.routing.params import MULTI_SEGMENT, Converter, get_converter


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Literal: ``posts``        (is_param=False)
    Param:   ``<slug>``       (is_param=True, param_name="slug")
    Typed:   ``<int:id>``     (is_param=True, param_name="id", param_type="int")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None
    param_type: str = "str"

    @property
    def converter(self) -> Converter:
        return get_converter(self.param_type)


def _parse_placeholder(part: str, pattern: str) -> PathSegment:
    inner = part[1:-1]
    if "<" in inner or ">" in inner:
        msg = f"Route pattern {pattern!r} has a malformed placeholder {part!r}."
        raise ConfigurationError(msg)

    if ":" in inner:
        param_type, param_name = inner.split(":", 1)
    else:
        param_type, param_name = "str", inner

    if not param_name.isidentifier():
        msg = (
            f"Route pattern {pattern!r}: placeholder name {param_name!r} "
            "is not a valid Python identifier."
        )
        raise ConfigurationError(msg)
    try:
        get_converter(param_type)
    except KeyError:
        msg = f"Route pattern {pattern!r} uses unknown converter {param_type!r}."
        raise ConfigurationError(msg) from None

    return PathSegment(value=part, is_param=True, param_name=param_name, param_type=param_type)


def parse_pattern(pattern: str) -> tuple[PathSegment, ...]:
    """Parse a route pattern string into segments.

    Examples::

        ""                  -> ()
        "blog/"             -> (PathSegment("blog"),)
        "posts/<int:id>/"   -> (PathSegment("posts"), PathSegment("<int:id>", is_param=True, ...))
    """
    stripped = pattern.strip("/")
    if not stripped:
        return ()

    segments: list[PathSegment] = []
    seen: set[str] = set()
    for part in stripped.split("/"):
        if not part:
            msg = f"Route pattern {pattern!r} contains an empty segment."
            raise ConfigurationError(msg)

        if part.startswith("{") and part.endswith("}"):
            msg = (
                f"Route pattern {pattern!r} uses {{param}} syntax. "
                "Placeholders are written <param> or <type:param>."
            )
            raise ConfigurationError(msg)

        if part.startswith("<") and part.endswith(">"):
            segment = _parse_placeholder(part, pattern)
            if segment.param_name in seen:
                msg = f"Route pattern {pattern!r} repeats placeholder {segment.param_name!r}."
                raise ConfigurationError(msg)
            seen.add(segment.param_name or "")
            segments.append(segment)
        elif "<" in part or ">" in part:
            msg = (
                f"Route pattern {pattern!r}: placeholder in {part!r} must span "
                "the whole segment."
            )
            raise ConfigurationError(msg)
        else:
            segments.append(PathSegment(value=part))

    for segment in segments[:-1]:
        if segment.is_param and segment.param_type in MULTI_SEGMENT:
            msg = (
                f"Route pattern {pattern!r}: <{segment.param_type}:{segment.param_name}> "
                "must be the last segment."
            )
            raise ConfigurationError(msg)

    return tuple(segments)


def _match_segment(segment: PathSegment, part: str, params: dict[str, Any]) -> bool:
    if not segment.is_param:
        return part == segment.value
    try:
        params[segment.param_name or ""] = segment.converter.parse(part)
    except ValueError:
        return False
    return True


def _render(segment: PathSegment, value: Any) -> str:
    # The rendered text must resolve back to the same value.
    converter = segment.converter
    text = converter.to_url(value)
    parsed = converter.parse(text)
    if parsed != value and not (isinstance(value, str) and converter.to_url(parsed) == value):
        msg = f"{value!r} would resolve as {parsed!r}"
        raise ValueError(msg)
    if segment.param_type in MULTI_SEGMENT:
        if text.startswith("/") or text.endswith("/"):
            msg = f"{text!r} cannot start or end with '/'"
            raise ValueError(msg)
    elif "/" in text:
        msg = f"{text!r} cannot contain '/'"
        raise ValueError(msg)
    return text


class RoutePattern:
    """A parsed, immutable route pattern.

    Usage::

        pattern = RoutePattern("posts/<int:id>/")
        pattern.match_full(["posts", "3"], 0)        # {"id": 3}
        pattern.match_prefix(["posts", "3", "x"], 0) # ({"id": 3}, 2)
        pattern.format({"id": 3})                    # ["posts", "3"]
    """

    __slots__ = ("_raw", "_segments", "_param_names")

    def __init__(self, raw: str) -> None:
        self._raw = raw
        self._segments = parse_pattern(raw)
        self._param_names = tuple(s.param_name or "" for s in self._segments if s.is_param)

    @property
    def raw(self) -> str:
        return self._raw

    @property
    def segments(self) -> tuple[PathSegment, ...]:
        return self._segments

    @property
    def param_names(self) -> tuple[str, ...]:
        return self._param_names

    @property
    def is_empty(self) -> bool:
        return not self._segments

    @property
    def is_catch_all(self) -> bool:
        """True when the last segment may span several path segments."""
        if not self._segments:
            return False
        last = self._segments[-1]
        return last.is_param and last.param_type in MULTI_SEGMENT

    def __str__(self) -> str:
        return "/".join(s.value for s in self._segments)

    def __repr__(self) -> str:
        return f"RoutePattern({self._raw!r})"

    def match_full(self, parts: Sequence[str], start: int) -> dict[str, Any] | None:
        """Match the entire remainder ``parts[start:]``.

        Returns the extracted parameters, or ``None`` when the length or
        any segment differs, or a placeholder fails to convert.
        """
        remaining = len(parts) - start
        size = len(self._segments)
        params: dict[str, Any] = {}

        if self.is_catch_all:
            if remaining < size:
                return None
            for offset, segment in enumerate(self._segments[:-1]):
                if not _match_segment(segment, parts[start + offset], params):
                    return None
            rest = "/".join(parts[start + size - 1 :])
            return params if _match_segment(self._segments[-1], rest, params) else None

        if remaining != size:
            return None
        for offset, segment in enumerate(self._segments):
            if not _match_segment(segment, parts[start + offset], params):
                return None
        return params

    def match_prefix(self, parts: Sequence[str], start: int) -> tuple[dict[str, Any], int] | None:
        """Match the leading segments of ``parts[start:]``.

        Returns ``(params, consumed)`` or ``None``. The empty pattern is a
        prefix of every path and consumes nothing.
        """
        size = len(self._segments)
        if len(parts) - start < size:
            return None
        params: dict[str, Any] = {}
        for offset, segment in enumerate(self._segments):
            if not _match_segment(segment, parts[start + offset], params):
                return None
        return params, size

    def format(self, params: Mapping[str, Any]) -> list[str]:
        """Substitute *params* into the pattern, in declared order.

        Raises ``KeyError`` for a missing placeholder value and
        ``ValueError`` (or ``TypeError``) when a value cannot be rendered
        as text that resolves back to the same value.
        """
        out: list[str] = []
        for segment in self._segments:
            if not segment.is_param:
                out.append(segment.value)
                continue
            out.append(_render(segment, params[segment.param_name or ""]))
        return out
