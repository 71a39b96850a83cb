"""Path parameter parsing and type conversion.

Built-in converters for placeholder segments like ``<int:id>``.
Extra converters may be registered at startup, before any pattern
that uses them is parsed.
"""

import logging
import re
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from routetree.errors import ConfigurationError

logger = logging.getLogger("routetree.params")


@dataclass(frozen=True, slots=True)
class Converter:
    """How one placeholder type matches, parses and formats a value.

    ``regex`` must match the whole segment (it is anchored when compiled).
    ``to_python`` may raise ``ValueError`` to reject a segment that the
    regex accepted; the resolver treats that as a non-match.
    """

    regex: str
    to_python: Callable[[str], Any] = str
    to_url: Callable[[Any], str] = str
    compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "compiled", re.compile(self.regex))

    def parse(self, value: str) -> Any:
        """Match and convert a raw segment. Raises ``ValueError`` on mismatch."""
        if self.compiled.fullmatch(value) is None:
            msg = f"{value!r} does not match {self.regex!r}"
            raise ValueError(msg)
        return self.to_python(value)


def _int_to_url(value: Any) -> str:
    # bool is an int subclass, but True -> "True" would never resolve back
    if isinstance(value, bool) or not isinstance(value, int | str):
        msg = f"expected an integer, got {type(value).__name__}"
        raise ValueError(msg)
    return str(value)


def _uuid_to_url(value: Any) -> str:
    return str(value if isinstance(value, uuid.UUID) else uuid.UUID(str(value)))


# name -> Converter for each supported placeholder type
CONVERTERS: dict[str, Converter] = {
    "str": Converter(r"[^/]+"),
    "int": Converter(r"[0-9]+", int, _int_to_url),
    "slug": Converter(r"[-a-zA-Z0-9_]+"),
    "uuid": Converter(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        uuid.UUID,
        _uuid_to_url,
    ),
    "path": Converter(r".+"),
}

# Converters allowed to span several segments (terminal patterns only)
MULTI_SEGMENT: frozenset[str] = frozenset({"path"})


def get_converter(param_type: str) -> Converter:
    """Return the converter registered as *param_type*.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    return CONVERTERS[param_type]


def convert_param(value: str, param_type: str) -> Any:
    """Convert a captured path segment to the target type.

    Raises ``ValueError`` if the string cannot be converted.
    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    return CONVERTERS[param_type].parse(value)


def register_converter(name: str, converter: Converter) -> None:
    """Register an additional placeholder type.

    Call during startup, before building tables that use ``<name:...>``.
    Re-registering a name (built-in or not) is a configuration error.
    """
    if not name.isidentifier():
        msg = f"Converter name {name!r} is not a valid identifier."
        raise ConfigurationError(msg)
    if name in CONVERTERS:
        msg = f"Converter {name!r} is already registered."
        raise ConfigurationError(msg)
    CONVERTERS[name] = converter
    logger.debug("registered converter %r (%s)", name, converter.regex)
