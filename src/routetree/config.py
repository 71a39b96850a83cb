"""Resolver configuration.

RoutingConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, no string-key dict lookups.
"""

from dataclasses import dataclass

from routetree.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class RoutingConfig:
    """Resolver configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RoutingConfig(trailing_slash=False, debug=True)
    """

    # Reverse output: "/blog/posts/3/" with both enabled
    leading_slash: bool = True
    trailing_slash: bool = True

    # Deepest include() nesting a Resolver accepts
    max_depth: int = 32

    # Log every resolution outcome at DEBUG
    debug: bool = False

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be at least 1, got {self.max_depth}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = RoutingConfig()
