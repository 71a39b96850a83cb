"""Tests for routetree.config — RoutingConfig frozen dataclass."""

import pytest

from routetree.config import DEFAULT_CONFIG, RoutingConfig
from routetree.errors import ConfigurationError


class TestRoutingConfig:
    def test_defaults(self) -> None:
        cfg = RoutingConfig()

        assert cfg.leading_slash is True
        assert cfg.trailing_slash is True
        assert cfg.max_depth == 32
        assert cfg.debug is False

    def test_override(self) -> None:
        cfg = RoutingConfig(trailing_slash=False, max_depth=4, debug=True)

        assert cfg.trailing_slash is False
        assert cfg.max_depth == 4
        assert cfg.debug is True

    def test_frozen(self) -> None:
        cfg = RoutingConfig()

        with pytest.raises(AttributeError):
            cfg.debug = True  # type: ignore[misc]

    def test_max_depth_must_be_positive(self) -> None:
        with pytest.raises(ConfigurationError, match="max_depth"):
            RoutingConfig(max_depth=0)

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == RoutingConfig()
