"""Tests for routetree.cli._resolve — route tree import resolution."""

import sys
import types

import pytest

from routetree.cli._resolve import load_resolver
from routetree.errors import ConfigurationError
from routetree.routing.conf import path
from routetree.routing.resolver import Resolver
from routetree.routing.route import RouteTable


def home(request: object) -> str:
    return "home"


@pytest.fixture
def _fake_urls_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module exposing route trees in several shapes."""
    mod = types.ModuleType("_fake_routetree_urls")
    mod.urlpatterns = [path("", home, name="home")]  # type: ignore[attr-defined]
    mod.table = RouteTable([path("", home)])  # type: ignore[attr-defined]
    mod.resolver = Resolver([path("", home)])  # type: ignore[attr-defined]
    mod.factory = lambda: [path("", home)]  # type: ignore[attr-defined]
    mod.broken_factory = lambda: 1 / 0  # type: ignore[attr-defined]
    mod.bad_config = [("", home, "a"), ("x", home, "a")]  # type: ignore[attr-defined]
    mod.not_a_tree = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_routetree_urls", mod)


@pytest.mark.usefixtures("_fake_urls_module")
class TestLoadResolver:
    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'urlpatterns'."""
        resolver = load_resolver("_fake_routetree_urls")
        assert isinstance(resolver, Resolver)
        assert resolver.root.names == ("home",)

    def test_table_attribute(self) -> None:
        assert isinstance(load_resolver("_fake_routetree_urls:table"), Resolver)

    def test_resolver_attribute_returned_as_is(self) -> None:
        mod = sys.modules["_fake_routetree_urls"]
        assert load_resolver("_fake_routetree_urls:resolver") is mod.resolver  # type: ignore[attr-defined]

    def test_factory(self) -> None:
        assert len(load_resolver("_fake_routetree_urls:factory").routes) == 1

    def test_broken_factory(self) -> None:
        with pytest.raises(TypeError, match="raised an error"):
            load_resolver("_fake_routetree_urls:broken_factory")

    def test_invalid_configuration(self) -> None:
        with pytest.raises(ConfigurationError):
            load_resolver("_fake_routetree_urls:bad_config")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            load_resolver("nonexistent_module_xyz:urlpatterns")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            load_resolver("_fake_routetree_urls:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match="not a route tree"):
            load_resolver("_fake_routetree_urls:not_a_tree")
