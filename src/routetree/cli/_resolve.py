"""Route tree import resolution — ``"module:attribute"`` strings to Resolvers.

Shared utility used by every ``routetree`` subcommand to locate a route
tree from a user-supplied import string.
"""

import importlib

from routetree.routing.resolver import Resolver
from routetree.routing.route import RouteTable


def load_resolver(import_string: str) -> Resolver:
    """Resolve an import string to a ``Resolver``.

    Accepts ``"module:attribute"`` format.  When the attribute portion
    is omitted, defaults to ``"urlpatterns"`` (e.g. ``"mysite.urls"``
    resolves to ``mysite.urls.urlpatterns``).

    The attribute may be a ``Resolver``, a ``RouteTable``, a list of
    routes, or a factory function returning one of those.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the resolved object is not a route tree.
        ConfigurationError: If the route configuration is invalid.

    """
    module_path, _, attr_name = import_string.partition(":")
    if not attr_name:
        attr_name = "urlpatterns"

    module = importlib.import_module(module_path)
    obj = getattr(module, attr_name)

    # Support factory functions
    if callable(obj) and not isinstance(obj, Resolver | RouteTable):
        try:
            obj = obj()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if isinstance(obj, Resolver):
        return obj
    if isinstance(obj, RouteTable | list | tuple):
        return Resolver(obj)

    msg = f"{import_string!r} resolved to {type(obj).__name__}, not a route tree"
    raise TypeError(msg)
