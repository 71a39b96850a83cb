"""routetree — hierarchical path resolution for web applications.

A project-level route table delegates URL prefixes to app-level tables;
each table maps literal and typed path segments to a handler.

Basic usage::

    from routetree import Resolver, include, path

    resolver = Resolver([
        path("", views.home, name="home"),
        path("blog/", include([
            path("", views.post_list, name="post-list"),
            path("posts/<int:id>/", views.post_detail, name="post-detail"),
        ])),
    ])

    match = resolver.resolve("/blog/posts/3/")   # handler=post_detail, params={"id": 3}
    resolver.reverse("post-detail", {"id": 3})   # "/blog/posts/3/"
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "Converter",
    "HTTPError",
    "MatchResult",
    "NoMatch",
    "NoReverseMatch",
    "NotFound",
    "Resolver",
    "ReverseFailure",
    "RouteEntry",
    "RouteMatch",
    "RouteTable",
    "RouteTreeError",
    "RoutingConfig",
    "build_table",
    "include",
    "path",
    "register_converter",
    "resolve",
    "reverse",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routetree`` fast while providing a clean top-level API.
    """
    if name in ("Resolver", "resolve", "reverse"):
        from routetree.routing import resolver as _resolver

        return getattr(_resolver, name)

    if name in ("path", "include", "build_table"):
        from routetree.routing import conf as _conf

        return getattr(_conf, name)

    if name in ("MatchResult", "NoMatch", "ReverseFailure", "RouteEntry", "RouteMatch", "RouteTable"):
        from routetree.routing import route as _route

        return getattr(_route, name)

    if name in ("Converter", "register_converter"):
        from routetree.routing import params as _params

        return getattr(_params, name)

    if name == "RoutingConfig":
        from routetree.config import RoutingConfig

        return RoutingConfig

    if name in (
        "ConfigurationError",
        "HTTPError",
        "NoReverseMatch",
        "NotFound",
        "RouteTreeError",
    ):
        from routetree import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
