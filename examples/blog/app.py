"""Blog — a project table delegating to an app table.

Demonstrates the two-level layout a web project usually has: the project
routes the home page and hands everything under ``blog/`` to the blog
app's own table. Views receive the request plus the typed parameters the
resolver extracted.

Run:
    python app.py /blog/posts/1/
"""

import sys
from dataclasses import dataclass

from routetree import Resolver, include, path

# ---------------------------------------------------------------------------
# Models (in-memory)
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Post:
    id: int
    slug: str
    title: str


POSTS: dict[int, Post] = {
    1: Post(1, "hello-world", "Hello, World"),
    2: Post(2, "second-thoughts", "Second Thoughts"),
}


@dataclass(frozen=True, slots=True)
class Request:
    path: str


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------


def home(request: Request) -> str:
    return f"Welcome. Read the blog at {resolver.url_for('post-list')}"


def post_list(request: Request) -> str:
    return "\n".join(
        f"{post.title} -> {resolver.url_for('post-detail', id=post.id)}" for post in POSTS.values()
    )


def post_detail(request: Request, id: int) -> str:
    post = POSTS.get(id)
    if post is None:
        return f"No post {id}"
    return post.title


def post_by_slug(request: Request, slug: str) -> str:
    for post in POSTS.values():
        if post.slug == slug:
            return post.title
    return f"No post {slug!r}"


# ---------------------------------------------------------------------------
# URL configuration
# ---------------------------------------------------------------------------

blog_urlpatterns = [
    path("", post_list, name="post-list"),
    path("posts/<int:id>/", post_detail, name="post-detail"),
    path("posts/<slug:slug>/", post_by_slug, name="post-by-slug"),
]

urlpatterns = [
    path("", home, name="home"),
    path("blog/", include(blog_urlpatterns)),
]

resolver = Resolver(urlpatterns)


def handle(raw_path: str) -> str:
    match = resolver.resolve(raw_path)
    if not match:
        return f"404: nothing at {raw_path}"
    return match.dispatch(Request(raw_path))


if __name__ == "__main__":
    print(handle(sys.argv[1] if len(sys.argv) > 1 else "/"))
