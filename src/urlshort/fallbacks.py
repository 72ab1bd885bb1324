"""Stock fallback handlers for requests no redirect matches."""

from urlshort._internal.types import Fallback
from urlshort.http.request import Request
from urlshort.http.response import Response


def not_found(request: Request) -> Response:  # noqa: ARG001
    """404 — no redirect is defined for this path."""
    return Response("Not Found", status=404)


def text(body: str, status: int = 200) -> Fallback:
    """Return a fallback that answers every request with *body*.

    ``text("Hello, world!")`` stands in for a site's default page.
    """
    response = Response(body, status=status)

    def fallback(request: Request) -> Response:  # noqa: ARG001
        return response

    return fallback
