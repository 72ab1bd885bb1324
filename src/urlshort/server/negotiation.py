"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable. A fallback is
free to return a plain string; the redirect path always returns a
``Response`` and passes straight through.
"""

from typing import Any

from urlshort.http.response import Redirect, Response


def negotiate(value: Any) -> Response:
    """Convert a handler's return value to a Response.

    Dispatch order:

    1. ``Response``         -> pass through
    2. ``Redirect``         -> 3xx with Location header
    3. ``str``              -> 200, text/plain
    4. ``bytes``            -> 200, application/octet-stream
    5. ``(value, int)``     -> negotiate value, override status
    """
    match value:
        case Response():
            return value
        case Redirect():
            return value.to_response()
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a Response, Redirect, str, bytes, or (value, status)."
            )
            raise TypeError(msg)
