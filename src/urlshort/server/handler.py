"""ASGI handler — translates ASGI scope/messages to urlshort types.

The only component that touches raw ASGI directly. Converts the scope
dict to a typed Request, awaits the redirect handler, and sends the
negotiated Response back through ASGI send().
"""

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.types import Handler
from urlshort.http.request import Request
from urlshort.server.errors import handle_internal_error
from urlshort.server.negotiation import negotiate
from urlshort.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    handler: Handler,
    debug: bool,
) -> None:
    """Process a single HTTP request through *handler*."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = negotiate(await handler(request))
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send, head=request.method == "HEAD")
