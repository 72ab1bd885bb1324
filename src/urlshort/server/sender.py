"""ASGI response sending — translates Response objects to ASGI messages.

Every response goes out as exactly two messages: ``http.response.start``
then a single ``http.response.body``.
"""

from urlshort._internal.asgi import Send
from urlshort.http.response import Response


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def encode_headers(response: Response, content_length: int) -> list[tuple[bytes, bytes]]:
    """Lower-cased raw header pairs, content-type first, content-length last."""
    return [
        (b"content-type", response.content_type.encode("latin-1")),
        *(
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in response.headers
        ),
        (b"content-length", str(content_length).encode("latin-1")),
    ]


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a Response into ASGI send() calls.

    For ``HEAD`` requests the headers (including ``content-length``)
    describe the full body, but no body bytes are sent.
    """
    body = response.body_bytes if _body_allowed(response.status) else b""

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": encode_headers(response, len(body)),
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": b"" if head else body,
        }
    )
