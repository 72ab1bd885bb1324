"""Error handling for the request pipeline.

A built redirect handler never raises, but the fallback is user code.
Anything it raises becomes a logged 500 instead of a dropped connection.
"""

import logging
import traceback

from urlshort.http.request import Request
from urlshort.http.response import Response

logger = logging.getLogger("urlshort.server")


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Log *exc* and build the 500 response for *request*.

    In debug mode the traceback is included in the body.
    """
    logger.error(
        "Unhandled error on %s %s",
        request.method,
        request.path,
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    if debug:
        detail = "".join(traceback.format_exception(exc))
        return Response(f"Internal Server Error\n\n{detail}", status=500)
    return Response("Internal Server Error", status=500)
