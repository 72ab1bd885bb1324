"""Invoke helpers — call sync or async fallbacks uniformly.

A fallback can be ``def`` or ``async def``. Anything that calls a
user-provided fallback goes through ``invoke`` so the sync/async check
lives in exactly one place.

Usage::

    from urlshort._internal.invoke import invoke

    result = await invoke(fallback, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's a coroutine.

    Works with both sync and async callables::

        # sync — returns immediately, no await needed
        def hello(request):
            return Response("Hello, world!")

        # async — returns coroutine, awaited automatically
        async def hello(request):
            body = await request.text()
            return Response(body)
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
