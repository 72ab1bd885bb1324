"""Shared type aliases used across urlshort modules."""

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from urlshort.http.request import Request

# Resolved request handler produced by map_handler()
Handler: TypeAlias = Callable[["Request"], Awaitable[Any]]

# Fallback: sync or async callable receiving the unmodified request
Fallback: TypeAlias = Callable[["Request"], Any]

