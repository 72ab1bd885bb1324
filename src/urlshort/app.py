"""urlshort application class.

Wraps a resolved redirect handler in an ASGI 3.0 callable. The handler
and its mapping are fixed at construction; there is no setup phase and
no shared mutable state between requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from urlshort._internal.asgi import Receive, Scope, Send
from urlshort._internal.types import Fallback, Handler
from urlshort.config import AppConfig
from urlshort.fallbacks import not_found
from urlshort.handler import file_handler, map_handler
from urlshort.server.handler import handle_request


class App:
    """An ASGI application serving one redirect handler.

    Usage::

        app = App.from_file("redirects.yaml")
        app.run()

    Any ASGI server can host it; ``run()`` uses pounce.
    """

    __slots__ = ("config", "handler")

    def __init__(self, handler: Handler, config: AppConfig | None = None) -> None:
        self.handler: Handler = handler
        self.config: AppConfig = config or AppConfig()

    @classmethod
    def from_mapping(
        cls,
        mapping: Mapping[str, str],
        fallback: Fallback = not_found,
        config: AppConfig | None = None,
    ) -> App:
        """Serve redirects from an in-memory ``path -> url`` mapping."""
        return cls(map_handler(mapping, fallback), config)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        fallback: Fallback = not_found,
        config: AppConfig | None = None,
    ) -> App:
        """Serve redirects decoded from a YAML or JSON file.

        Raises:
            ConfigurationError: Missing file or unsupported suffix.
            RecordDecodeError: Malformed file contents.
        """
        return cls(file_handler(path, fallback), config)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start the development server.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        from urlshort.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            reload=self.config.debug,
            reload_include=self.config.reload_include,
            reload_dirs=self.config.reload_dirs,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Completes lifespan immediately (nothing to start or stop), then
        delegates HTTP scopes to the request pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        await handle_request(
            scope,
            receive,
            send,
            handler=self.handler,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
