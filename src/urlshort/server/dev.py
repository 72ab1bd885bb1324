"""Development server.

Starts a pounce ASGI server with the live urlshort App object.
Single worker; reload is enabled in debug mode.
"""


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_include: tuple[str, ...] = (),
    reload_dirs: tuple[str, ...] = (),
) -> None:
    """Start a pounce server with the given urlshort App.

    Args:
        app: ASGI callable (urlshort App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Enable auto-reload on file changes.
        reload_include: Extra file extensions to watch when reload is
            active (e.g. ``(".yaml",)``).
        reload_dirs: Extra directories to watch alongside cwd.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_include=reload_include,
        reload_dirs=reload_dirs,
    )
    server = Server(config, app)
    server.run()
