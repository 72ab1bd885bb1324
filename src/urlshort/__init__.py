"""urlshort — exact-path URL redirects for ASGI.

Maps request paths to redirect destinations from a static mapping or a
YAML/JSON document, deferring unmatched paths to a fallback handler.

Basic usage::

    from urlshort import App, map_handler, not_found

    handler = map_handler({"/go": "https://golang.org"}, not_found)
    app = App(handler)

From a file::

    app = App.from_file("redirects.yaml")
    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "RecordDecodeError",
    "Redirect",
    "RedirectRecord",
    "Request",
    "Response",
    "UrlshortError",
    "build_mapping",
    "file_handler",
    "json_handler",
    "map_handler",
    "not_found",
    "yaml_handler",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import urlshort`` fast (PyYAML loads only when needed).
    """
    if name == "App":
        from urlshort.app import App

        return App

    if name == "AppConfig":
        from urlshort.config import AppConfig

        return AppConfig

    if name == "Request":
        from urlshort.http.request import Request

        return Request

    if name in ("Response", "Redirect"):
        from urlshort.http import response as _resp

        return getattr(_resp, name)

    if name in ("RedirectRecord", "build_mapping"):
        from urlshort import records as _records

        return getattr(_records, name)

    if name in ("map_handler", "yaml_handler", "json_handler", "file_handler"):
        from urlshort import handler as _handler

        return getattr(_handler, name)

    if name == "not_found":
        from urlshort.fallbacks import not_found

        return not_found

    if name in ("UrlshortError", "ConfigurationError", "RecordDecodeError"):
        from urlshort import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
