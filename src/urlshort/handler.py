"""Redirect resolution — path lookup composed with a fallback.

``map_handler`` is the core: it closes over a read-only path mapping and
a fallback, and returns an async handler. A request whose path is an
exact key of the mapping gets a 302 to the mapped URL and nothing else
runs. Every other request is passed, unmodified, to the fallback, and
whatever the fallback returns is returned as-is.

The other constructors decode a document first, then delegate::

    handler = yaml_handler(b"- path: /go\\n  url: https://golang.org\\n", not_found)
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from urlshort._internal.invoke import invoke
from urlshort._internal.types import Fallback, Handler
from urlshort.decoding import load_records, parse_json, parse_yaml
from urlshort.errors import ConfigurationError
from urlshort.http.request import Request
from urlshort.http.response import Redirect
from urlshort.records import build_mapping

logger = logging.getLogger("urlshort.handler")


def map_handler(mapping: Mapping[str, str], fallback: Fallback) -> Handler:
    """Return a handler that redirects paths found in *mapping*.

    Matching is exact string comparison against ``request.path``: no
    normalization, no trailing-slash equivalence. A matched request is
    answered with ``302 Found`` and the fallback is not called.

    Raises:
        ConfigurationError: If *fallback* is not callable.
    """
    if not callable(fallback):
        msg = f"fallback must be callable, got {type(fallback).__name__}"
        raise ConfigurationError(msg)

    paths = MappingProxyType(dict(mapping))

    async def resolve(request: Request) -> Any:
        dest = paths.get(request.path)
        if dest is not None:
            logger.debug("Redirecting %s -> %s", request.path, dest)
            return Redirect(dest).to_response()
        return await invoke(fallback, request)

    return resolve


def yaml_handler(document: str | bytes, fallback: Fallback) -> Handler:
    """Build a redirect handler from a YAML document.

    The document must be a list of ``path``/``url`` entries::

        - path: /some-path
          url: https://www.some-url.com/demo

    Raises:
        RecordDecodeError: If the YAML is malformed. No handler is built.
    """
    return map_handler(build_mapping(parse_yaml(document)), fallback)


def json_handler(document: str | bytes, fallback: Fallback) -> Handler:
    """Build a redirect handler from a JSON document (list of objects)."""
    return map_handler(build_mapping(parse_json(document)), fallback)


def file_handler(path: str | Path, fallback: Fallback) -> Handler:
    """Build a redirect handler from a ``.yaml``, ``.yml`` or ``.json`` file."""
    return map_handler(build_mapping(load_records(path)), fallback)
