"""``urlshort run`` — serve a redirect file with the development server.

Decodes the file up front so a malformed document fails before any
socket is bound.
"""

import argparse
import logging
import sys

from urlshort.app import App
from urlshort.config import AppConfig
from urlshort.errors import UrlshortError


def run_server(args: argparse.Namespace) -> None:
    """Build an App from ``args.file`` and start the dev server.

    CLI flags override ``AppConfig`` defaults. Unmatched paths get the
    ``not_found`` fallback.
    """
    defaults = AppConfig()
    config = AppConfig(
        host=args.host or defaults.host,
        port=args.port if args.port is not None else defaults.port,
        debug=args.debug,
        reload_include=(".yaml", ".yml", ".json") if args.debug else (),
        log_level=args.log_level or defaults.log_level,
    )

    logging.basicConfig(
        level=config.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        app = App.from_file(args.file, config=config)
    except UrlshortError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()
