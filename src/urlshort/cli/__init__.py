"""urlshort CLI — serve and validate redirect files.

Entry point registered as ``urlshort`` in ``pyproject.toml``::

    [project.scripts]
    urlshort = "urlshort.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``urlshort`` command."""
    parser = argparse.ArgumentParser(
        prog="urlshort",
        description="urlshort — exact-path URL redirects for ASGI.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- urlshort run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve redirects from a file")
    run_parser.add_argument(
        "file",
        help="Redirect file (.yaml, .yml or .json)",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Reload on file changes and show tracebacks in 500 responses",
    )
    run_parser.add_argument(
        "--log-level",
        default=None,
        choices=["debug", "info", "warning", "error"],
        help="Logging level (default: info)",
    )

    # -- urlshort check ---------------------------------------------------
    check_parser = subparsers.add_parser("check", help="Validate a redirect file")
    check_parser.add_argument(
        "file",
        help="Redirect file (.yaml, .yml or .json)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from urlshort.cli._run import run_server

        run_server(args)
    elif args.command == "check":
        from urlshort.cli._check import run_check

        run_check(args)
