"""fsroute CLI — inspect the routes a directory tree produces.

Entry point registered as ``fsroute`` in ``pyproject.toml``::

    [project.scripts]
    fsroute = "fsroute.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``fsroute`` command."""
    parser = argparse.ArgumentParser(
        prog="fsroute",
        description="fsroute: map a directory tree of route files onto URL paths.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- fsroute routes ---------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List the routes a directory produces")
    routes_parser.add_argument("directory", help="Routes directory")
    routes_parser.add_argument(
        "--root-file",
        default="index",
        help="File name that maps to its directory's URL (default: index)",
    )
    routes_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each binding to stderr",
    )

    # -- fsroute call -----------------------------------------------------
    call_parser = subparsers.add_parser("call", help="Dispatch one request and print the response")
    call_parser.add_argument("directory", help="Routes directory")
    call_parser.add_argument("method", help="HTTP method (e.g. GET)")
    call_parser.add_argument("path", help="Request path (e.g. /users/42)")
    call_parser.add_argument(
        "--root-file",
        default="index",
        help="File name that maps to its directory's URL (default: index)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from fsroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "call":
        from fsroute.cli._call import run_call

        run_call(args)
