"""``fsroute call`` — dispatch a single request against a routes directory.

Handy for checking what a route file answers without a server::

    fsroute call routes GET /users/42
"""

import argparse
import sys
from pathlib import Path

import anyio

from fsroute.errors import ConfigurationError, HTTPError, ModuleLoadError
from fsroute.file_router import FileRouter
from fsroute.http.request import Request
from fsroute.http.response import Response


def run_call(args: argparse.Namespace) -> None:
    """Dispatch ``args.method`` ``args.path`` and print the result.

    A :class:`Response` prints as its status line followed by the body;
    any other return value is printed as-is.  Routing errors exit 1.
    """
    try:
        file_router = FileRouter(
            routes=Path(args.directory).absolute(),
            root_file=args.root_file,
        )
    except (ConfigurationError, ModuleLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    request = Request(method=args.method.upper(), path=args.path)
    try:
        result = anyio.run(file_router.router.dispatch, request)
    except HTTPError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if isinstance(result, Response):
        print(f"{result.status} {result.content_type}")
        print(result.text)
    else:
        print(result)
