"""``fsroute routes`` — list the routes bound from a directory.

Builds a router from a routes directory and prints every binding with
method, path, and the file it came from.
"""

import argparse
import logging
import sys
from pathlib import Path

from fsroute.errors import ConfigurationError, ModuleLoadError
from fsroute.file_router import FileRouter


def run_routes(args: argparse.Namespace) -> None:
    """List the routes produced by ``args.directory``.

    Prints a table of METHOD, PATH, and SOURCE.  Fallback bindings are
    shown with method ``*``.
    """
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        file_router = FileRouter(
            routes=Path(args.directory).absolute(),
            root_file=args.root_file,
        )
    except (ConfigurationError, ModuleLoadError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = file_router.router.routes
    if not routes:
        print("No routes registered.")
        return

    # Build rows: (methods_str, path, source)
    rows: list[tuple[str, str, str]] = []
    for route in routes:
        methods_str = ", ".join(sorted(route.methods))
        source = route.source or getattr(route.handler, "__name__", str(route.handler))
        rows.append((methods_str, route.path or "/", source))

    # Column widths
    max_methods = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    # Print table
    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "SOURCE"))
    sep_len = max_methods + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for methods_str, path, source in rows:
        print(fmt.format(methods_str, path, source))
