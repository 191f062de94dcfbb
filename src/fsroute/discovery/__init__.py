"""Filesystem route discovery.

The directory tree under the routes directory defines URL paths.
Folder and file names wrapped in ``(parens)`` become path parameters,
and the root file (``index`` by default) maps to its directory's URL.

Conventions::

    routes/
      index.py           # /            (the router root)
      products/
        list.py          # /products/list
      users/
        index.py         # /users/
        (id)/
          index.py       # /users/:id/
          posts.py       # /users/:id/posts
"""

from fsroute.discovery.loader import load_handlers
from fsroute.discovery.scanner import iter_route_files, scan_routes
from fsroute.discovery.translate import path_to_route
from fsroute.discovery.types import HandlerLoader, HandlerSet, RouteFile

__all__ = [
    "HandlerLoader",
    "HandlerSet",
    "RouteFile",
    "iter_route_files",
    "load_handlers",
    "path_to_route",
    "scan_routes",
]
