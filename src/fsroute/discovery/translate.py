"""File path to route translation.

A pure string transformation: nothing here touches the filesystem.
The steps run in a fixed order, and each one depends on the previous::

    /srv/app/routes/users/(id)/index.py
    -> /users/(id)/index.py     strip the routes directory
    -> /users/(id)/index        strip the extension
    -> /users/(id)/             strip the root file
    -> /users/:id/              (param) -> :param
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import PurePath
    from types import ModuleType


def path_to_route(
    file_path: str | PurePath,
    routes_dir: str | PurePath,
    root_file: str = "index",
    *,
    pathmod: ModuleType = os.path,
) -> str:
    """Translate a route file's path into a route definition.

    Args:
        file_path: Path of the route file, located under *routes_dir*.
        routes_dir: The directory the scan started from.
        root_file: Base name (without extension) that stands for its
            directory's own URL.
        pathmod: ``os.path``-compatible module (``posixpath``, ``ntpath``)
            defining the separator conventions of both paths.

    Returns:
        The route, always ``/``-separated.  A root file directly inside
        *routes_dir* yields ``""``, the root of the mounted router.

    Raises:
        ValueError: If *file_path* is not inside *routes_dir*.

    Examples::

        path_to_route("/routes/users/(id)/index.py", "/routes")  -> "/users/:id/"
        path_to_route("/routes/products/list.py", "/routes")     -> "/products/list"
        path_to_route("/routes/index.py", "/routes")             -> ""
    """
    seps = pathmod.sep + (pathmod.altsep or "")
    path = os.fspath(file_path)
    root = os.fspath(routes_dir).rstrip(seps)

    if not path.startswith(root) or len(path) == len(root) or path[len(root)] not in seps:
        msg = f"{path!r} is not a file inside {os.fspath(routes_dir)!r}"
        raise ValueError(msg)

    # Collapse "//", "." and ".." without touching the filesystem
    route = pathmod.normpath(pathmod.sep + path[len(root) :].lstrip(seps))

    # Only the final segment's extension; "a.py.d/x.py" keeps its folder name
    route, _ext = pathmod.splitext(route)

    # Trailing text, not a whole segment: "/products/reindex" becomes "/products/re"
    if root_file and route.endswith(root_file):
        route = route[: -len(root_file)]

    route = route.replace("(", ":").replace(")", "")
    route = route.replace(pathmod.sep, "/")

    if route == "/":
        return ""
    return route
