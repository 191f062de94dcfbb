"""Recursive scan of the routes directory.

Entries are classified the way ``lstat`` reports them: regular files are
collected, directories are walked, and everything else (symlinks,
sockets, FIFOs, ...) is skipped.  The result is sorted by POSIX relative
path so registration order does not depend on the filesystem.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from fsroute.discovery.types import RouteFile
from fsroute.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import Collection, Iterator


def scan_routes(root_dir: str | Path, *, ignore: Collection[str] = ()) -> list[Path]:
    """Return the absolute path of every regular file under *root_dir*.

    Args:
        root_dir: The routes directory.
        ignore: File or directory names to skip wherever they appear
            (e.g. ``("__pycache__",)``).

    Raises:
        ConfigurationError: If *root_dir* does not exist or is not a
            directory.
    """
    return [route_file.path for route_file in iter_route_files(root_dir, ignore=ignore)]


def iter_route_files(root_dir: str | Path, *, ignore: Collection[str] = ()) -> Iterator[RouteFile]:
    """Iterate over a :class:`RouteFile` for every regular file under *root_dir*.

    Same ordering and error behaviour as :func:`scan_routes`; the tree
    is listed and validated before this returns.
    """
    root = Path(root_dir).absolute()
    if not root.exists():
        msg = f"Routes directory does not exist: {root}"
        raise ConfigurationError(msg)
    if not root.is_dir():
        msg = f"Routes path is not a directory: {root}"
        raise ConfigurationError(msg)

    files: list[Path] = []
    _walk_directory(root, frozenset(ignore), files)

    route_files = [RouteFile(path=file, relative=file.relative_to(root).as_posix()) for file in files]
    route_files.sort(key=lambda route_file: route_file.relative)
    return iter(route_files)


def _walk_directory(directory: Path, ignore: frozenset[str], files: list[Path]) -> None:
    """Collect regular files below *directory* into *files*."""
    for item in directory.iterdir():
        if item.name in ignore or item.is_symlink():
            continue
        if item.is_file():
            files.append(item)
        elif item.is_dir():
            _walk_directory(item, ignore, files)
