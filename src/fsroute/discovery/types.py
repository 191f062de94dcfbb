"""Data types for filesystem route discovery.

Built once at router construction; nothing here outlives a scan.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol, TypeAlias

# Verb name (``"get"``, ``"post"``, ...) to handler callable, as exported
# by one route file.  A fresh dict per file, so hooks may rewrite it.
HandlerSet: TypeAlias = dict[str, Callable[..., Any]]


class HandlerLoader(Protocol):
    """Turns a route file into its :data:`HandlerSet`.

    The default loader imports the file as a Python module.  Anything
    with this signature can stand in for it, e.g. a lookup into a
    prebuilt registry keyed by path.  Implementations raise
    :class:`~fsroute.errors.ModuleLoadError` when a file cannot be loaded.
    """

    def __call__(self, path: Path, /) -> HandlerSet: ...


@dataclass(frozen=True, slots=True)
class RouteFile:
    """A regular file found under the routes directory.

    Attributes:
        path: Absolute filesystem path.
        relative: POSIX-style path relative to the scan root.
    """

    path: Path
    relative: str
