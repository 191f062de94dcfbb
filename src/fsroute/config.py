"""Router configuration.

RouterConfig is a frozen dataclass: immutable after creation, one per
router, no process-wide defaults to mutate.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fsroute.discovery.loader import load_handlers
from fsroute.discovery.types import HandlerLoader, HandlerSet
from fsroute.fallback import method_not_supported


def _before_setup_route(route: str, handlers: HandlerSet) -> None:
    """Default hook: leave the route untouched."""


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """File router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(routes="api", root_file="page")
    """

    # Routes directory.  A string is always taken relative to base_path
    # ("/routes" means <base_path>/routes); an absolute Path is used as-is.
    routes: str | Path = "/routes"

    # Directory routes is resolved against.  None = the entry script's
    # directory, or the working directory when there is no script.
    base_path: str | Path | None = None

    # File base name (sans extension) that maps to its directory's URL
    root_file: str = "index"

    # Called with (route, handlers) before a file is bound.  May wrap or
    # replace entries of the handlers dict; the return value is ignored.
    before_setup_route: Callable[[str, HandlerSet], Any] = _before_setup_route

    # Answers verbs a route file doesn't export
    unsupported_method_handler: Callable[..., Any] = method_not_supported

    # Turns a route file into its handler set
    loader: HandlerLoader = load_handlers

    # File and directory names skipped while scanning
    ignore: tuple[str, ...] = ("__pycache__",)
