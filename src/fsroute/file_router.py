"""Bind a directory tree of route files onto a router.

Each regular file under the routes directory becomes one route.  The
file's path decides the URL, the functions it exports decide the verbs::

    from fsroute import create_router

    router = create_router(routes="routes")
    response = await router.dispatch(Request("GET", "/users/42"))

Construction is all-or-nothing: the router is only exposed once every
file has been loaded and bound.
"""

import logging
import os
import sys
from collections.abc import Callable, Iterator
from dataclasses import replace
from pathlib import Path
from typing import Any

from fsroute.config import RouterConfig
from fsroute.discovery.scanner import iter_route_files
from fsroute.discovery.translate import path_to_route
from fsroute.discovery.types import HandlerSet, RouteFile
from fsroute.errors import ConfigurationError
from fsroute.routing.route import ANY_METHOD, HTTP_METHODS, Route
from fsroute.routing.router import Router

logger = logging.getLogger("fsroute.router")

# Handler-set key answering every verb not bound explicitly at its route
ALL_METHODS_KEY = "all"


def bind_handlers(
    router: Router,
    route: str,
    handlers: HandlerSet,
    *,
    fallback: Callable[..., Any],
    source: str | None = None,
) -> list[Route]:
    """Register one file's handler set at *route*.

    Keys naming a known HTTP verb are bound to that verb.  An ``all``
    handler answers the remaining verbs; without one, *fallback* does.
    Unknown keys and non-callable values are skipped silently.

    Returns the routes handed to the router, fallback last.
    """
    routes: list[Route] = []
    for key, handler in handlers.items():
        method = HTTP_METHODS.get(key)
        if method is None or not callable(handler):
            continue
        routes.append(Route(path=route, handler=handler, methods=frozenset({method}), source=source))

    catch_all = handlers.get(ALL_METHODS_KEY)
    if catch_all is None or not callable(catch_all):
        catch_all = fallback
    routes.append(Route(path=route, handler=catch_all, methods=frozenset({ANY_METHOD}), source=source))

    for r in routes:
        router.add(r)
        logger.debug("Bound %s %r from %s", ", ".join(sorted(r.methods)), route, source)
    return routes


def _check_config(config: RouterConfig) -> None:
    """Reject settings that would make every route wrong."""
    if not config.root_file or any(sep in config.root_file for sep in ("/", "\\", os.sep)):
        msg = f"root_file must be a bare file name, got {config.root_file!r}."
        raise ConfigurationError(msg)
    for name in ("before_setup_route", "unsupported_method_handler", "loader"):
        if not callable(getattr(config, name)):
            msg = f"{name} must be callable, got {type(getattr(config, name)).__name__}."
            raise ConfigurationError(msg)


class FileRouter:
    """A router populated from a directory tree of route files.

    Usage::

        file_router = FileRouter(RouterConfig(routes="api"))
        file_router.router.match("GET", "/users/42")

    Keyword overrides are merged over *config* (or the defaults)::

        FileRouter(root_file="page", base_path="/srv/app")

    Raises:
        ConfigurationError: The routes directory is missing, or a
            setting is invalid.
        ModuleLoadError: A route file could not be loaded.
    """

    __slots__ = ("_config", "_router", "_routes_directory")

    def __init__(self, config: RouterConfig | None = None, **overrides: Any) -> None:
        config = config or RouterConfig()
        if overrides:
            config = replace(config, **overrides)
        _check_config(config)
        self._config = config
        self._routes_directory = self.resolve(config.routes)

        # Built locally and only published once every file is bound
        router = Router()
        for route_file in self.route_files():
            route = self.path_to_route(route_file.path)
            handlers = config.loader(route_file.path)
            config.before_setup_route(route, handlers)
            bind_handlers(
                router,
                route,
                handlers,
                fallback=config.unsupported_method_handler,
                source=route_file.relative,
            )
        router.compile()
        self._router = router
        logger.debug("Bound %d routes from %s", len(router.routes), self._routes_directory)

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def router(self) -> Router:
        """The compiled router with every discovered route bound."""
        return self._router

    @property
    def routes_directory(self) -> Path:
        return self._routes_directory

    @property
    def base_path(self) -> Path:
        """Directory the routes setting is resolved against.

        ``config.base_path`` when set, otherwise the directory of the
        entry script, falling back to the working directory (REPL,
        ``python -c``).
        """
        if self._config.base_path is not None:
            return Path(self._config.base_path).absolute()
        main_file = getattr(sys.modules.get("__main__"), "__file__", None)
        if main_file:
            return Path(main_file).absolute().parent
        return Path.cwd()

    def resolve(self, unresolved: str | Path) -> Path:
        """Resolve a routes setting to an absolute directory path.

        Strings are relative to :attr:`base_path` even with a leading
        separator; absolute ``Path`` objects are returned unchanged.
        """
        if isinstance(unresolved, Path) and unresolved.is_absolute():
            return unresolved
        relative = os.fspath(unresolved).lstrip("/\\")
        return Path(os.path.normpath(self.base_path / relative))

    def route_files(self) -> Iterator[RouteFile]:
        """Every route file under the routes directory, in binding order."""
        return iter_route_files(self._routes_directory, ignore=self._config.ignore)

    def path_to_route(self, file_path: str | Path) -> str:
        """Translate a file under the routes directory to its route."""
        return path_to_route(file_path, self._routes_directory, self._config.root_file)


def create_router(config: RouterConfig | None = None, **overrides: Any) -> Router:
    """Build a :class:`FileRouter` and return its compiled router."""
    return FileRouter(config, **overrides).router
