"""Router with trie-based path matching and per-path fallbacks.

Routes are registered while the route tree is bound and compiled into
an immutable lookup structure once binding succeeds.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fsroute._internal.invoke import invoke
from fsroute.errors import ConfigurationError, MethodNotAllowed, NotFound
from fsroute.routing.route import ANY_METHOD, PathSegment, Route, RouteMatch

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from fsroute.http.request import Request

logger = logging.getLogger("fsroute.routing")


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        ""                -> []
        "/users"          -> [PathSegment("users")]
        "/users/:id/"     -> [PathSegment("users"), PathSegment(":id", is_param=True, ...)]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith(":"):
            param_name = part[1:]
            if not param_name:
                msg = f"Route {path!r} has a parameter segment without a name."
                raise ConfigurationError(msg)
            segments.append(PathSegment(value=part, is_param=True, param_name=param_name))
        else:
            segments.append(PathSegment(value=part))
    return segments


class _TrieNode:
    """A node in the route trie. Mutable during registration only."""

    __slots__ = ("children", "fallback", "param_children", "routes_by_method")

    def __init__(self) -> None:
        # Static segment children: "users" -> node
        self.children: dict[str, _TrieNode] = {}
        # Parameter children keyed by parameter name, tried in insertion order
        self.param_children: dict[str, _TrieNode] = {}
        # Routes at this node, keyed by HTTP method
        self.routes_by_method: dict[str, Route] = {}
        # Answers any method missing from routes_by_method
        self.fallback: Route | None = None

    @property
    def is_terminal(self) -> bool:
        return bool(self.routes_by_method) or self.fallback is not None


class Router:
    """Router with trie-based path matching.

    A path may carry one fallback route in addition to its per-method
    routes.  The fallback is only consulted after the method table
    misses, so it never shadows a bound verb regardless of registration
    order.

    Usage::

        router = Router()
        router.add(Route("/users/:id", handler, frozenset({"GET"})))
        router.add_fallback("/users/:id", not_supported)
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_root", "_routes")

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the router. Must be called before compile().

        The first route bound to a (path, method) pair wins; later ones
        are ignored with a warning.
        """
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        node = self._root
        for seg in parse_path(route.path):
            if seg.is_param:
                name = seg.param_name or ""
                if name not in node.param_children:
                    node.param_children[name] = _TrieNode()
                node = node.param_children[name]
            else:
                if seg.value not in node.children:
                    node.children[seg.value] = _TrieNode()
                node = node.children[seg.value]

        accepted = False
        for method in sorted(route.methods):
            if method == ANY_METHOD:
                if node.fallback is None:
                    node.fallback = route
                    accepted = True
                continue
            existing = node.routes_by_method.get(method)
            if existing is not None:
                logger.warning(
                    "%s %r is already bound by %s; ignoring binding from %s",
                    method,
                    route.path,
                    existing.source or _handler_name(existing.handler),
                    route.source or _handler_name(route.handler),
                )
                continue
            node.routes_by_method[method] = route
            accepted = True

        if accepted:
            self._routes.append(route)

    def add_fallback(
        self,
        path: str,
        handler: Callable[..., Any],
        *,
        source: str | None = None,
    ) -> None:
        """Bind *handler* to every method of *path* not bound explicitly."""
        self.add(Route(path=path, handler=handler, methods=frozenset({ANY_METHOD}), source=source))

    @property
    def routes(self) -> list[Route]:
        """Return all accepted routes in registration order."""
        return list(self._routes)

    @property
    def compiled(self) -> bool:
        return self._compiled

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request path and method against registered routes.

        Every node the path reaches is a candidate, static segments
        ahead of parameters.  A candidate binding the method wins over
        any fallback; ``HEAD`` is served by ``GET`` when no candidate
        binds it explicitly.  Only then does the first candidate with a
        fallback answer.

        Returns a ``RouteMatch`` on success.
        Raises ``NotFound`` if no route matches the path.
        Raises ``MethodNotAllowed`` if the path matches, the method
        doesn't, and no candidate has a fallback.
        """
        parts = [p for p in path.strip("/").split("/") if p]
        candidates = list(self._iter_matches(self._root, parts, 0, {}))

        if not candidates:
            raise NotFound(f"No route matches {method} {path!r}")

        method = method.upper()
        lookups = (method, "GET") if method == "HEAD" else (method,)
        for lookup in lookups:
            for node, params in candidates:
                route = node.routes_by_method.get(lookup)
                if route is not None:
                    return RouteMatch(route=route, path_params=params)

        for node, params in candidates:
            if node.fallback is not None:
                return RouteMatch(route=node.fallback, path_params=params)

        allowed = frozenset().union(*(node.routes_by_method for node, _ in candidates))
        raise MethodNotAllowed(allowed)

    async def dispatch(self, request: Request) -> Any:
        """Route *request* and return whatever its handler returns.

        Sync and async handlers are both supported.  Routing failures
        propagate as ``NotFound`` / ``MethodNotAllowed``.
        """
        match = self.match(request.method, request.path)
        return await invoke(match.route.handler, request.with_path_params(match.path_params))

    def _iter_matches(
        self,
        node: _TrieNode,
        parts: list[str],
        index: int,
        params: dict[str, str],
    ) -> Iterator[tuple[_TrieNode, dict[str, str]]]:
        """Yield every terminal node matching the path, in precedence order."""
        if index == len(parts):
            if node.is_terminal:
                yield node, params
            return

        part = parts[index]

        # 1. Static child first (exact match)
        if part in node.children:
            yield from self._iter_matches(node.children[part], parts, index + 1, params)

        # 2. Parameter children, in registration order
        for name, child in node.param_children.items():
            yield from self._iter_matches(child, parts, index + 1, {**params, name: part})


def _handler_name(handler: Callable[..., Any]) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
