"""Routing — trie-based route table with per-path fallback bindings.

Routes are registered while the file tree is bound and compiled into
an immutable lookup structure once binding succeeds.
"""

from fsroute.routing.route import ANY_METHOD, HTTP_METHODS, PathSegment, Route, RouteMatch
from fsroute.routing.router import Router, parse_path

__all__ = [
    "ANY_METHOD",
    "HTTP_METHODS",
    "PathSegment",
    "Route",
    "RouteMatch",
    "Router",
    "parse_path",
]
