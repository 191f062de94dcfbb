"""Immutable request handed to route handlers.

fsroute does not parse requests off the wire.  The host server builds a
``Request`` and the router fills in ``path_params`` when it dispatches.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request as seen by a route handler."""

    method: str
    path: str
    path_params: dict[str, str] = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes = b""
    # Arbitrary host-server data (the original ASGI scope, a session, ...)
    extra: Mapping[str, Any] = field(default_factory=dict)

    def with_path_params(self, path_params: dict[str, str]) -> Request:
        """Return a copy carrying the parameters captured by the router."""
        return replace(self, path_params=path_params)
