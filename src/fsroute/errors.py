"""fsroute exception hierarchy.

Shared across the scanner, loader, binder, and router so every module
raises and catches the same types.
"""

from dataclasses import dataclass
from pathlib import Path


class FsRouteError(Exception):
    """Base for all fsroute-specific errors."""


class ConfigurationError(FsRouteError):
    """Raised when router configuration is invalid.

    Most commonly: the routes directory does not exist.  Raised during
    ``FileRouter`` construction, before anything is registered.
    """


class ModuleLoadError(FsRouteError):
    """A discovered route file could not be loaded as a handler module.

    The underlying exception (syntax error, failing import, ...) is
    chained as ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Cannot load route module {str(self.path)!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


@dataclass(frozen=True, slots=True)
class HTTPError(FsRouteError):
    """A routing failure carrying the status a server should answer with.

    ``Router.match`` raises the subclasses below; fsroute never writes a
    response for them itself.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """No route file maps onto the requested path."""

    def __init__(self, detail: str = "No route for this path") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """The path is routed, but no file binds the verb and none has a fallback.

    ``headers`` holds an ``Allow`` entry with the bound verbs, sorted.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        verbs = ", ".join(sorted(allowed))
        if not detail:
            detail = f"Route only binds {verbs}"
        super().__init__(status=405, detail=detail, headers=(("Allow", verbs),))
