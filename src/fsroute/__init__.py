"""fsroute — file-system-as-router.

Lay out route files in a directory and get a router back: folders and
file names become URL paths, ``(name)`` segments become parameters, and
each file's ``get`` / ``post`` / ... functions become its verbs.

Basic usage::

    # routes/users/(id)/index.py
    def get(request):
        return Response.json({"id": request.path_params["id"]})

    from fsroute import Request, create_router

    router = create_router(routes="routes")
    response = await router.dispatch(Request("GET", "/users/42"))
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "FileRouter",
    "FsRouteError",
    "HTTPError",
    "MethodNotAllowed",
    "ModuleLoadError",
    "NotFound",
    "Request",
    "Response",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "create_router",
    "path_to_route",
    "scan_routes",
]

# Public name -> defining module, resolved on first attribute access
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "fsroute.errors",
    "FileRouter": "fsroute.file_router",
    "FsRouteError": "fsroute.errors",
    "HTTPError": "fsroute.errors",
    "MethodNotAllowed": "fsroute.errors",
    "ModuleLoadError": "fsroute.errors",
    "NotFound": "fsroute.errors",
    "Request": "fsroute.http.request",
    "Response": "fsroute.http.response",
    "Route": "fsroute.routing.route",
    "RouteMatch": "fsroute.routing.route",
    "Router": "fsroute.routing.router",
    "RouterConfig": "fsroute.config",
    "create_router": "fsroute.file_router",
    "path_to_route": "fsroute.discovery.translate",
    "scan_routes": "fsroute.discovery.scanner",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import fsroute`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
