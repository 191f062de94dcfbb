"""Default handler loader: import a route file as a Python module.

Every public callable defined in the route module becomes an entry of
the handler set, keyed by its name.  Imported callables are left out,
so ``from lib import get`` does not bind a GET handler.  A module that
defines ``__all__`` exports exactly the names listed there.  Names that are not HTTP verbs are carried along and
ignored later by the binder::

    # routes/users/(id).py
    def get(request):
        return Response.json({"id": request.path_params["id"]})

    def delete(request):
        ...
"""

import importlib.util
from pathlib import Path

from fsroute.discovery.types import HandlerSet
from fsroute.errors import ModuleLoadError


def load_handlers(path: str | Path) -> HandlerSet:
    """Execute *path* as a module and return its exported callables.

    Raises:
        ModuleLoadError: If the file is not importable as Python source,
            or executing it raises.  The original error is chained.
    """
    file = Path(path)
    module_name = f"_route_{file.stem}_{id(file)}"
    spec = importlib.util.spec_from_file_location(module_name, file)
    if spec is None or spec.loader is None:
        raise ModuleLoadError(file, "not a Python module")

    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        raise ModuleLoadError(file, f"{type(exc).__name__}: {exc}") from exc

    namespace = vars(module)
    exported = namespace.get("__all__")
    if exported is not None:
        names = list(exported)
    else:
        names = [
            name
            for name, value in namespace.items()
            if not name.startswith("_") and getattr(value, "__module__", None) == module_name
        ]

    handlers: HandlerSet = {}
    for name in names:
        value = namespace.get(name)
        if value is not None and callable(value):
            handlers[name] = value
    return handlers
