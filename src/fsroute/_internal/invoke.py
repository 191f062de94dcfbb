"""Invoke helpers — call sync or async handlers uniformly.

Route handlers can be ``def`` or ``async def``. Any code that calls
a user-provided handler must handle both cases. This module provides
a single helper so the sync/async check lives in exactly one place.

Usage::

    from fsroute._internal.invoke import invoke

    result = await invoke(handler, request)
"""

import inspect
from typing import Any


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result if it's awaitable.

    Works with both sync and async callables::

        # routes/users/(id).py
        def get(request):
            return Response.json({"id": request.path_params["id"]})

        async def delete(request):
            await users.remove(request.path_params["id"])
            return Response(status=204)
    """
    result = handler(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
