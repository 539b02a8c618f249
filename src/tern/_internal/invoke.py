"""Invoke helper — call sync or async callables uniformly.

Handlers and middleware can be ``def`` or ``async def``. Everything
that calls user code goes through :func:`invoke` so the sync/async
check lives in exactly one place.

Usage::

    from tern._internal.invoke import invoke

    await invoke(middleware, request)
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it is awaitable.

    Exceptions raised by *func* (or by the awaited result) propagate
    unchanged::

        def stamp(request):
            request.seen = True

        async def load_user(request):
            request.user = await users.lookup(request.headers["x-user"])
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
