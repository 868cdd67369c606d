"""The shape warble's layout middleware is written against.

Warble does not own the middleware chain; the host application does.
These types describe the chain step a layout middleware sits in, so
``ApplyLayout`` and ``OptimizeTurboFrame`` drop into any stack that
passes ``(request, next)``.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from warble.http.request import Request
from warble.http.response import Response

type Next = Callable[[Request], Awaitable[Response]]


class Middleware(Protocol):
    """A chain step that may hand a modified request copy downstream.

    A plain coroutine function fits as well as a class::

        async def admin_shell(request: Request, next: Next) -> Response:
            return await next(with_layout(request, "admin"))
    """

    async def __call__(self, request: Request, next: Next) -> Response: ...
