"""Layout override middleware.

Attach render overrides to every request a route group handles, instead
of calling :func:`warble.context.with_layout` in each handler.
"""

from warble.context import strip_layout, with_layout
from warble.http.request import Request
from warble.http.response import Response
from warble.middleware.protocol import Next


class ApplyLayout:
    """Render pages handled downstream inside ``layouts/<layout>``.

    Usage::

        admin = ApplyLayout("admin")
        response = await admin(request, handler)
    """

    __slots__ = ("_layout",)

    def __init__(self, layout: str) -> None:
        self._layout = layout

    @property
    def layout(self) -> str:
        return self._layout

    async def __call__(self, request: Request, next: Next) -> Response:
        return await next(with_layout(request, self._layout))


class OptimizeTurboFrame:
    """Skip the layout for Turbo Frame requests.

    A frame request only swaps the matching ``<turbo-frame>`` element, so
    the surrounding shell would be discarded by the client anyway.
    """

    __slots__ = ()

    async def __call__(self, request: Request, next: Next) -> Response:
        if request.turbo_frame:
            request = strip_layout(request)
        return await next(request)
