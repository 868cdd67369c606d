"""Middleware: Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    ApplyLayout -- Render downstream pages inside a named layout
    OptimizeTurboFrame -- Skip layouts for Turbo Frame requests
"""

from warble.middleware.layout import ApplyLayout, OptimizeTurboFrame
from warble.middleware.protocol import Middleware, Next

__all__ = [
    "ApplyLayout",
    "Middleware",
    "Next",
    "OptimizeTurboFrame",
]
