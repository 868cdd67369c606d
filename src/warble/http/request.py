"""Immutable HTTP request, as seen by the view engine.

Frozen metadata plus the two request-scoped layout overrides the engine
honours.  Overrides are attached by returning a modified copy, never by
mutating the request other handlers hold.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from warble.http.headers import Headers

STREAM_MIME = "text/vnd.turbo-stream.html"


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``layout`` and ``skip_layout`` carry the render overrides set by
    :func:`warble.context.with_layout`, :func:`warble.context.strip_layout`
    or the layout middleware.
    """

    method: str = "GET"
    path: str = "/"
    headers: Headers = field(default_factory=Headers)
    layout: str | None = None
    skip_layout: bool = False

    # -- Computed properties --

    @property
    def turbo_frame(self) -> str | None:
        """The frame ID from the ``Turbo-Frame`` header."""
        return self.headers.get("turbo-frame") or None

    @property
    def accepts_stream(self) -> bool:
        """True if the ``Accept`` header lists the Turbo Stream MIME type."""
        return STREAM_MIME in (self.headers.get("accept") or "")

    # -- Factory --

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope.get("method", "GET"),
            path=scope.get("path", "/"),
            headers=Headers(tuple(scope.get("headers", ()))),
        )
