"""Rendered output as an HTTP response.

``Views.render`` and ``Views.render_stream`` hand back a ``Response``;
the application's server adapter turns it into bytes on the wire.
Adjustments (status, extra headers) are made on copies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace

from warble.http.request import STREAM_MIME

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


@dataclass(frozen=True, slots=True)
class Response:
    """A finished render: markup, status and content type.

    Usage::

        response = views.render(request, "events/new", data).with_status(422)
    """

    body: str = ""
    status: int = 200
    content_type: str = HTML_CONTENT_TYPE
    headers: tuple[tuple[str, str], ...] = ()

    @property
    def is_stream(self) -> bool:
        """True for Turbo Stream responses."""
        return self.content_type == STREAM_MIME

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Copy with *name* appended; earlier values for *name* are kept."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        return replace(self, headers=self.headers + tuple(headers.items()))

    def with_content_type(self, content_type: str) -> Response:
        return replace(self, content_type=content_type)

    def header(self, name: str, default: str | None = None) -> str | None:
        """First value of *name*, compared case-insensitively."""
        wanted = name.lower()
        return next((v for k, v in self.headers if k.lower() == wanted), default)
