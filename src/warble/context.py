"""Request-scoped render overrides.

Provides:
- ``RenderContext``: the per-render view of the layout override, the
  skip-layout flag and the caller's data.
- ``with_layout`` / ``strip_layout``: return a copy of the request
  carrying an override.  The original request is left untouched, so the
  override only applies to the handlers the copy is passed to.

Thread safety:
    Requests and contexts are frozen dataclasses created per request.
    Nothing here is shared between requests.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any

from warble.http.request import Request

_EMPTY: Mapping[str, Any] = MappingProxyType({})


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Overrides and data for a single render call.

    Attributes:
        layout: Bare layout name chosen by the handler (``"alt"`` selects
            ``layouts/alt``), or ``None`` for the default.
        skip_layout: Render only the view's body block.
        data: The caller's render data.
    """

    layout: str | None = None
    skip_layout: bool = False
    data: Mapping[str, Any] = field(default=_EMPTY)

    @property
    def state(self) -> str:
        """The resolver state this context puts a render in."""
        if self.skip_layout:
            return "skip"
        if self.layout is not None:
            return "override"
        return "default"

    @classmethod
    def from_request(
        cls,
        request: Request | None,
        data: Mapping[str, Any] | None = None,
    ) -> RenderContext:
        """Build the context for rendering *data* on behalf of *request*."""
        data = _EMPTY if data is None else data
        if request is None:
            return cls(data=data)
        return cls(layout=request.layout, skip_layout=request.skip_layout, data=data)


def with_layout(request: Request, layout: str) -> Request:
    """Return a copy of *request* that renders pages inside ``layouts/<layout>``."""
    return replace(request, layout=layout)


def strip_layout(request: Request) -> Request:
    """Return a copy of *request* that renders views without any layout."""
    return replace(request, skip_layout=True)
