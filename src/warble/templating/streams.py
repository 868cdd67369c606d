"""Turbo Stream envelopes for differential page updates.

A stream response carries one or more ``<turbo-stream>`` elements, each
naming an action and a target DOM ID and wrapping the rendered markup in
a ``<template>``::

    <turbo-stream action="append" target="guests"><template>
    <li id="guest-7">Ada</li>
    </template></turbo-stream>

``remove`` needs no markup: no partial is looked up or rendered for it.
"""

from __future__ import annotations

import enum
import html
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from warble.config import ViewsConfig
from warble.context import RenderContext
from warble.errors import ViewNotFound
from warble.http.request import STREAM_MIME, Request
from warble.views.layout import resolve_layout
from warble.views.renderer import Renderer

__all__ = [
    "STREAM_MIME",
    "StreamAction",
    "StreamEnvelope",
    "accepts_stream",
    "encode_stream",
    "format_stream",
]


class StreamAction(enum.StrEnum):
    """The DOM operation a stream element asks the client to perform."""

    APPEND = "append"
    PREPEND = "prepend"
    REPLACE = "replace"
    UPDATE = "update"
    REMOVE = "remove"
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True, slots=True)
class StreamEnvelope:
    """One action-tagged fragment.

    Attributes:
        action: What to do with the target element.
        target: DOM ID of the element to act on.
        content: Rendered markup, empty for ``remove``.
    """

    action: StreamAction
    target: str
    content: str = ""

    def __str__(self) -> str:
        return format_stream(self)


def format_stream(envelope: StreamEnvelope) -> str:
    """Serialise *envelope* as a ``<turbo-stream>`` element.

    Attribute values are escaped; the content is emitted verbatim.
    """
    action = html.escape(str(envelope.action), quote=True)
    target = html.escape(envelope.target, quote=True)
    return (
        f'<turbo-stream action="{action}" target="{target}"><template>\n'
        f"{envelope.content}\n"
        f"</template></turbo-stream>"
    )


def encode_stream(
    renderer: Renderer,
    config: ViewsConfig,
    action: StreamAction | str,
    target: str,
    partial_name: str,
    data: Mapping[str, Any] | None = None,
    *,
    request: Request | None = None,
) -> StreamEnvelope:
    """Render a partial into a stream envelope.

    Args:
        renderer: Renderer bound to the current registry.
        config: View configuration (decides the fixed partial wrapper).
        action: Stream action; strings are converted to ``StreamAction``.
        target: DOM ID the action applies to.
        partial_name: Logical name of the partial to render.  Ignored for
            ``remove``.
        data: Render data.
        request: Current request, passed to the data injector.

    Raises:
        ValueError: If *action* is not a known stream action.
        ViewNotFound: If the partial does not exist.
        ExecutionError: If rendering fails.
    """
    action = StreamAction(action)
    if action is StreamAction.REMOVE:
        return StreamEnvelope(action=action, target=target)

    view = renderer.registry.partial(partial_name)
    if view is None:
        raise ViewNotFound(partial_name, "partial")

    # Request overrides never apply to stream content: always the fixed
    # partial wrapper (or the bare body when the tree has none).
    layout = resolve_layout(view, RenderContext(data=data or {}), config)
    content = renderer.execute(view, layout, data, request=request)
    return StreamEnvelope(action=action, target=target, content=content)


def accepts_stream(request: Request) -> bool:
    """True if the client announced it can handle stream responses."""
    return request.accepts_stream
