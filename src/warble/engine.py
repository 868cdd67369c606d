"""The Views facade.

Builds the registry once at construction and exposes the render entry
points request handlers call.  Everything a render needs (config,
injector, request functions) is passed in explicitly; there is no
module-level state.

Basic usage::

    views = Views(
        ViewsConfig(root="views"),
        injector=lambda request, data: data | {"csrf": token_for(request)},
    )

    def show_event(request):
        return views.render(request, "events/show", {"event": event})

    def add_guest(request):
        return views.render_stream("append", "guests", request, "guests/row", {"guest": guest})
"""

from __future__ import annotations

import io
import threading
from collections.abc import Callable, Mapping
from typing import Any

from warble.config import ViewsConfig
from warble.context import RenderContext
from warble.errors import RenderError, ViewNotFound
from warble.http.request import STREAM_MIME, Request
from warble.http.response import Response
from warble.server.errors import handle_render_error
from warble.templating.streams import StreamAction, StreamEnvelope, encode_stream, format_stream
from warble.views.discovery import build_registry
from warble.views.layout import resolve_layout
from warble.views.renderer import DataInjector, Renderer, RequestFunc, Sink
from warble.views.types import CompiledView, ViewRegistry


class Views:
    """Renders the views of one source tree.

    Thread safety:
        Construction scans and compiles the tree before any request can
        reach the instance.  Afterwards the registry is only read.
        ``reload()`` builds a complete new registry first and then swaps
        a single reference under a lock; renders already running keep the
        registry they started with.
    """

    __slots__ = (
        "_filters",
        "_globals",
        "_injector",
        "_reload_lock",
        "_renderer",
        "_request_funcs",
        "config",
    )

    def __init__(
        self,
        config: ViewsConfig | None = None,
        *,
        filters: Mapping[str, Callable[..., Any]] | None = None,
        globals_: Mapping[str, Any] | None = None,
        injector: DataInjector | None = None,
        request_funcs: Mapping[str, RequestFunc] | None = None,
    ) -> None:
        self.config: ViewsConfig = config or ViewsConfig()
        self._filters = dict(filters or {})
        self._globals = dict(globals_ or {})
        self._injector = injector
        self._request_funcs = dict(request_funcs or {})
        self._reload_lock = threading.Lock()
        self._renderer: Renderer = self._build()

    def _build(self) -> Renderer:
        registry = build_registry(self.config, filters=self._filters, globals_=self._globals)
        return Renderer(
            registry,
            self.config,
            injector=self._injector,
            request_funcs=self._request_funcs,
        )

    # -- Registry --

    @property
    def registry(self) -> ViewRegistry:
        return self._renderer.registry

    def reload(self) -> ViewRegistry:
        """Rescan the tree and swap in the new registry.

        On ``ScanError`` the current registry stays in place.
        """
        with self._reload_lock:
            renderer = self._build()
            self._renderer = renderer
        return renderer.registry

    def lookup(self, name: str) -> CompiledView:
        """Return the partial or page called *name*.

        Raises:
            ViewNotFound: If neither namespace has *name*.
        """
        view = self.registry.find(name)
        if view is None:
            raise ViewNotFound(name)
        return view

    # -- Document rendering --

    def render_to(
        self,
        sink: Sink,
        request: Request | None,
        name: str,
        data: Mapping[str, Any] | None = None,
    ) -> None:
        """Render *name* into *sink*, writing nothing unless it succeeds.

        Raises:
            ViewNotFound: Unknown logical name.
            LayoutNotFound: The request's layout override is not attached.
            ExecutionError: Template evaluation failed.
        """
        renderer = self._renderer
        view = renderer.registry.find(name)
        if view is None:
            raise ViewNotFound(name)

        context = RenderContext.from_request(request, data)
        layout = resolve_layout(view, context, self.config)
        renderer.render(view, layout, context.data, sink, request=request)

    def render(
        self,
        request: Request | None,
        name: str,
        data: Mapping[str, Any] | None = None,
    ) -> Response:
        """Render *name* as an HTML document response.

        Raises the same errors as :meth:`render_to`.
        """
        buf = io.StringIO()
        self.render_to(buf, request, name, data)
        return Response(body=buf.getvalue())

    def respond(
        self,
        request: Request,
        name: str,
        data: Mapping[str, Any] | None = None,
    ) -> Response:
        """Like :meth:`render`, but failures become a logged 500 response."""
        try:
            return self.render(request, name, data)
        except RenderError as exc:
            return handle_render_error(exc, request, debug=self.config.debug)

    # -- Stream rendering --

    def encode_stream(
        self,
        action: StreamAction | str,
        target: str,
        name: str,
        data: Mapping[str, Any] | None = None,
        *,
        request: Request | None = None,
    ) -> StreamEnvelope:
        """Render partial *name* into a stream envelope.

        ``remove`` never looks *name* up.
        """
        return encode_stream(
            self._renderer,
            self.config,
            action,
            target,
            name,
            data,
            request=request,
        )

    def render_stream(
        self,
        action: StreamAction | str,
        target: str,
        request: Request | None,
        name: str,
        data: Mapping[str, Any] | None = None,
    ) -> Response:
        """Render partial *name* as a Turbo Stream response."""
        envelope = self.encode_stream(action, target, name, data, request=request)
        return Response(body=format_stream(envelope), content_type=STREAM_MIME)
