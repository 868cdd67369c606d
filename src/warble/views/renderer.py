"""Buffered view rendering.

A render runs in three steps:

1. The data injector merges cross-cutting values (tokens, identity,
   one-shot messages) into a private copy of the caller's data.
2. A per-call binding table is built: ``partial()`` bound to this
   renderer and request, plus every configured request function.  The
   table lives only in this call's context dict; the shared kida
   environment and compiled views are never touched, so concurrent
   requests cannot see each other's helpers.
3. The view executes fully into memory.  Only a complete result is
   written to the sink; on failure the sink receives nothing.

Composition uses kida's ``render_with_blocks()``: the view's body (its
``main`` block, or the whole template when it declares none) and every
other block it declares that the layout also has are pre-rendered and
injected into the layout.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Protocol

from kida.template import Markup

from warble.config import ViewsConfig
from warble.errors import ExecutionError, LayoutNotFound, ViewNotFound
from warble.http.request import Request
from warble.views.types import CompiledView, ViewRegistry

logger = logging.getLogger("warble.views")

type DataInjector = Callable[[Request | None, dict[str, Any]], Mapping[str, Any] | None]
"""Called before every render with the request and a private copy of the
data.  May mutate the dict in place and return ``None``, or return the
mapping to render with."""

type RequestFunc = Callable[[Request | None], Any]
"""Factory called once per render; its result is bound into the template
context under the registered name."""


class Sink(Protocol):
    """Anything rendered output can be written to (``io.StringIO``, a file)."""

    def write(self, s: str, /) -> object: ...


class Renderer:
    """Executes compiled views against render data.

    Thread safety:
        A renderer holds only immutable state (registry, config, frozen
        mapping of request functions).  Every call builds its own data and
        binding dicts, so one instance serves all request threads.
    """

    __slots__ = ("_config", "_injector", "_registry", "_request_funcs")

    def __init__(
        self,
        registry: ViewRegistry,
        config: ViewsConfig,
        *,
        injector: DataInjector | None = None,
        request_funcs: Mapping[str, RequestFunc] | None = None,
    ) -> None:
        self._registry = registry
        self._config = config
        self._injector = injector
        self._request_funcs: Mapping[str, RequestFunc] = MappingProxyType(dict(request_funcs or {}))

    @property
    def registry(self) -> ViewRegistry:
        return self._registry

    # -- Public API --

    def render(
        self,
        view: CompiledView,
        layout: str,
        data: Mapping[str, Any] | None,
        sink: Sink,
        *,
        request: Request | None = None,
    ) -> None:
        """Execute *view* with *layout* and write the result to *sink*.

        Raises:
            LayoutNotFound: If *layout* is neither the body block nor
                attached to *view*.
            ExecutionError: If template evaluation fails.  Nothing has been
                written to *sink* in that case.
        """
        html = self.execute(view, layout, data, request=request)
        sink.write(html)

    def execute(
        self,
        view: CompiledView,
        layout: str,
        data: Mapping[str, Any] | None,
        *,
        request: Request | None = None,
    ) -> str:
        """Execute *view* with *layout* and return the complete output."""
        body_block = self._config.body_block
        template = None
        if layout != body_block:
            template = view.lookup(layout)
            if template is None:
                raise LayoutNotFound(view.name, layout)

        try:
            ctx = self.inject(request, data)
            ctx.update(self.bindings(request))

            body = self._render_body(view, ctx)
            if template is None:
                return body
            # Blocks the layout does not declare are dropped
            wanted = set(template.list_blocks())
            blocks = {
                name: view.root.render_block(name, ctx)
                for name in view.blocks
                if name != body_block and name in wanted
            }
            blocks[body_block] = body
            return template.render_with_blocks(blocks, ctx)
        except Exception as exc:
            logger.debug("Rendering %r with %r failed", view.name, layout, exc_info=True)
            raise ExecutionError(view.name, layout, _describe(exc)) from exc

    def render_partial(
        self,
        name: str,
        data: Mapping[str, Any] | None = None,
        *,
        request: Request | None = None,
    ) -> Markup:
        """Render a partial's bare body for embedding in another template."""
        view = self._registry.partial(name)
        if view is None:
            raise ViewNotFound(name, "partial")
        return Markup(self.execute(view, self._config.body_block, data, request=request))

    def inject(self, request: Request | None, data: Mapping[str, Any] | None) -> dict[str, Any]:
        """Return a private copy of *data* with the injector applied."""
        merged: dict[str, Any] = dict(data) if data else {}
        if self._injector is not None:
            result = self._injector(request, merged)
            if result is not None:
                merged = dict(result)
        return merged

    def bindings(self, request: Request | None) -> dict[str, Any]:
        """Build this call's table of request-aware template helpers."""

        def partial(name: str, data: Mapping[str, Any] | None = None) -> Markup:
            return self.render_partial(name, data, request=request)

        table: dict[str, Any] = {"partial": partial}
        for name, factory in self._request_funcs.items():
            table[name] = factory(request)
        return table

    # -- Internals --

    def _render_body(self, view: CompiledView, ctx: dict[str, Any]) -> str:
        body_block = self._config.body_block
        if view.has_block(body_block):
            return view.root.render_block(body_block, ctx)
        return view.root.render(ctx)


def _describe(exc: BaseException) -> str:
    detail = str(exc).strip()
    if not detail:
        return type(exc).__name__
    return f"{type(exc).__name__}: {detail}"
