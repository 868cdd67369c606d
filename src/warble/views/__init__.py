"""Convention-based view discovery, layout negotiation and rendering.

The view root's structure defines what every file is::

    views/
      index.html            # page      "index"
      _flash.html           # partial   "flash"
      events/
        list.html           # page      "events/list"
        _row.html           # partial   "events/row"
      layouts/
        base.html           # layout    "layouts/base"
        partial.html        # layout    "layouts/partial"

Layouts place the view's body with ``{% block main %}{% end %}``; a
page may declare other blocks (``title``) that its layout also fills.
"""

from warble.views.discovery import build_registry, discover_sources
from warble.views.layout import resolve_layout
from warble.views.naming import classify, is_markup, logical_name
from warble.views.renderer import DataInjector, Renderer, RequestFunc, Sink
from warble.views.types import CompiledView, SourceFile, ViewKind, ViewRegistry

__all__ = [
    "CompiledView",
    "DataInjector",
    "Renderer",
    "RequestFunc",
    "Sink",
    "SourceFile",
    "ViewKind",
    "ViewRegistry",
    "build_registry",
    "classify",
    "discover_sources",
    "is_markup",
    "logical_name",
    "resolve_layout",
]
