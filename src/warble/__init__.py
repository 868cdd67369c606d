"""Warble: convention-based HTML views with layouts, partials and streams.

Discovers pages, partials and layouts from a directory by naming
convention, renders them through kida with request-scoped layout
overrides, and packages partials as Turbo Stream updates.

Basic usage::

    from warble import Views, ViewsConfig

    views = Views(ViewsConfig(root="views"))

    response = views.render(request, "events/list", {"events": events})
    update = views.render_stream("append", "events", request, "events/row", {"event": event})
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "ExecutionError",
    "LayoutNotFound",
    "RenderContext",
    "RenderError",
    "Request",
    "Response",
    "ScanError",
    "StreamAction",
    "StreamEnvelope",
    "ViewNotFound",
    "Views",
    "ViewsConfig",
    "WarbleError",
    "strip_layout",
    "with_layout",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import warble`` fast while providing a clean top-level API.
    """
    if name == "Views":
        from warble.engine import Views

        return Views

    if name == "ViewsConfig":
        from warble.config import ViewsConfig

        return ViewsConfig

    if name in ("Request", "Response"):
        from warble import http as _http

        return getattr(_http, name)

    if name in ("RenderContext", "strip_layout", "with_layout"):
        from warble import context as _ctx

        return getattr(_ctx, name)

    if name in ("StreamAction", "StreamEnvelope"):
        from warble.templating import streams as _streams

        return getattr(_streams, name)

    if name in (
        "ConfigurationError",
        "ExecutionError",
        "LayoutNotFound",
        "RenderError",
        "ScanError",
        "ViewNotFound",
        "WarbleError",
    ):
        from warble import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
