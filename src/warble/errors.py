"""Warble exception hierarchy.

Shared across the registry builder, layout resolver, renderer and stream
encoder so every module raises and catches the same types.
"""


class WarbleError(Exception):
    """Base for all warble-specific errors."""


class ConfigurationError(WarbleError):
    """Raised when a ``ViewsConfig`` is invalid.

    Checked once by ``build_registry()`` before the tree is walked.
    """


class ScanError(WarbleError):
    """The view tree could not be scanned or compiled.

    Fatal: raised while building the registry, before any request is
    served.  No partially built registry is ever exposed.
    """

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


class RenderError(WarbleError):
    """Base for per-request rendering failures.

    Callers translate these into a 5xx response, see
    :func:`warble.server.errors.handle_render_error`.
    """


class ViewNotFound(RenderError):  # noqa: N818
    """The requested logical name is not in the registry."""

    def __init__(self, name: str, kind: str = "view") -> None:
        self.name = name
        self.kind = kind
        super().__init__(f"{kind} {name!r} not found")


class LayoutNotFound(RenderError):  # noqa: N818
    """An explicit layout override names a layout the view cannot reach."""

    def __init__(self, view: str, layout: str) -> None:
        self.view = view
        self.layout = layout
        super().__init__(f"layout {layout!r} not found for view {view!r}")


class ExecutionError(RenderError):
    """Template evaluation failed against the supplied data.

    The original exception is chained as ``__cause__``.
    """

    def __init__(self, view: str, layout: str, detail: str) -> None:
        self.view = view
        self.layout = layout
        self.detail = detail
        super().__init__(f"rendering {view!r} with {layout!r} failed: {detail}")
