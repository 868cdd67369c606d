"""Tests for the warble exception hierarchy."""

from warble.errors import (
    ConfigurationError,
    ExecutionError,
    LayoutNotFound,
    RenderError,
    ScanError,
    ViewNotFound,
    WarbleError,
)


class TestHierarchy:
    def test_startup_errors(self) -> None:
        assert issubclass(ScanError, WarbleError)
        assert issubclass(ConfigurationError, WarbleError)
        assert not issubclass(ScanError, RenderError)

    def test_render_errors(self) -> None:
        for cls in (ViewNotFound, LayoutNotFound, ExecutionError):
            assert issubclass(cls, RenderError)


class TestMessages:
    def test_scan_error(self) -> None:
        exc = ScanError("/views/index.html", "cannot compile page")
        assert str(exc) == "/views/index.html: cannot compile page"
        assert exc.path == "/views/index.html"
        assert exc.detail == "cannot compile page"

    def test_view_not_found(self) -> None:
        assert str(ViewNotFound("events/show")) == "view 'events/show' not found"
        exc = ViewNotFound("row", "partial")
        assert str(exc) == "partial 'row' not found"
        assert exc.kind == "partial"

    def test_layout_not_found(self) -> None:
        exc = LayoutNotFound("index", "layouts/admin")
        assert exc.view == "index"
        assert exc.layout == "layouts/admin"
        assert "layouts/admin" in str(exc)

    def test_execution_error(self) -> None:
        exc = ExecutionError("index", "layouts/base", "KeyError: 'x'")
        assert exc.detail == "KeyError: 'x'"
        assert str(exc) == "rendering 'index' with 'layouts/base' failed: KeyError: 'x'"
