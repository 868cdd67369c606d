"""Translation of engine failures into HTTP responses."""

from warble.server.errors import client_error, handle_render_error

__all__ = ["client_error", "handle_render_error"]
