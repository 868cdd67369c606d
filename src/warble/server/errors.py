"""Error translation for view rendering failures.

Maps render errors to Response objects.  The detail of the underlying
failure is always logged and only shown to the client in debug mode.
"""

import html
import logging
from http import HTTPStatus

from warble.errors import RenderError
from warble.http.request import Request
from warble.http.response import Response

logger = logging.getLogger("warble.server")


def client_error(status: int, detail: str = "") -> Response:
    """A plain response for a problem with the client's request."""
    body = detail or HTTPStatus(status).phrase
    return Response(body=body, status=status, content_type="text/plain; charset=utf-8")


def handle_render_error(
    exc: Exception,
    request: Request | None = None,
    *,
    debug: bool = False,
) -> Response:
    """Log *exc* with its traceback and return a 500 response.

    Handles ``ViewNotFound``, ``LayoutNotFound`` and ``ExecutionError``
    alike, as well as unexpected exceptions raised while rendering.
    """
    if request is not None:
        logger.error("500 %s %s", request.method, request.path, exc_info=exc)
    else:
        logger.error("500 render failed", exc_info=exc)

    if debug:
        kind = "Render error" if isinstance(exc, RenderError) else type(exc).__name__
        body = f"<h1>Internal Server Error</h1>\n<pre>{kind}: {html.escape(str(exc))}</pre>"
        return Response(body=body, status=500)

    return Response(body=HTTPStatus.INTERNAL_SERVER_ERROR.phrase, status=500)
