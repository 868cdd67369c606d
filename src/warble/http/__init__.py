"""HTTP boundary types consumed by the view engine."""

from warble.http.headers import Headers
from warble.http.request import STREAM_MIME, Request
from warble.http.response import HTML_CONTENT_TYPE, Response

__all__ = [
    "HTML_CONTENT_TYPE",
    "STREAM_MIME",
    "Headers",
    "Request",
    "Response",
]
