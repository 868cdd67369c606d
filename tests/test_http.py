"""Tests for warble.http: headers, request and response."""

import dataclasses

import pytest

from warble.http import Headers, Request, Response
from warble.http.request import STREAM_MIME


class TestHeaders:
    def test_case_insensitive(self) -> None:
        headers = Headers([(b"Content-Type", b"text/html")])
        assert headers["content-type"] == "text/html"
        assert headers.get("CONTENT-TYPE") == "text/html"
        assert "Content-Type" in headers

    def test_missing(self) -> None:
        headers = Headers()
        assert headers.get("accept") is None
        assert headers.get("accept", "*/*") == "*/*"
        with pytest.raises(KeyError):
            headers["accept"]

    def test_repeated(self) -> None:
        headers = Headers([("Vary", "Accept"), ("vary", "Turbo-Frame")])
        assert headers["vary"] == "Accept"
        assert headers.get_list("Vary") == ["Accept", "Turbo-Frame"]
        assert len(headers) == 1
        assert list(headers) == ["vary"]

    def test_from_mapping(self) -> None:
        headers = Headers.from_mapping({"X-Token": "abc"})
        assert headers["x-token"] == "abc"


class TestRequest:
    def test_defaults(self) -> None:
        request = Request()
        assert request.method == "GET"
        assert request.layout is None
        assert request.skip_layout is False
        assert request.turbo_frame is None
        assert request.accepts_stream is False

    def test_turbo_frame(self) -> None:
        request = Request(headers=Headers([("Turbo-Frame", "events")]))
        assert request.turbo_frame == "events"

    def test_accepts_stream(self) -> None:
        request = Request(headers=Headers([("Accept", f"{STREAM_MIME}, text/html")]))
        assert request.accepts_stream is True

    def test_from_asgi(self) -> None:
        scope = {
            "type": "http",
            "method": "POST",
            "path": "/guests",
            "headers": [(b"accept", STREAM_MIME.encode())],
        }
        request = Request.from_asgi(scope)
        assert request.method == "POST"
        assert request.path == "/guests"
        assert request.accepts_stream

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            Request().layout = "alt"  # type: ignore[misc]


class TestResponse:
    def test_defaults(self) -> None:
        response = Response("<p>hi</p>")
        assert response.status == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert response.body == "<p>hi</p>"
        assert response.is_stream is False

    def test_chaining_returns_copies(self) -> None:
        original = Response("x")
        changed = original.with_status(201).with_header("Vary", "Accept")
        assert original.status == 200
        assert original.headers == ()
        assert changed.status == 201
        assert changed.header("vary") == "Accept"

    def test_with_headers_and_content_type(self) -> None:
        response = Response().with_headers({"A": "1", "B": "2"}).with_content_type(STREAM_MIME)
        assert response.headers == (("A", "1"), ("B", "2"))
        assert response.content_type == STREAM_MIME
        assert response.header("missing", "none") == "none"
