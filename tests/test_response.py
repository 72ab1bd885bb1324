"""Tests for urlshort.http.response — Response chaining and Redirect."""

import pytest

from urlshort.http.response import Redirect, Response


class TestResponse:
    def test_defaults(self) -> None:
        r = Response()
        assert r.body == ""
        assert r.status == 200
        assert r.content_type == "text/plain; charset=utf-8"
        assert r.headers == ()

    def test_with_status(self) -> None:
        assert Response().with_status(404).status == 404

    def test_with_header(self) -> None:
        r = Response().with_header("X-Custom", "value")
        assert r.headers == (("X-Custom", "value"),)

    def test_chained_headers(self) -> None:
        r = Response().with_header("A", "1").with_header("B", "2")
        assert r.headers == (("A", "1"), ("B", "2"))

    def test_with_headers_dict(self) -> None:
        r = Response().with_headers({"A": "1", "B": "2"})
        assert ("A", "1") in r.headers
        assert ("B", "2") in r.headers

    def test_with_content_type(self) -> None:
        r = Response().with_content_type("application/json")
        assert r.content_type == "application/json"

    def test_chaining_returns_new_objects(self) -> None:
        r1 = Response("a")
        r2 = r1.with_status(201)
        assert r1 is not r2
        assert r1.status == 200

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Response().status = 500  # type: ignore[misc]

    def test_header_lookup_case_insensitive(self) -> None:
        r = Response().with_header("Location", "/x")
        assert r.header("location") == "/x"
        assert r.header("x-missing") is None

    def test_location_absent(self) -> None:
        assert Response().location is None

    def test_body_bytes_from_str(self) -> None:
        assert Response("héllo").body_bytes == "héllo".encode()

    def test_text_from_bytes(self) -> None:
        assert Response(b"hello").text == "hello"


class TestRedirect:
    def test_defaults(self) -> None:
        r = Redirect("/login")
        assert r.url == "/login"
        assert r.status == 302
        assert r.headers == ()

    def test_to_response(self) -> None:
        response = Redirect("https://golang.org").to_response()
        assert response.status == 302
        assert response.location == "https://golang.org"
        assert response.body == ""

    def test_location_keeps_reserved_and_escaped_characters(self) -> None:
        url = "https://a.example/p%20q?x=1&y=[2]#frag"
        assert Redirect(url).to_response().location == url

    def test_location_percent_encodes_non_ascii(self) -> None:
        response = Redirect("/café").to_response()
        assert response.location == "/caf%C3%A9"

    def test_custom_status_and_headers(self) -> None:
        response = Redirect("/new", status=301, headers=(("Cache-Control", "no-store"),)).to_response()
        assert response.status == 301
        assert response.header("Cache-Control") == "no-store"
