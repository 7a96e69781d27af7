# tests/domain/test_cassette_model.py
import pytest

from vcr_cassette.domain.body import StringBody
from vcr_cassette.domain.cassette import (
    HttpVersion,
    OtherMethod,
    Request,
    StandardMethod,
    Status,
    parse_method,
)
from vcr_cassette.domain.exceptions import ValidationError


class TestMethod:
    def test_parse_is_case_insensitive(self):
        assert parse_method("get") is StandardMethod.GET
        assert parse_method("GET") is StandardMethod.GET
        assert parse_method("Patch") is StandardMethod.PATCH

    def test_unknown_method_falls_back(self):
        assert parse_method("PROPFIND") == OtherMethod("PROPFIND")

    def test_as_str(self):
        assert StandardMethod.DELETE.as_str() == "DELETE"
        assert OtherMethod("mkcol").as_str() == "mkcol"


class TestHttpVersion:
    def test_protocol_order(self):
        assert sorted([HttpVersion.HTTP_3, HttpVersion.HTTP_0_9, HttpVersion.HTTP_2, HttpVersion.HTTP_1_1]) == [
            HttpVersion.HTTP_0_9,
            HttpVersion.HTTP_1_1,
            HttpVersion.HTTP_2,
            HttpVersion.HTTP_3,
        ]

    def test_comparisons(self):
        assert HttpVersion.HTTP_1_0 < HttpVersion.HTTP_1_1
        assert HttpVersion.HTTP_2 >= HttpVersion.HTTP_1_1
        assert HttpVersion.HTTP_3 > HttpVersion.HTTP_2
        assert HttpVersion.HTTP_0_9 <= HttpVersion.HTTP_0_9

    def test_lookup_by_wire_text(self):
        assert HttpVersion("2") is HttpVersion.HTTP_2


class TestStatus:
    def test_valid_status(self):
        status = Status(code=200, message="OK")
        assert status.code == 200

    @pytest.mark.parametrize("code", [-1, 65536, True, "200"])
    def test_invalid_code_raises(self, code):
        with pytest.raises(ValidationError):
            Status(code=code, message="x")

    def test_bounds_are_inclusive(self):
        assert Status(code=0, message="").code == 0
        assert Status(code=65535, message="").code == 65535


class TestRequest:
    def test_absolute_uri_accepted(self):
        request = Request(uri="http://localhost:7777/foo", body=StringBody(""), method=StandardMethod.GET)
        assert request.headers == {}

    @pytest.mark.parametrize(
        "uri",
        [
            "",
            "/relative/path",
            "http://[::1",
            "http://localhost:99999/foo",
            "http://localhost:port/foo",
            "http://exa mple.com/",
            "http://example.com\x00/",
        ],
    )
    def test_invalid_uri_raises(self, uri):
        with pytest.raises(ValidationError):
            Request(uri=uri, body=StringBody(""), method=StandardMethod.GET)

    def test_uri_with_port_and_query_accepted(self):
        request = Request(uri="https://api.example.com:8443/v1?q=a%20b", body=StringBody(""), method=StandardMethod.GET)
        assert request.uri.endswith("q=a%20b")
