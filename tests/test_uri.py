"""Tests for the public encoding functions."""

import pytest

from uriescape import (
    InvalidUriError,
    UnsupportedEncodingError,
    UriComponents,
    decode,
    encode_authority,
    encode_fragment,
    encode_host,
    encode_http_url,
    encode_path,
    encode_path_segment,
    encode_port,
    encode_query,
    encode_query_param,
    encode_scheme,
    encode_uri,
    encode_uri_components,
    encode_user_info,
)


class TestComponentEncoders:
    @pytest.mark.parametrize(
        ("function", "source", "expected"),
        [
            (encode_scheme, "svn+ssh", "svn+ssh"),
            (encode_scheme, "a_b c", "a%5Fb%20c"),
            (encode_authority, "user@host:80", "user@host:80"),
            (encode_authority, "us er@host", "us%20er@host"),
            (encode_user_info, "us:er@x", "us:er%40x"),
            (encode_host, "exa mple.com:80", "exa%20mple.com%3A80"),
            (encode_port, "80a", "80%61"),
            (encode_path, "/a b/c", "/a%20b/c"),
            (encode_path, "/a;b=c,d", "/a;b=c,d"),
            (encode_path_segment, "a/b c", "a%2Fb%20c"),
            (encode_query, "a=b&c", "a=b&c"),
            (encode_query_param, "a=b&c", "a%3Db%26c"),
            (encode_fragment, "sec 1/2?x#y", "sec%201/2?x%23y"),
        ],
    )
    def test_encode(self, function, source, expected):
        assert function(source) == expected

    def test_literal_percent(self):
        assert encode_path("100%") == "100%25"

    def test_encoding_argument(self):
        assert encode_path("/café", "latin-1") == "/caf%E9"
        assert encode_query_param("café", encoding="utf-8") == "caf%C3%A9"

    def test_unknown_encoding(self):
        with pytest.raises(UnsupportedEncodingError):
            encode_query("a b", "no-such-encoding")

    def test_end_to_end(self):
        encoded = encode_path("/a b/c", "UTF-8")
        assert encoded == "/a%20b/c"
        assert decode(encoded, "UTF-8") == "/a b/c"


class TestEncodeUri:
    def test_every_component(self):
        assert (
            encode_uri("http://us er@ex ample.com:8080/a b?q=x y#f g")
            == "http://us%20er@ex%20ample.com:8080/a%20b?q=x%20y#f%20g"
        )

    def test_query_parameters(self):
        assert (
            encode_uri("http://example.com/path?name=Jürgen&x=1/2")
            == "http://example.com/path?name=J%C3%BCrgen&x=1/2"
        )

    def test_already_valid(self):
        uri = "https://example.com/a/b?c=d&e=f#g"
        assert encode_uri(uri) == uri

    def test_injected_parser(self):
        assert encode_uri("a b", parse=lambda s: UriComponents(scheme="x", path=s)) == "x:a%20b"

    def test_invalid(self):
        with pytest.raises(InvalidUriError):
            encode_uri("http://h:abc/x")


class TestEncodeHttpUrl:
    def test_hash_encoded_in_query(self):
        assert encode_http_url("http://example.com/a b?q=1#2") == "http://example.com/a%20b?q=1%232"

    def test_fragment_rejected(self):
        with pytest.raises(InvalidUriError):
            encode_http_url("http://h/p#x")

    def test_not_http(self):
        with pytest.raises(InvalidUriError):
            encode_http_url("ftp://h/p")


class TestEncodeUriComponents:
    def test_host_port_path(self):
        assert encode_uri_components(scheme="http", host="h", port="80", path="a b") == "http://h:80/a%20b"

    def test_positional(self):
        assert (
            encode_uri_components("https", None, "me", "h", 8443, "/p", "q=a b", "top", "utf-8")
            == "https://me@h:8443/p?q=a%20b#top"
        )

    def test_no_authority(self):
        assert encode_uri_components(scheme="mailto", path="a b@c") == "mailto:a%20b@c"

    def test_authority(self):
        assert encode_uri_components(authority="us er@h", path="/p") == "//us%20er@h/p"

    def test_nothing(self):
        assert encode_uri_components() == ""

    def test_invalid_port(self):
        with pytest.raises(ValueError):
            encode_uri_components(port="eighty")

    def test_authority_like_path(self):
        with pytest.raises(InvalidUriError):
            encode_uri_components(scheme="x", path="//evil/p")


class TestBracketedHosts:
    def test_ip_literal_untouched(self):
        assert encode_uri("http://[::1]:8080/a b") == "http://[::1]:8080/a%20b"

    def test_zone_id_untouched(self):
        assert encode_uri("http://[fe80::1%25eth0]/") == "http://[fe80::1%25eth0]/"

    def test_spaces_escaped(self):
        assert encode_uri("http://[a b]/") == "http://%5Ba%20b%5D/"

    def test_line_breaks_escaped(self):
        encoded = encode_http_url("http://[x\r\nX-Injected: 1]/p")
        assert encoded == "http://%5Bx%0D%0AX-Injected%3A%201%5D/p"
        assert "\r" not in encoded and "\n" not in encoded

    def test_bare_percent_escaped(self):
        assert encode_uri("http://[fe80::1%eth0 x]/") == "http://%5Bfe80%3A%3A1%25eth0%20x%5D/"
