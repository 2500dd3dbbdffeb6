"""uriescape.uri
Encoding of whole URIs and of every individual URI component, plus decoding.
Each component is encoded according to its own RFC 3986 grammar: a "/" survives in a path but not in a path segment,
an "&" survives in a query but not in a query parameter.
"""

from typing import Callable

from .charset import ComponentKind
from .codec import DEFAULT_ENCODING, encode
from .components import UriComponents, build_uri_components, parse_http_url, parse_uri


def encode_uri(uri: str, encoding: str = DEFAULT_ENCODING, parse: Callable[[str], UriComponents] = parse_uri) -> str:
    """Encodes every component of the given URI according to its own set of legal characters.
    e.g. encode_uri("http://example.org/a b?q=x y") == "http://example.org/a%20b?q=x%20y"
    """
    return parse(uri).encode(encoding).serialize()


def encode_http_url(
    http_url: str, encoding: str = DEFAULT_ENCODING, parse: Callable[[str], UriComponents] = parse_http_url
) -> str:
    """Like encode_uri, but only for http and https URLs, and without fragments:
    a "#" after the "?" gets encoded as part of the query, a "#" before it is rejected.
    """
    return parse(http_url).encode(encoding).serialize()


def encode_uri_components(
    scheme: str | None = None,
    authority: str | None = None,
    userinfo: str | None = None,
    host: str | None = None,
    port: str | int | None = None,
    path: str | None = None,
    query: str | None = None,
    fragment: str | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> str:
    """Encodes each of the given components and joins them into one URI. Every component is optional.
    authority is used only when none of userinfo, host and port is given.
    """
    return (
        build_uri_components(scheme, authority, userinfo, host, port, path, query, fragment)
        .encode(encoding)
        .serialize()
    )


def encode_scheme(scheme: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(scheme, ComponentKind.SCHEME, encoding)


def encode_authority(authority: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(authority, ComponentKind.AUTHORITY, encoding)


def encode_user_info(userinfo: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(userinfo, ComponentKind.USER_INFO, encoding)


def encode_host(host: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(host, ComponentKind.HOST, encoding)


def encode_port(port: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(port, ComponentKind.PORT, encoding)


def encode_path(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """e.g. encode_path("/a b/c") == "/a%20b/c" """
    return encode(path, ComponentKind.PATH, encoding)


def encode_path_segment(segment: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Unlike encode_path, also escapes "/"."""
    return encode(segment, ComponentKind.PATH_SEGMENT, encoding)


def encode_query(query: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(query, ComponentKind.QUERY, encoding)


def encode_query_param(param: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Unlike encode_query, also escapes "&" and "=".
    e.g. encode_query_param("a=b&c") == "a%3Db%26c"
    """
    return encode(param, ComponentKind.QUERY_PARAM, encoding)


def encode_fragment(fragment: str, encoding: str = DEFAULT_ENCODING) -> str:
    return encode(fragment, ComponentKind.FRAGMENT, encoding)

