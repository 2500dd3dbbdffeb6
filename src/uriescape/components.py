"""uriescape.components
Splits a whole URI into its components, and puts encoded components back together.
The split is deliberately loose (RFC 3986 Appendix B) because the input is not yet encoded:
"http://example.org/a b" has to come apart even though it is not a valid URI.
"""

import dataclasses
import re

from typing import Self

from ._logging import logger
from .charset import ComponentKind
from .codec import DEFAULT_ENCODING, encode
from .errors import InvalidUriError

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
_HEXDIG: str = r"[0-9A-Fa-f]"

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: str = r"[A-Za-z0-9\-._~]"

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: str = r"[!$&'()*+,;=]"

# dec-octet = DIGIT / %x31-39 DIGIT / "1" 2DIGIT / "2" %x30-34 DIGIT / "25" %x30-35
_DEC_OCTET: str = r"(?:25[0-5]|2[0-4][0-9]|1[0-9]{2}|[1-9][0-9]|[0-9])"

# IPv4address = dec-octet "." dec-octet "." dec-octet "." dec-octet
_IPV4ADDRESS: str = rf"{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}\.{_DEC_OCTET}"

# h16 = 1*4HEXDIG
_H16: str = rf"(?:{_HEXDIG}{{1,4}})"

# ls32 = ( h16 ":" h16 ) / IPv4address
_LS32: str = rf"(?:{_H16}:{_H16}|{_IPV4ADDRESS})"

# IPv6address =                            6( h16 ":" ) ls32
#             /                       "::" 5( h16 ":" ) ls32
#             / [               h16 ] "::" 4( h16 ":" ) ls32
#             / [ *1( h16 ":" ) h16 ] "::" 3( h16 ":" ) ls32
#             / [ *2( h16 ":" ) h16 ] "::" 2( h16 ":" ) ls32
#             / [ *3( h16 ":" ) h16 ] "::"    h16 ":"   ls32
#             / [ *4( h16 ":" ) h16 ] "::"              ls32
#             / [ *5( h16 ":" ) h16 ] "::"              h16
#             / [ *6( h16 ":" ) h16 ] "::"
_IPV6ADDRESS: str = "(?:" + "|".join(
    (
        rf"(?:{_H16}:){{6}}{_LS32}",
        rf"::(?:{_H16}:){{5}}{_LS32}",
        rf"(?:{_H16})?::(?:{_H16}:){{4}}{_LS32}",
        rf"(?:(?:{_H16}:){{0,1}}{_H16})?::(?:{_H16}:){{3}}{_LS32}",
        rf"(?:(?:{_H16}:){{0,2}}{_H16})?::(?:{_H16}:){{2}}{_LS32}",
        rf"(?:(?:{_H16}:){{0,3}}{_H16})?::{_H16}:{_LS32}",
        rf"(?:(?:{_H16}:){{0,4}}{_H16})?::{_LS32}",
        rf"(?:(?:{_H16}:){{0,5}}{_H16})?::{_H16}",
        rf"(?:(?:{_H16}:){{0,6}}{_H16})?::",
    )
) + ")"

# IPv6addrz = IPv6address "%25" ZoneID
# ZoneID = 1*( unreserved / pct-encoded )
_IPV6ADDRZ: str = rf"{_IPV6ADDRESS}%25(?:{_UNRESERVED}|%{_HEXDIG}{_HEXDIG})+"

# IPvFuture = "v" 1*HEXDIG "." 1*( unreserved / sub-delims / ":" )
_IPVFUTURE: str = rf"[vV]{_HEXDIG}+\.(?:{_UNRESERVED}|{_SUB_DELIMS}|:)+"

# IP-literal = "[" ( IPv6address / IPv6addrz / IPvFuture ) "]"
_IP_LITERAL_PAT: re.Pattern[str] = re.compile(rf"\A\[(?:{_IPV6ADDRESS}|{_IPV6ADDRZ}|{_IPVFUTURE})\]\Z")

# port = *DIGIT
_PORT_PAT: re.Pattern[str] = re.compile(r"\A[0-9]+\Z")

# scheme ":"
_SCHEME: str = r"(?:(?P<scheme>[^:/?#]+):)"

# userinfo "@"
_USERINFO: str = r"(?:(?P<userinfo>[^@/?#]*)@)"

# "[" ... "]" / reg-name (checked against IP-literal only when encoding)
_HOST: str = r"(?P<host>\[[^\]/?#]*\]|[^/?#:]*)"

# ":" port
_PORT: str = r"(?::(?P<port>[0-9]*)(?=[/?#]|\Z))"

# "//" authority
_AUTHORITY: str = rf"(?://{_USERINFO}?{_HOST}{_PORT}?)"

# path
_PATH: str = r"(?P<path>[^?#]*)"

# "?" query
_QUERY: str = r"(?:\?(?P<query>[^#]*))"

# "#" fragment
_FRAGMENT: str = r"(?:#(?P<fragment>.*))"

# URI-reference, as loose as Appendix B
_URI: str = rf"\A{_SCHEME}?{_AUTHORITY}?{_PATH}{_QUERY}?{_FRAGMENT}?\Z"
_URI_PAT: re.Pattern[str] = re.compile(_URI, re.DOTALL)

# HTTP URLs have no fragment; everything after "?" belongs to the query.
_HTTP_URL: str = rf"\A(?P<scheme>(?i:https?))://{_USERINFO}?{_HOST}{_PORT}?{_PATH}(?:\?(?P<query>.*))?\Z"
_HTTP_URL_PAT: re.Pattern[str] = re.compile(_HTTP_URL, re.DOTALL)


def _parse_port(port: str | int | None) -> int | None:
    if port is None or port == "":
        return None
    if isinstance(port, str):
        if _PORT_PAT.match(port) is None:
            raise ValueError(f"port must be a non-negative decimal integer, got {port!r}")
        port = int(port, base=10)
    if port < 0:
        raise ValueError(f"port must not be negative, got {port}")
    return port


def _encode_if_not_none(s: str | None, kind: ComponentKind, encoding: str) -> str | None:
    if s is None:
        return None
    return encode(s, kind, encoding)


def _encode_host(host: str | None, encoding: str) -> str | None:
    # A well-formed IP-literal is already made of legal characters; anything else in brackets is not.
    if host is not None and _IP_LITERAL_PAT.match(host) is not None:
        return host
    return _encode_if_not_none(host, ComponentKind.HOST, encoding)


def _encode_query(query: str, encoding: str) -> str:
    """Encodes every name and value of an "&"-separated query as a query parameter.
    e.g. _encode_query("q=a&b&c=d=e", "utf-8") == "q=a&b&c=d%3De"
    """
    params: list[str] = []
    for param in query.split("&"):
        name, equals, value = param.partition("=")
        params.append(
            encode(name, ComponentKind.QUERY_PARAM, encoding) + equals + encode(value, ComponentKind.QUERY_PARAM, encoding)
        )
    return "&".join(params)


@dataclasses.dataclass
class UriComponents:
    """The components of one URI-reference.
    Use parse_uri, parse_http_url or build_uri_components rather than instantiating this directly.
    """

    scheme: str | None = None
    userinfo: str | None = None
    host: str | None = None
    port: int | None = None
    path: str = ""
    query: str | None = None
    fragment: str | None = None
    # Only used when none of userinfo, host and port is set.
    raw_authority: str | None = None

    @property
    def authority(self: Self) -> str | None:
        """userinfo@host:port"""
        if self.userinfo is None and self.host is None and self.port is None:
            return self.raw_authority
        result: str = ""
        if self.userinfo is not None:
            result += f"{self.userinfo}@"
        if self.host is not None:
            result += self.host
        if self.port is not None:
            result += f":{self.port}"
        return result

    def serialize(self: Self) -> str:
        """Translation of RFC 3986 section 5.3"""
        result: str = ""
        if self.scheme is not None:
            result += f"{self.scheme}:"
        authority: str | None = self.authority
        if authority is not None:
            result += f"//{authority}"
        if authority is None and self.path.startswith("//"):
            # RFC 3986 section 3.3: would be read back as an authority
            raise InvalidUriError(result + self.path, "path cannot begin with '//' without an authority")
        if len(self.path) > 0:
            # Without the "/", the path would run into the authority.
            if authority is not None and not self.path.startswith("/"):
                result += "/"
            result += self.path
        if self.query:
            result += f"?{self.query}"
        if self.fragment:
            result += f"#{self.fragment}"
        return result

    def encode(self: Self, encoding: str = DEFAULT_ENCODING) -> Self:
        """Returns a copy with every component percent-encoded according to its own grammar."""
        return self.__class__(
            scheme=_encode_if_not_none(self.scheme, ComponentKind.SCHEME, encoding),
            userinfo=_encode_if_not_none(self.userinfo, ComponentKind.USER_INFO, encoding),
            host=_encode_host(self.host, encoding),
            port=self.port,
            path=encode(self.path, ComponentKind.PATH, encoding),
            query=_encode_query(self.query, encoding) if self.query is not None else None,
            fragment=_encode_if_not_none(self.fragment, ComponentKind.FRAGMENT, encoding),
            raw_authority=_encode_if_not_none(self.raw_authority, ComponentKind.AUTHORITY, encoding),
        )


def _parse(data: str, pattern: re.Pattern[str]) -> UriComponents:
    if data is None:
        raise TypeError("'uri' must not be None")
    m: re.Match[str] | None = pattern.match(data)
    if m is None:
        logger.debug("cannot split %r into components", data)
        raise InvalidUriError(data)

    # path-abempty: after an authority, the path is empty or starts with "/"
    if m["host"] is not None and m["path"] and not m["path"].startswith("/"):
        logger.debug("path of %r does not start with '/'", data)
        raise InvalidUriError(data, "path must start with '/' after an authority")

    # The HTTP pattern has no fragment group.
    fragment: str | None = m["fragment"] if "fragment" in m.groupdict() else None

    return UriComponents(
        scheme=m["scheme"],
        userinfo=m["userinfo"],
        host=m["host"],
        port=_parse_port(m["port"]),
        path=m["path"],
        query=m["query"],
        fragment=fragment,
    )


def parse_uri(data: str) -> UriComponents:
    """Splits any URI-reference into its components. Characters that are not legal in a component are kept as they are.
    e.g. parse_uri("http://example.org/a b?q=x y").path == "/a b"
    """
    return _parse(data, _URI_PAT)


def parse_http_url(data: str) -> UriComponents:
    """Splits an http or https URL into its components.
    There is no fragment: a "#" in the query is part of the query, and a "#" anywhere before it is an error.
    """
    result: UriComponents = _parse(data, _HTTP_URL_PAT)
    if result.host is None or result.host == "":
        raise InvalidUriError(data, "missing host")
    return result


def build_uri_components(
    scheme: str | None = None,
    authority: str | None = None,
    userinfo: str | None = None,
    host: str | None = None,
    port: str | int | None = None,
    path: str | None = None,
    query: str | None = None,
    fragment: str | None = None,
) -> UriComponents:
    """Assembles components that are not yet encoded.
    port may be given as text, but it has to be a non-negative decimal integer.
    """
    return UriComponents(
        scheme=scheme,
        userinfo=userinfo,
        host=host,
        port=_parse_port(port),
        path=path if path is not None else "",
        query=query,
        fragment=fragment,
        raw_authority=authority,
    )
