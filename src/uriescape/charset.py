"""uriescape.charset
Which characters may appear unescaped in each URI component.
Every set is ASCII-only: any code point outside it has to be percent-encoded.
"""

import enum
import string

# Each of these ABNF rules is from RFC 3986 or 5234.

# ALPHA = %x41-5A / %x61-7A
_ALPHA: frozenset[str] = frozenset(string.ascii_letters)

# DIGIT = %x30-39
_DIGIT: frozenset[str] = frozenset(string.digits)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
_UNRESERVED: frozenset[str] = _ALPHA | _DIGIT | frozenset("-._~")

# sub-delims = "!" / "$" / "&" / "'" / "(" / ")" / "*" / "+" / "," / ";" / "="
_SUB_DELIMS: frozenset[str] = frozenset("!$&'()*+,;=")

# pchar = unreserved / pct-encoded / sub-delims / ":" / "@"
# (pct-encoded is left out: a literal "%" always gets escaped)
_PCHAR: frozenset[str] = _UNRESERVED | _SUB_DELIMS | frozenset(":@")

# scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME: frozenset[str] = _ALPHA | _DIGIT | frozenset("+-.")

# authority = [ userinfo "@" ] host [ ":" port ]
_AUTHORITY: frozenset[str] = _UNRESERVED | _SUB_DELIMS | frozenset(":@")

# userinfo = *( unreserved / pct-encoded / sub-delims / ":" )
_USERINFO: frozenset[str] = _UNRESERVED | _SUB_DELIMS | frozenset(":")

# reg-name = *( unreserved / pct-encoded / sub-delims )
_HOST: frozenset[str] = _UNRESERVED | _SUB_DELIMS

# port = *DIGIT
_PORT: frozenset[str] = _DIGIT

# path-abempty = *( "/" segment )
_PATH: frozenset[str] = _PCHAR | frozenset("/")

# segment = *pchar
_SEGMENT: frozenset[str] = _PCHAR

# query = *( pchar / "/" / "?" )
_QUERY: frozenset[str] = _PCHAR | frozenset("/?")

# "&" and "=" delimit parameters inside a query, so they are escaped within one.
_QUERY_PARAM: frozenset[str] = _QUERY - frozenset("&=")

# fragment = *( pchar / "/" / "?" )
_FRAGMENT: frozenset[str] = _PCHAR | frozenset("/?")


class ComponentKind(enum.Enum):
    SCHEME = enum.auto()
    AUTHORITY = enum.auto()
    USER_INFO = enum.auto()
    HOST = enum.auto()
    PORT = enum.auto()
    PATH = enum.auto()
    PATH_SEGMENT = enum.auto()
    QUERY = enum.auto()
    QUERY_PARAM = enum.auto()
    FRAGMENT = enum.auto()


_ALLOWED: dict[ComponentKind, frozenset[str]] = {
    ComponentKind.SCHEME: _SCHEME,
    ComponentKind.AUTHORITY: _AUTHORITY,
    ComponentKind.USER_INFO: _USERINFO,
    ComponentKind.HOST: _HOST,
    ComponentKind.PORT: _PORT,
    ComponentKind.PATH: _PATH,
    ComponentKind.PATH_SEGMENT: _SEGMENT,
    ComponentKind.QUERY: _QUERY,
    ComponentKind.QUERY_PARAM: _QUERY_PARAM,
    ComponentKind.FRAGMENT: _FRAGMENT,
}


def allowed_characters(kind: ComponentKind) -> frozenset[str]:
    """Returns every character that kind leaves unescaped."""
    return _ALLOWED[kind]


def is_allowed(kind: ComponentKind, c: str | int) -> bool:
    """True if the code point c may appear as-is in a component of the given kind.
    c is either a one-character string or an integer code point.
    """
    if isinstance(c, int):
        c = chr(c)
    return c in _ALLOWED[kind]
