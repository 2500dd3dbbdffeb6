__version__ = "0.1"

from .charset import ComponentKind, allowed_characters, is_allowed
from .codec import DEFAULT_ENCODING, decode, encode
from .components import UriComponents, build_uri_components, parse_http_url, parse_uri
from .errors import InvalidUriError, MalformedEscapeError, UnsupportedEncodingError, UriEscapeError
from .uri import encode_authority, encode_fragment, encode_host, encode_http_url, encode_path, encode_path_segment, encode_port, encode_query, encode_query_param, encode_scheme, encode_uri, encode_uri_components, encode_user_info
