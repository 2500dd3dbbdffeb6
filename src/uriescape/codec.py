"""uriescape.codec
Percent-encoding of one URI component and percent-decoding of any text.
Encoding depends on the component kind, decoding never does: by the time text
gets decoded the component boundaries may already be gone.
"""

import codecs

from ._logging import logger
from .charset import ComponentKind, is_allowed
from .errors import MalformedEscapeError, UnsupportedEncodingError

DEFAULT_ENCODING: str = "utf-8"

# HEXDIG = DIGIT / "A" / "B" / "C" / "D" / "E" / "F"
# (case-insensitive, like every quoted string in ABNF)
_HEXDIG: frozenset[str] = frozenset("0123456789ABCDEFabcdef")


def _lookup(encoding: str | None) -> codecs.CodecInfo:
    if not encoding:
        raise ValueError("'encoding' must not be empty")
    try:
        # codecs.lookup alone would accept bytes-to-bytes codecs like "base64".
        "".encode(encoding)
        return codecs.lookup(encoding)
    except LookupError as e:
        logger.debug("cannot resolve encoding %r", encoding)
        raise UnsupportedEncodingError(encoding) from e


def _check_source(source: str | None) -> None:
    if source is None:
        raise TypeError("'source' must not be None")


def encode(source: str, kind: ComponentKind, encoding: str = DEFAULT_ENCODING) -> str:
    """Percent-encodes every character of source that may not appear as-is in a component of the given kind.
    Characters are classified before conversion to bytes, so a multi-byte encoding never changes the verdict.
    e.g. encode("/a b", ComponentKind.PATH) == "/a%20b"
    """
    _check_source(source)
    # One encoder per call, so stateful codecs (utf-16 and its BOM) emit their prefix once.
    encoder: codecs.IncrementalEncoder = _lookup(encoding).incrementalencoder()
    prefix: bytes = encoder.encode("")
    result: list[str] = []
    escaped: bool = False
    for c in source:
        if is_allowed(kind, c):
            result.append(c)
        else:
            result.extend(f"%{b:02X}" for b in encoder.encode(c))
            escaped = True
    if not escaped:
        return "".join(result)
    result.extend(f"%{b:02X}" for b in encoder.encode("", final=True))
    # The prefix leads the output, so it precedes every byte once decoded, literals included.
    return "".join(f"%{b:02X}" for b in prefix) + "".join(result)


def _malformed(source: str, position: int) -> MalformedEscapeError:
    logger.debug("rejecting escape sequence at %d in %r", position, source)
    return MalformedEscapeError(source[position:], position)


def decode(source: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Replaces every "%" HEXDIG HEXDIG triple in source with the byte it stands for,
    then reads the resulting bytes back as text in the given encoding.
    Text without any "%" is returned as-is.
    Raises MalformedEscapeError at the first "%" not followed by two hex digits.
    """
    _check_source(source)
    info: codecs.CodecInfo = _lookup(encoding)
    if "%" not in source:
        return source

    encoder: codecs.IncrementalEncoder = info.incrementalencoder()
    # Literal characters never carry a prefix of their own: a BOM only comes from an escape.
    encoder.encode("")
    buffer: bytearray = bytearray()
    length: int = len(source)
    i: int = 0
    literal: bool = False
    while i < length:
        c: str = source[i]
        if c != "%":
            buffer += encoder.encode(c)
            literal = True
            i += 1
            continue
        if i + 2 >= length:
            raise _malformed(source, i)
        hi, lo = source[i + 1], source[i + 2]
        if hi not in _HEXDIG or lo not in _HEXDIG:
            raise _malformed(source, i)
        buffer.append((int(hi, 16) << 4) + int(lo, 16))
        i += 3
    if literal:
        buffer += encoder.encode("", final=True)
    return bytes(buffer).decode(info.name)
