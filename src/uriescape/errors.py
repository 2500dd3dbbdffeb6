from dataclasses import dataclass


class UriEscapeError(ValueError):
    pass


@dataclass
class UnsupportedEncodingError(UriEscapeError, LookupError):
    encoding: str

    def __str__(self) -> str:
        return f"unsupported encoding - {self.encoding}"


@dataclass
class MalformedEscapeError(UriEscapeError):
    sequence: str
    position: int

    def __str__(self) -> str:
        return f'invalid encoded sequence "{self.sequence}" at position {self.position}'


@dataclass
class InvalidUriError(UriEscapeError):
    uri: str
    reason: str = "parse failed"

    def __str__(self) -> str:
        return f"[{self.uri}] is not a valid URI - {self.reason}"
