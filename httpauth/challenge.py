"""WWW-Authenticate challenge parsing."""

import enum
from typing import Dict, List

__all__ = (
    "parse_scheme",
    "parse_www_authenticate",
    "split_segments",
    "unquote",
)


class _State(enum.Enum):
    PLAIN = enum.auto()
    IN_QUOTES = enum.auto()


class _Tokenizer:
    """Track quoting while a challenge is scanned one character at a time.

    An unescaped double quote flips between PLAIN and IN_QUOTES.
    A backslash flips the escaped flag, so a run of backslashes
    alternates; any other character clears it.
    """

    __slots__ = ("state", "escaped")

    def __init__(self) -> None:
        self.state = _State.PLAIN
        self.escaped = False

    def feed(self, char: str) -> bool:
        """Consume char, return True if it separates two segments."""
        if char == "=" and self.state is _State.PLAIN:
            return True
        if char == '"' and not self.escaped:
            if self.state is _State.PLAIN:
                self.state = _State.IN_QUOTES
            else:
                self.state = _State.PLAIN
        if char == "\\":
            self.escaped = not self.escaped
        else:
            self.escaped = False
        return False


def split_segments(header: str) -> List[str]:
    """Split header at every "=" that is not inside a quoted string."""
    tokenizer = _Tokenizer()
    segments: List[str] = []
    chunk: List[str] = []
    for char in header:
        if tokenizer.feed(char):
            segments.append("".join(chunk))
            chunk.clear()
        else:
            chunk.append(char)
    segments.append("".join(chunk))
    return segments


def _parse_value(segment: str) -> str:
    if segment[:1] == '"':
        # Keep everything up to the last quote, dropping what follows it
        # (the next parameter's name).
        value = '"'.join(segment.split('"')[:-1]) + '"'
    else:
        value = segment.split(" ")[0]
    if value[-1:] == ",":
        value = value[:-1]
    return value


def parse_www_authenticate(header: str) -> Dict[str, str]:
    """Parse challenge parameters out of a WWW-Authenticate header.

    Values are returned exactly as sent, quoted ones keep their quotes:

    >>> parse_www_authenticate('Digest realm="test", algorithm=MD5')
    {'realm': '"test"', 'algorithm': 'MD5'}

    Parameter names are not case-normalized.
    """
    segments = split_segments(header)
    params: Dict[str, str] = {}
    for previous, segment in zip(segments, segments[1:]):
        name = previous.split(" ")[-1]
        params[name] = _parse_value(segment)
    return params


def parse_scheme(header: str) -> str:
    """Return the auth scheme, the first word of a challenge header."""
    return header.split(" ")[0]


def unquote(value: str) -> str:
    """Strip one pair of surrounding quotes and unescape inner quotes."""
    if len(value) >= 2:
        if value[0] == '"' and value[-1] == '"':
            value = value[1:-1]
        value = value.replace('\\"', '"')
    return value
