"""Minimal reader for protobuf text format.

Font description files (``METADATA.pb``) are written in protobuf text format::

    name: "Roboto"
    fonts {
      style: "normal"
      weight: 400
    }
    axes {
      tag: "wght"
      min_value: 100.0
      max_value: 900.0
    }

This module parses that syntax into an ordered tree of :class:`TextMessage`
without needing the ``.proto`` schema. Repeated fields keep their order,
nested blocks may use ``{}`` or ``<>`` and an optional colon, and adjacent
string literals are concatenated.
"""

import re
from collections.abc import Iterator
from re import Pattern
from typing import Any, NamedTuple, Union, cast

from gfont2ts.core.exceptions import TextProtoError

Value = Union[str, int, float, bool, "TextMessage"]

TOKEN_RE: Pattern[str] = re.compile(
    r"""
    (?P<newline>\n)
    | (?P<space>[ \t\r\f\v]+)
    | (?P<comment>\#[^\n]*)
    | (?P<string>"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*')
    | (?P<number>[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?[fF]?(?![\w.]))
    | (?P<ident>-?[A-Za-z_][\w.]*)
    | (?P<punct>[:{}<>\[\],;])
    """,
    re.VERBOSE,
)

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "?": "?",
}

_ESCAPE_RE: Pattern[str] = re.compile(
    r"\\(?:x([0-9A-Fa-f]{1,2})|([0-7]{1,3})|u([0-9A-Fa-f]{4})|U([0-9A-Fa-f]{8})|(.))"
)

_CLOSING = {"{": "}", "<": ">"}


class Token(NamedTuple):
    kind: str
    text: str
    line: int
    column: int


class TextMessage:
    """Ordered multimap of field names to values.

    Values are strings, numbers, booleans, bare identifiers (as strings) or
    nested :class:`TextMessage` blocks.
    """

    def __init__(self) -> None:
        self._fields: list[tuple[str, Value]] = []

    def add(self, key: str, value: Value) -> None:
        self._fields.append((key, value))

    def get(self, key: str, default: Any = None) -> Any:
        """Return the first value of ``key``, or ``default``."""
        for name, value in self._fields:
            if name == key:
                return value
        return default

    def get_all(self, key: str) -> list[Value]:
        """Return every value of ``key`` in declaration order."""
        return [value for name, value in self._fields if name == key]

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._fields)

    def __iter__(self) -> Iterator[tuple[str, Value]]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"TextMessage({self._fields!r})"


def tokenize(text: str) -> Iterator[Token]:
    """Split text into tokens, dropping whitespace and comments.

    Raises:
        TextProtoError: On a character that starts no token.
    """
    line = 1
    line_start = 0
    pos = 0
    while pos < len(text):
        match = TOKEN_RE.match(text, pos)
        if match is None:
            raise TextProtoError(
                f"Unexpected character {text[pos]!r}", line, pos - line_start + 1
            )
        kind = cast(str, match.lastgroup)
        if kind == "newline":
            line += 1
            line_start = match.end()
        elif kind not in ("space", "comment"):
            yield Token(kind, match.group(), line, match.start() - line_start + 1)
        pos = match.end()


def _unescape(match: re.Match[str]) -> bytes:
    # Hex and octal escapes are single bytes of the UTF-8 encoded string.
    hex_digits, octal_digits, short_digits, long_digits, char = match.groups()
    if hex_digits:
        return bytes([int(hex_digits, 16)])
    if octal_digits:
        return bytes([int(octal_digits, 8)])
    if short_digits or long_digits:
        return chr(int(short_digits or long_digits, 16)).encode("utf-8")
    return _ESCAPES.get(char, char).encode("utf-8")


def _string_value(token: Token) -> str:
    """Decode a quoted literal, including its escape sequences.

    Raises:
        TextProtoError: If an escape is out of range or the bytes are not
            valid UTF-8.
    """
    body = token.text[1:-1]
    data = bytearray()
    pos = 0
    try:
        for match in _ESCAPE_RE.finditer(body):
            data += body[pos : match.start()].encode("utf-8")
            data += _unescape(match)
            pos = match.end()
        data += body[pos:].encode("utf-8")
        return data.decode("utf-8")
    except ValueError as e:
        raise TextProtoError(
            f"Invalid string literal: {e}", token.line, token.column
        ) from e


def _number_value(token: Token) -> int | float:
    text = token.text.rstrip("fF")
    try:
        return int(text)
    except ValueError:
        return float(text)


class _Parser:
    """Recursive-descent parser over the token stream."""

    def __init__(self, text: str) -> None:
        self._tokens = list(tokenize(text))
        self._pos = 0

    def _peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _next(self, expected: str) -> Token:
        token = self._peek()
        if token is None:
            last = self._tokens[-1] if self._tokens else Token("", "", 1, 0)
            raise TextProtoError(
                f"Unexpected end of input, expected {expected}",
                last.line,
                last.column + len(last.text),
            )
        self._pos += 1
        return token

    def _accept(self, text: str) -> bool:
        token = self._peek()
        if token is not None and token.kind == "punct" and token.text == text:
            self._pos += 1
            return True
        return False

    def parse(self) -> TextMessage:
        message = self._message(closing=None)
        token = self._peek()
        if token is not None:
            raise TextProtoError(
                f"Unexpected {token.text!r}", token.line, token.column
            )
        return message

    def _message(self, closing: str | None) -> TextMessage:
        message = TextMessage()
        while True:
            token = self._peek()
            if token is None:
                if closing is not None:
                    self._next(repr(closing))
                return message
            if token.kind == "punct" and token.text == closing:
                self._pos += 1
                return message
            self._field(message)
            # Field separators are optional.
            if not self._accept(","):
                self._accept(";")

    def _field(self, message: TextMessage) -> None:
        token = self._next("field name")
        if token.kind != "ident":
            raise TextProtoError(
                f"Expected field name, got {token.text!r}", token.line, token.column
            )
        key = token.text
        has_colon = self._accept(":")
        following = self._peek()
        if following is not None and following.kind == "punct":
            if following.text in _CLOSING:
                self._pos += 1
                message.add(key, self._message(_CLOSING[following.text]))
                return
            if following.text == "[" and has_colon:
                self._pos += 1
                self._list(message, key)
                return
        if not has_colon:
            token = following or token
            raise TextProtoError(
                f"Expected ':' or '{{' after {key!r}", token.line, token.column
            )
        message.add(key, self._scalar())

    def _list(self, message: TextMessage, key: str) -> None:
        if self._accept("]"):
            return
        while True:
            if self._accept("{"):
                message.add(key, self._message("}"))
            elif self._accept("<"):
                message.add(key, self._message(">"))
            else:
                message.add(key, self._scalar())
            if self._accept("]"):
                return
            token = self._next("',' or ']'")
            if token.text != ",":
                raise TextProtoError(
                    f"Expected ',' or ']', got {token.text!r}", token.line, token.column
                )

    def _scalar(self) -> Value:
        token = self._next("value")
        if token.kind == "string":
            parts = [_string_value(token)]
            following = self._peek()
            while following is not None and following.kind == "string":
                self._pos += 1
                parts.append(_string_value(following))
                following = self._peek()
            return "".join(parts)
        if token.kind == "number":
            return _number_value(token)
        if token.kind == "ident":
            if token.text in ("true", "True"):
                return True
            if token.text in ("false", "False"):
                return False
            return token.text
        raise TextProtoError(
            f"Expected value, got {token.text!r}", token.line, token.column
        )


def parse(text: str) -> TextMessage:
    """Parse protobuf text format into a :class:`TextMessage` tree.

    Raises:
        TextProtoError: If the text is not well-formed.
    """
    return _Parser(text).parse()
