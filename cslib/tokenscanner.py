"""Split text into words, numbers, strings and operators."""

from __future__ import annotations

import enum
import io
from collections.abc import Iterator
from typing import TextIO

_SPACES = " \t\n\v\f\r"
_DIGITS = "0123456789"

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
}


def _is_space(ch: str) -> bool:
    return ch != "" and ch in _SPACES


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in _DIGITS


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


class TokenType(enum.Enum):
    """The kind of a token."""

    EOF = -1
    SEPARATOR = 0
    WORD = 1
    NUMBER = 2
    STRING = 3
    OPERATOR = 4


class ScannerError(ValueError):
    """Raised when the input cannot be scanned as requested."""


class _NumberState(enum.Enum):
    INITIAL = enum.auto()
    BEFORE_DECIMAL_POINT = enum.auto()
    AFTER_DECIMAL_POINT = enum.auto()
    STARTING_EXPONENT = enum.auto()
    FOUND_EXPONENT_SIGN = enum.auto()
    SCANNING_EXPONENT = enum.auto()
    FINAL = enum.auto()


class _CharReader:
    """Character source with unlimited pushback; reads streams lazily."""

    def __init__(self, source: str | TextIO) -> None:
        if isinstance(source, str):
            self._chars = list(source)
            self._stream: TextIO | None = None
        else:
            self._chars = []
            self._stream = source
        self._pos = 0

    def get(self) -> str:
        if self._pos >= len(self._chars):
            if self._stream is None:
                return ""
            chunk = self._stream.read(1)
            if not chunk:
                return ""
            self._chars.append(chunk)
        ch = self._chars[self._pos]
        self._pos += 1
        return ch

    def unget(self) -> None:
        if self._pos > 0:
            self._pos -= 1

    @property
    def position(self) -> int:
        return self._pos


class TokenScanner:
    """Breaks its input into tokens, one call to ``next_token`` at a time.

    The end of the input is signalled by the empty string.
    """

    def __init__(self, source: str | TextIO = "") -> None:
        self._ignore_whitespace = False
        self._ignore_comments = False
        self._scan_numbers = False
        self._scan_strings = False
        self._word_chars = ""
        self._operators: list[str] = []
        self._saved: list[str] = []
        self._reader = _CharReader("")
        self.set_input(source)

    def set_input(self, source: str | TextIO) -> None:
        """Start scanning ``source``, a string or a readable text stream."""
        if not isinstance(source, (str, io.IOBase)) and not hasattr(source, "read"):
            raise TypeError("set_input: source must be a string or a text stream")
        self._reader = _CharReader(source)
        self._saved = []

    def has_more_tokens(self) -> bool:
        """Return True if another token is available, without consuming it."""
        token = self.next_token()
        self.save_token(token)
        return token != ""

    def next_token(self) -> str:
        """Return the next token, or ``""`` at the end of the input."""
        if self._saved:
            return self._saved.pop()
        reader = self._reader
        while True:
            if self._ignore_whitespace:
                self._skip_spaces()
            ch = reader.get()
            if ch == "/" and self._ignore_comments:
                ch = reader.get()
                if ch == "/":
                    while ch not in ("\n", "\r", ""):
                        ch = reader.get()
                    continue
                if ch == "*":
                    prev = ""
                    while True:
                        ch = reader.get()
                        if ch == "" or (prev == "*" and ch == "/"):
                            break
                        prev = ch
                    continue
                if ch != "":
                    reader.unget()
                ch = "/"
            if ch == "":
                return ""
            if ch in ('"', "'") and self._scan_strings:
                reader.unget()
                return self._scan_string()
            if _is_digit(ch) and self._scan_numbers:
                reader.unget()
                return self._scan_number()
            if self.is_word_character(ch):
                reader.unget()
                return self._scan_word()
            op = ch
            while self._is_operator_prefix(op):
                ch = reader.get()
                if ch == "":
                    break
                op += ch
            while len(op) > 1 and not self._is_operator(op):
                reader.unget()
                op = op[:-1]
            return op

    def save_token(self, token: str) -> None:
        """Push ``token`` back so that the next call to ``next_token`` returns it."""
        self._saved.append(token)

    def __iter__(self) -> Iterator[str]:
        while True:
            token = self.next_token()
            if token == "":
                return
            yield token

    def ignore_whitespace(self) -> None:
        """Skip whitespace instead of returning it as tokens."""
        self._ignore_whitespace = True

    def ignore_comments(self) -> None:
        """Skip ``//`` and ``/* */`` comments."""
        self._ignore_comments = True

    def scan_numbers(self) -> None:
        """Return numbers, with fraction and exponent, as single tokens."""
        self._scan_numbers = True

    def scan_strings(self) -> None:
        """Return quoted strings, quotes included, as single tokens."""
        self._scan_strings = True

    def add_word_characters(self, chars: str) -> None:
        """Treat every character in ``chars`` as part of a word."""
        self._word_chars += chars

    def add_operator(self, op: str) -> None:
        """Recognise the multi-character operator ``op`` as one token."""
        self._operators.insert(0, op)

    def position(self) -> int:
        """Return the offset in the input of the next unread token."""
        pos = self._reader.position
        if self._saved:
            return pos - len(self._saved[-1])
        return pos

    def is_word_character(self, ch: str) -> bool:
        """Return True if ``ch`` may appear in a word token."""
        if ch == "":
            return False
        return _is_alnum(ch) or ch in self._word_chars

    def verify_token(self, expected: str) -> None:
        """Read the next token and raise ScannerError unless it is ``expected``."""
        token = self.next_token()
        if token != expected:
            raise ScannerError(f'Found "{token}" when expecting "{expected}"')

    def get_token_type(self, token: str) -> TokenType:
        """Classify ``token``."""
        if token == "":
            return TokenType.EOF
        ch = token[0]
        if _is_space(ch):
            return TokenType.SEPARATOR
        if ch == '"' or (ch == "'" and len(token) > 1):
            return TokenType.STRING
        if _is_digit(ch):
            return TokenType.NUMBER
        if self.is_word_character(ch):
            return TokenType.WORD
        return TokenType.OPERATOR

    def get_string_value(self, token: str) -> str:
        """Strip the quotes from a string token and resolve its escapes."""
        start, finish = 0, len(token)
        if finish > 1 and token[0] in ('"', "'"):
            start, finish = 1, finish - 1

        def char_at(i: int) -> str:
            return token[i] if i < len(token) else "\0"

        out: list[str] = []
        i = start
        while i < finish:
            ch = token[i]
            if ch == "\\":
                i += 1
                ch = char_at(i)
                if _is_digit(ch) or ch == "x":
                    base = 8
                    if ch == "x":
                        base = 16
                        i += 1
                    result = 0
                    while i < finish:
                        c = token[i]
                        if _is_digit(c):
                            digit = ord(c) - ord("0")
                        elif _is_alpha(c):
                            digit = ord(c.upper()) - ord("A") + 10
                        else:
                            digit = base
                        if digit >= base:
                            break
                        result = base * result + digit
                        i += 1
                    ch = chr(result & 0xFF)
                    i -= 1
                else:
                    ch = _SIMPLE_ESCAPES.get(ch, ch)
            out.append(ch)
            i += 1
        return "".join(out)

    def get_char(self) -> str:
        """Read one raw character; ``""`` at the end of the input."""
        return self._reader.get()

    def unget_char(self, ch: str) -> None:
        """Push back the character most recently read by ``get_char``."""
        self._reader.unget()

    def _skip_spaces(self) -> None:
        while True:
            ch = self._reader.get()
            if ch == "":
                return
            if not _is_space(ch):
                self._reader.unget()
                return

    def _scan_word(self) -> str:
        chars: list[str] = []
        while True:
            ch = self._reader.get()
            if ch == "":
                break
            if not self.is_word_character(ch):
                self._reader.unget()
                break
            chars.append(ch)
        return "".join(chars)

    def _scan_number(self) -> str:
        reader = self._reader
        chars: list[str] = []
        state = _NumberState.INITIAL
        while state is not _NumberState.FINAL:
            ch = reader.get()
            if state is _NumberState.INITIAL:
                if not _is_digit(ch):
                    raise ScannerError("Internal error: illegal call to scanNumber")
                state = _NumberState.BEFORE_DECIMAL_POINT
            elif state in (
                _NumberState.BEFORE_DECIMAL_POINT,
                _NumberState.AFTER_DECIMAL_POINT,
            ):
                if ch == "." and state is _NumberState.BEFORE_DECIMAL_POINT:
                    state = _NumberState.AFTER_DECIMAL_POINT
                elif ch in ("E", "e"):
                    state = _NumberState.STARTING_EXPONENT
                elif not _is_digit(ch):
                    if ch != "":
                        reader.unget()
                    state = _NumberState.FINAL
            elif state is _NumberState.STARTING_EXPONENT:
                if ch in ("+", "-"):
                    state = _NumberState.FOUND_EXPONENT_SIGN
                elif _is_digit(ch):
                    state = _NumberState.SCANNING_EXPONENT
                else:
                    if ch != "":
                        reader.unget()
                    reader.unget()
                    chars.pop()
                    state = _NumberState.FINAL
            elif state is _NumberState.FOUND_EXPONENT_SIGN:
                if _is_digit(ch):
                    state = _NumberState.SCANNING_EXPONENT
                else:
                    if ch != "":
                        reader.unget()
                    reader.unget()
                    reader.unget()
                    del chars[-2:]
                    state = _NumberState.FINAL
            elif state is _NumberState.SCANNING_EXPONENT:
                if not _is_digit(ch):
                    if ch != "":
                        reader.unget()
                    state = _NumberState.FINAL
            if state is not _NumberState.FINAL:
                chars.append(ch)
        return "".join(chars)

    def _scan_string(self) -> str:
        reader = self._reader
        delim = reader.get()
        chars = [delim]
        escape = False
        while True:
            ch = reader.get()
            if ch == "":
                raise ScannerError("TokenScanner found unterminated string")
            if ch == delim and not escape:
                break
            escape = ch == "\\" and not escape
            chars.append(ch)
        chars.append(delim)
        return "".join(chars)

    def _is_operator(self, op: str) -> bool:
        return op in self._operators

    def _is_operator_prefix(self, op: str) -> bool:
        return any(candidate.startswith(op) for candidate in self._operators)