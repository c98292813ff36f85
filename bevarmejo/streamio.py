"""Lenient reading and plain formatting of values in text streams."""

from __future__ import annotations

import re
import string
import sys
from collections.abc import Iterable, Mapping

_ARITHMETIC_SYMBOLS = "^~+-"
_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DEFAULT_IGNORE_LIMIT = 1000


class TokenReader:
    """Cursor over a piece of text that reads numbers, words and lists.

    Numbers are found by skipping everything that is neither a digit nor one
    of the symbols ``^`` (largest float), ``~`` (smallest positive float),
    ``+`` or ``-``.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        """Return True when all the text has been consumed."""
        return self._pos >= len(self._text)

    def _skip_whitespace(self) -> None:
        while not self.at_end() and self._text[self._pos].isspace():
            self._pos += 1

    def read_number(self) -> float:
        """Read the next number, skipping any text in front of it."""
        text = self._text
        while not self.at_end():
            char = text[self._pos]
            if char in string.digits or char in _ARITHMETIC_SYMBOLS:
                break
            self._pos += 1
        if self.at_end():
            raise EOFError("No number left to read")

        char = text[self._pos]
        if char == "^":
            self._pos += 1
            return sys.float_info.max
        if char == "~":
            self._pos += 1
            return sys.float_info.min
        if char == "+":
            self._pos += 1

        self._skip_whitespace()
        match = _NUMBER.match(text, self._pos)
        if match is None:
            raise ValueError(f"Expected a number at position {self._pos}")
        self._pos = match.end()
        return float(match.group())

    def read_word(self) -> str:
        """Read the next run of non-whitespace characters."""
        self._skip_whitespace()
        if self.at_end():
            raise EOFError("No word left to read")
        start = self._pos
        while not self.at_end() and not self._text[self._pos].isspace():
            self._pos += 1
        return self._text[start:self._pos]

    def skip_past(self, char: str, limit: int = _DEFAULT_IGNORE_LIMIT) -> bool:
        """Consume up to ``limit`` characters, stopping after ``char``.

        Returns True when ``char`` was found and consumed.
        """
        consumed = 0
        while consumed < limit and not self.at_end():
            current = self._text[self._pos]
            self._pos += 1
            consumed += 1
            if current == char:
                return True
        return False

    def read_list(self, count: int) -> list[float]:
        """Read up to ``count`` numbers written as ``[a, b, c]``.

        Fewer numbers are returned when the text ends first.
        """
        self.skip_past("[")
        values: list[float] = []
        while len(values) < count and not self.at_end():
            try:
                values.append(self.read_number())
            except EOFError:
                break
            if len(values) < count:
                self.skip_past(",")
        self.skip_past("]")
        return values


def format_value(value: object) -> str:
    """Format a value: lists as ``[a, b]``, mappings as ``{k | v\\n...}``."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    if isinstance(value, Mapping):
        body = "\n".join(
            f"{format_value(key)} | {format_value(item)}" for key, item in value.items()
        )
        return "{" + body + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def format_param(name: str, value: object) -> str:
    """Format a ``name : value`` line."""
    return f"{name} : {format_value(value)}\n"


def load_dimensions(lines: Iterable[str], tag: str) -> int:
    """Find the first line containing ``tag`` and return the size written after it.

    A missing or zero size counts as 1. Lines are consumed up to and including
    the tag line, so an iterator can go on being read afterwards.
    """
    for line in lines:
        if tag not in line:
            continue
        reader = TokenReader(line)
        try:
            reader.read_word()
        except EOFError:
            pass
        try:
            dimensions = reader.read_number()
        except EOFError:
            dimensions = 0.0
        if dimensions < 0:
            raise ValueError(f"Negative dimension after tag {tag}")
        return int(dimensions) or 1
    raise ValueError(f"Tag {tag} not found.")