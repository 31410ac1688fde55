"""Detectors for comments, string literals and numbers."""

from __future__ import annotations

from rustlexer.constants import Category
from rustlexer.token import Token


def _token(text: str, start: int, end: int, category: Category) -> Token:
    return Token(text[start:end], category, f"{start}-{end}")


def detect_block_comment(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect a ``/* ... */`` comment at ``pos``, honouring nesting."""
    length = len(text)
    if not (pos < length - 1 and text.startswith("/*", pos)):
        return None
    start = pos
    i = pos + 2
    depth = 1
    while i < length - 1 and depth > 0:
        pair = text[i : i + 2]
        if pair == "*/":
            depth -= 1
            i += 2
        elif pair == "/*":
            depth += 1
            i += 2
        else:
            i += 1
    return _token(text, start, i, Category.BLOCK_COMMENT), i


def detect_chain(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect a double-quoted string with backslash escapes at ``pos``."""
    length = len(text)
    if pos >= length or text[pos] != '"':
        return None
    start = pos
    i = pos + 1
    escaped = False
    while i < length:
        char = text[i]
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif char == '"':
            i += 1
            break
        i += 1
    return _token(text, start, i, Category.STRING), i


def detect_line_comment(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect a ``//`` comment running to the end of the line at ``pos``."""
    length = len(text)
    if not (pos < length - 1 and text.startswith("//", pos)):
        return None
    end = text.find("\n", pos + 2)
    if end == -1:
        end = length
    return _token(text, pos, end, Category.LINE_COMMENT), end


def detect_number(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect a natural or real number at ``pos``.

    A real number needs digits on both sides of its single point;
    a trailing point makes the token unknown.
    """
    if not text[pos].isdecimal():
        return None
    length = len(text)
    start = pos
    i = pos + 1
    category = Category.NATURAL_NUMBER
    has_point = False
    while i < length and (text[i].isdecimal() or (not has_point and text[i] == ".")):
        if text[i] == ".":
            has_point = True
            category = Category.REAL_NUMBER
        i += 1
    if has_point:
        dot = text.find(".", start, i)
        if dot in (-1, start, i - 1):
            category = Category.UNKNOWN
    return _token(text, start, i, category), i