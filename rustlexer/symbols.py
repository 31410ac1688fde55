"""Detectors for single-character punctuation tokens."""

from __future__ import annotations

from rustlexer.constants import Category
from rustlexer.token import Token


def _detect_char(text: str, pos: int, char: str, category: Category) -> tuple[Token, int] | None:
    if text[pos] != char:
        return None
    end = pos + 1
    return Token(char, category, f"{pos}-{end}"), end


def detect_open_brace(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect ``{`` at ``pos``; return the token and the next position."""
    return _detect_char(text, pos, "{", Category.OPEN_BRACE)


def detect_close_brace(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect ``}`` at ``pos``; return the token and the next position."""
    return _detect_char(text, pos, "}", Category.CLOSE_BRACE)


def detect_comma(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect the ``,`` separator at ``pos``."""
    return _detect_char(text, pos, ",", Category.SEPARATOR)


def detect_open_parenthesis(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect ``(`` at ``pos``."""
    return _detect_char(text, pos, "(", Category.OPEN_PARENTHESIS)


def detect_close_parenthesis(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect ``)`` at ``pos``."""
    return _detect_char(text, pos, ")", Category.CLOSE_PARENTHESIS)


def detect_semicolon(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect the ``;`` terminal at ``pos``."""
    return _detect_char(text, pos, ";", Category.TERMINAL)


def detect_var_type_assignation(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect the ``:`` that introduces a variable's type at ``pos``."""
    return _detect_char(text, pos, ":", Category.TYPE_ANNOTATION)