"""Detectors for identifiers, reserved words, primitive types and operators."""

from __future__ import annotations

from rustlexer.constants import (
    ARITHMETIC_OPERATORS,
    ASSIGNMENT_OPERATORS,
    COMPARISON_OPERATORS,
    INCREMENT_DECREMENT_OPERATORS,
    LOGICAL_OPERATORS,
    OPERATOR_CHARS,
    PRIMITIVE_TYPES,
    RESERVED_WORDS,
    Category,
)
from rustlexer.token import Token

# Identifiers longer than this many UTF-8 bytes are reported as unknown.
_MAX_IDENTIFIER_BYTES = 10

# Characters that may follow the first character of a compound operator.
_CONTINUATIONS = {
    "=": "=",
    "!": "=",
    "<": "=<",
    ">": "=>",
    "&": "&=",
    "|": "|=",
    "+": "=",
    "-": "=",
    "*": "=",
    "/": "=",
    "%": "=",
    "^": "=",
}

_OPERATOR_CATEGORIES = (
    (ARITHMETIC_OPERATORS, Category.ARITHMETIC_OPERATOR),
    (COMPARISON_OPERATORS, Category.COMPARISON_OPERATOR),
    (LOGICAL_OPERATORS, Category.LOGICAL_OPERATOR),
    (ASSIGNMENT_OPERATORS, Category.ASSIGNMENT_OPERATOR),
    (INCREMENT_DECREMENT_OPERATORS, Category.INC_DEC_OPERATOR),
)


def _token(text: str, start: int, end: int, category: Category) -> Token:
    return Token(text[start:end], category, f"{start}-{end}")


def _is_identifier_start(char: str) -> bool:
    return char.isalpha() or char == "_"


def _is_identifier_part(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char == "_"


def detect_identifier(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect an identifier or reserved word at ``pos``.

    Identifiers longer than ten UTF-8 bytes are categorised as unknown.
    """
    if not _is_identifier_start(text[pos]):
        return None
    length = len(text)
    end = pos + 1
    while end < length and _is_identifier_part(text[end]):
        end += 1
    word = text[pos:end]
    if word in RESERVED_WORDS:
        category = Category.RESERVED_WORD
    elif len(word.encode("utf-8")) > _MAX_IDENTIFIER_BYTES:
        category = Category.UNKNOWN
    else:
        category = Category.IDENTIFIER
    return _token(text, pos, end, category), end


def detect_primitive(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect a primitive type such as ``i32`` or ``f64`` at ``pos``.

    Only a single letter followed by digits is considered.
    """
    if not text[pos].isalpha():
        return None
    length = len(text)
    end = pos + 1
    while end < length and text[end].isdecimal():
        end += 1
    if text[pos:end] not in PRIMITIVE_TYPES:
        return None
    return _token(text, pos, end, Category.PRIMITIVE), end


def _operator_category(word: str) -> Category:
    for operators, category in _OPERATOR_CATEGORIES:
        if word in operators:
            return category
    return Category.UNKNOWN


def detect_operator(text: str, pos: int) -> tuple[Token, int] | None:
    """Detect a one-, two- or three-character operator at ``pos``."""
    first = text[pos]
    if first not in OPERATOR_CHARS:
        return None
    length = len(text)
    end = pos + 1
    if end < length and text[end] in _CONTINUATIONS.get(first, ""):
        end += 1
        if end < length and text[pos : pos + 2] in ("<<", ">>") and text[end] == "=":
            end += 1
    word = text[pos:end]
    return _token(text, pos, end, _operator_category(word)), end