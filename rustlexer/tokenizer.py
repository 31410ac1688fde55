"""Turn source text into a list of categorised tokens."""

from __future__ import annotations

from rustlexer.constants import SEPARATORS, Category
from rustlexer.literals import (
    detect_block_comment,
    detect_chain,
    detect_line_comment,
    detect_number,
)
from rustlexer.symbols import (
    detect_close_brace,
    detect_close_parenthesis,
    detect_comma,
    detect_open_brace,
    detect_open_parenthesis,
    detect_semicolon,
    detect_var_type_assignation,
)
from rustlexer.token import Token
from rustlexer.words import detect_identifier, detect_operator, detect_primitive

_WHITESPACE = frozenset(" \t\n")

# Tried in this order at each position; the first match wins.
_DETECTORS = (
    detect_var_type_assignation,
    detect_chain,
    detect_line_comment,
    detect_block_comment,
    detect_open_parenthesis,
    detect_close_parenthesis,
    detect_open_brace,
    detect_close_brace,
    detect_semicolon,
    detect_comma,
    detect_operator,
    detect_number,
    detect_primitive,
    detect_identifier,
)


def is_separator(char: str) -> bool:
    """Return whether ``char`` separates tokens."""
    return char in SEPARATORS


def _unknown_index(count: int) -> str:
    # Unrecognised characters carry the token count rendered as one code point.
    if 0xD800 <= count <= 0xDFFF or count > 0x10FFFF:
        return "\ufffd"
    return chr(count)


def tokenize(text: str) -> list[Token]:
    """Split ``text`` into tokens, skipping blanks, tabs and newlines."""
    tokens: list[Token] = []
    pos = 0
    length = len(text)
    while pos < length:
        if text[pos] in _WHITESPACE:
            pos += 1
            continue
        for detect in _DETECTORS:
            found = detect(text, pos)
            if found is not None:
                token, pos = found
                break
        else:
            token = Token(text[pos], Category.UNKNOWN, _unknown_index(len(tokens)))
            pos += 1
        tokens.append(token)
    return tokens


class Tokenizer:
    """Holds text that is ready to tokenize: non-empty and ending in a separator."""

    def __init__(self, text: str) -> None:
        if not text:
            raise ValueError("text is empty")
        if not is_separator(text[-1]):
            raise ValueError(f"text must end with a separator: {text!r}")
        self.text = text

    def tokens(self) -> list[Token]:
        """Return the tokens of the text."""
        return tokenize(self.text)