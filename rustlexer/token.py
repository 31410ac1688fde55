"""The token produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass

from rustlexer.constants import Category


@dataclass(frozen=True)
class Token:
    """A lexeme with its category and its position as ``"start-end"``."""

    word: str
    category: Category
    index: str

    def to_dict(self) -> dict[str, str]:
        """Return the JSON-ready form sent to clients."""
        return {
            "word": self.word,
            "category": str(self.category),
            "index": self.index,
        }