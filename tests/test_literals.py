import pytest

from rustlexer.constants import Category
from rustlexer.literals import (
    detect_block_comment,
    detect_chain,
    detect_line_comment,
    detect_number,
)


def _check_index(tok, pos, new_pos, text):
    assert tok.index == f"{pos}-{new_pos}"
    assert text[pos:new_pos] == tok.word


# block comments

def test_block_comment_simple():
    comment = "/* a */"
    text = comment + " x"
    tok, new_pos = detect_block_comment(text, 0)
    assert tok.word == comment
    assert tok.category is Category.BLOCK_COMMENT
    assert new_pos == len(comment)
    _check_index(tok, 0, new_pos, text)


def test_block_comment_nested():
    comment = "/* a /* b */ c */"
    text = comment + "\n"
    tok, new_pos = detect_block_comment(text, 0)
    assert tok.word == comment
    assert new_pos == len(comment)


def test_block_comment_unterminated_stops_before_last_char():
    text = "/* abc"
    tok, new_pos = detect_block_comment(text, 0)
    assert tok.word == text[:-1]
    assert new_pos == len(text) - 1


def test_block_comment_not_present():
    assert detect_block_comment("// no", 0) is None
    assert detect_block_comment("x /", 2) is None


# strings

def test_chain_simple():
    text = '"hi" x'
    tok, new_pos = detect_chain(text, 0)
    assert tok.word == '"hi"'
    assert tok.category is Category.STRING
    _check_index(tok, 0, new_pos, text)


def test_chain_with_escaped_quote():
    literal = '"a\\"b"'
    tok, new_pos = detect_chain(literal + ";", 0)
    assert tok.word == literal
    assert new_pos == len(literal)


def test_chain_unterminated_takes_rest():
    text = 'x "abc'
    tok, new_pos = detect_chain(text, 2)
    assert tok.word == text[2:]
    assert new_pos == len(text)


def test_chain_not_present():
    assert detect_chain("abc", 0) is None
    assert detect_chain("abc", 3) is None


# line comments

def test_line_comment_stops_at_newline():
    text = "// hi\nx"
    tok, new_pos = detect_line_comment(text, 0)
    assert tok.word == "// hi"
    assert tok.category is Category.LINE_COMMENT
    assert new_pos == text.index("\n")
    _check_index(tok, 0, new_pos, text)


def test_line_comment_to_end_of_text():
    text = "a // end"
    tok, new_pos = detect_line_comment(text, 2)
    assert tok.word == text[2:]
    assert new_pos == len(text)


def test_line_comment_not_present():
    assert detect_line_comment("/* x */", 0) is None
    assert detect_line_comment("/", 0) is None


# numbers

@pytest.mark.parametrize(
    "text, word, category",
    [
        ("123 ", "123", Category.NATURAL_NUMBER),
        ("3.14;", "3.14", Category.REAL_NUMBER),
        ("3. ", "3.", Category.UNKNOWN),
        ("1.2.3", "1.2", Category.REAL_NUMBER),
        ("42abc", "42", Category.NATURAL_NUMBER),
    ],
)
def test_number_categories(text, word, category):
    tok, new_pos = detect_number(text, 0)
    assert tok.word == word
    assert tok.category is category
    assert new_pos == len(word)
    _check_index(tok, 0, new_pos, text)


def test_number_not_present():
    assert detect_number("abc", 0) is None
    assert detect_number(".5", 0) is None


def test_number_position_out_of_range_raises():
    with pytest.raises(IndexError):
        detect_number("1", 3)