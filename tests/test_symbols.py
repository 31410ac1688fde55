import pytest

from rustlexer.constants import Category
from rustlexer.symbols import (
    detect_close_brace,
    detect_close_parenthesis,
    detect_comma,
    detect_open_brace,
    detect_open_parenthesis,
    detect_semicolon,
    detect_var_type_assignation,
)

SYMBOLS = "{}(),;:"


def _assert_found(result, char, category, pos):
    assert result is not None
    tok, new_pos = result
    assert tok.word == char
    assert tok.category is category
    assert new_pos == pos + 1
    assert tok.index == f"{pos}-{pos + 1}"


def test_open_brace():
    _assert_found(detect_open_brace("{ rest", 0), "{", Category.OPEN_BRACE, 0)
    _assert_found(detect_open_brace("abc{def", 3), "{", Category.OPEN_BRACE, 3)
    assert detect_open_brace("x{", 0) is None
    assert all(detect_open_brace(c, 0) is None for c in SYMBOLS if c != "{")


def test_close_brace():
    _assert_found(detect_close_brace("} rest", 0), "}", Category.CLOSE_BRACE, 0)
    _assert_found(detect_close_brace("abc}def", 3), "}", Category.CLOSE_BRACE, 3)
    assert detect_close_brace("x}", 0) is None
    assert all(detect_close_brace(c, 0) is None for c in SYMBOLS if c != "}")


def test_comma():
    _assert_found(detect_comma(", rest", 0), ",", Category.SEPARATOR, 0)
    _assert_found(detect_comma("abc,def", 3), ",", Category.SEPARATOR, 3)
    assert detect_comma("x,", 0) is None
    assert all(detect_comma(c, 0) is None for c in SYMBOLS if c != ",")


def test_open_parenthesis():
    _assert_found(detect_open_parenthesis("( rest", 0), "(", Category.OPEN_PARENTHESIS, 0)
    _assert_found(detect_open_parenthesis("abc(def", 3), "(", Category.OPEN_PARENTHESIS, 3)
    assert detect_open_parenthesis("x(", 0) is None
    assert all(detect_open_parenthesis(c, 0) is None for c in SYMBOLS if c != "(")


def test_close_parenthesis():
    _assert_found(detect_close_parenthesis(") rest", 0), ")", Category.CLOSE_PARENTHESIS, 0)
    _assert_found(detect_close_parenthesis("abc)def", 3), ")", Category.CLOSE_PARENTHESIS, 3)
    assert detect_close_parenthesis("x)", 0) is None
    assert all(detect_close_parenthesis(c, 0) is None for c in SYMBOLS if c != ")")


def test_semicolon():
    _assert_found(detect_semicolon("; rest", 0), ";", Category.TERMINAL, 0)
    _assert_found(detect_semicolon("abc;def", 3), ";", Category.TERMINAL, 3)
    assert detect_semicolon("x;", 0) is None
    assert all(detect_semicolon(c, 0) is None for c in SYMBOLS if c != ";")


def test_var_type_assignation():
    _assert_found(detect_var_type_assignation(": rest", 0), ":", Category.TYPE_ANNOTATION, 0)
    _assert_found(detect_var_type_assignation("abc:def", 3), ":", Category.TYPE_ANNOTATION, 3)
    assert detect_var_type_assignation("x:", 0) is None
    assert all(detect_var_type_assignation(c, 0) is None for c in SYMBOLS if c != ":")


def test_word_matches_source_slice():
    text = "let x: i32 = (1, 2);"
    pos = text.index(":")
    tok, new_pos = detect_var_type_assignation(text, pos)
    assert text[pos:new_pos] == tok.word


def test_position_out_of_range_raises():
    with pytest.raises(IndexError):
        detect_semicolon("a", 5)