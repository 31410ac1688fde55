"""Token categories and the lexical tables of the Rust subset."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Category assigned to a token; the value is the label shown to clients."""

    NATURAL_NUMBER = "NÚMERO NATURAL"
    REAL_NUMBER = "NÚMERO REAL"
    IDENTIFIER = "IDENTIFICADOR"
    RESERVED_WORD = "PALABRA RESERVADA"
    ARITHMETIC_OPERATOR = "OPERADOR ARITMÉTICO"
    COMPARISON_OPERATOR = "OPERADOR DE COMPARACIÓN"
    LOGICAL_OPERATOR = "OPERADOR LÓGICO"
    ASSIGNMENT_OPERATOR = "OPERADOR DE ASIGNACIÓN"
    INC_DEC_OPERATOR = "OPERADOR DE INCREMENTO/DECREMENTO"
    OPEN_PARENTHESIS = "PARÉNTESIS DE APERTURA"
    CLOSE_PARENTHESIS = "PARÉNTESIS DE CIERRE"
    OPEN_BRACE = "LLAVE DE APERTURA"
    CLOSE_BRACE = "LLAVE DE CIERRE"
    TERMINAL = "TERMINAL"
    SEPARATOR = "SEPARADOR"
    STRING = "CADENA DE CARACTERES"
    LINE_COMMENT = "COMENTARIO DE LÍNEA"
    BLOCK_COMMENT = "COMENTARIO DE BLOQUE"
    UNKNOWN = "DESCONOCIDO"
    PRIMITIVE = "PRIMITIVO"
    TYPE_ANNOTATION = "ASIGNACION TIPO VARIABLE"

    def __str__(self) -> str:
        return self.value


SEPARATORS = frozenset(" \t\n(){};,")

RESERVED_WORDS = frozenset(
    {
        "as", "break", "const", "continue", "crate", "else", "enum",
        "extern", "false", "fn", "for", "if", "impl", "in", "let",
        "loop", "match", "mod", "move", "mut", "pub", "ref", "return",
        "self", "Self", "static", "struct", "super", "trait", "true",
        "type", "unsafe", "use", "where", "while", "dyn", "await",
        "async", "abstract", "become", "box", "do", "final", "macro",
        "override", "priv", "typeof", "unsized", "virtual", "yield", "try",
    }
)

ARITHMETIC_OPERATORS = frozenset({"+", "-", "*", "/", "%"})
COMPARISON_OPERATORS = frozenset({"==", "!=", ">", "<", ">=", "<="})
LOGICAL_OPERATORS = frozenset({"&&", "||", "!"})
ASSIGNMENT_OPERATORS = frozenset(
    {"=", "+=", "-=", "*=", "/=", "%=", "&=", "|=", "^=", "<<=", ">>="}
)
# Rust has no ++ or -- operators.
INCREMENT_DECREMENT_OPERATORS: frozenset[str] = frozenset()

OPERATOR_CHARS = frozenset("+-*/%=!<>&|^")

PRIMITIVE_TYPES = frozenset(
    {
        "i8", "i16", "i32", "i64", "i128",
        "u8", "u16", "u32", "u64", "u128",
        "f32", "f64",
        "bool", "char", "str",
    }
)

PARENTHESES = frozenset("()")
BRACES = frozenset("{}")
STATEMENT_TERMINATOR = ";"
COMMA = ","
STRING_DELIMITER = '"'
LINE_COMMENT_START = "//"
BLOCK_COMMENT_START = "/*"
BLOCK_COMMENT_END = "*/"