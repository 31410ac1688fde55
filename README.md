# rustlexer

A small lexical analyzer for Rust-like source text. Each kind of token is
recognized by its own detector, and the tokenizer tries them in a fixed order
at every position: type annotations (`:`), strings, line comments, block
comments (nested ones too), parentheses, braces, `;`, `,`, operators, numbers,
primitive types and finally identifiers and reserved words. Blanks, tabs and
newlines are skipped.

Every token is a `rustlexer.token.Token` with three fields: `word` (the text
it was read from), `category` (a `rustlexer.constants.Category`, whose value
is the Spanish label such as `"PALABRA RESERVADA"`) and `index`, the character
range it covers, such as `"0-3"`. `Token.to_dict()` gives the JSON-ready form
with the keys `word`, `category` and `index`.

## Installation

```
pip install .
```

## Using the library

```python
from rustlexer.tokenizer import Tokenizer, tokenize

for tok in tokenize("let x: i32 = 42;"):
    print(tok.word, tok.category, tok.index)

# Tokenizer only accepts text that is non-empty and ends in a separator
# (space, tab, newline, parenthesis, brace, semicolon or comma);
# otherwise it raises ValueError.
tokenizer = Tokenizer("let total = 3.14;")
print([tok.to_dict() for tok in tokenizer.tokens()])
```

`rustlexer.tokenizer.is_separator(char)` tells whether a character is one of
those separators.

The detectors can also be used on their own. Each takes the text and a
position and returns `(token, next_position)`, or `None` if nothing matches
there:

- `rustlexer.symbols`: `detect_open_brace`, `detect_close_brace`,
  `detect_comma`, `detect_open_parenthesis`, `detect_close_parenthesis`,
  `detect_semicolon`, `detect_var_type_assignation`
- `rustlexer.literals`: `detect_block_comment`, `detect_chain` (strings with
  backslash escapes), `detect_line_comment`, `detect_number`
- `rustlexer.words`: `detect_identifier`, `detect_primitive`,
  `detect_operator`

The category `DESCONOCIDO` (unknown) is given to identifiers longer than ten
UTF-8 bytes, to reals without digits on both sides of the point (such as
`3.`), to operator sequences that form no known operator, and to single
characters that no detector accepts. For those single characters the `index`
is not a range: it is the number of tokens read before it, rendered as a
single code point.

## Running the server

```
rustlexer [--host HOST] [--port PORT] [--html PATH]
```

By default the server listens on all interfaces at port 8081. `/` serves the
HTML file given by `--html` (default `views/index.html`, relative to the
working directory; a missing file gives 404), and `/ws` is a WebSocket
endpoint: send it source text and it replies with a JSON array of objects with
the keys `word`, `category` and `index`. Messages that are empty or do not end
in a separator are ignored.

To embed the server in your own aiohttp setup, build the application with
`rustlexer.server.create_app(html_path)`.

## What it does not include

The package does not ship an HTML page. The server only serves whatever file
`--html` points to; you need to provide your own front end that talks to `/ws`.

## Tests

```
pip install ".[test]"
pytest
```