"""
lispcss Lexer - Converts raw source text into a flat token sequence.

Tokens are lark Tokens of three types:
- WORD: a run of non-whitespace text; may contain balanced parentheses,
  e.g. var(--text-color, red)
- LPAR / RPAR: the document's own grouping parentheses
"""

from lark import Token
from lark.lexer import Lexer

from sexpr.errors import LexError, get_line_context

WORD = 'WORD'
LPAR = 'LPAR'
RPAR = 'RPAR'


class _Cursor:
    """Walks the source text, tracking line and column (both 1-based)."""

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1

    def peek(self):
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def advance(self):
        if self.text[self.pos] == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1

    def token(self, type_, value, start):
        pos, line, column = start
        return Token(type_, value, pos, line, column, self.line, self.column, self.pos)

    def mark(self):
        return self.pos, self.line, self.column


def is_whitespace(c):
    # Unicode White_Space; str.isspace() also accepts the \x1c-\x1f separators
    return c.isspace() and not '\x1c' <= c <= '\x1f'


def lex(text, strict=False):
    """
    Split source text into WORD, LPAR and RPAR tokens.

    Args:
        text: The whole document.
        strict: Reject words whose inner parentheses are never closed.

    Returns:
        List of lark Tokens in source order.

    Raises:
        LexError: Only in strict mode.
    """
    tokens = []
    cursor = _Cursor(text)
    while cursor.peek() is not None:
        c = cursor.peek()
        start = cursor.mark()
        if c == '(':
            cursor.advance()
            tokens.append(cursor.token(LPAR, c, start))
        elif c == ')':
            cursor.advance()
            tokens.append(cursor.token(RPAR, c, start))
        elif is_whitespace(c):
            cursor.advance()
        else:
            tokens.append(_lex_word(cursor, strict))
    return tokens


def _lex_word(cursor, strict):
    start = cursor.mark()
    chars = []
    depth = 0
    while cursor.peek() is not None:
        c = cursor.peek()
        if c == '(':
            depth += 1
        elif c == ')':
            if depth == 0:
                break
            depth -= 1
        elif is_whitespace(c) and depth == 0:
            break
        chars.append(c)
        cursor.advance()

    word = ''.join(chars)
    if strict and depth > 0:
        _, line, column = start
        raise LexError(
            f"Unterminated '(' in word {word!r}",
            line_number=line,
            column=column,
            context=get_line_context(cursor.text, line),
            suggestion="Close every '(' that appears inside a value, e.g. var(--x, red)",
        )
    return cursor.token(WORD, word, start)


def serialize(tokens):
    """
    Turn a token sequence back into source text.

    Words are separated by one space, and a word followed by '(' gets a space
    so the paren is not swallowed into the word. Lexing the result gives back
    the same tokens.
    """
    parts = []
    previous = None
    for token in tokens:
        if previous is not None and previous.type == WORD and token.type in (WORD, LPAR):
            parts.append(' ')
        parts.append(str(token))
        previous = token
    return ''.join(parts)


class TokenStreamLexer(Lexer):
    """Feeds lex() into a lark parser (see sexpr.grammar)."""

    def __init__(self, lexer_conf):
        pass

    def lex(self, data):
        yield from lex(data, strict=True)
