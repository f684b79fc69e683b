"""
lispcss Parser - Builds Nodes from tokens.

Two modes:
- lenient (parse / parse_document): a malformed top-level group is dropped and
  reported as a Diagnostic; the rest of the document still compiles.
- strict (parse_strict): the lark grammar must accept the whole document,
  otherwise a CompileError is raised.
"""

from lark import Lark
from lark.visitors import Transformer_NonRecursive
from lark.exceptions import UnexpectedInput
from pydantic import ValidationError

from sexpr.errors import (
    CompileError,
    MalformedNodeError,
    UnbalancedParenthesesError,
    detect_common_error_patterns,
    get_line_context,
)
from sexpr.grammar import lispcss_grammar
from sexpr.lexer import LPAR, RPAR, WORD, TokenStreamLexer
from sexpr.model import Diagnostic, Node, ParseResult, Rule, Selector


class TokenStream:
    """Cursor over a token list with one token of lookahead."""

    def __init__(self, tokens):
        self._tokens = tokens
        self._index = 0

    def peek(self):
        if self._index < len(self._tokens):
            return self._tokens[self._index]
        return None

    def next(self):
        token = self.peek()
        if token is not None:
            self._index += 1
        return token


def parse(tokens):
    """Parse a token sequence into top-level Nodes, dropping malformed groups."""
    return list(parse_document(tokens).nodes)


def parse_document(tokens):
    """
    Split the tokens into top-level groups and parse each one independently.

    Returns:
        ParseResult with the parsed Nodes and one Diagnostic per dropped group.

    Raises:
        UnbalancedParenthesesError: A ')' appears with no open group.
    """
    nodes = []
    diagnostics = []
    depth = 0
    left = 0
    group_index = 0
    for right, token in enumerate(tokens):
        if token.type == LPAR:
            depth += 1
        elif token.type == RPAR:
            if depth == 0:
                raise UnbalancedParenthesesError(
                    "Unexpected ')' with no matching '('",
                    line_number=token.line,
                    column=token.column,
                    suggestion="Remove the extra ')' or add the missing '('",
                )
            depth -= 1

        if depth == 0:
            opener = tokens[left]
            try:
                if opener.type != LPAR:
                    raise MalformedNodeError(f"stray word {str(opener)!r} outside any group", opener)
                nodes.append(parse_node(TokenStream(tokens[left + 1:right])))
            except MalformedNodeError as e:
                token_at = e.token or opener
                diagnostics.append(Diagnostic(
                    group_index=group_index,
                    reason=e.reason,
                    line=token_at.line,
                    column=token_at.column,
                ))
            group_index += 1
            left = right + 1

    if left < len(tokens):
        opener = tokens[left]
        diagnostics.append(Diagnostic(
            group_index=group_index,
            reason="group is never closed",
            line=opener.line,
            column=opener.column,
        ))

    return ParseResult(nodes=nodes, diagnostics=diagnostics)


def _open_group(stream):
    first = stream.next()
    if first is None:
        raise MalformedNodeError("empty group has no selector")
    if first.type != WORD:
        raise MalformedNodeError("group must start with a selector", first)
    return first, [], []


def parse_node(stream):
    """
    Parse one group body (the opening '(' already consumed).

    Stops at the group's ')' (consumed) or at end of input. Nested groups are
    kept on an explicit stack, so nesting depth is not bounded by recursion.
    """
    stack = [_open_group(stream)]
    while True:
        token = stream.peek()
        if token is not None and token.type == WORD:
            stack[-1][1].append(parse_rule(stream))
            continue
        if token is not None and token.type == LPAR:
            stream.next()
            stack.append(_open_group(stream))
            continue
        if token is not None:
            stream.next()

        selector, rules, children = stack.pop()
        node = Node(selector=Selector(text=str(selector)), rules=rules, children=children)
        if not stack:
            return node
        stack[-1][2].append(node)


def parse_rule(stream):
    """Parse 'property value' or 'property (v1 v2 ...)'."""
    prop = stream.next()
    token = stream.next()
    if token is None:
        raise MalformedNodeError(f"property {str(prop)!r} has no value", prop)

    if token.type == WORD:
        value = [str(token)]
    elif token.type == LPAR:
        # Words up to the first non-word, which is consumed; no nesting here.
        value = []
        while True:
            item = stream.next()
            if item is None or item.type != WORD:
                break
            value.append(str(item))
    else:
        raise MalformedNodeError(f"property {str(prop)!r} has no value", token)

    try:
        return Rule(property=str(prop), value=value)
    except ValidationError:
        raise MalformedNodeError(f"property {str(prop)!r} has an empty value list", token)


class NodeBuilder(Transformer_NonRecursive):
    """Transforms a lark parse tree of a well-formed document into Nodes."""

    def start(self, groups):
        return list(groups)

    def group(self, items):
        _, selector, *body, _ = items
        return Node(
            selector=Selector(text=str(selector)),
            rules=[i for i in body if isinstance(i, Rule)],
            children=[i for i in body if isinstance(i, Node)],
        )

    def rule(self, items):
        prop, value = items
        return Rule(property=str(prop), value=value)

    def word_value(self, items):
        return [str(items[0])]

    def list_value(self, items):
        return [str(t) for t in items if t.type == WORD]


_strict_parser = None


def get_strict_parser():
    global _strict_parser
    if _strict_parser is None:
        _strict_parser = Lark(lispcss_grammar, parser='lalr', lexer=TokenStreamLexer)
    return _strict_parser


def _position(error, attr):
    # lark uses -1 or '?' when it has no position
    value = getattr(error, attr, None)
    if isinstance(value, int) and value > 0:
        return value
    return None


def parse_strict(text):
    """
    Parse a whole document with the lark grammar.

    Raises:
        LexError: An unterminated '(' inside a word.
        CompileError: Any syntax error, with position and a hint.
    """
    try:
        tree = get_strict_parser().parse(text)
    except UnexpectedInput as e:
        line_number = _position(e, 'line')
        column = _position(e, 'column')
        token = getattr(e, 'token', None)
        if token is None or token.type == '$END':
            message = "Unexpected end of input"
        else:
            message = f"Unexpected {str(token)!r}"

        suggestion, _ = detect_common_error_patterns(text)
        raise CompileError(
            message=message,
            line_number=line_number,
            column=column,
            context=get_line_context(text, line_number),
            suggestion=suggestion or "Check syntax around this line",
        ) from e
    return NodeBuilder().transform(tree)
