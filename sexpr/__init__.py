# lispcss - Core Compiler Components
"""
Core modules for the lispcss compiler:
- errors: Error types and hint utilities
- lexer: Source text to lark Tokens
- grammar: Lark grammar for well-formed documents (strict mode)
- model: Pydantic models for the parsed tree
- parser: Tokens to Nodes (lenient and strict)
- renderer: Nodes to CSS text
- config: lispcss.json loading
"""

from .errors import CompileError, LexError, UnbalancedParenthesesError
from .lexer import lex, serialize
from .grammar import lispcss_grammar
from .model import Diagnostic, Node, ParseResult, Rule, Selector
from .parser import parse, parse_document, parse_strict
from .renderer import render, render_document
from .config import CompilerConfig, load_config

__all__ = [
    'CompileError',
    'LexError',
    'UnbalancedParenthesesError',
    'lex',
    'serialize',
    'lispcss_grammar',
    'Diagnostic',
    'Node',
    'ParseResult',
    'Rule',
    'Selector',
    'parse',
    'parse_document',
    'parse_strict',
    'render',
    'render_document',
    'CompilerConfig',
    'load_config',
]
