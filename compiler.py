import sys

from sexpr.config import DEFAULT_INDENT
from sexpr.lexer import lex
from sexpr.parser import parse_document, parse_strict
from sexpr.renderer import render_document
from sexpr.model import ParseResult

# Global verbose flag
_VERBOSE = False

def set_verbose(value):
    """Set the global verbose flag."""
    global _VERBOSE
    _VERBOSE = value

def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


def inspect_source(source_code, strict=False):
    """Lex and parse without rendering. Returns a ParseResult."""
    if strict:
        return ParseResult(nodes=parse_strict(source_code))

    tokens = lex(source_code)
    debug_log(f"Lexed {len(tokens)} tokens")
    result = parse_document(tokens)
    for diagnostic in result.diagnostics:
        debug_log(str(diagnostic))
    return result


def string_to_stylesheet(source_code, strict=False, indent=DEFAULT_INDENT):
    """
    Compile lispcss source text to CSS.

    Raises:
        LexError: strict mode only, unterminated '(' inside a word.
        UnbalancedParenthesesError: a ')' with no matching '('.
        CompileError: strict mode only, any syntax error.
    """
    result = inspect_source(source_code, strict=strict)
    debug_log(f"Rendering {len(result.nodes)} top-level rule set(s)")
    return render_document(result.nodes, indent)


def compile_source(file_path, source_code=None, strict=False, indent=DEFAULT_INDENT):
    if source_code is None:
        with open(file_path, 'r') as f:
            source_code = f.read()

    debug_log(f"Compiling source: {file_path}")
    return string_to_stylesheet(source_code, strict=strict, indent=indent)
