"""
Error handling utilities for the lispcss compiler.
"""


class CompileError(Exception):
    """Compilation error with line numbers and hints."""
    def __init__(self, message, line_number=None, column=None, context=None, suggestion=None):
        self.message = message
        self.line_number = line_number
        self.column = column
        self.context = context  # The offending line
        self.suggestion = suggestion
        super().__init__(self._format_error())

    def _format_error(self):
        """Format the error message with context and suggestion."""
        lines = ["\nCompilation Error"]
        if self.line_number:
            lines.append(f" at line {self.line_number}")
            if self.column:
                lines.append(f", column {self.column}")
        lines.append(":\n")

        lines.append(f"   {self.message}\n")

        if self.context:
            lines.append(f"   > {self.context}\n")

        if self.suggestion:
            lines.append(f"   hint: {self.suggestion}\n")

        return "".join(lines)


class LexError(CompileError):
    """Raised by the strict lexer for input it cannot tokenize."""


class UnbalancedParenthesesError(CompileError):
    """Raised when a ')' closes a group that was never opened."""


class MalformedNodeError(Exception):
    """A group could not be parsed. Caught by the lenient parser, never surfaced."""
    def __init__(self, reason, token=None):
        self.reason = reason
        self.token = token
        super().__init__(reason)


def get_line_context(source_code, line_number):
    """Extract the line of code from source by line number (1-based)."""
    if not source_code or line_number is None:
        return None
    source_lines = source_code.split('\n')
    if 0 < line_number <= len(source_lines):
        return source_lines[line_number - 1].strip()
    return None


def detect_common_error_patterns(source_code):
    """Detect common mistakes and return (suggestion, error_type)."""
    open_parens = source_code.count('(')
    close_parens = source_code.count(')')
    if open_parens != close_parens:
        return f"Unmatched parentheses: found {open_parens} '(' but {close_parens} ')'", "unmatched_parens"

    if '()' in ''.join(source_code.split()):
        return "A value list needs at least one word: use '(prop (a b))' or 'prop a'", "empty_value"

    stripped = source_code.strip()
    if stripped and not stripped.startswith('('):
        return "Every rule set must be wrapped in parentheses: '(selector prop value)'", "stray_word"

    return None, None
