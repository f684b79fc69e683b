"""
lispcss Grammar Definition.

Lark grammar for well-formed documents, used by the strict parser. Terminals
are produced by sexpr.lexer.TokenStreamLexer, not by lark itself.
"""

lispcss_grammar = r"""
    start: group*

    // ( selector  prop value  (child ...)  prop (v1 v2) )
    group: LPAR WORD (rule | group)* RPAR

    rule: WORD value

    value: WORD                -> word_value
         | LPAR WORD+ RPAR     -> list_value

    %declare WORD LPAR RPAR
"""
