"""
exprlex - Lexer for a Small Expression Language
===============================================

This package converts source text into a stream of tokens for a small
expression language with identifiers, number literals, arithmetic
operators, parentheses, assignment, ';' terminators and the ``let``
keyword.

Main Components
---------------
- **tokens**: TokenType enumeration, Token data class, keyword table
- **cursor**: forward-only, peekable character cursor
- **classify**: character classification predicates
- **lexer**: the Lexer and the tokenize() helper
- **options**: LexerOptions and the unrecognized character policies
- **errors**: the ExprLexError hierarchy

Quick Start
-----------
    >>> from exprlex import tokenize
    >>> tokenize("(a*b)/c^2")
    [Token(LPAREN), Token(IDENTIFIER, 'a'), Token(STAR), Token(IDENTIFIER, 'b'), Token(RPAREN), Token(SLASH), Token(IDENTIFIER, 'c'), Token(CARET), Token(NUMBER_LITERAL, 2.0)]

Or use the command-line tool:
    $ exprlex program.txt
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from exprlex.errors import (
    ExprLexError,
    LexerError,
    MalformedNumberError,
    UnrecognizedCharacterError,
)
from exprlex.lexer import Lexer, tokenize
from exprlex.options import LexerOptions, UnrecognizedPolicy
from exprlex.tokens import KEYWORDS, Token, TokenType, lookup_keyword

__all__ = [
    "__version__",
    # Lexer
    "Lexer",
    "tokenize",
    "LexerOptions",
    "UnrecognizedPolicy",
    # Tokens
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_keyword",
    # Errors
    "ExprLexError",
    "LexerError",
    "MalformedNumberError",
    "UnrecognizedCharacterError",
]
