"""
Token Types and Token Data Class
================================

Token Categories
----------------
- Keywords: let
- Identifiers: letter or '_' followed by letters, digits, '_'
- Numbers: digit followed by digits and '.', stored as float
- Operators: = + - * / ^
- Delimiters: ; ( )

Tokens carry no source position. Two tokens are equal when their type
and value are equal; the scanned text is kept in ``lexeme`` for display
and does not take part in comparisons.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Every distinct token the lexer can produce.

    The set is closed: the lexer never produces a type outside it.
    """

    # === Identifiers and Literals ===
    IDENTIFIER = auto()      # Variable names
    NUMBER_LITERAL = auto()  # 42, 3.14 (always float)

    # === Operators ===
    PLUS = auto()            # +
    MINUS = auto()           # -
    STAR = auto()            # *
    SLASH = auto()           # /
    CARET = auto()           # ^
    EQUAL = auto()           # =

    # === Delimiters ===
    SEMICOLON = auto()       # ;
    LPAREN = auto()          # (
    RPAREN = auto()          # )

    # === Keywords ===
    LET = auto()             # let


# =============================================================================
# Lookup Tables
# =============================================================================

# Map keyword strings to their token types
KEYWORDS: dict[str, TokenType] = {
    "let": TokenType.LET,
}

# None of these is the prefix of a longer operator
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "=": TokenType.EQUAL,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
    "^": TokenType.CARET,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token produced by the lexer.

    Attributes:
        type: The TokenType classification
        value: Identifier text, parsed float, or None for payload-free tokens
        lexeme: The exact source text the token was scanned from
    """
    type: TokenType
    value: str | float | None = None
    lexeme: str = field(default="", compare=False)

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.value is None:
            return f"Token({self.type.name})"
        return f"Token({self.type.name}, {self.value!r})"

    def is_operator(self) -> bool:
        """Return True if this token is an arithmetic operator."""
        return self.type in (
            TokenType.PLUS,
            TokenType.MINUS,
            TokenType.STAR,
            TokenType.SLASH,
            TokenType.CARET,
        )


def lookup_keyword(word: str) -> Token:
    """
    Classify a fully scanned identifier-shaped word.

    Matching is exact: case-sensitive and never prefix-based, so
    ``lets`` and ``Let`` are identifiers.
    """
    token_type = KEYWORDS.get(word)
    if token_type is not None:
        return Token(token_type, None, word)
    return Token(TokenType.IDENTIFIER, word, word)
