"""
exprlex Error Hierarchy
=======================

This module defines the exception hierarchy for the expression lexer.
All exceptions inherit from ExprLexError, allowing callers to catch every
lexer-related error with a single except clause if desired.

Exception Hierarchy
-------------------
ExprLexError (base)
└── LexerError - errors raised while scanning a token
    ├── MalformedNumberError - digit/dot run that is not a valid number
    └── UnrecognizedCharacterError - character no token can start with

Recoverability
--------------
Lexer errors are local to a single ``next_token()`` call. When one is
raised, the offending text has already been consumed, so the caller can
report it and keep pulling tokens:

    lexer = Lexer("1.2.3 + x")
    try:
        lexer.next_token()
    except MalformedNumberError as e:
        print(e)                 # error: malformed number literal '1.2.3'
    lexer.next_token()           # Token(PLUS)

Tokens carry no positions, so error messages do not include a
line or column.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ExprLexError(Exception):
    """
    Base exception for all exprlex errors.

        try:
            tokens = tokenize(source)
        except ExprLexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class LexerError(ExprLexError):
    """
    Base exception for errors found while scanning source text.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its optional hint.

        Example output:
            error: malformed number literal '1.2.3'
            hint: a number literal may contain at most one '.'
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


class MalformedNumberError(LexerError):
    """
    Number literal that does not parse as a floating point value.

    The number scanner accepts any run of digits and dots that starts
    with a digit, so text such as ``1.2.3`` is consumed as one literal
    and only rejected when it is converted to a float.
    """

    def __init__(self, text: str):
        self.text = text
        super().__init__(
            f"malformed number literal '{text}'",
            hint="a number literal may contain at most one '.'",
        )


class UnrecognizedCharacterError(LexerError):
    """
    Character that cannot start any token.

    Raised for symbols outside the operator set, a '.' that does not
    follow a digit, and characters that are neither alphabetic nor
    decimal digits.
    """

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"invalid character '{char}' (U+{ord(char):04X})")
