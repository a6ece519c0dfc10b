"""
Expression Lexer (Tokenizer)
============================

This module implements the lexer for the expression language. It converts
source text into a lazy stream of tokens for a downstream parser.

Scanning
--------
Each call to ``next_token()`` skips whitespace, consumes one character
and dispatches on it:

| First character       | Scans                         | Produces                 |
|-----------------------|-------------------------------|--------------------------|
| = + - * / ^ ; ( )     | nothing more                  | the operator token       |
| letter or _           | letters, digits, _            | LET or IDENTIFIER        |
| digit 0-9             | digits and '.'                | NUMBER_LITERAL (float)   |
| anything else         | nothing more                  | see UnrecognizedPolicy   |

The number scanner does not check the shape of the literal: ``1.2.3`` is
consumed whole and then rejected with MalformedNumberError. A '.' that
does not follow a digit is an unrecognized character.

Example Usage
-------------
>>> from exprlex.lexer import Lexer
>>> for token in Lexer("let x = 3 + 4;"):
...     print(token)
Token(LET)
Token(IDENTIFIER, 'x')
Token(EQUAL)
Token(NUMBER_LITERAL, 3.0)
Token(PLUS)
Token(NUMBER_LITERAL, 4.0)
Token(SEMICOLON)
"""

from typing import Callable, Iterator, Optional
import logging

from exprlex.classify import is_digit, is_whitespace, is_word_continue, is_word_start
from exprlex.cursor import END_OF_INPUT, CharCursor
from exprlex.errors import MalformedNumberError, UnrecognizedCharacterError
from exprlex.options import LexerOptions, UnrecognizedPolicy
from exprlex.tokens import SINGLE_CHAR_TOKENS, Token, TokenType, lookup_keyword

logger = logging.getLogger(__name__)


def _is_number_char(char: str) -> bool:
    return is_digit(char) or char == "."


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes expression source text on demand.

    The lexer is its own iterator. It holds no state between tokens other
    than the cursor position, and it cannot rewind: to scan the same text
    again, construct a new Lexer.

    Errors raised by ``next_token()`` (and so by ``next()``) leave the
    cursor just past the offending text, and scanning can continue with
    the next call:

        lexer = Lexer(source)
        while True:
            try:
                token = lexer.next_token()
            except LexerError as e:
                report(e)
                continue
            if token is None:
                break
            handle(token)

    Attributes:
        source: The source text being tokenized
        options: Lexer configuration
    """

    def __init__(self, source: str, options: Optional[LexerOptions] = None):
        """
        Initialize the lexer with source text.

        Args:
            source: The complete source text to tokenize
            options: Lexer configuration (defaults to LexerOptions())
        """
        self.source = source
        self.options = options if options is not None else LexerOptions()
        self._cursor = CharCursor(source)

        # Set once end-of-sequence has been reported
        self._exhausted = False

    # =========================================================================
    # Public API
    # =========================================================================

    def next_token(self) -> Optional[Token]:
        """
        Scan and return the next token.

        Returns:
            The next Token, or None once the token stream has ended.
            After None has been returned, every later call returns None.

        Raises:
            MalformedNumberError: If a number literal does not parse
            UnrecognizedCharacterError: If a character cannot start a token
                and the policy is UnrecognizedPolicy.ERROR
        """
        while not self._exhausted:
            self._skip_whitespace()

            char = self._cursor.advance()
            if char == END_OF_INPUT:
                logger.debug("End of input")
                self._exhausted = True
                break

            token = self._scan_token(char)
            if token is not None:
                logger.debug(f"Scanned {token!r}")
                return token

        return None

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the token stream ends.

        Yields:
            Token objects in source order

        Raises:
            LexerError: On the first lexical error
        """
        while (token := self.next_token()) is not None:
            yield token

    def __iter__(self) -> "Lexer":
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._cursor.peek()):
            self._cursor.advance()

    def _scan_token(self, char: str) -> Optional[Token]:
        """
        Dispatch on the first character of a token.

        Returns:
            The scanned Token, or None if the character was dropped
        """
        # Operators and delimiters
        if char in SINGLE_CHAR_TOKENS:
            return Token(SINGLE_CHAR_TOKENS[char], None, char)

        # Identifiers and keywords
        if is_word_start(char):
            return lookup_keyword(self._scan_while(char, is_word_continue))

        # Numbers
        if is_digit(char):
            return self._scan_number(char)

        return self._unrecognized(char)

    def _scan_while(self, first: str, predicate: Callable[[str], bool]) -> str:
        """Consume characters while predicate holds, starting from first."""
        chars = [first]
        while predicate(self._cursor.peek()):
            chars.append(self._cursor.advance())
        return "".join(chars)

    def _scan_number(self, first: str) -> Token:
        """
        Scan a number literal.

        Every digit and '.' is consumed before the text is converted, so a
        malformed literal is dropped as a whole.
        """
        text = self._scan_while(first, _is_number_char)
        try:
            value = float(text)
        except ValueError:
            raise MalformedNumberError(text) from None
        return Token(TokenType.NUMBER_LITERAL, value, text)

    def _unrecognized(self, char: str) -> None:
        """Apply the configured policy to an unclassifiable character."""
        policy = self.options.on_unrecognized

        if policy is UnrecognizedPolicy.SKIP:
            logger.warning(f"Skipping invalid character {char!r}")
            return None

        if policy is UnrecognizedPolicy.STOP:
            logger.info(f"Token stream stopped at invalid character {char!r}")
            self._exhausted = True
            return None

        raise UnrecognizedCharacterError(char)


# =============================================================================
# Convenience Function
# =============================================================================

def tokenize(source: str, options: Optional[LexerOptions] = None) -> list[Token]:
    """
    Tokenize source text into a list of tokens.

    Args:
        source: The source text to tokenize
        options: Lexer configuration

    Returns:
        All tokens in source order

    Raises:
        LexerError: On the first lexical error
    """
    return list(Lexer(source, options).tokenize())
