# =============================================================================
# test_cursor.py - Character Cursor and Classifier Tests
# =============================================================================
# Tests for the low-level scanning primitives used by the lexer:
#   - CharCursor peek/advance semantics and end-of-input signalling
#   - Character classification predicates
#   - Keyword lookup
# =============================================================================

import pytest

from exprlex.classify import is_digit, is_whitespace, is_word_continue, is_word_start
from exprlex.cursor import END_OF_INPUT, CharCursor
from exprlex.tokens import KEYWORDS, Token, TokenType, lookup_keyword


# =============================================================================
# Cursor Tests
# =============================================================================

class TestCharCursor:
    """Test forward-only character access."""

    def test_advance_returns_characters_in_order(self):
        """advance() walks the source one character at a time."""
        cursor = CharCursor("abc")
        assert [cursor.advance() for _ in range(3)] == ["a", "b", "c"]

    def test_peek_does_not_consume(self):
        """peek() returns the next character without moving."""
        cursor = CharCursor("xy")
        assert cursor.peek() == "x"
        assert cursor.position == 0
        assert cursor.advance() == "x"
        assert cursor.peek() == "y"

    def test_peek_is_idempotent(self):
        """Repeated peeks return the same character."""
        cursor = CharCursor("q")
        assert [cursor.peek() for _ in range(5)] == ["q"] * 5
        assert cursor.advance() == "q"

    def test_end_of_input(self):
        """Both operations return END_OF_INPUT once exhausted."""
        cursor = CharCursor("a")
        cursor.advance()
        assert cursor.at_end()
        assert cursor.peek() == END_OF_INPUT
        assert cursor.advance() == END_OF_INPUT
        assert cursor.position == 1

    def test_empty_source(self):
        """An empty source is exhausted from the start."""
        cursor = CharCursor("")
        assert cursor.at_end()
        assert cursor.peek() == END_OF_INPUT

    def test_position_counts_consumed_characters(self):
        cursor = CharCursor("héllo")
        cursor.advance()
        cursor.advance()
        assert cursor.position == 2

    def test_peek_does_not_change_tokenization(self):
        """Peeking at the lexer's source leaves its output unchanged."""
        from exprlex.lexer import Lexer

        lexer = Lexer("a b")
        for _ in range(3):
            lexer._cursor.peek()
        assert [t.value for t in lexer] == ["a", "b"]


# =============================================================================
# Classifier Tests
# =============================================================================

class TestClassifier:
    """Test character classification predicates."""

    @pytest.mark.parametrize("char", ["a", "Z", "_", "é", "λ", "ж"])
    def test_word_start(self, char):
        assert is_word_start(char)

    @pytest.mark.parametrize("char", ["1", "-", ".", " ", "@", ""])
    def test_not_word_start(self, char):
        assert not is_word_start(char)

    @pytest.mark.parametrize("char", ["a", "_", "7", "١"])
    def test_word_continue(self, char):
        assert is_word_continue(char)

    @pytest.mark.parametrize("char", ["+", ".", " ", ""])
    def test_not_word_continue(self, char):
        assert not is_word_continue(char)

    def test_digits(self):
        """Only ASCII 0-9 are digits."""
        assert all(is_digit(c) for c in "0123456789")
        assert not is_digit("١")
        assert not is_digit("a")
        assert not is_digit(".")
        assert not is_digit(END_OF_INPUT)

    @pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\v", "\f", "\u00a0"])
    def test_whitespace(self, char):
        assert is_whitespace(char)

    def test_not_whitespace(self):
        assert not is_whitespace("x")
        assert not is_whitespace(END_OF_INPUT)


# =============================================================================
# Keyword Lookup Tests
# =============================================================================

class TestKeywordLookup:
    """Test mapping scanned words to tokens."""

    def test_let(self):
        token = lookup_keyword("let")
        assert token == Token(TokenType.LET)
        assert token.lexeme == "let"

    def test_identifier(self):
        assert lookup_keyword("letter") == Token(TokenType.IDENTIFIER, "letter")

    def test_every_keyword_maps_to_its_type(self):
        for word, token_type in KEYWORDS.items():
            assert lookup_keyword(word).type is token_type
