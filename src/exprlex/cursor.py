"""
Character Cursor
================

Forward-only, peekable access over an in-memory source string.

The cursor never copies or slices the source; it only advances an index.
Both operations are total: once the input is exhausted they return
END_OF_INPUT (the empty string) instead of raising.

    >>> cursor = CharCursor("ab")
    >>> cursor.peek(), cursor.advance(), cursor.advance(), cursor.advance()
    ('a', 'a', 'b', '')
"""

# Returned by peek() and advance() when no characters remain
END_OF_INPUT = ""


class CharCursor:
    """
    Position marker over a read-only source string.

    Attributes:
        source: The text being scanned (never modified)
    """

    def __init__(self, source: str):
        self.source = source
        self._pos = 0

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos

    def at_end(self) -> bool:
        """Check if every character has been consumed."""
        return self._pos >= len(self.source)

    def peek(self) -> str:
        """
        Look at the next character without consuming it.

        Returns END_OF_INPUT if past end of source.
        """
        if self.at_end():
            return END_OF_INPUT
        return self.source[self._pos]

    def advance(self) -> str:
        """
        Consume and return the next character.

        Returns END_OF_INPUT, without moving, if past end of source.
        """
        if self.at_end():
            return END_OF_INPUT
        char = self.source[self._pos]
        self._pos += 1
        return char
