"""
Character classification predicates used by the lexer.

All predicates accept END_OF_INPUT (the empty string) and return False
for it, so callers can pass the result of ``peek()`` straight in.
"""


def is_word_start(char: str) -> bool:
    """Return True if char can start an identifier (letter or '_')."""
    return char == "_" or char.isalpha()


def is_word_continue(char: str) -> bool:
    """Return True if char can continue an identifier."""
    return char == "_" or char.isalnum()


def is_digit(char: str) -> bool:
    # ASCII only: str.isdigit() also accepts other scripts' digits
    return len(char) == 1 and "0" <= char <= "9"


def is_whitespace(char: str) -> bool:
    return char.isspace()
