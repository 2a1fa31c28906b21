# Tokenizer.py
"""
Tokenizer for the integer calculator.

Scans an input line left to right and classifies every character:
digits are grouped into one Number token, each of '^ * / + -' becomes an
Operator token, parentheses become LeftParen / RightParen tokens, spaces
are skipped and anything else becomes a one-character Error token.

The scan never fails. Rejecting Error tokens is left to the tree builder.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple


DIGITS = "0123456789"
OPERATORS = "^*/+-"


class TokenKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    ERROR = "error"


class Token(NamedTuple):
    kind: TokenKind
    text: str
    position: int = 0

    def __repr__(self):
        return f"Token({self.kind.name}, {self.text!r}, {self.position})"


def iter_tokens(line: str) -> Iterator[Token]:
    """Yield the tokens of line in order. Each token's text is an exact slice of line."""
    b = 0
    while b < len(line):
        current_char = line[b]

        # --- Whitespace (ignored) ---
        if current_char == " ":
            b += 1
            continue

        # --- Numbers: contiguous digits only ---
        if current_char in DIGITS:
            start = b
            while b < len(line) and line[b] in DIGITS:
                b += 1
            yield Token(TokenKind.NUMBER, line[start:b], start)
            continue

        # --- Operators and parentheses ---
        if current_char in OPERATORS:
            kind = TokenKind.OPERATOR
        elif current_char == "(":
            kind = TokenKind.LEFT_PAREN
        elif current_char == ")":
            kind = TokenKind.RIGHT_PAREN
        else:
            kind = TokenKind.ERROR

        yield Token(kind, current_char, b)
        b += 1


def tokenize(line: str) -> List[Token]:
    """Return the full token list for line."""
    return list(iter_tokens(line))
