"""Token kinds, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    NEWLINE = auto()  # \n
    NUMBER = auto()  # digit (digit | .)*, value is a float
    IDENTIFIER = auto()  # alpha (alpha | digit | _)*
    KEYWORD = auto()  # identifier found in the rule table
    OPERATOR = auto()  # single character

    # Brackets
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    LEFT_SQUARE_BRACKET = auto()  # [
    RIGHT_SQUARE_BRACKET = auto()  # ]
    BRACKET = auto()  # bracket with no registered name

    # Delimiters
    DELIMITER_COLON = auto()  # :
    DELIMITER_SEMICOLON = auto()  # ;
    DELIMITER_COMMA = auto()  # ,
    DELIMITER_DOT = auto()  # .
    DELIMITER = auto()  # delimiter with no registered name

    STRING = auto()  # quoted contents, quotes excluded
    COMMENT = auto()  # /* ... */ contents

    EOF = auto()


BRACKETS = frozenset(
    {
        TokenKind.LEFT_PAREN,
        TokenKind.RIGHT_PAREN,
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_SQUARE_BRACKET,
        TokenKind.RIGHT_SQUARE_BRACKET,
        TokenKind.BRACKET,
    }
)

DELIMITERS = frozenset(
    {
        TokenKind.DELIMITER_COLON,
        TokenKind.DELIMITER_SEMICOLON,
        TokenKind.DELIMITER_COMMA,
        TokenKind.DELIMITER_DOT,
        TokenKind.DELIMITER,
    }
)


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and 0-based column."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Token:
    """A classified lexeme with its location and enclosing brace depth."""

    kind: TokenKind
    value: str | float
    line: int
    column: int
    block_depth: int

    @property
    def is_bracket(self) -> bool:
        return self.kind in BRACKETS

    @property
    def is_delimiter(self) -> bool:
        return self.kind in DELIMITERS


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return len(ch) == 1 and "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return len(ch) == 1 and ("a" <= ch <= "z" or "A" <= ch <= "Z")


def is_ident_char(ch: str) -> bool:
    """Return True if ch may continue an identifier."""
    return is_alpha(ch) or is_digit(ch) or ch == "_"


# Same membership as the JavaScript \s class
WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009"
    "\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def is_space(ch: str) -> bool:
    """Return True if ch is whitespace (newline and BOM included)."""
    return ch in WHITESPACE
