"""Lexer: converts C/JS-like source text into a flat token sequence."""

from __future__ import annotations

from dataclasses import dataclass

from lexan.errors import (
    LexError,
    UnknownCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from lexan.rules import (
    BRACKET_CHARS,
    COMBINED_OPERATORS,
    DELIMITER_CHARS,
    OPERATORS,
    QUOTES,
    bracket_kind,
    delimiter_kind,
    is_keyword,
)
from lexan.tokens import (
    Position,
    Token,
    TokenKind,
    is_alpha,
    is_digit,
    is_ident_char,
    is_space,
)


@dataclass(slots=True)
class Cursor:
    """Mutable scan position shared by the main loop and every sub-scan."""

    pos: int = 0
    line: int = 1
    line_start: int = 0
    column: int = 0
    block_depth: int = 0

    @property
    def position(self) -> Position:
        return Position(self.line, self.column)


class Lexer:
    """Tokenize source text in a single fail-fast pass."""

    def __init__(self, source: str, *, emit_eof: bool = False) -> None:
        self._source = source
        self._emit_eof = emit_eof
        self._cursor = Cursor()
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        cur = self._cursor
        while cur.pos < len(self._source):
            self._dispatch(cur)
            # The column only moves when the cursor lands on non-whitespace,
            # so a token emitted from whitespace keeps an earlier offset.
            if not is_space(self._peek()):
                cur.column = cur.pos - cur.line_start

        if self._emit_eof:
            self._emit(TokenKind.EOF, "")
        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _peek(self, offset: int = 0) -> str:
        idx = self._cursor.pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._cursor.pos]
        self._cursor.pos += 1
        return ch

    def _at_end(self) -> bool:
        return self._cursor.pos >= len(self._source)

    def _emit(self, kind: TokenKind, value: str | float, start: Position | None = None) -> Token:
        cur = self._cursor
        if start is None:
            start = cur.position
        tok = Token(kind, value, start.line, start.column, cur.block_depth)
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, cur: Cursor) -> None:
        ch = self._peek()

        if ch == "\n":
            self._emit(TokenKind.NEWLINE, "\n")
            self._advance()
            cur.line += 1
            cur.line_start = cur.pos
            return

        if is_digit(ch):
            self._scan_number(cur)
            return

        if is_alpha(ch):
            self._scan_identifier(cur)
            return

        # Shadows the delimiter branch for ':' and '.'
        if ch in COMBINED_OPERATORS:
            self._emit(TokenKind.OPERATOR, ch)
            self._advance()
            return

        if ch in DELIMITER_CHARS:
            self._scan_delimiter(cur)
            return

        if ch in BRACKET_CHARS:
            self._scan_bracket(cur)
            return

        if ch in QUOTES:
            self._scan_string(cur, ch)
            return

        if is_space(ch):
            self._advance()
            return

        if ch in OPERATORS:
            self._emit(TokenKind.OPERATOR, ch)
            self._advance()
            return

        if ch == "/" and self._peek(1) in ("/", "*"):
            self._scan_comment(cur)
            return

        raise UnknownCharacterError(ch, cur.position, self._source)

    # ------------------------------------------------------------------
    # Sub-scans
    # ------------------------------------------------------------------

    def _scan_number(self, cur: Cursor) -> None:
        start = cur.pos
        while is_digit(self._peek()) or self._peek() == ".":
            self._advance()
        self._emit(TokenKind.NUMBER, parse_number(self._source[start : cur.pos]))

    def _scan_identifier(self, cur: Cursor) -> None:
        start = cur.pos
        while is_ident_char(self._peek()):
            self._advance()
        text = self._source[start : cur.pos]
        kind = TokenKind.KEYWORD if is_keyword(text) else TokenKind.IDENTIFIER
        self._emit(kind, text)

        # A directly following '=' is taken here rather than by the operator branch
        if self._peek() == "=":
            self._emit(TokenKind.OPERATOR, "=")
            self._advance()

    def _scan_delimiter(self, cur: Cursor) -> None:
        ch = self._source[cur.pos]
        self._emit(delimiter_kind(ch), ch)
        self._advance()

    def _scan_bracket(self, cur: Cursor) -> None:
        ch = self._peek()
        if ch == "{":
            cur.block_depth += 1
        elif ch == "}":
            cur.block_depth -= 1
        self._emit(bracket_kind(ch), ch)
        self._advance()

    def _scan_string(self, cur: Cursor, quote: str) -> None:
        start = cur.position
        self._advance()  # opening quote

        chars = []
        while not self._at_end() and self._peek() != quote:
            chars.append(self._advance())

        if self._at_end():
            raise UnterminatedStringError(start, self._source)

        self._advance()  # closing quote
        self._emit(TokenKind.STRING, "".join(chars), start)

    def _scan_comment(self, cur: Cursor) -> None:
        if self._peek(1) == "/":
            # Single-line comments are dropped; the newline is left for the main loop
            while not self._at_end() and self._peek() != "\n":
                self._advance()
            return

        start = cur.position
        self._advance()  # /
        self._advance()  # *

        chars = []
        while not (self._peek() == "*" and self._peek(1) == "/"):
            if self._at_end():
                raise UnterminatedCommentError(start, self._source)
            chars.append(self._advance())

        self._advance()  # *
        self._advance()  # /
        self._emit(TokenKind.COMMENT, "".join(chars), start)


def parse_number(text: str) -> float:
    """Parse the leading ``digits[.digits]`` of text, ignoring any further dots.

    ``"1.2.3"`` gives 1.2 and ``"7."`` gives 7.0.
    """
    whole, _, rest = text.partition(".")
    fraction = rest.partition(".")[0]
    if fraction:
        return float(f"{whole}.{fraction}")
    return float(whole)


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Outcome of a scan: either the full token sequence or the error, never both."""

    tokens: tuple[Token, ...] = ()
    error: LexError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> list[Token]:
        """Return the tokens, or raise the error the scan stopped on."""
        if self.error is not None:
            raise self.error
        return list(self.tokens)


def tokenize(source: str, *, emit_eof: bool = False) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, emit_eof=emit_eof).tokenize()


def scan(source: str, *, emit_eof: bool = False) -> ScanResult:
    """Tokenize source, returning failure as data instead of raising."""
    try:
        tokens = tokenize(source, emit_eof=emit_eof)
    except LexError as exc:
        return ScanResult(error=exc)
    return ScanResult(tokens=tuple(tokens))
