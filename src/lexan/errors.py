"""Lexical error types with formatted source context."""

from __future__ import annotations

from lexan.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.lx") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * col
        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class UnknownCharacterError(LexError):
    """The current character belongs to no lexical class."""

    def __init__(self, char: str, position: Position, source: str) -> None:
        self.char = char
        super().__init__(f"unknown character {char!r}", position, source)


class UnterminatedStringError(LexError):
    """End of input inside a quoted string; position is the opening quote."""

    def __init__(self, position: Position, source: str) -> None:
        super().__init__("unterminated string", position, source)


class UnterminatedCommentError(LexError):
    """End of input inside a /* comment; position is the opening delimiter."""

    def __init__(self, position: Position, source: str) -> None:
        super().__init__("unterminated multi-line comment", position, source)
