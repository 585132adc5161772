"""Lexical error types with formatted source context."""

from __future__ import annotations

from ember.tokens import Position


class LexError(Exception):
    """Base class for lexical errors, with position and source context."""

    kind = "lex-error"

    def __init__(
        self, message: str, position: Position, source: str, filename: str = "<input>"
    ) -> None:
        self.message = message
        self.position = position
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

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


class UnexpectedCharacterError(LexError):
    """A character that starts no token."""

    kind = "unexpected-character"

    def __init__(
        self, char: str, position: Position, source: str, filename: str = "<input>"
    ) -> None:
        self.char = char
        super().__init__(f"unexpected character {char!r}", position, source, filename)


class UnterminatedStringError(LexError):
    """A string literal whose closing quote never arrives; reported at the opening quote."""

    kind = "unterminated-string"

    def __init__(self, position: Position, source: str, filename: str = "<input>") -> None:
        super().__init__("unterminated string", position, source, filename)


class UnterminatedBlockCommentError(LexError):
    """A ``/*`` with no matching ``*/``; reported at the opening delimiter."""

    kind = "unterminated-block-comment"

    def __init__(self, position: Position, source: str, filename: str = "<input>") -> None:
        super().__init__("unterminated block comment", position, source, filename)
