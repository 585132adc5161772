"""Ember scanner: converts source text into a flat token list."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ember.errors import (
    LexError,
    UnexpectedCharacterError,
    UnterminatedBlockCommentError,
    UnterminatedStringError,
)
from ember.tokens import KEYWORDS, Position, Token, TokenType, is_digit, is_word_char

logger = logging.getLogger(__name__)

_SINGLE_CHAR: dict[str, TokenType] = {
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# lead char -> (kind alone, kind when followed by "=")
_EQUALS_PAIRS: dict[str, tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens plus every lexical error found while producing them."""

    tokens: list[Token]
    errors: list[LexError]

    @property
    def ok(self) -> bool:
        return not self.errors


class Scanner:
    """Scan Ember source text into a list of Token objects.

    In the default collect mode every lexical error is appended to
    ``errors`` and scanning carries on; with ``fail_fast=True`` the first
    error is raised instead. Either way the scan never stops the process.
    """

    def __init__(self, source: str, filename: str = "<input>", *, fail_fast: bool = False) -> None:
        self._source = source
        self._filename = filename
        self._fail_fast = fail_fast
        self._start = 0
        self._current = 0
        self._line = 1
        self._col = 1
        self._start_pos = Position(1, 1, 0)
        self._tokens: list[Token] = []
        self._done = False
        self.errors: list[LexError] = []

    def scan_tokens(self) -> list[Token]:
        """Scan the full source and return the token list, ending with EOF."""
        if self._done:
            raise RuntimeError("scanner has already consumed its source")
        self._done = True

        while not self._at_end():
            self._start = self._current
            self._start_pos = self._current_pos()
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", "", self._line))
        logger.debug(
            "scanned %s: %d tokens, %d errors",
            self._filename,
            len(self._tokens),
            len(self.errors),
        )
        return self._tokens

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._current)

    def _peek(self, offset: int = 0) -> str:
        idx = self._current + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _advance(self) -> str:
        ch = self._source[self._current]
        self._current += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def _match(self, expected: str) -> bool:
        if self._peek() != expected:
            return False
        self._advance()
        return True

    def _add_token(self, kind: TokenType, literal: str = "") -> None:
        lexeme = self._source[self._start : self._current]
        self._tokens.append(Token(kind, lexeme, literal, self._start_pos.line))

    def _report(self, error: LexError) -> None:
        if self._fail_fast:
            raise error
        self.errors.append(error)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        ch = self._advance()

        if ch in " \n":
            return

        kind = _SINGLE_CHAR.get(ch)
        if kind is not None:
            self._add_token(kind)
            return

        pair = _EQUALS_PAIRS.get(ch)
        if pair is not None:
            alone, with_equals = pair
            self._add_token(with_equals if self._match("=") else alone)
            return

        if ch == "-":
            self._add_token(TokenType.ARROW if self._match(">") else TokenType.MINUS)
            return

        if ch == ":":
            if self._match(":"):
                self._add_token(TokenType.COLON_COLON)
            else:
                logger.debug("skipping lone ':' at %s:%d", self._filename, self._start_pos.line)
            return

        if ch == "#":
            self._skip_line_comment()
            return

        if ch == "/":
            if self._match("*"):
                self._skip_block_comment()
            else:
                self._add_token(TokenType.SLASH)
            return

        if ch == '"':
            self._scan_string()
            return

        if is_digit(ch):
            self._scan_number()
            return

        if is_word_char(ch):
            self._scan_word()
            return

        self._report(UnexpectedCharacterError(ch, self._start_pos, self._source, self._filename))

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _skip_line_comment(self) -> None:
        while not self._at_end() and self._peek() != "\n":
            self._advance()

    def _skip_block_comment(self) -> None:
        while not (self._peek() == "*" and self._peek(1) == "/"):
            if self._at_end():
                self._report(
                    UnterminatedBlockCommentError(self._start_pos, self._source, self._filename)
                )
                return
            self._advance()
        self._advance()  # *
        self._advance()  # /

    # ------------------------------------------------------------------
    # Literals and words
    # ------------------------------------------------------------------

    def _scan_string(self) -> None:
        while not self._at_end() and self._peek() != '"':
            self._advance()

        if self._at_end():
            self._report(UnterminatedStringError(self._start_pos, self._source, self._filename))
            return

        self._advance()  # closing quote
        value = self._source[self._start + 1 : self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _scan_number(self) -> None:
        while is_digit(self._peek()):
            self._advance()

        if self._peek() == "." and is_digit(self._peek(1)):
            self._advance()  # .
            while is_digit(self._peek()):
                self._advance()

        self._add_token(TokenType.NUMBER, self._source[self._start : self._current])

    def _scan_word(self) -> None:
        while is_word_char(self._peek()):
            self._advance()

        text = self._source[self._start : self._current]
        keyword = KEYWORDS.get(text)
        if keyword is not None:
            self._add_token(keyword)
        else:
            self._add_token(TokenType.IDENTIFIER, text)


def scan_all(source: str, filename: str = "<input>") -> list[Token]:
    """Scan source text, raising the first LexError encountered."""
    return Scanner(source, filename, fail_fast=True).scan_tokens()


def scan(source: str, filename: str = "<input>") -> ScanResult:
    """Scan source text, collecting every LexError alongside the tokens."""
    scanner = Scanner(source, filename)
    tokens = scanner.scan_tokens()
    return ScanResult(tokens, list(scanner.errors))
