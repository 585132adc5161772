"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from ember.lexer import ScanResult, scan, scan_all
from ember.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that scans source and returns tokens (excluding EOF)."""

    def _lex(source: str) -> list[Token]:
        tokens = scan_all(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.kind != TokenType.EOF]

    return _lex


@pytest.fixture
def scan_source():
    """Return a helper that scans source in collect mode and returns a ScanResult."""

    def _scan(source: str, filename: str = "test.em") -> ScanResult:
        return scan(source, filename)

    return _scan


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_lexemes(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token lexemes match the expected list."""
    actual = [t.lexeme for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_well_formed(tokens: list[Token]) -> None:
    """Assert the sequence ends with exactly one EOF and lines never decrease."""
    assert tokens, "Expected at least an EOF token"
    assert tokens[-1].kind == TokenType.EOF
    assert [t.kind for t in tokens].count(TokenType.EOF) == 1
    lines = [t.line for t in tokens]
    assert lines == sorted(lines), f"Non-monotonic lines: {lines}"
