"""Ember language scanner."""

from __future__ import annotations

from ember.errors import (
    LexError,
    UnexpectedCharacterError,
    UnterminatedBlockCommentError,
    UnterminatedStringError,
)
from ember.lexer import Scanner, ScanResult, scan, scan_all
from ember.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = [
    "LexError",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenType",
    "UnexpectedCharacterError",
    "UnterminatedBlockCommentError",
    "UnterminatedStringError",
    "scan",
    "scan_all",
]
