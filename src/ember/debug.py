"""Human-readable and JSON token dumps."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from ember.tokens import Token


def format_token(tok: Token) -> str:
    """Render one token as an aligned ``line  KIND  lexeme  literal`` row."""
    row = f"{tok.line:>4}  {tok.kind.name:<14} {tok.lexeme!r}"
    if tok.literal:
        row += f"  {tok.literal!r}"
    return row


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    """Print one row per token to *file*."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")


def token_to_dict(tok: Token) -> dict[str, str | int]:
    return {
        "kind": tok.kind.name,
        "lexeme": tok.lexeme,
        "literal": tok.literal,
        "line": tok.line,
    }


def tokens_to_json(tokens: list[Token]) -> str:
    return json.dumps([token_to_dict(t) for t in tokens], indent=2) + "\n"
