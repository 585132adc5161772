"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Comparison / assignment
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    LESS = auto()  # <
    LESS_EQUAL = auto()  # <=
    GREATER = auto()  # >
    GREATER_EQUAL = auto()  # >=

    # Structural (single-character)
    LEFT_BRACE = auto()  # {
    RIGHT_BRACE = auto()  # }
    LEFT_PAREN = auto()  # (
    RIGHT_PAREN = auto()  # )
    DOT = auto()  # .
    MINUS = auto()  # -
    PLUS = auto()  # +
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    SLASH = auto()  # /
    STAR = auto()  # *

    # Function type operators
    ARROW = auto()  # ->
    COLON_COLON = auto()  # ::

    # Literals
    NUMBER = auto()  # digit+ ('.' digit+)?
    IDENTIFIER = auto()  # alnum+
    STRING = auto()  # "..." (no escapes)

    # Keywords
    AND = auto()
    ELSE = auto()
    FALSE = auto()
    TRUE = auto()
    FN = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    VAR = auto()
    MATCH = auto()
    DO = auto()
    END = auto()

    # Type names
    NUMBER_TYPE = auto()
    FLOAT_TYPE = auto()
    BOOL_TYPE = auto()
    STRING_TYPE = auto()
    NIL_TYPE = auto()
    FUNCTION_TYPE = auto()
    UNKNOWN_TYPE = auto()  # <unknown>, never produced from source text

    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    ``lexeme`` is the exact source text; ``literal`` is the semantic payload
    (string contents, number text, identifier name) and empty otherwise.
    ``line`` is the line of the token's first character.
    """

    kind: TokenType
    lexeme: str
    literal: str
    line: int


# "nil" is both a value keyword and a type name; the keyword wins.
KEYWORDS: dict[str, TokenType] = {
    "and": TokenType.AND,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "true": TokenType.TRUE,
    "fn": TokenType.FN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "var": TokenType.VAR,
    "match": TokenType.MATCH,
    "do": TokenType.DO,
    "end": TokenType.END,
    "number": TokenType.NUMBER_TYPE,
    "float": TokenType.FLOAT_TYPE,
    "bool": TokenType.BOOL_TYPE,
    "string": TokenType.STRING_TYPE,
    "function": TokenType.FUNCTION_TYPE,
}


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch != "" and ch in "0123456789"


def is_word_char(ch: str) -> bool:
    """Return True if ch can appear in an identifier or keyword."""
    return ch.isalnum()
