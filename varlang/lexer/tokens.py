"""
Token definitions for the varlang lexer.

This module defines the closed set of token types produced by the scanner:
- Literals (integers, floats, booleans, strings)
- Identifiers and reserved type names
- Operators (assignment, comparison, arithmetic)
- Special tokens (ILLEGAL, EOF)

It also holds the keyword lookup tables and the ASCII character-class
predicates used by the lexer.
"""

import string
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple


class TokenType(Enum):
    """
    Enumeration of all token types in varlang.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Character the lexer could not classify
    EOF = auto()                    # End of input (returned forever once reached)

    # ========================================================================
    # Identifiers and Type Names
    # ========================================================================
    TYPE = auto()                   # bool, int, float, string
    IDENT = auto()                  # my_var, _tmp, x1

    # ========================================================================
    # Literals
    # ========================================================================
    INT = auto()                    # 42 (signed 32-bit)
    FLOAT = auto()                  # 3.14 (32-bit float)
    BOOL = auto()                   # true, false
    STRING = auto()                 # "hello", escapes kept verbatim

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    COLON = auto()                  # :

    EQUAL = auto()                  # ==
    NOT_EQUAL = auto()              # !=
    BANG = auto()                   # !

    MINUS = auto()                  # -
    PLUS = auto()                   # +
    ASTERISK = auto()               # *
    SLASH = auto()                  # /
    MODULO = auto()                 # %


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for diagnostics only; it never takes part in token identity.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the varlang language.

    A token is identified by its type and payload value. The raw lexeme
    and the source location are carried along for diagnostics but are
    excluded from equality, so ``Token(TokenType.INT, 10)`` compares equal
    to any scanned ``10`` regardless of where it was found.
    """
    type: TokenType
    value: Any = None               # Payload (e.g., int for INT, char for ILLEGAL)
    lexeme: str = field(default="", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.type.name}({self.value!r})"
        return self.type.name

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.location!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENT

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF


# Lookup tables used by the lexer for keyword/operator recognition

BOOL_LITERALS = {
    "true": True,
    "false": False,
}

TYPE_NAMES = frozenset({"bool", "int", "float", "string"})

# Operators that never need lookahead
SINGLE_CHAR_OPERATORS = {
    ":": TokenType.COLON,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "%": TokenType.MODULO,
}

# First character -> (type without '=', type with '=' following)
LOOKAHEAD_OPERATORS = {
    "=": (TokenType.ASSIGN, TokenType.EQUAL),
    "!": (TokenType.BANG, TokenType.NOT_EQUAL),
}

LITERAL_TYPES = frozenset({
    TokenType.INT, TokenType.FLOAT, TokenType.BOOL, TokenType.STRING,
})

OPERATOR_TYPES = frozenset(
    list(SINGLE_CHAR_OPERATORS.values())
    + [t for pair in LOOKAHEAD_OPERATORS.values() for t in pair]
)


_LETTERS = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)


def is_letter(ch: Optional[str]) -> bool:
    """ASCII letter or underscore. ``None`` (end of input) is never a letter."""
    return ch is not None and ch in _LETTERS


def is_digit(ch: Optional[str]) -> bool:
    """ASCII decimal digit."""
    return ch is not None and ch in _DIGITS


def lookup_ident(ident: str) -> Tuple[TokenType, Any]:
    """
    Classify a scanned word into a (type, value) pair.

    Boolean keywords are checked first, then reserved type names; any other
    word is an identifier carried verbatim.
    """
    if ident in BOOL_LITERALS:
        return TokenType.BOOL, BOOL_LITERALS[ident]
    if ident in TYPE_NAMES:
        return TokenType.TYPE, ident
    return TokenType.IDENT, ident
