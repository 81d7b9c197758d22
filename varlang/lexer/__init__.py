"""
varlang Lexer Package

Implements the lexical analyzer (tokenizer) for varlang, a small language of
typed variable declarations and arithmetic/comparison expressions.

Key Features:
- Pull-based scanning: one token per next_token() call, EOF repeated forever
- ILLEGAL tokens instead of failures for unrecognized characters
- 32-bit integer and float literals
- Source location metadata on every token for diagnostics
"""

from .tokens import Token, TokenType, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError, LexerWarning

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "LexerError",
    "LexerWarning",
    "tokenize_string",
    "tokenize_file",
]
