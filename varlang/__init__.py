"""
varlang

Front end for varlang, a small expression and variable-declaration
language (``my_var : int = 10``). The package currently provides the
lexer; a parser consumes its token stream.

Architecture:
    varlang/
    ├── lexer/           # Tokenization and lexical analysis
    ├── config.py        # Immutable lexer configuration
    ├── logger.py        # Namespaced standard-library loggers
    └── cli.py           # varlang-lex token dump tool

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .config import LexerConfig
from .lexer import Lexer, Token, TokenType, LexerError

__all__ = [
    # Core classes
    "Lexer",
    "LexerConfig",
    "LexerError",
    "Token",
    "TokenType",

    # Version info
    "__version__",
    "__license__",
]
