"""
varlang Lexer - turns source text into a stream of tokens, one per call.

The scanner is a pull-based state machine over the input string. A parser
calls next_token() until it sees EOF; EOF keeps coming back after that, so
calling again is always safe.

Only the space character separates tokens. Tabs and newlines scan as
ILLEGAL like any other unrecognized character.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Iterator, List, Optional

import numpy as np

from .tokens import (
    Token, TokenType, SourceLocation, SINGLE_CHAR_OPERATORS, LOOKAHEAD_OPERATORS,
    is_letter, is_digit, lookup_ident
)
from .errors import (
    LexerWarning, create_number_overflow_error, create_unterminated_string_warning
)
from ..config import LexerConfig, DEFAULT_CONFIG
from ..logger import get_logger

logger = get_logger(__name__)

_INT32 = np.iinfo(np.int32)

_FLOAT32_MAX = np.finfo(np.float32).max
# Halfway between the largest float32 and 2**128; ties go to the even side, infinity
_FLOAT32_OVERFLOW = Fraction(2 ** 128 - 2 ** 103)


def round_to_float32(exact: Fraction) -> np.float32:
    """
    Round a non-negative exact value to the nearest float32, ties to even.

    Going through a float64 first rounds twice and can land on a float32
    midpoint that the exact value is not on, so the float64 result is only
    used as a guess and the answer is picked among it and its neighbours.
    """
    if exact >= _FLOAT32_OVERFLOW:
        return np.float32(np.inf)

    with np.errstate(over="ignore"):
        guess = np.float32(float(exact))
    if np.isinf(guess):
        guess = _FLOAT32_MAX

    candidates = [guess, np.nextafter(guess, np.float32(-np.inf))]
    if guess < _FLOAT32_MAX:
        candidates.append(np.nextafter(guess, np.float32(np.inf)))

    def distance_then_parity(candidate):
        odd = int(np.array(candidate, dtype=np.float32).view(np.uint32)) & 1
        return abs(Fraction(float(candidate)) - exact), odd

    return min(candidates, key=distance_then_parity)


class Lexer:
    """
    varlang lexical analyzer.

    Holds a cursor over the source text and produces one Token per
    next_token() call. An instance is a single mutable cursor and must not
    be shared between threads; build one Lexer per input instead.
    """

    def __init__(self, source: str, filename: Optional[str] = None,
                 config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source for diagnostics (defaults to config.filename)
            config: Lexer configuration (defaults to LexerConfig())
        """
        self.config = config if config is not None else DEFAULT_CONFIG
        self.source = source
        self.filename = filename if filename is not None else self.config.filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.ch: Optional[str] = source[0] if source else None
        self.warnings: List[LexerWarning] = []
        self._reached_eof = False

        logger.debug("Created lexer for %s (%d characters)", self.filename, len(source))

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Never fails on unrecognized input (that yields ILLEGAL). Raises
        LexerError only when an integer literal does not fit in 32 bits.
        """
        self._skip_whitespace()

        start = self._location()
        start_pos = self.pos
        ch = self.ch

        if ch is None:
            if not self._reached_eof:
                self._reached_eof = True
                logger.debug("Reached end of input in %s", self.filename)
            return Token(TokenType.EOF, None, "", start)

        if ch in SINGLE_CHAR_OPERATORS:
            token_type, value = SINGLE_CHAR_OPERATORS[ch], None
        elif ch == '"':
            token_type, value = TokenType.STRING, self._read_string(start)
        elif ch in LOOKAHEAD_OPERATORS:
            token_type, value = self._read_lookahead_operator(ch), None
        elif is_letter(ch):
            return self._read_identifier(start)
        elif is_digit(ch):
            return self._read_number(start)
        else:
            token_type, value = TokenType.ILLEGAL, ch

        # Symbols consume one character no matter how far we peeked
        self._next_char()
        return Token(token_type, value, self.source[start_pos:self.pos], start)

    def tokenize(self) -> List[Token]:
        """
        Scan the remaining input.

        Returns:
            List of tokens including the EOF token

        Raises:
            LexerError: If an integer literal overflows
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def _read_lookahead_operator(self, ch: str) -> TokenType:
        plain, doubled = LOOKAHEAD_OPERATORS[ch]
        if self._peek_char() != "=":
            return plain
        if self.config.consume_double_operators:
            self._next_char()
        return doubled

    def _read_string(self, start: SourceLocation) -> str:
        """
        Read the body of a string literal.

        Leaves the cursor on the closing quote (or at end of input). Escape
        markers are kept verbatim: a backslash only stops the following
        quote from terminating the literal.
        """
        self._next_char()  # Skip opening quote
        begin = self.pos
        escape = False

        while self.ch is not None:
            if self.ch == "\\" and not escape:
                escape = True
            elif self.ch == '"' and not escape:
                return self.source[begin:self.pos]
            else:
                escape = False
            self._next_char()

        if self.config.warn_unterminated_strings:
            warning = create_unterminated_string_warning(start)
            self.warnings.append(warning)
            logger.warning("%s: unterminated string literal", start)
        return self.source[begin:self.pos]

    def _read_number(self, start: SourceLocation) -> Token:
        """Tokenize an integer or float literal."""
        begin = self.pos
        is_float = False

        while True:
            if is_digit(self.ch):
                self._next_char()
                continue

            # A single '.' switches to float mode, but only before a digit
            if not is_float and self.ch == "." and is_digit(self._peek_char()):
                is_float = True
                self._next_char()
                continue

            break

        lexeme = self.source[begin:self.pos]
        if is_float:
            return Token(TokenType.FLOAT, self._parse_float(lexeme), lexeme, start)
        return Token(TokenType.INT, self._parse_int(lexeme, start), lexeme, start)

    def _parse_int(self, lexeme: str, start: SourceLocation) -> int:
        # Decimal has no digit limit, so any length of digits is an overflow, not a crash
        value = Decimal(lexeme)
        if not _INT32.min <= value <= _INT32.max:
            raise create_number_overflow_error(lexeme, start, int(_INT32.min), int(_INT32.max))
        return int(value)

    def _parse_float(self, lexeme: str) -> np.float32:
        return round_to_float32(Fraction(Decimal(lexeme)))

    def _read_identifier(self, start: SourceLocation) -> Token:
        """Tokenize an identifier, boolean literal or type name."""
        begin = self.pos
        while is_letter(self.ch) or is_digit(self.ch):
            self._next_char()

        ident = self.source[begin:self.pos]
        token_type, value = lookup_ident(ident)
        return Token(token_type, value, ident, start)

    def _skip_whitespace(self):
        """Skip spaces. Nothing else counts as whitespace."""
        while self.ch == " ":
            self._next_char()

    def _next_char(self):
        """Advance position by one character, updating line/column."""
        if self.ch is None:
            return
        if self.ch == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        self.ch = self.source[self.pos] if self.pos < len(self.source) else None

    def _peek_char(self) -> Optional[str]:
        """Peek at the character after the current one without advancing."""
        peek_pos = self.pos + 1
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return None

    def _location(self) -> SourceLocation:
        return SourceLocation(self.filename, self.line, self.column, self.pos)

    def has_warnings(self) -> bool:
        """Check if lexer recorded any warnings."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[LexerWarning]:
        """Get all diagnostics collected so far (errors are raised, not stored)."""
        return list(self.warnings)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for diagnostics
        config: Optional lexer configuration

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If an integer literal overflows
    """
    return Lexer(source, filename, config).tokenize()


def tokenize_file(filepath: str, config: Optional[LexerConfig] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        config: Optional lexer configuration

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If an integer literal overflows
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, str(filepath), config)
