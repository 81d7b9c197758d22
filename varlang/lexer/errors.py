"""
Error handling for the varlang lexer.

Two channels exist. Unclassifiable characters never raise: they come back
as ILLEGAL tokens. Integer literals that do not fit in 32 bits raise
LexerError and abort the scan. A string literal cut off by end of input is
not an error; the lexer records a LexerWarning on Lexer.warnings instead.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """One rendered report: what went wrong, where, and what to try."""
    message: str
    location: SourceLocation
    severity: str  # "error" aborts the scan, "warning" is only recorded
    code: Optional[str] = None      # Key into ERROR_CODES
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        header = self.severity.upper()
        if self.code:
            header = f"{header}[{self.code}]"
        lines = [f"{header}: {self.message}", f"  --> {self.location}"]

        if self.help_text:
            lines.append(f"  help: {self.help_text}")

        if self.suggestions:
            lines.append("  suggestions:")
            lines.extend(f"    - {suggestion}" for suggestion in self.suggestions)

        return "\n".join(lines) + "\n"


class LexerError(Exception):
    """
    Raised when a scan cannot continue.

    The lexer raises it only for integer literals outside the 32-bit range;
    the CLI also builds one per ILLEGAL token in --strict mode.
    """

    def __init__(self, message: str, location: SourceLocation, code: Optional[str] = None,
                 help_text: Optional[str] = None, suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.diagnostic = Diagnostic(message, location, "error", code, help_text, suggestions)

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Something odd in the source that still produced a normal token.

    Collected on Lexer.warnings (an unterminated string literal, for
    instance) and never raised.
    """

    def __init__(self, message: str, location: SourceLocation, code: Optional[str] = None,
                 help_text: Optional[str] = None, suggestions: Optional[List[str]] = None):
        self.diagnostic = Diagnostic(message, location, "warning", code, help_text, suggestions)

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
    "L002": "Unterminated string literal",
    "L007": "Number literal overflow",
}


def create_unterminated_string_warning(location: SourceLocation) -> LexerWarning:
    """Create a warning for a string literal that runs into end of input."""
    return LexerWarning(
        message="Unterminated string literal",
        location=location,
        code="L002",
        help_text="The literal was closed implicitly at end of input.",
        suggestions=['Add a closing " quote', "Check for an escaped final quote"]
    )


def create_number_overflow_error(lexeme: str, location: SourceLocation,
                                 minimum: int, maximum: int) -> LexerError:
    """Create an error for an integer literal outside the 32-bit range."""
    return LexerError(
        message=f"Integer literal out of range: '{lexeme}'",
        location=location,
        code="L007",
        help_text=f"Integer literals must lie between {minimum} and {maximum}.",
        suggestions=["Use a float literal for larger magnitudes"]
    )


def create_invalid_character_error(char: str, location: SourceLocation) -> LexerError:
    """Create an error for a character that scanned as ILLEGAL (strict tooling)."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in varlang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."
    if char in "\t\r\n":
        suggestions = ["Only the space character separates tokens"]
    else:
        suggestions = None

    return LexerError(
        message=f"Invalid character: {char!r}",
        location=location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )
