"""Lexer configuration for varlang.

LexerConfig is an immutable value passed to a Lexer at construction. Since
it is frozen, one instance can be shared by any number of lexers, including
lexers running on different threads.

Usage:
    from varlang.config import LexerConfig
    from varlang.lexer import Lexer

    config = LexerConfig(consume_double_operators=True)
    lexer = Lexer("a == b", config=config)
"""

from dataclasses import dataclass, fields


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        consume_double_operators: Consume both characters of ``==`` and
            ``!=``. Off by default: the scanner then consumes only the first
            character, and the second one is scanned again on the next call.
        filename: Name reported in source locations when the Lexer is not
            given one explicitly
        warn_unterminated_strings: Record a LexerWarning (and log it) when a
            string literal runs into end of input

    """

    consume_double_operators: bool = False
    filename: str = "<unknown>"
    warn_unterminated_strings: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from a dictionary.

        Unknown keys are ignored so that configuration coming from a larger
        tool section can be passed through unchanged.

        Example:
            >>> LexerConfig.from_dict({"consume_double_operators": True})
            LexerConfig(consume_double_operators=True, filename='<unknown>', warn_unterminated_strings=True)
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in config_dict.items() if k in known})


DEFAULT_CONFIG = LexerConfig()
