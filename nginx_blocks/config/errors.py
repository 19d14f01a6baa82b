"""
Error taxonomy for the parsing pipeline.

Every failure is a ParseError subclass tagged with an ErrorKind, so
callers can either catch the base class or dispatch on ``error.kind``.
"""

from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Token


class ErrorKind(Enum):
    """Kinds of parse failure."""

    UNMATCHED_OPENING_BRACE = auto()
    UNMATCHED_CLOSING_BRACE = auto()
    EXPECTED_DIRECTIVE_NAME = auto()
    UNTERMINATED_DIRECTIVE = auto()
    EXPECTED_TERMINATOR_OR_BLOCK = auto()
    NESTING_TOO_DEEP = auto()


class ParseError(Exception):
    """Exception raised for grouper and block builder errors."""

    kind: ErrorKind

    def __init__(self, message: str, token: "Token | None" = None, filename: str | None = None):
        self.message = message
        self.token = token
        self.filename = filename
        super().__init__(self._render())

    @property
    def line(self) -> int | None:
        return self.token.line if self.token else None

    @property
    def column(self) -> int | None:
        return self.token.column if self.token else None

    @property
    def index(self) -> int | None:
        """Position of the offending token in the token sequence."""
        return self.token.index if self.token else None

    def with_filename(self, filename: str) -> "ParseError":
        """Attach a filename to the error message."""
        self.filename = filename
        self.args = (self._render(),)
        return self

    def _render(self) -> str:
        text = self.message
        if self.token:
            text = f"Line {self.token.line}, column {self.token.column}: {text}"
        if self.filename:
            text = f"{self.filename}:{text}"
        return text


class UnmatchedOpeningBrace(ParseError):
    kind = ErrorKind.UNMATCHED_OPENING_BRACE


class UnmatchedClosingBrace(ParseError):
    kind = ErrorKind.UNMATCHED_CLOSING_BRACE


class ExpectedDirectiveName(ParseError):
    kind = ErrorKind.EXPECTED_DIRECTIVE_NAME


class UnterminatedDirective(ParseError):
    kind = ErrorKind.UNTERMINATED_DIRECTIVE


class ExpectedTerminatorOrBlock(ParseError):
    kind = ErrorKind.EXPECTED_TERMINATOR_OR_BLOCK


class NestingTooDeep(ParseError):
    kind = ErrorKind.NESTING_TOO_DEEP
