"""
Lexer (tokenizer) for nginx-like configuration syntax.

Produces a flat token sequence from raw text:
- Braces and semicolons as single-character tokens
- Strings as maximal runs of any other characters
- Whitespace (space, tab, newline) and # line comments are skipped

The lexer never fails: every character either belongs to a token or is
skipped.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator


WHITESPACE = " \t\n"
COMMENT_START = "#"
PUNCTUATION = ";{}"

# Characters that end a string literal
STRING_DELIMITERS = WHITESPACE + COMMENT_START + PUNCTUATION


class TokenType(Enum):
    """Token types for the nginx-like config syntax."""

    SEMICOLON = auto()     # ;
    LBRACE = auto()        # {
    RBRACE = auto()        # }
    STRING = auto()        # any other run of characters


PUNCTUATION_TYPES = {
    ";": TokenType.SEMICOLON,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}


@dataclass(frozen=True)
class Token:
    """A single token from the lexer."""

    type: TokenType
    value: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)
    index: int = field(default=0, compare=False)  # position in the token sequence

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.line}:{self.column})"

    def is_a(self, token_type: TokenType) -> bool:
        return self.type is token_type


class Lexer:
    """
    Tokenizer for nginx-like configuration syntax.

    Example config:
        server {
            listen 80;   # comment
            location / {
                index index.html;
            }
        }
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.count = 0

    def _current(self) -> str:
        """Get current character or empty string if at end."""
        if self.pos >= len(self.source):
            return ""
        return self.source[self.pos]

    def _advance(self) -> str:
        """Advance position and return current character."""
        if self.pos >= len(self.source):
            return ""

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def _skip_whitespace_and_comments(self) -> None:
        """Skip whitespace and # comments up to the next token."""
        while True:
            char = self._current()
            if char and char in WHITESPACE:
                self._advance()
            elif char == COMMENT_START:
                # Comment runs to end of line; the newline is whitespace
                while self._current() and self._current() != "\n":
                    self._advance()
            else:
                break

    def _make_token(self, token_type: TokenType, value: str, line: int, column: int) -> Token:
        token = Token(token_type, value, line, column, self.count)
        self.count += 1
        return token

    def _read_string(self) -> Token:
        """Read a string literal up to the next delimiter."""
        start_line = self.line
        start_col = self.column
        start_pos = self.pos

        while self._current() and self._current() not in STRING_DELIMITERS:
            self._advance()

        return self._make_token(
            TokenType.STRING,
            self.source[start_pos:self.pos],
            start_line,
            start_col,
        )

    def next_token(self) -> Token | None:
        """Get the next token from the source, or None at end of input."""
        self._skip_whitespace_and_comments()

        char = self._current()
        if not char:
            return None

        if char in PUNCTUATION_TYPES:
            line, column = self.line, self.column
            self._advance()
            return self._make_token(PUNCTUATION_TYPES[char], char, line, column)

        return self._read_string()

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the source."""
        while True:
            token = self.next_token()
            if token is None:
                break
            yield token

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize a source string."""
    return list(Lexer(source))
