"""
Lexer module for tokenizing package manager command lines.

This module turns a single command line into a flat list of typed tokens,
handling the `--` separator, flags, quoted strings and bare words. Quoting
is recorded on each argument token so that it can be reproduced later.
"""

from dataclasses import dataclass
from enum import Enum, auto

from packmorph.constants import EXEC_SHORTHANDS, MANAGER_INVOCATIONS, SEPARATOR


class TokenType(Enum):
    """Token types for the command lexer."""

    MANAGER = auto()  # npm, pnpm, yarn, bun, npx, bunx
    SUBCOMMAND = auto()  # install, add, run, create, dlx, global, ...
    FLAG = auto()  # -D, --save-dev, --template=x
    ARGUMENT = auto()  # packages, scripts, templates, quoted strings
    SEPARATOR = auto()  # --

    # Special
    EOF = auto()


WHITESPACE = " \t\r\n"
QUOTES = "\"'"


@dataclass(frozen=True)
class Token:
    """Represents a single token from the lexer."""

    type: TokenType
    value: str
    start: int  # offset of the first character in the source string
    end: int  # offset one past the last character
    was_quoted: bool = False
    quote_char: str | None = None

    def __repr__(self) -> str:
        quoted = f", quoted={self.quote_char!r}" if self.was_quoted else ""
        return f"Token({self.type.name}, {self.value!r}, {self.start}:{self.end}{quoted})"


class CommandLexer:
    """
    Tokenizer for package manager command lines.

    Handles:
    - Standalone `--` separators
    - Flags (anything starting with `-`), read verbatim up to whitespace
    - Quoted strings (single and double quotes, backslash escapes)
    - Bare words

    The lexer never fails. An unterminated quoted string runs to the end of
    the input.
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.length = len(source)

    def _current_char(self) -> str | None:
        """Return current character or None if at end."""
        if self.pos >= self.length:
            return None
        return self.source[self.pos]

    def _peek_char(self, offset: int = 1) -> str | None:
        """Peek at character at given offset from current position."""
        peek_pos = self.pos + offset
        if peek_pos >= self.length:
            return None
        return self.source[peek_pos]

    def _advance(self) -> str | None:
        """Advance position and return the character."""
        char = self._current_char()
        if char is not None:
            self.pos += 1
        return char

    def _skip_whitespace(self) -> None:
        """Skip spaces, tabs, carriage returns and newlines."""
        while self._current_char() is not None and self._current_char() in WHITESPACE:
            self._advance()

    def _at_separator(self) -> bool:
        """Check for a standalone `--` at the current position."""
        if self._current_char() != "-" or self._peek_char() != "-":
            return False
        following = self._peek_char(2)
        return following is None or following in WHITESPACE

    def _read_separator(self) -> Token:
        start_pos = self.pos
        self._advance()
        self._advance()
        return Token(TokenType.SEPARATOR, SEPARATOR, start_pos, self.pos)

    def _read_until_whitespace(self) -> str:
        chars: list[str] = []
        while self._current_char() is not None and self._current_char() not in WHITESPACE:
            chars.append(self._advance())  # type: ignore
        return "".join(chars)

    def _read_flag(self) -> Token:
        """Read a flag verbatim. Flags are never quoted or escaped."""
        start_pos = self.pos
        value = self._read_until_whitespace()
        return Token(TokenType.FLAG, value, start_pos, self.pos)

    def _read_word(self) -> Token:
        """Read an unquoted argument."""
        start_pos = self.pos
        value = self._read_until_whitespace()
        return Token(TokenType.ARGUMENT, value, start_pos, self.pos)

    def _read_string(self, quote_char: str) -> Token:
        """Read a quoted string."""
        start_pos = self.pos
        self._advance()  # skip opening quote

        value_chars: list[str] = []
        while True:
            char = self._current_char()
            if char is None:
                # unterminated: keep what was read
                break
            if char == "\\":
                self._advance()  # skip backslash
                escaped = self._advance()
                if escaped is not None:
                    value_chars.append(escaped)
                continue
            if char == quote_char:
                self._advance()  # skip closing quote
                break
            value_chars.append(char)
            self._advance()

        return Token(
            type=TokenType.ARGUMENT,
            value="".join(value_chars),
            start=start_pos,
            end=self.pos,
            was_quoted=True,
            quote_char=quote_char,
        )

    def _classify_leading_words(self, tokens: list[Token]) -> list[Token]:
        """
        Mark the manager invocation and its subcommand.

        Only bare words are promoted. The first word becomes MANAGER when it
        names an invocation; the second becomes SUBCOMMAND when the first was
        a full manager name rather than an exec shorthand.
        """
        if not tokens or not self._is_bare_word(tokens[0]):
            return tokens
        if tokens[0].value not in MANAGER_INVOCATIONS:
            return tokens

        first = tokens[0]
        tokens[0] = Token(TokenType.MANAGER, first.value, first.start, first.end)

        if first.value in EXEC_SHORTHANDS:
            return tokens
        if len(tokens) > 1 and self._is_bare_word(tokens[1]):
            second = tokens[1]
            tokens[1] = Token(TokenType.SUBCOMMAND, second.value, second.start, second.end)
        return tokens

    @staticmethod
    def _is_bare_word(token: Token) -> bool:
        return token.type == TokenType.ARGUMENT and not token.was_quoted

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source string."""
        tokens: list[Token] = []

        while self.pos < self.length:
            self._skip_whitespace()

            if self.pos >= self.length:
                break

            char = self._current_char()

            if self._at_separator():
                tokens.append(self._read_separator())
                continue

            if char == "-":
                tokens.append(self._read_flag())
                continue

            if char in QUOTES:
                tokens.append(self._read_string(char))  # type: ignore
                continue

            tokens.append(self._read_word())

        tokens = self._classify_leading_words(tokens)

        # Add EOF token
        tokens.append(Token(TokenType.EOF, "", self.pos, self.pos))

        return tokens


def tokenize(source: str) -> list[Token]:
    """Tokenize `source` with a fresh lexer."""
    return CommandLexer(source).tokenize()
