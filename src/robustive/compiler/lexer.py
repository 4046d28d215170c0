# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Lexical scanner for robustness diagram source.

Converts cleaned diagram text into a sequence of tokens for the grammar
recognizer. Whitespace, including line breaks, only separates tokens.
"""

import enum
from dataclasses import dataclass

from robustive.compiler.errors import ParseError

# ###############
# Public Interface
# ###############


class TokenType(enum.Enum):
    """All token types produced by the robustive lexer."""

    # Keywords
    ROBUSTIVE = "robustive"

    # Symbols and operators
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    RELATED_ARROW = "---"
    SEQUENTIAL_ARROW = "-->"

    # Back-reference written '$name'; the value is the bare name
    ALIAS_REF = "ALIAS_REF"

    # Bracketed free text: role labels and conditions
    LABEL = "LABEL"

    # Identifiers: role kinds and alias names
    IDENTIFIER = "IDENTIFIER"

    # End of file
    EOF = "EOF"


@dataclass(frozen=True)
class Token:
    """A lexical token with its source location.

    Attributes:
        type: The kind of token.
        value: The raw text of the token (the trimmed inner text for LABEL tokens).
        line: 1-based line number where the token starts.
        column: 1-based column number where the token starts.
        end_column: 1-based column just past the last character of the token.
    """

    type: TokenType
    value: str
    line: int
    column: int
    end_column: int


class LexerError(ParseError):
    """Raised when the scanner encounters an invalid character or unterminated label."""


def tokenize(source: str) -> list[Token]:
    """Tokenize diagram source text into a sequence of tokens.

    Args:
        source: Cleaned diagram text (line endings normalized to LF).

    Returns:
        A list of Token objects ending with a single EOF token.

    Raises:
        LexerError: On unexpected characters or unterminated labels.
    """
    return _Lexer(source).tokenize()


# ################
# Implementation
# ################

_KEYWORDS: dict[str, TokenType] = {
    "robustive": TokenType.ROBUSTIVE,
}

_SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
}


class _Lexer:
    """Internal scanner state machine."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Run the scanner and return all tokens including the terminal EOF."""
        while self._pos < len(self._source):
            self._skip_whitespace()
            if self._pos >= len(self._source):
                break
            self._scan_token()
        self._tokens.append(Token(TokenType.EOF, "", self._line, self._column, self._column))
        return self._tokens

    # ------------------------------------------------------------------
    # Low-level character access helpers
    # ------------------------------------------------------------------

    def _current(self) -> str:
        """Return the character at the current position, or '' at end of input."""
        if self._pos < len(self._source):
            return self._source[self._pos]
        return ""

    def _peek(self, offset: int = 1) -> str:
        """Return the character *offset* positions ahead, or '' past end of input."""
        if self._pos + offset < len(self._source):
            return self._source[self._pos + offset]
        return ""

    def _advance(self) -> str:
        """Consume the current character, update position tracking, and return it."""
        ch = self._source[self._pos]
        self._pos += 1
        if ch == "\n":
            self._line += 1
            self._column = 1
        else:
            self._column += 1
        return ch

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._source) and self._current() in " \t\r\n":
            self._advance()

    def _emit(self, token_type: TokenType, value: str, line: int, col: int) -> None:
        self._tokens.append(Token(token_type, value, line, col, self._column))

    # ------------------------------------------------------------------
    # Token scanning dispatcher
    # ------------------------------------------------------------------

    def _scan_token(self) -> None:
        """Dispatch to the appropriate handler based on the current character."""
        ch = self._current()
        line = self._line
        col = self._column

        if ch in _SINGLE_CHAR_TOKENS:
            self._advance()
            self._emit(_SINGLE_CHAR_TOKENS[ch], ch, line, col)
        elif ch == "$":
            self._scan_alias_ref(line, col)
        elif ch == "-":
            self._scan_arrow(line, col)
        elif ch == "[":
            self._scan_label(line, col)
        elif ch.isalpha() or ch == "_":
            self._scan_identifier_or_keyword(line, col)
        else:
            raise LexerError(
                f"Unexpected character: {ch!r}",
                line,
                col,
                token=ch,
            )

    # ------------------------------------------------------------------
    # Scanners
    # ------------------------------------------------------------------

    def _scan_arrow(self, line: int, col: int) -> None:
        """Scan '---' (related) or '-->' (sequential)."""
        if self._peek() == "-" and self._peek(2) == "-":
            token_type = TokenType.RELATED_ARROW
        elif self._peek() == "-" and self._peek(2) == ">":
            token_type = TokenType.SEQUENTIAL_ARROW
        else:
            raise LexerError(
                "Unexpected character: '-'",
                line,
                col,
                token="-",
                expected=["'---'", "'-->'"],
            )
        text = "".join(self._advance() for _ in range(3))
        self._emit(token_type, text, line, col)

    def _scan_label(self, line: int, col: int) -> None:
        """Scan '[' text ']' on a single line; the value is the trimmed text."""
        self._advance()  # [
        chars: list[str] = []
        while self._pos < len(self._source):
            ch = self._current()
            if ch == "]":
                self._advance()  # ]
                self._emit(TokenType.LABEL, "".join(chars).strip(), line, col)
                return
            if ch == "\n":
                break
            chars.append(self._advance())
        raise LexerError(
            "Unterminated label",
            line,
            col,
            token="[" + "".join(chars),
            expected=["']'"],
        )

    def _scan_alias_ref(self, line: int, col: int) -> None:
        """Scan '$' immediately followed by an alias name."""
        nxt = self._peek()
        if not (nxt.isalpha() or nxt == "_"):
            raise LexerError(
                "Expected an alias name directly after '$'",
                line,
                col,
                token="$",
                expected=["alias name"],
            )
        self._advance()  # $
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        self._emit(TokenType.ALIAS_REF, self._source[start : self._pos], line, col)

    def _scan_identifier_or_keyword(self, line: int, col: int) -> None:
        """Scan an identifier and map it to a keyword token type if applicable."""
        start = self._pos
        while self._pos < len(self._source) and (self._current().isalnum() or self._current() == "_"):
            self._advance()
        value = self._source[start : self._pos]
        token_type = _KEYWORDS.get(value, TokenType.IDENTIFIER)
        self._emit(token_type, value, line, col)
