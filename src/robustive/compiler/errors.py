# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Fatal error types raised while compiling robustness diagram source."""

from __future__ import annotations

from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class RobustiveError(Exception):
    """Base class of all fatal compilation errors."""


@dataclass(frozen=True)
class SourceLocation:
    """Span of source text covered by a token (1-based, end column exclusive)."""

    first_line: int
    last_line: int
    first_column: int
    last_column: int


class ParseError(RobustiveError):
    """Raised when the input does not match the diagram grammar.

    The parse is abandoned and no partial result is returned.

    Attributes:
        message: Description of the failure without location prefix.
        token: Source text of the offending token ('' at end of input).
        line: 1-based line number of the error.
        column: 1-based column number of the error.
        loc: Full span of the offending token.
        expected: Human-readable names of the tokens that would have matched.
    """

    def __init__(
        self,
        message: str,
        line: int,
        column: int,
        *,
        token: str = "",
        end_column: int | None = None,
        expected: list[str] | None = None,
    ) -> None:
        super().__init__(f"Line {line}, column {column}: {message}")
        self.message = message
        self.token = token
        self.line = line
        self.column = column
        self.loc = SourceLocation(
            first_line=line,
            last_line=line,
            first_column=column,
            last_column=end_column if end_column is not None else column + len(token),
        )
        self.expected = list(expected or [])


class InternalParseError(RobustiveError):
    """Raised when building the scene graph fails without a source location."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
