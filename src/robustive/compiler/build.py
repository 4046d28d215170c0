# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compile entry points: source text and diagram files to scene graphs.

:func:`compile_source` chains the two phases (grammar recognition, then the
semantic builder) for one text. :func:`compile_files` is the batch form used
by the command-line interface; it reports fatal errors per file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from robustive.compiler.builder import ParserContext, build
from robustive.compiler.errors import RobustiveError
from robustive.compiler.parser import parse
from robustive.model.entities import ParseResult

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class CompilerError(Exception):
    """Raised when a diagram file cannot be read or does not compile.

    The message is prefixed with the offending file path.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def compile_source(source: str, *, context: ParserContext | None = None) -> ParseResult:
    """Compile cleaned diagram text into a ParseResult.

    Args:
        source: Diagram text starting with the ``robustive`` keyword.
        context: Alias registry and error flag to build with. A fresh
            context is used when omitted, so independent calls never share
            state.

    Returns:
        The scene graph; check ``has_error`` for structural violations.

    Raises:
        ParseError: If the text does not match the grammar (LexerError included).
        InternalParseError: If building the graph fails without a location.
    """
    tree = parse(source)
    return build(tree, context)


def compile_file(path: Path) -> ParseResult:
    """Read a UTF-8 diagram file, normalize its line endings and compile it.

    Raises:
        OSError: If the file cannot be read.
        ParseError: If the file does not match the grammar.
    """
    text = path.read_text(encoding="utf-8")
    return compile_source(_normalize_newlines(text))


def compile_files(files: list[Path]) -> dict[Path, ParseResult]:
    """Compile a list of diagram files.

    Args:
        files: Paths of the diagram files, compiled in the given order.

    Returns:
        A mapping from each path to its compiled ParseResult.

    Raises:
        CompilerError: On the first file that cannot be read or does not
            compile.
    """
    compiled: dict[Path, ParseResult] = {}
    for path in files:
        logger.debug("Compiling %s", path)
        try:
            compiled[path] = compile_file(path)
        except OSError as exc:
            raise CompilerError(f"{path}: cannot read file: {exc}") from exc
        except RobustiveError as exc:
            raise CompilerError(f"{path}: {exc}") from exc
    return compiled


# ################
# Implementation
# ################


def _normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")
