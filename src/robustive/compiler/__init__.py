# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler pipeline for robustness diagrams: scanning, recognition and graph building."""

from robustive.compiler.build import CompilerError, compile_file, compile_files, compile_source
from robustive.compiler.builder import ParserContext, SemanticBuilder, build
from robustive.compiler.errors import InternalParseError, ParseError, RobustiveError, SourceLocation
from robustive.compiler.lexer import LexerError, Token, TokenType, tokenize
from robustive.compiler.parser import parse

__all__ = [
    "tokenize",
    "Token",
    "TokenType",
    "LexerError",
    "parse",
    "ParseError",
    "SourceLocation",
    "RobustiveError",
    "InternalParseError",
    "build",
    "ParserContext",
    "SemanticBuilder",
    "compile_source",
    "compile_file",
    "compile_files",
    "CompilerError",
]
