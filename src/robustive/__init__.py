# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Compiler for the robustive robustness-diagram notation."""

from robustive.compiler import (
    CompilerError,
    InternalParseError,
    LexerError,
    ParseError,
    ParserContext,
    RobustiveError,
    compile_file,
    compile_source,
)
from robustive.diagram import RobustiveDiagram
from robustive.model import AliasRef, ParseResult, Relation, RelationKind, Role, RoleKind

__all__ = [
    "AliasRef",
    "CompilerError",
    "InternalParseError",
    "LexerError",
    "ParseError",
    "ParseResult",
    "ParserContext",
    "Relation",
    "RelationKind",
    "RobustiveDiagram",
    "RobustiveError",
    "Role",
    "RoleKind",
    "compile_file",
    "compile_source",
]
