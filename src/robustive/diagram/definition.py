# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Host-facing diagram definition for the robustive notation.

A host that renders several diagram types registers one
:class:`RobustiveDiagram` instance under a type name and talks to it only
through :meth:`RobustiveDiagram.clear` and :meth:`RobustiveDiagram.parse`.
"""

from __future__ import annotations

from robustive.compiler.builder import ParserContext, build
from robustive.compiler.parser import parse
from robustive.model.entities import ParseResult

# ###############
# Public Interface
# ###############

DIAGRAM_TYPE = "robustive"


class RobustiveDiagram:
    """Parser for robustive diagrams with the host's clear/parse contract.

    The instance owns one :class:`ParserContext`. The host calls
    :meth:`clear` before each independent parse; aliases and the error flag
    otherwise carry over from the previous parse.
    """

    def __init__(self) -> None:
        self._context = ParserContext()

    @property
    def context(self) -> ParserContext:
        """The alias registry and error flag shared by successive parses."""
        return self._context

    def clear(self) -> None:
        """Reset the alias registry and error flag."""
        self._context.clear()

    async def parse(self, text: str) -> ParseResult:
        """Parse cleaned diagram text.

        Runs synchronously to completion; the coroutine form only matches
        the host's uniform asynchronous parser interface.

        Raises:
            ParseError: If the text does not match the grammar.
            InternalParseError: If building the graph fails without a location.
        """
        return build(parse(text), self._context)
