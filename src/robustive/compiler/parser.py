# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Recursive-descent recognizer for robustness diagram source.

Converts the token stream produced by the lexer into a raw
:class:`~robustive.compiler.syntax.DiagramTree`. No semantic checks happen
here; the recognizer only decides whether the input is well formed.
"""

from robustive.compiler.errors import ParseError
from robustive.compiler.lexer import Token, TokenType, tokenize
from robustive.compiler.syntax import (
    AlternateCourse,
    AliasTarget,
    Arrow,
    ChainStep,
    DiagramTree,
    RoleDecl,
    Scenario,
    Target,
)
from robustive.model.types import RelationKind, RoleKind

# ###############
# Public Interface
# ###############


def parse(source: str) -> DiagramTree:
    """Recognize diagram source text and return its raw syntax tree.

    Args:
        source: Cleaned diagram text, starting with the ``robustive`` keyword.

    Returns:
        The recognized DiagramTree.

    Raises:
        LexerError: If the source contains invalid characters or unterminated labels.
        ParseError: If the source is syntactically invalid.
    """
    tokens = tokenize(source)
    return _Parser(tokens).parse()


# Role kind keywords, long and short forms.
ROLE_KIND_NAMES: dict[str, RoleKind] = {
    "Actor": RoleKind.ACTOR,
    "A": RoleKind.ACTOR,
    "Boundary": RoleKind.BOUNDARY,
    "B": RoleKind.BOUNDARY,
    "Controller": RoleKind.CONTROLLER,
    "C": RoleKind.CONTROLLER,
    "Entity": RoleKind.ENTITY,
    "E": RoleKind.ENTITY,
    "Usecase": RoleKind.USECASE,
    "U": RoleKind.USECASE,
}


# ################
# Implementation
# ################

_ARROW_TYPES: tuple[TokenType, ...] = (TokenType.RELATED_ARROW, TokenType.SEQUENTIAL_ARROW)

_TOKEN_DESCRIPTIONS: dict[TokenType, str] = {
    TokenType.LABEL: "'[...]'",
    TokenType.ALIAS_REF: "'$alias'",
    TokenType.IDENTIFIER: "identifier",
    TokenType.EOF: "end of input",
}


def _describe(token_type: TokenType) -> str:
    """Return the name of a token type as shown in error messages."""
    return _TOKEN_DESCRIPTIONS.get(token_type, repr(token_type.value))


class _Parser:
    """Recursive-descent parser for robustive token streams."""

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def parse(self) -> DiagramTree:
        """Parse the full token stream and return a DiagramTree."""
        self._expect(TokenType.ROBUSTIVE)
        tree = DiagramTree(scenario=self._parse_scenario())
        while self._check(TokenType.ALIAS_REF):
            tree.alternates.append(self._parse_alternate())
        if not self._at_end():
            raise self._error(
                "Unexpected token",
                ["'---'", "'-->'", "'$alias'", "end of input"],
            )
        return tree

    # ------------------------------------------------------------------
    # Token access helpers
    # ------------------------------------------------------------------

    def _current(self) -> Token:
        """Return the current (un-consumed) token."""
        return self._tokens[self._pos]

    def _peek_type(self) -> TokenType:
        """Return the token type of the current token."""
        return self._tokens[self._pos].type

    def _at_end(self) -> bool:
        """Return True if the current token is the EOF token."""
        return self._peek_type() == TokenType.EOF

    def _advance(self) -> Token:
        """Consume and return the current token, stopping at EOF."""
        tok = self._tokens[self._pos]
        if self._pos < len(self._tokens) - 1:
            self._pos += 1
        return tok

    def _check(self, *types: TokenType) -> bool:
        """Return True if the current token matches any of the given types (without
        consuming).
        """
        return self._peek_type() in types

    def _expect(self, *types: TokenType) -> Token:
        """Consume the current token if it matches any of the given types.

        Raises ParseError if the current token does not match.
        """
        if not self._check(*types):
            raise self._error("Unexpected token", [_describe(t) for t in types])
        return self._advance()

    def _expect_name_token(self) -> Token:
        """Consume the current token as an alias name.

        Accepts identifiers and the ``robustive`` keyword used in name position.
        """
        return self._expect(TokenType.IDENTIFIER, TokenType.ROBUSTIVE)

    def _error(self, message: str, expected: list[str]) -> ParseError:
        """Build a ParseError located at the current token."""
        tok = self._current()
        got = "end of input" if tok.type == TokenType.EOF else repr(tok.value)
        return ParseError(
            f"{message}: expected {', '.join(expected)}, got {got}",
            tok.line,
            tok.column,
            token=tok.value,
            end_column=tok.end_column,
            expected=expected,
        )

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    def _parse_scenario(self) -> Scenario:
        """Parse: role_decl chain"""
        head = self._parse_role_decl()
        return Scenario(head=head, steps=self._parse_chain())

    def _parse_alternate(self) -> AlternateCourse:
        """Parse: '$name' arrow targets chain"""
        head = self._parse_alias_target()
        if not self._check(*_ARROW_TYPES):
            raise self._error(
                f"Alternate course '${head.name}' has no relation",
                ["'---'", "'-->'"],
            )
        return AlternateCourse(head=head, steps=self._parse_chain())

    def _parse_chain(self) -> list[ChainStep]:
        """Parse: (arrow targets)*"""
        steps: list[ChainStep] = []
        while self._check(*_ARROW_TYPES):
            arrow = self._parse_arrow()
            steps.append(ChainStep(arrow=arrow, targets=self._parse_targets()))
        return steps

    # ------------------------------------------------------------------
    # Arrows and targets
    # ------------------------------------------------------------------

    def _parse_arrow(self) -> Arrow:
        """Parse: '---' | '-->' | '-->' '[' condition ']'"""
        tok = self._expect(*_ARROW_TYPES)
        if tok.type == TokenType.RELATED_ARROW:
            return Arrow(kind=RelationKind.RELATED)
        if self._check(TokenType.LABEL):
            condition = self._advance().value
            return Arrow(kind=RelationKind.CONDITIONAL, condition=condition)
        return Arrow(kind=RelationKind.SEQUENTIAL)

    def _parse_targets(self) -> list[Target]:
        """Parse a comma-separated list of targets."""
        targets = [self._parse_target()]
        while self._check(TokenType.COMMA):
            self._advance()  # consume ,
            targets.append(self._parse_target())
        return targets

    def _parse_target(self) -> Target:
        """Parse a role declaration or a ``$alias`` back-reference."""
        if self._check(TokenType.ALIAS_REF):
            return self._parse_alias_target()
        if self._check(TokenType.IDENTIFIER):
            return self._parse_role_decl()
        raise self._error("Unexpected token", ["role declaration", "'$alias'"])

    def _parse_alias_target(self) -> AliasTarget:
        """Parse: '$name'"""
        tok = self._expect(TokenType.ALIAS_REF)
        return AliasTarget(name=tok.value, line=tok.line, column=tok.column)

    # ------------------------------------------------------------------
    # Role declarations
    # ------------------------------------------------------------------

    def _parse_role_decl(self) -> RoleDecl:
        """Parse: kind '[' label ']' [ '(' alias ')' ]"""
        if not self._check(TokenType.IDENTIFIER):
            raise self._error("Unexpected token", ["role declaration"])
        kind_tok = self._current()
        kind = ROLE_KIND_NAMES.get(kind_tok.value)
        if kind is None:
            raise self._error(
                f"Unknown role kind {kind_tok.value!r}",
                [repr(name) for name in ROLE_KIND_NAMES],
            )
        self._advance()
        label_tok = self._expect(TokenType.LABEL)
        alias: str | None = None
        if self._check(TokenType.LPAREN):
            self._advance()  # consume (
            alias = self._expect_name_token().value
            self._expect(TokenType.RPAREN)
        return RoleDecl(
            kind=kind,
            label=label_tok.value,
            alias=alias,
            line=kind_tok.line,
            column=kind_tok.column,
        )
