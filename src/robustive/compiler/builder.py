# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Semantic builder: turns a recognized syntax tree into the scene graph.

The builder walks the tree in source order, allocates roles, appends
relations to their source role and applies the structural validity rules.
Violations are recorded on the offending role or relation and never abort
the build. Alias registration and ``$alias`` resolution happen in the same
pass, so an alias is only visible to source that follows its declaration.
"""

from __future__ import annotations

import logging

from robustive.compiler.errors import InternalParseError
from robustive.compiler.syntax import (
    AlternateCourse,
    AliasTarget,
    Arrow,
    ChainStep,
    DiagramTree,
    RoleDecl,
    Target,
)
from robustive.model.entities import AliasRef, ParseResult, Relation, Role
from robustive.model.types import ALIASABLE_KINDS, RoleKind
from robustive.validation.checks import (
    check_relation,
    check_scenario_entry,
    undefined_alias_message,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParserContext:
    """Mutable state of one parse: the alias registry and the error flag.

    A context must not be shared by two parses running at the same time.
    Call :meth:`clear` (or create a new context) before reusing it.
    """

    def __init__(self) -> None:
        self._aliases: dict[str, Role] = {}
        self._has_error = False

    @property
    def has_error(self) -> bool:
        """Return True once any violation has been recorded."""
        return self._has_error

    def mark_error(self) -> None:
        """Record that the graph contains at least one violation."""
        self._has_error = True

    def register(self, role: Role) -> Role:
        """Register an aliased Controller/Usecase role and return the registered node.

        Registration is idempotent: when the alias is already known, the
        first registered role is returned and *role* is discarded. Roles
        without an alias or of another kind are returned unchanged.
        """
        if role.alias is None or role.kind not in ALIASABLE_KINDS:
            return role
        existing = self._aliases.get(role.alias)
        if existing is not None:
            return existing
        self._aliases[role.alias] = role
        logger.debug("Registered alias '%s' for %s '%s'", role.alias, role.kind.display_name, role.label)
        return role

    def lookup(self, alias: str) -> Role | None:
        """Return the role registered under *alias*, or None."""
        return self._aliases.get(alias)

    def clear(self) -> None:
        """Forget all aliases and reset the error flag."""
        self._aliases.clear()
        self._has_error = False


def build(tree: DiagramTree, context: ParserContext | None = None) -> ParseResult:
    """Build the scene graph for a recognized diagram.

    Args:
        tree: The syntax tree produced by :func:`robustive.compiler.parser.parse`.
        context: Alias registry and error flag to use. A fresh context is
            created when omitted.

    Returns:
        The assembled :class:`ParseResult`. Structural violations are
        recorded in the graph and reflected by ``has_error``.

    Raises:
        InternalParseError: If the tree contains a node the builder cannot handle.
    """
    return SemanticBuilder(context if context is not None else ParserContext()).build(tree)


class SemanticBuilder:
    """Builds one ParseResult from a DiagramTree using an explicit context."""

    def __init__(self, context: ParserContext) -> None:
        self._ctx = context
        self._alternatives: list[Relation] = []

    def build(self, tree: DiagramTree) -> ParseResult:
        """Build the basic course, then every alternate course in source order."""
        self._alternatives = []
        scenario = self._build_scenario_root(tree.scenario.head)
        self._build_chain(scenario, None, tree.scenario.steps)
        for course in tree.alternates:
            self._build_alternate(course)
        return ParseResult(
            scenario=scenario,
            alternatives=self._alternatives,
            has_error=self._ctx.has_error,
        )

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    def _build_scenario_root(self, decl: RoleDecl) -> Role:
        root = self._ctx.register(_new_role(decl))
        violation = check_scenario_entry(root.kind)
        if violation is not None:
            root.violating = violation
            self._violation(root.node_id, violation)
        return root

    def _build_alternate(self, course: AlternateCourse) -> None:
        """Splice an alternate course onto the role its ``$alias`` names."""
        head = self._ctx.lookup(course.head.name)
        if head is None:
            logger.debug(
                "Alternate course '$%s' at line %d does not resolve; kept as alternative",
                course.head.name,
                course.head.line,
            )
            self._build_chain(None, course.head.name, course.steps)
            return
        logger.debug(
            "Splicing alternate course onto '%s' at relation index %d",
            course.head.name,
            len(head.relations),
        )
        self._build_chain(head, None, course.steps)

    def _build_chain(self, head: Role | None, unresolved: str | None, steps: list[ChainStep]) -> None:
        """Apply *steps* starting at *head*.

        *head* is None when the chain starts from an alias that could not be
        resolved; *unresolved* then holds that alias name.
        """
        for step in steps:
            reached: list[tuple[Role | None, Target]] = [
                (self._link(head, unresolved, step.arrow, target), target) for target in step.targets
            ]
            if len(reached) != 1:
                continue
            role, target = reached[0]
            if role is None:
                if isinstance(target, AliasTarget):
                    head, unresolved = None, target.name
                continue
            # Entities are leaves; the chain continues from the current head.
            if role.kind != RoleKind.ENTITY:
                head, unresolved = role, None

    # ------------------------------------------------------------------
    # Relations
    # ------------------------------------------------------------------

    def _link(
        self,
        source: Role | None,
        unresolved: str | None,
        arrow: Arrow,
        target: Target,
    ) -> Role | None:
        """Append one relation and return the role it reaches (None if unknown)."""
        if isinstance(target, RoleDecl):
            reached, edge_target = self._resolve_decl(target)
        elif isinstance(target, AliasTarget):
            reached = self._ctx.lookup(target.name)
            edge_target = AliasRef(name=target.name)
        else:
            raise InternalParseError(f"Unsupported relation target: {type(target).__name__}")

        relation = Relation(kind=arrow.kind, condition=arrow.condition, target=edge_target)
        if source is None:
            relation.violating = undefined_alias_message(unresolved or "")
        elif reached is None:
            relation.violating = undefined_alias_message(relation.target_name)
        else:
            relation.violating = check_relation(source.kind, arrow.kind, reached.kind)

        if relation.violating is not None:
            origin = source.node_id if source is not None else f"${unresolved}"
            self._violation(f"{origin} -> {relation.target_name}", relation.violating)

        if source is None:
            self._alternatives.append(relation)
        else:
            source.relations.append(relation)
        return reached

    def _resolve_decl(self, decl: RoleDecl) -> tuple[Role, Role | AliasRef]:
        """Return the role a declaration reaches and the edge target to store.

        A declaration whose alias is already placed in the graph reuses that
        role and is stored as a back-reference.
        """
        if decl.alias is not None and decl.kind in ALIASABLE_KINDS:
            existing = self._ctx.lookup(decl.alias)
            if existing is not None:
                logger.debug("Alias '%s' re-declared at line %d; storing a back-reference", decl.alias, decl.line)
                return existing, AliasRef(name=decl.alias, declared_kind=decl.kind)
        role = self._ctx.register(_new_role(decl))
        return role, role

    def _violation(self, where: str, message: str) -> None:
        self._ctx.mark_error()
        logger.debug("Violation at %s: %s", where, message)


# ################
# Implementation
# ################


def _new_role(decl: RoleDecl) -> Role:
    return Role(kind=decl.kind, label=decl.label, alias=decl.alias)
