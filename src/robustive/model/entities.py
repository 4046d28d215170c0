# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scene graph entities produced by compiling a robustness diagram."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel
from pydantic import Field as _Field

from robustive.model.types import RelationKind, RoleKind

# ###############
# Public Interface
# ###############


class AliasRef(BaseModel):
    """A back-reference to a role that already exists elsewhere in the graph.

    Attributes:
        name: Alias of the referenced role.
        declared_kind: Kind written at the reference when it re-declares the
            alias (``U[...](name)``); None for a plain ``$name``.
    """

    kind: Literal["alias"] = "alias"
    name: str
    declared_kind: RoleKind | None = None


class Role(BaseModel):
    """A node of the scene graph: one actor, boundary, controller, entity or use-case.

    Attributes:
        kind: The role stereotype.
        label: Human-readable text declared inside ``[...]``.
        alias: Canonical identifier declared as ``(alias)``, if any.
        violating: Structural rule violation attached to this role, if any.
        relations: Outgoing edges in narrative (source) order.
    """

    kind: RoleKind
    label: str
    alias: str | None = None
    violating: str | None = None
    relations: list[Relation] = _Field(default_factory=list)

    @property
    def node_id(self) -> str:
        """Return the identity of this role within a diagram (alias, else label)."""
        return self.alias if self.alias is not None else self.label


class Relation(BaseModel):
    """A directed edge from one role to another.

    The target is either a fully expanded role (first time it is reached)
    or an :class:`AliasRef` when the role already exists in the graph.
    """

    kind: RelationKind
    target: Role | AliasRef
    condition: str | None = None
    violating: str | None = None

    @property
    def target_name(self) -> str:
        """Return the node id of the target, dereferencing nothing."""
        if isinstance(self.target, AliasRef):
            return self.target.name
        return self.target.node_id


class ParseResult(BaseModel):
    """The compiled form of one diagram.

    Attributes:
        scenario: Root role of the basic course.
        alternatives: Alternate-course chains whose ``$alias`` head could not
            be resolved against any existing role.
        has_error: True if any role or relation carries a violation.
    """

    scenario: Role
    alternatives: list[Relation] = _Field(default_factory=list)
    has_error: bool = False

    def walk(self) -> Iterator[tuple[tuple[str, ...], Role | None, Relation]]:
        """Yield every relation depth-first in narrative order.

        Each item is ``(trail, source, relation)`` where *trail* holds the
        node ids from the root down to and including *source*. The basic
        course comes first, then the alternatives, whose head relations
        have no source (``None`` and an empty trail).
        """
        yield from _walk(self.scenario, (self.scenario.node_id,), self.scenario.relations)
        yield from _walk(None, (), self.alternatives)


# ################
# Implementation
# ################


def _walk(
    source: Role | None,
    trail: tuple[str, ...],
    relations: list[Relation],
) -> Iterator[tuple[tuple[str, ...], Role | None, Relation]]:
    # Explicit stack: chains can be far deeper than the recursion limit.
    stack = [(source, trail, iter(relations))]
    while stack:
        src, src_trail, pending = stack[-1]
        relation = next(pending, None)
        if relation is None:
            stack.pop()
            continue
        yield src_trail, src, relation
        if isinstance(relation.target, Role):
            target = relation.target
            stack.append((target, (*src_trail, target.node_id), iter(target.relations)))


# Resolve forward references in self-referential models.
Role.model_rebuild()
Relation.model_rebuild()
ParseResult.model_rebuild()
