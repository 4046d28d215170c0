# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Raw syntax tree produced by the grammar recognizer.

The tree mirrors the surface notation one-to-one and carries no semantic
information beyond what the grammar itself distinguishes. The semantic
builder turns it into the scene graph.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from robustive.model.types import RelationKind, RoleKind

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class RoleDecl:
    """A role declaration such as ``C[Check session](checkSession)``."""

    kind: RoleKind
    label: str
    alias: str | None
    line: int
    column: int


@dataclass(frozen=True)
class AliasTarget:
    """A ``$alias`` back-reference token."""

    name: str
    line: int
    column: int


Target = RoleDecl | AliasTarget


@dataclass(frozen=True)
class Arrow:
    """A relation arrow: ``---``, ``-->`` or ``-->[condition]``."""

    kind: RelationKind
    condition: str | None = None


@dataclass
class ChainStep:
    """One ``arrow targets`` step of a chain; several targets share the arrow."""

    arrow: Arrow
    targets: list[Target] = field(default_factory=list)


@dataclass
class Scenario:
    """The basic course: the opening role followed by its chain."""

    head: RoleDecl
    steps: list[ChainStep] = field(default_factory=list)


@dataclass
class AlternateCourse:
    """An alternate course: ``$alias`` followed by at least one chain step."""

    head: AliasTarget
    steps: list[ChainStep] = field(default_factory=list)


@dataclass
class DiagramTree:
    """The whole recognized input."""

    scenario: Scenario
    alternates: list[AlternateCourse] = field(default_factory=list)
