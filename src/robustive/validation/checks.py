# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural validity rules for robustness diagrams.

The rules are plain functions over role and relation kinds so they can be
applied by the semantic builder while the graph is constructed and tested
without going through the grammar. :func:`validate` collects every
violation recorded on a compiled graph into a report.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from robustive.model.entities import ParseResult, Role
from robustive.model.types import ALIASABLE_KINDS, RelationKind, RoleKind

# ###############
# Public Interface
# ###############

SCENARIO_ENTRY_MESSAGE = "Only Actor comes first in the basic course."

# Allowed target kinds per (source kind, relation kind). Every pair that is
# not listed here allows no target at all.
VALID_RELATIONS: dict[tuple[RoleKind, RelationKind], frozenset[RoleKind]] = {
    (RoleKind.ACTOR, RelationKind.RELATED): frozenset({RoleKind.BOUNDARY}),
    (RoleKind.BOUNDARY, RelationKind.RELATED): frozenset({RoleKind.BOUNDARY}),
    (RoleKind.BOUNDARY, RelationKind.CONDITIONAL): frozenset({RoleKind.CONTROLLER, RoleKind.USECASE}),
    (RoleKind.CONTROLLER, RelationKind.RELATED): frozenset({RoleKind.ENTITY}),
    (RoleKind.CONTROLLER, RelationKind.SEQUENTIAL): frozenset(
        {RoleKind.BOUNDARY, RoleKind.CONTROLLER, RoleKind.USECASE}
    ),
    (RoleKind.CONTROLLER, RelationKind.CONDITIONAL): frozenset({RoleKind.CONTROLLER, RoleKind.USECASE}),
    (RoleKind.USECASE, RelationKind.CONDITIONAL): frozenset({RoleKind.CONTROLLER, RoleKind.USECASE}),
}


@dataclass(frozen=True)
class ValidationWarning:
    """A questionable construct that does not make the diagram invalid.

    Attributes:
        path: Node ids from the scenario root to the offending element.
        message: Human-readable description of the warning.
    """

    path: str
    message: str


@dataclass(frozen=True)
class ValidationError:
    """A structural violation recorded on a role or relation.

    Attributes:
        path: Node ids from the scenario root to the offending element.
        message: The ``violating`` text of the element.
    """

    path: str
    message: str


@dataclass
class ValidationResult:
    """All violations and warnings of one compiled diagram, in walk order."""

    warnings: list[ValidationWarning] = field(default_factory=list)
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Return True if any structural violation was found."""
        return len(self.errors) > 0


def is_valid_relation(source: RoleKind, relation: RelationKind, target: RoleKind) -> bool:
    """Return True if *source* may reach *target* through a *relation* edge."""
    return target in VALID_RELATIONS.get((source, relation), frozenset())


def check_relation(source: RoleKind, relation: RelationKind, target: RoleKind) -> str | None:
    """Return the violation message for an edge, or None if the edge is valid.

    Every invalid edge of one relation kind gets the same message, naming
    the kinds that relation can reach from any source.
    """
    if is_valid_relation(source, relation, target):
        return None
    return relation_message(relation)


def relation_message(relation: RelationKind) -> str:
    """Return the violation message shared by all invalid *relation* edges."""
    return f'"{relation.display_name}" can only be connected to {_join_kinds(_targets_of(relation))}.'


def check_scenario_entry(kind: RoleKind) -> str | None:
    """Return the violation message if *kind* may not open the basic course."""
    if kind != RoleKind.ACTOR:
        return SCENARIO_ENTRY_MESSAGE
    return None


def undefined_alias_message(name: str) -> str:
    """Return the violation message for a ``$alias`` that names no known role."""
    return f'Alias "{name}" is not defined.'


def validate(result: ParseResult) -> ValidationResult:
    """Collect the violations recorded on a compiled diagram.

    Every role or relation carrying a ``violating`` message becomes one
    :class:`ValidationError`. Aliases declared on roles that cannot be
    re-entered (anything but Controller and Usecase) produce a
    :class:`ValidationWarning`, as do re-declarations of an alias with a
    different kind than the role it refers to.

    Args:
        result: The compiled diagram.

    Returns:
        A :class:`ValidationResult`; ``has_errors`` agrees with
        ``result.has_error`` for graphs produced by the builder.
    """
    report = ValidationResult()
    root = result.scenario
    _check_role(report, root.node_id, root.kind, root.alias, root.violating)
    # A back-reference can be walked before the role it names.
    aliased = _aliased_roles(result)
    for trail, _source, relation in result.walk():
        path = " > ".join((*trail, relation.target_name))
        if relation.violating is not None:
            report.errors.append(ValidationError(path=path, message=relation.violating))
        target = relation.target
        if isinstance(target, Role):
            _check_role(report, path, target.kind, target.alias, target.violating)
        elif target.declared_kind is not None:
            _check_redeclaration(report, path, target.name, target.declared_kind, aliased.get(target.name))
    return report


# ################
# Implementation
# ################


def _targets_of(relation: RelationKind) -> frozenset[RoleKind]:
    """Return every target kind that is valid for *relation* from some source."""
    targets: set[RoleKind] = set()
    for (_, kind), allowed in VALID_RELATIONS.items():
        if kind == relation:
            targets |= allowed
    return frozenset(targets)


def _join_kinds(kinds: frozenset[RoleKind]) -> str:
    """Join kinds in declaration order: 'A', 'A or B', 'A, B or C'."""
    names = [kind.display_name for kind in RoleKind if kind in kinds]
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " or " + names[-1]


def _aliased_roles(result: ParseResult) -> dict[str, Role]:
    """Map every re-enterable alias in the graph to its expanded role."""
    roles = [result.scenario]
    roles.extend(rel.target for _t, _s, rel in result.walk() if isinstance(rel.target, Role))
    return {role.alias: role for role in reversed(roles) if role.alias is not None and role.kind in ALIASABLE_KINDS}


def _check_redeclaration(
    report: ValidationResult,
    path: str,
    alias: str,
    declared: RoleKind,
    role: Role | None,
) -> None:
    if role is None or role.kind == declared:
        return
    report.warnings.append(
        ValidationWarning(
            path=path,
            message=(
                f"Alias '{alias}' re-declared as {declared.display_name};"
                f" it refers to the {role.kind.display_name} '{role.label}'."
            ),
        )
    )


def _check_role(
    report: ValidationResult,
    path: str,
    kind: RoleKind,
    alias: str | None,
    violating: str | None,
) -> None:
    if violating is not None:
        report.errors.append(ValidationError(path=path, message=violating))
    if alias is not None and kind not in ALIASABLE_KINDS:
        report.warnings.append(
            ValidationWarning(
                path=path,
                message=(
                    f"Alias '{alias}' on {kind.display_name} is ignored;"
                    " only Controller and Usecase can be re-entered."
                ),
            )
        )
