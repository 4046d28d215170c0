# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the host-facing diagram definition."""

import asyncio

import pytest

from robustive.compiler.errors import ParseError
from robustive.diagram import DIAGRAM_TYPE, RobustiveDiagram
from robustive.model import ParseResult, Relation, RelationKind, Role, RoleKind

# ###############
# Helpers
# ###############


def _parse(diagram: RobustiveDiagram, text: str) -> ParseResult:
    return asyncio.run(diagram.parse(text))


# ###############
# Host Contract
# ###############


def test_diagram_type_name() -> None:
    assert DIAGRAM_TYPE == "robustive"


def test_clear_then_parse_minimal_scenario() -> None:
    diagram = RobustiveDiagram()
    diagram.clear()
    result = _parse(diagram, "robustive\n    Actor[User] --- Boundary[SignIn]")
    assert result == ParseResult(
        scenario=Role(
            kind=RoleKind.ACTOR,
            label="User",
            relations=[Relation(kind=RelationKind.RELATED, target=Role(kind=RoleKind.BOUNDARY, label="SignIn"))],
        ),
    )


def test_syntax_error_raises() -> None:
    diagram = RobustiveDiagram()
    with pytest.raises(ParseError):
        _parse(diagram, "stateDiagram\n    A[User] --- B[iPhone's home]")


def test_error_flag_carries_over_until_clear() -> None:
    diagram = RobustiveDiagram()
    assert _parse(diagram, "robustive\nB[Home]").has_error is True
    assert diagram.context.has_error is True
    assert _parse(diagram, "robustive\nA[User] --- B[SignIn]").has_error is True
    diagram.clear()
    assert _parse(diagram, "robustive\nA[User] --- B[SignIn]").has_error is False


def test_aliases_carry_over_until_clear() -> None:
    diagram = RobustiveDiagram()
    _parse(diagram, "robustive\nA[User] --- B[SignIn] -->[touch] C[Check](check)")
    follow_up = "robustive\nA[User] --- B[SignIn]\n$check -->[x] C[Other](other)"
    assert _parse(diagram, follow_up).alternatives == []
    diagram.clear()
    assert diagram.context.lookup("check") is None
    assert len(_parse(diagram, follow_up).alternatives) == 1


def test_separate_instances_are_independent() -> None:
    first = RobustiveDiagram()
    second = RobustiveDiagram()
    _parse(first, "robustive\nB[Home]")
    assert _parse(second, "robustive\nA[User] --- B[SignIn]").has_error is False
