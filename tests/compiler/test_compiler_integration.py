# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""End-to-end tests: diagram text through both compiler phases."""

from __future__ import annotations

import itertools

import pytest

from robustive.compiler import ParseError, compile_source
from robustive.model import AliasRef, ParseResult, Relation, RelationKind, Role, RoleKind

# ###############
# Compatibility matrix
# ###############

VALID_TRIPLES = {
    (RoleKind.ACTOR, RelationKind.RELATED, RoleKind.BOUNDARY),
    (RoleKind.BOUNDARY, RelationKind.RELATED, RoleKind.BOUNDARY),
    (RoleKind.BOUNDARY, RelationKind.CONDITIONAL, RoleKind.CONTROLLER),
    (RoleKind.BOUNDARY, RelationKind.CONDITIONAL, RoleKind.USECASE),
    (RoleKind.CONTROLLER, RelationKind.RELATED, RoleKind.ENTITY),
    (RoleKind.CONTROLLER, RelationKind.SEQUENTIAL, RoleKind.BOUNDARY),
    (RoleKind.CONTROLLER, RelationKind.SEQUENTIAL, RoleKind.CONTROLLER),
    (RoleKind.CONTROLLER, RelationKind.SEQUENTIAL, RoleKind.USECASE),
    (RoleKind.CONTROLLER, RelationKind.CONDITIONAL, RoleKind.CONTROLLER),
    (RoleKind.CONTROLLER, RelationKind.CONDITIONAL, RoleKind.USECASE),
    (RoleKind.USECASE, RelationKind.CONDITIONAL, RoleKind.CONTROLLER),
    (RoleKind.USECASE, RelationKind.CONDITIONAL, RoleKind.USECASE),
}

ALL_TRIPLES = list(itertools.product(RoleKind, RelationKind, RoleKind))

# A valid course that ends in a role of the given kind named "Src".
_PREFIX = {
    RoleKind.ACTOR: "A[Src]",
    RoleKind.BOUNDARY: "A[User] --- B[Src]",
    RoleKind.CONTROLLER: "A[User] --- B[Form] -->[go] C[Src]",
    RoleKind.USECASE: "A[User] --- B[Form] -->[go] U[Src]",
    RoleKind.ENTITY: "E[Src]",
}

_ARROW = {
    RelationKind.RELATED: "---",
    RelationKind.SEQUENTIAL: "-->",
    RelationKind.CONDITIONAL: "-->[when]",
}

_KIND_LETTER = {
    RoleKind.ACTOR: "A",
    RoleKind.BOUNDARY: "B",
    RoleKind.CONTROLLER: "C",
    RoleKind.ENTITY: "E",
    RoleKind.USECASE: "U",
}


def _two_node(source: RoleKind, relation: RelationKind, target: RoleKind) -> ParseResult:
    text = f"robustive\n{_PREFIX[source]} {_ARROW[relation]} {_KIND_LETTER[target]}[Tgt]"
    return compile_source(text)


def _last_relation(result: ParseResult) -> Relation:
    relations = [relation for _trail, _source, relation in result.walk()]
    return relations[-1]


def _triple_id(triple: tuple[RoleKind, RelationKind, RoleKind]) -> str:
    source, relation, target = triple
    return f"{source.display_name}-{relation.display_name}-{target.display_name}"


def test_matrix_covers_every_combination() -> None:
    assert len(ALL_TRIPLES) == 75
    assert len(VALID_TRIPLES) == 12


@pytest.mark.parametrize("triple", ALL_TRIPLES, ids=_triple_id)
def test_compatibility_matrix(triple: tuple[RoleKind, RelationKind, RoleKind]) -> None:
    source, relation, target = triple
    result = _two_node(source, relation, target)
    edge = _last_relation(result)
    assert edge.kind == relation
    assert edge.target_name == "Tgt"
    if triple in VALID_TRIPLES:
        assert edge.violating is None
        assert result.has_error is (source == RoleKind.ENTITY)
    else:
        assert edge.violating
        assert result.has_error is True


INVALID_TRIPLES = [triple for triple in ALL_TRIPLES if triple not in VALID_TRIPLES]

_MESSAGES = {
    RelationKind.RELATED: '"Related" can only be connected to Boundary or Entity.',
    RelationKind.SEQUENTIAL: '"Sequential" can only be connected to Boundary, Controller or Usecase.',
    RelationKind.CONDITIONAL: '"Conditional" can only be connected to Controller or Usecase.',
}


@pytest.mark.parametrize("triple", INVALID_TRIPLES, ids=_triple_id)
def test_violation_message_depends_only_on_relation(triple: tuple[RoleKind, RelationKind, RoleKind]) -> None:
    _source, relation, _target = triple
    assert _last_relation(_two_node(*triple)).violating == _MESSAGES[relation]


def test_every_relation_kind_has_invalid_edges() -> None:
    assert {relation for _s, relation, _t in INVALID_TRIPLES} == set(RelationKind)
    assert len(INVALID_TRIPLES) == 63


# ###############
# Documented scenarios
# ###############


def test_minimal_scenario_shape() -> None:
    result = compile_source("robustive\n    Actor[User] --- Boundary[SignIn]")
    assert result.scenario == Role(
        kind=RoleKind.ACTOR,
        label="User",
        relations=[
            Relation(
                kind=RelationKind.RELATED,
                target=Role(kind=RoleKind.BOUNDARY, label="SignIn"),
            )
        ],
    )
    assert result.alternatives == []
    assert result.has_error is False


def test_non_actor_opener() -> None:
    result = compile_source("robustive\n    Boundary[SignIn] -->[cond] Controller[Check](check)")
    assert result.scenario.violating == "Only Actor comes first in the basic course."
    assert result.has_error is True


def test_unknown_leading_keyword() -> None:
    with pytest.raises(ParseError):
        compile_source("stateDiagram\n    A[User] --- B[iPhone's home]")


def test_comma_separated_related_targets() -> None:
    result = compile_source("robustive\nA[User] --- B[Home] -->[open] C[Load](load) --- E[UserInfo], E[Version], E[Flags]")
    load = [rel.target for _t, _s, rel in result.walk() if rel.target_name == "load"][0]
    assert isinstance(load, Role)
    assert [rel.target_name for rel in load.relations] == ["UserInfo", "Version", "Flags"]
    assert all(rel.kind == RelationKind.RELATED for rel in load.relations)
    assert len({id(rel.target) for rel in load.relations}) == 3


def test_sign_in_scenario_with_alternate_courses() -> None:
    source = """\
robustive
Actor[User] --- Boundary[SignIn]
    -->[touch button] Controller[App checks if the user has a session](checkSession)
        -->[has session] Controller[Show home](showHome)
            --> Boundary[Home]
                -->[open profile] Usecase[Show profile](showProfile)
$checkSession -->[no session] Controller[Show sign up](showSignUp)
    --> Boundary[SignUp]
        -->[submit] Controller[Create account](createAccount)
            --- Entity[Account]
            -->[created] Usecase[Show profile](showProfile)
$createAccount -->[failed] $showSignUp
"""
    result = compile_source(source)
    assert result.has_error is False
    assert result.alternatives == []

    ids = [rel.target_name for _t, _s, rel in result.walk()]
    assert ids == [
        "SignIn",
        "checkSession",
        "showHome",
        "Home",
        "showProfile",
        "showSignUp",
        "SignUp",
        "createAccount",
        "Account",
        "showProfile",
        "showSignUp",
    ]

    create = [rel.target for _t, _s, rel in result.walk() if rel.target_name == "createAccount"][0]
    assert isinstance(create, Role)
    assert [rel.target for rel in create.relations[1:]] == [
        AliasRef(name="showProfile", declared_kind=RoleKind.USECASE),
        AliasRef(name="showSignUp"),
    ]
