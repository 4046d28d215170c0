# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Scene graph model for robustness diagrams (roles, relations, results)."""

from robustive.model.entities import AliasRef, ParseResult, Relation, Role
from robustive.model.types import ALIASABLE_KINDS, RelationKind, RoleKind

__all__ = [
    # Kinds
    "RoleKind",
    "RelationKind",
    "ALIASABLE_KINDS",
    # Entities
    "AliasRef",
    "Role",
    "Relation",
    "ParseResult",
]
