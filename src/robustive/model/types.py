# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Role and relation kinds of the robustness diagram model."""

from enum import Enum

# ###############
# Public Interface
# ###############


class RoleKind(Enum):
    """The five role stereotypes of a robustness diagram."""

    ACTOR = "actor"
    BOUNDARY = "boundary"
    CONTROLLER = "controller"
    ENTITY = "entity"
    USECASE = "usecase"

    @property
    def display_name(self) -> str:
        """Return the capitalized name used in diagram source and messages."""
        return self.value.capitalize()


class RelationKind(Enum):
    """The three kinds of edges between roles."""

    RELATED = "related"
    SEQUENTIAL = "sequential"
    CONDITIONAL = "conditional"

    @property
    def display_name(self) -> str:
        """Return the capitalized name used in violation messages."""
        return self.value.capitalize()


# Role kinds that may declare an alias and be re-entered through ``$alias``.
ALIASABLE_KINDS: frozenset[RoleKind] = frozenset({RoleKind.CONTROLLER, RoleKind.USECASE})
