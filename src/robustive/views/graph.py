# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Flat node/edge view of a compiled diagram for rendering collaborators.

The scene graph is a tree with alias back-references. Renderers usually
want a plain graph instead: one node per role identity and one edge per
relation. The view computes no layout.

- Node ids are the role alias, or the label when no alias is declared.
- The first role seen with a given id wins.
- Back-references become edges to the referenced node id.
- Head relations of unresolved alternatives have no source node.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from robustive.model.entities import ParseResult, Role
from robustive.model.types import RelationKind, RoleKind

# ###############
# Public Interface
# ###############


@dataclass
class NodeData:
    """One role identity in the graph.

    Attributes:
        id: Alias of the role, or its label.
        kind: Role kind; decides the shape a renderer draws.
        label: Text shown inside the shape.
        violating: Violation attached to the role, if any.
    """

    id: str
    kind: RoleKind
    label: str
    violating: str | None = None


@dataclass
class EdgeData:
    """One relation in the graph.

    Attributes:
        source: Id of the source node; None for an unresolved alternative head.
        target: Id of the target node.
        kind: Relation kind; decides the arrow style.
        condition: Label of a conditional edge.
        violating: Violation attached to the relation, if any.
    """

    source: str | None
    target: str
    kind: RelationKind
    condition: str | None = None
    violating: str | None = None


@dataclass
class GraphData:
    """Nodes and edges of a compiled diagram in narrative order."""

    nodes: list[NodeData] = field(default_factory=list)
    edges: list[EdgeData] = field(default_factory=list)

    def node(self, node_id: str) -> NodeData | None:
        """Return the node with *node_id*, or None."""
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    @property
    def dangling_targets(self) -> list[str]:
        """Return edge targets that name no node (unresolved ``$alias`` references)."""
        known = {node.id for node in self.nodes}
        return [edge.target for edge in self.edges if edge.target not in known]


def build_graph_data(result: ParseResult) -> GraphData:
    """Flatten a compiled diagram into a :class:`GraphData` description.

    Args:
        result: The compiled diagram.

    Returns:
        Nodes in first-seen order and edges in walk order.
    """
    data = GraphData()
    seen: set[str] = set()
    _add_node(data, seen, result.scenario)
    for _trail, source, relation in result.walk():
        if isinstance(relation.target, Role):
            _add_node(data, seen, relation.target)
        data.edges.append(
            EdgeData(
                source=source.node_id if source is not None else None,
                target=relation.target_name,
                kind=relation.kind,
                condition=relation.condition,
                violating=relation.violating,
            )
        )
    return data


# ################
# Implementation
# ################


def _add_node(data: GraphData, seen: set[str], role: Role) -> None:
    if role.node_id in seen:
        return
    seen.add(role.node_id)
    data.nodes.append(
        NodeData(
            id=role.node_id,
            kind=role.kind,
            label=role.label,
            violating=role.violating,
        )
    )
