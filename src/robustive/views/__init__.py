# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Read-only views over compiled diagrams."""

from robustive.views.graph import EdgeData, GraphData, NodeData, build_graph_data

__all__ = [
    "EdgeData",
    "GraphData",
    "NodeData",
    "build_graph_data",
]
