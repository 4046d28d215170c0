# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Host plugin boundary for the robustive diagram type."""

from robustive.diagram.definition import DIAGRAM_TYPE, RobustiveDiagram

__all__ = [
    "DIAGRAM_TYPE",
    "RobustiveDiagram",
]
