# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Workspace configuration for robustive."""

from robustive.workspace.config import (
    DEFAULT_FILE_EXTENSION,
    WORKSPACE_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    default_workspace_yaml,
    load_workspace_config,
    parse_workspace_config,
)

__all__ = [
    "DEFAULT_FILE_EXTENSION",
    "WORKSPACE_FILE_NAME",
    "WorkspaceConfig",
    "WorkspaceConfigError",
    "default_workspace_yaml",
    "load_workspace_config",
    "parse_workspace_config",
]
