# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the robustive workspace configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

WORKSPACE_FILE_NAME = ".robustive-workspace.yaml"
DEFAULT_FILE_EXTENSION = ".robustive"


class WorkspaceConfigError(Exception):
    """Raised when a workspace configuration file is invalid or cannot be loaded."""


@dataclass
class WorkspaceConfig:
    """The parsed configuration for a robustive workspace.

    Attributes:
        diagram_paths: Directories, relative to the workspace root, scanned for diagrams.
        file_extension: Suffix of diagram files (including the dot).
        fail_on_violation: Whether structural violations fail ``robustive check``.
    """

    diagram_paths: list[str] = field(default_factory=lambda: ["."])
    file_extension: str = DEFAULT_FILE_EXTENSION
    fail_on_violation: bool = True

    def diagram_files(self, root: Path) -> list[Path]:
        """Return every diagram file under the configured paths, sorted and de-duplicated."""
        found: set[Path] = set()
        for rel in self.diagram_paths:
            base = (root / rel).resolve()
            if base.is_dir():
                found.update(p for p in base.rglob(f"*{self.file_extension}") if p.is_file())
        return sorted(found)


def load_workspace_config(path: Path) -> WorkspaceConfig:
    """Load and parse a robustive workspace configuration file.

    Args:
        path: Path to the `.robustive-workspace.yaml` file.

    Returns:
        A WorkspaceConfig instance populated from the file.

    Raises:
        WorkspaceConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise WorkspaceConfigError(f"Workspace config file not found: {path}") from None
    except OSError as exc:
        raise WorkspaceConfigError(f"Cannot read workspace config file: {exc}") from exc

    return parse_workspace_config(text, source_label=str(path))


def parse_workspace_config(text: str, source_label: str = "<string>") -> WorkspaceConfig:
    """Parse workspace config YAML text into a WorkspaceConfig.

    An empty document yields the defaults.

    Args:
        text: Raw YAML content.
        source_label: Human-readable label used in error messages (e.g. the file path).

    Raises:
        WorkspaceConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise WorkspaceConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return WorkspaceConfig()
    if not isinstance(data, dict):
        raise WorkspaceConfigError(f"{source_label}: workspace config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise WorkspaceConfigError(f"{source_label}: unknown field(s): {', '.join(map(str, unknown))}")

    config = WorkspaceConfig()
    if "diagram-paths" in data:
        config.diagram_paths = _require_string_list(data, "diagram-paths", source_label)
    if "file-extension" in data:
        extension = _require_string(data, "file-extension", source_label)
        if not extension.startswith(".") or len(extension) < 2:
            raise WorkspaceConfigError(f"{source_label}: 'file-extension' must start with '.', got '{extension}'")
        config.file_extension = extension
    if "fail-on-violation" in data:
        value = data["fail-on-violation"]
        if not isinstance(value, bool):
            raise WorkspaceConfigError(f"{source_label}: 'fail-on-violation' must be a boolean")
        config.fail_on_violation = value
    return config


def default_workspace_yaml() -> str:
    """Return the content written by ``robustive init``."""
    return (
        "# Robustive workspace configuration\n"
        "# This file marks the root of a robustive workspace.\n"
        "\n"
        "diagram-paths:\n"
        "  - .\n"
        f"file-extension: {DEFAULT_FILE_EXTENSION}\n"
        "fail-on-violation: true\n"
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"diagram-paths", "file-extension", "fail-on-violation"})


def _require_string(mapping: dict[str, object], key: str, source_label: str) -> str:
    """Extract a string field from a mapping, raising WorkspaceConfigError on a wrong type."""
    value = mapping[key]
    if not isinstance(value, str):
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a string")
    return value


def _require_string_list(mapping: dict[str, object], key: str, source_label: str) -> list[str]:
    """Extract a non-empty list of strings, raising WorkspaceConfigError otherwise."""
    value = mapping[key]
    if not isinstance(value, list) or not value:
        raise WorkspaceConfigError(f"{source_label}: '{key}' must be a non-empty list")
    for index, entry in enumerate(value):
        if not isinstance(entry, str):
            raise WorkspaceConfigError(f"{source_label}: {key}[{index}] must be a string")
    return list(value)
