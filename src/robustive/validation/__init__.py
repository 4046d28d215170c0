# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Structural validity rules and violation reports for robustness diagrams."""

from robustive.validation.checks import (
    SCENARIO_ENTRY_MESSAGE,
    VALID_RELATIONS,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    check_relation,
    check_scenario_entry,
    is_valid_relation,
    relation_message,
    undefined_alias_message,
    validate,
)

__all__ = [
    "SCENARIO_ENTRY_MESSAGE",
    "VALID_RELATIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "check_relation",
    "check_scenario_entry",
    "is_valid_relation",
    "relation_message",
    "undefined_alias_message",
    "validate",
]
