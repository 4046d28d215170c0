# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for robustive."""
