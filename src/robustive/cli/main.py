# Copyright 2026 Robustive Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the robustive command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError
from yachalk import chalk

from robustive.compiler.build import compile_file
from robustive.compiler.errors import RobustiveError
from robustive.validation.checks import validate
from robustive.views.graph import GraphData, build_graph_data
from robustive.workspace.config import (
    WORKSPACE_FILE_NAME,
    WorkspaceConfig,
    WorkspaceConfigError,
    default_workspace_yaml,
    load_workspace_config,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the robustive CLI."""
    parser = argparse.ArgumentParser(
        prog="robustive",
        description="robustive - robustness diagram compiler",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # init subcommand
    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new robustive workspace",
        description=f"Create a default {WORKSPACE_FILE_NAME} in a directory.",
    )
    init_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to initialize the workspace in (default: current directory)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check every diagram of a workspace",
        description="Compile all diagram files and report syntax errors and rule violations.",
    )
    check_parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory containing the robustive workspace (default: current directory)",
    )

    # show subcommand
    show_parser = subparsers.add_parser(
        "show",
        help="Print the compiled scene graph of one diagram",
        description="Compile one diagram file and print the result as JSON.",
    )
    show_parser.add_argument("file", help="Diagram file to compile")
    show_parser.add_argument(
        "--graph",
        action="store_true",
        help="Print the flat node/edge view instead of the scene graph tree",
    )

    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "init":
        return _cmd_init(args)
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "show":
        return _cmd_show(args)
    return 0


def _cmd_init(args: argparse.Namespace) -> int:
    """Handle the init subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    workspace_file = directory / WORKSPACE_FILE_NAME

    if workspace_file.exists():
        print(
            f"Error: workspace already exists at '{workspace_file}'.",
            file=sys.stderr,
        )
        return 1

    workspace_file.write_text(default_workspace_yaml(), encoding="utf-8")
    print(f"Initialized robustive workspace at '{workspace_file}'.")
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    directory = Path(args.directory).resolve()

    if not directory.exists():
        print(f"Error: directory '{directory}' does not exist.", file=sys.stderr)
        return 1

    workspace_file = directory / WORKSPACE_FILE_NAME
    if workspace_file.exists():
        try:
            config = load_workspace_config(workspace_file)
        except WorkspaceConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
    else:
        logger.debug("No %s in %s; using defaults", WORKSPACE_FILE_NAME, directory)
        config = WorkspaceConfig()

    files = config.diagram_files(directory)
    if not files:
        print(f"No {config.file_extension} files found in the workspace.")
        return 0

    print(f"Checking {len(files)} diagram file(s)...")
    syntax_errors = 0
    violations = 0
    for path in files:
        label = _display_path(path, directory)
        try:
            result = compile_file(path)
        except (OSError, RobustiveError) as exc:
            print(f"{chalk.red('Error')}: {label}: {exc}", file=sys.stderr)
            syntax_errors += 1
            continue

        report = validate(result)
        for warning in report.warnings:
            print(f"{chalk.yellow('Warning')}: {label}: {warning.path}: {warning.message}")
        for error in report.errors:
            print(f"{chalk.red('Violation')}: {label}: {error.path}: {error.message}", file=sys.stderr)
        violations += len(report.errors)

    if syntax_errors or violations:
        print(f"Found {syntax_errors} file(s) with syntax errors and {violations} violation(s).")
        failed = syntax_errors > 0 or config.fail_on_violation
        return 1 if failed else 0

    print(chalk.green("No issues found."))
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """Handle the show subcommand."""
    path = Path(args.file)
    try:
        result = compile_file(path)
    except (OSError, RobustiveError) as exc:
        print(f"Error: {path}: {exc}", file=sys.stderr)
        return 1

    if args.graph:
        print(_GRAPH_ADAPTER.dump_json(build_graph_data(result), indent=2).decode("utf-8"))
    else:
        try:
            text = result.model_dump_json(indent=2)
        except PydanticSerializationError as exc:
            # The nested tree hits the serializer's depth limit on long chains.
            logger.debug("Serializing %s failed: %s", path, exc)
            print(
                f"Error: {path}: scene graph is nested too deeply to print; use 'show --graph' instead.",
                file=sys.stderr,
            )
            return 1
        print(text)
    return 1 if result.has_error else 0


_GRAPH_ADAPTER: TypeAdapter[GraphData] = TypeAdapter(GraphData)


def _display_path(path: Path, root: Path) -> str:
    """Return *path* relative to *root* when possible."""
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)
