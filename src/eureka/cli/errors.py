"""
Standardized error handling and exit codes for the eureka CLI.

This module provides consistent error messaging with actionable guidance
and standardized exit codes.
"""

from enum import IntEnum

from rich.console import Console
from rich.markup import escape

from eureka.core.config.store import ConfigIOError
from eureka.core.editor.launcher import EditorLaunchError
from eureka.core.editor.models import EditorSource
from eureka.core.editor.resolver import EditorNotFoundError, InvalidEditorPathError
from eureka.core.git.persister import GitPersistError

console = Console()


class ExitCode(IntEnum):
    """Standard exit codes for eureka."""

    SUCCESS = 0
    """Idea captured (even if it could not be pushed)."""

    GENERAL_ERROR = 1
    """Generic error, including editor launch failures."""

    USER_ERROR = 2
    """User configuration error (actionable by user)."""

    SIGINT = 130
    """Terminated by SIGINT (Ctrl+C) - Unix standard."""


def print_error(
    problem: str,
    *,
    reason: str | None = None,
    solution: str | None = None,
) -> None:
    """
    Print a standardized error message with actionable guidance.

    Args:
        problem: Brief description of what went wrong
        reason: Optional explanation of why it happened
        solution: Optional command or action to fix it

    Example:
        >>> print_error(
        ...     "Invalid editor path",
        ...     reason="/usr/bin/vi does not exist",
        ...     solution="eureka --clear-editor",
        ... )
    """
    console.print(f"[red]Error:[/red] {escape(problem)}")

    if reason:
        console.print(f"[dim]{escape(reason)}[/dim]")

    if solution:
        console.print(f"[cyan]→ Try:[/cyan] {solution}")


def print_config_io_error(error: ConfigIOError) -> None:
    """Print error when stored configuration can't be written."""
    print_error(
        "Unable to save your eureka configuration",
        reason=str(error),
        solution=f"Check the permissions of {error.path}",
    )


def print_editor_not_found_error(error: EditorNotFoundError) -> None:
    """Print error when no editor could be resolved."""
    if isinstance(error, InvalidEditorPathError):
        print_error(
            "Invalid editor path",
            reason=f"{error.command!r} is not a file",
            solution="eureka  # and pick vim, nano, or the full path to your editor",
        )
        return

    if error.source is EditorSource.ENVIRONMENT:
        solution = "export EDITOR=<editor on your PATH>  # or unset EDITOR"
    else:
        solution = "eureka --clear-editor  # to choose a different editor"

    print_error(
        f"Editor not found: {error.command}",
        reason="No matching executable in any PATH directory",
        solution=solution,
    )


def print_editor_launch_error(error: EditorLaunchError) -> None:
    """Print error when the editor can't be started."""
    print_error(
        f"Could not open editor at path {error.binary_path}",
        reason=str(error.error),
        solution="eureka --clear-editor  # to choose a different editor",
    )


def print_persist_warning(error: GitPersistError) -> None:
    """Warn that the idea was saved locally but not pushed."""
    console.print(f"[yellow]Warning:[/yellow] {escape(str(error))}")
    console.print(
        f"[dim]Your idea is saved in {escape(str(error.repo.path))}; "
        f"finish the {error.stage.value} step with git by hand.[/dim]"
    )


__all__ = [
    "ExitCode",
    "print_config_io_error",
    "print_editor_launch_error",
    "print_editor_not_found_error",
    "print_error",
    "print_persist_warning",
]
