"""
Interactive questions the capture pipeline asks.

The core only depends on this protocol. The CLI supplies a rich-console
implementation; tests supply scripted answers.
"""

from __future__ import annotations

from typing import Protocol, Sequence

from eureka.core.config.models import EditorChoice


class Prompts(Protocol):
    """Terminal interaction used by first-run setup and every capture."""

    def first_run_banner(self) -> None:
        """Explain what eureka needs before asking for the repo path."""

    def ask_repo_path(self) -> str:
        """Absolute path to the idea repo. Blank answers are asked again."""

    def ask_editor_choice(self, choices: Sequence[EditorChoice]) -> str:
        """Raw menu answer. Numbering starts at 1; the last number is 'Other'."""

    def ask_editor_path(self) -> str:
        """Path to a custom editor binary."""

    def ask_commit_message(self) -> str:
        """One-line commit subject, returned untouched."""

    def warn(self, message: str) -> None:
        """Show a non-fatal warning."""
