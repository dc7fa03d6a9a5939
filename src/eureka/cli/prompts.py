"""
Terminal prompts for the eureka CLI.

Implements the core Prompts protocol on top of a rich Console.
"""

from typing import Sequence

from rich.console import Console

from eureka.core.config.models import EditorChoice

BANNER_WIDTH = 58


class ConsolePrompts:
    """Asks eureka's questions on the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def first_run_banner(self) -> None:
        rule = "#" * BANNER_WIDTH
        self.console.print()
        self.console.print(rule, highlight=False)
        self.console.print(f"####{'First Time Setup':^{BANNER_WIDTH - 8}}####", highlight=False)
        self.console.print(rule, highlight=False)
        self.console.print()
        self.console.print("This tool requires you to have a repository with a README.md")
        self.console.print("in the root folder. The markdown file is where your ideas will")
        self.console.print("be stored.")
        self.console.print()

    def ask_repo_path(self) -> str:
        return self.console.input("Absolute path to your idea repo: ")

    def ask_editor_choice(self, choices: Sequence[EditorChoice]) -> str:
        self.console.print("What editor do you want to use for writing down your ideas?")
        for number, choice in enumerate(choices, start=1):
            self.console.print(f"{number}) {choice.label} ({choice.command})", highlight=False)
        self.console.print(f"{len(choices) + 1}) Other (provide path to binary)")
        self.console.print()
        return self.console.input("Alternative: ")

    def ask_editor_path(self) -> str:
        return self.console.input("Path to editor binary: ")

    def ask_commit_message(self) -> str:
        return self.console.input("Idea commit subject: ")

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]Warning:[/yellow] {message}")
