"""
Eureka CLI - Main application entry point.

This module sets up the Typer CLI application. Eureka has a single
command: running `eureka` captures one idea.
"""

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from eureka import __version__
from eureka.cli.errors import (
    ExitCode,
    print_config_io_error,
    print_editor_launch_error,
    print_editor_not_found_error,
    print_error,
    print_persist_warning,
)
from eureka.cli.prompts import ConsolePrompts
from eureka.core.config.env import load_user_env
from eureka.core.config.store import ConfigIOError, ConfigKey
from eureka.core.editor.launcher import EditorLaunchError
from eureka.core.editor.resolver import EditorNotFoundError
from eureka.core.services.capture import IdeaCaptureService

app = typer.Typer(
    name="eureka",
    help="Input and store your ideas without leaving the terminal",
    add_completion=False,
    context_settings={"help_option_names": ["--help", "-h"]},
)

console = Console()

GIT_LOGGER = "eureka.core.git"


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging for eureka.

    Args:
        debug: If True, enable DEBUG level logging
    """
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    # Git stage failures already reach the user through print_persist_warning
    git_level = logging.NOTSET if debug else logging.ERROR
    logging.getLogger(GIT_LOGGER).setLevel(git_level)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"eureka version {__version__}")
        raise typer.Exit(ExitCode.SUCCESS)


@app.command()
def main(
    clear_repo: bool = typer.Option(
        False,
        "--clear-repo",
        help="Clear the stored path to your idea repo",
    ),
    clear_editor: bool = typer.Option(
        False,
        "--clear-editor",
        help="Clear the stored path to your idea editor",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug output with detailed logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show eureka version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Capture an idea.

    Opens README.md in your idea repo with your editor, then commits the
    change with the subject you typed and pushes it to origin/master.

    On first run eureka asks for the repo path and an editor. $EDITOR,
    when set, always wins over the stored editor.

    Examples:
        eureka                   # Capture an idea
        eureka --clear-editor    # Pick a different editor
        eureka --clear-repo      # Point eureka at another repo
    """
    setup_logging(debug)
    # Precedence: OS env > ~/.config/eureka/.env
    load_user_env()

    service = IdeaCaptureService.from_config(ConsolePrompts(console))

    try:
        if clear_repo:
            service.clear(ConfigKey.REPO_PATH)
        if clear_editor:
            service.clear(ConfigKey.EDITOR_PATH)

        outcome = service.run()
    except KeyboardInterrupt:
        console.print()
        raise typer.Exit(ExitCode.SIGINT)
    except EOFError:
        console.print()
        print_error("No input received", reason="Eureka needs an interactive terminal")
        raise typer.Exit(ExitCode.GENERAL_ERROR)
    except ConfigIOError as e:
        print_config_io_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)
    except EditorNotFoundError as e:
        print_editor_not_found_error(e)
        raise typer.Exit(ExitCode.USER_ERROR)
    except EditorLaunchError as e:
        print_editor_launch_error(e)
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    # Git failures don't change the exit code: the idea is on disk already.
    if not outcome.persisted and outcome.persist.error is not None:
        print_persist_warning(outcome.persist.error)
        return

    config = service.config
    console.print(
        f"[green]✓[/green] Idea pushed to {config.remote}/{config.branch} "
        f"from {escape(str(outcome.repo.path))}"
    )


def cli_main() -> None:
    """Main CLI entry point."""
    app()


__all__ = ["app", "cli_main", "setup_logging"]
