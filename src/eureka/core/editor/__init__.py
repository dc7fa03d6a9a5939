"""
Editor resolution and launching.

Modules:
    resolver: $EDITOR / stored / first-run menu resolution, PATH lookup
    launcher: foreground editor launch on the idea file
    models: Data models (ResolvedEditor, EditorSource)
"""

from eureka.core.editor.launcher import EditorLaunchError, launch_editor
from eureka.core.editor.models import EditorSource, ResolvedEditor
from eureka.core.editor.resolver import (
    EditorNotFoundError,
    EditorResolver,
    InvalidEditorPathError,
    find_binary,
    resolve_editor_command,
    split_editor_command,
)

__all__ = [
    # Resolver
    "EditorResolver",
    "EditorNotFoundError",
    "InvalidEditorPathError",
    "find_binary",
    "resolve_editor_command",
    "split_editor_command",
    # Launcher
    "EditorLaunchError",
    "launch_editor",
    # Models
    "EditorSource",
    "ResolvedEditor",
]
