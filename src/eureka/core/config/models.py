"""
Configuration data models for eureka.

These models hold the fixed constants of the capture pipeline, with
validation and type safety via Pydantic. Nothing here is read from disk;
the user's stored values live in the ConfigStore.
"""

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EditorChoice(BaseModel):
    """
    One entry of the first-run editor menu.

    The command is stored verbatim as the editor configuration when the
    entry is picked.
    """

    model_config = ConfigDict(frozen=True)

    label: str = Field(description="Name shown in the menu")
    command: str = Field(description="Absolute path to the editor binary")

    @field_validator("command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        """Menu entries must point at an absolute path."""
        if not PurePath(v).is_absolute():
            raise ValueError(f"editor command must be an absolute path, got: {v!r}")
        return v


def _default_editor_choices() -> tuple[EditorChoice, ...]:
    return (
        EditorChoice(label="vim", command="/usr/bin/vim"),
        EditorChoice(label="nano", command="/usr/bin/nano"),
    )


class EurekaConfig(BaseModel):
    """
    Constants for the capture-and-persist pipeline.

    The remote and branch are deliberately not user-configurable: ideas
    are always pushed to origin/master.
    """

    model_config = ConfigDict(frozen=True)

    idea_file: str = Field(
        default="README.md",
        description="File inside the idea repo that the editor opens",
    )
    remote: str = Field(default="origin", min_length=1, description="Remote to push to")
    branch: str = Field(default="master", min_length=1, description="Branch to push")
    editor_env_var: str = Field(
        default="EDITOR",
        min_length=1,
        description="Environment variable that overrides the stored editor",
    )
    editor_choices: tuple[EditorChoice, ...] = Field(
        default_factory=_default_editor_choices,
        description="Numbered entries of the first-run editor menu",
    )

    @field_validator("idea_file")
    @classmethod
    def validate_idea_file(cls, v: str) -> str:
        """The idea file is a plain name relative to the repo root."""
        if not v or PurePath(v).is_absolute():
            raise ValueError(f"idea_file must be a relative file name, got: {v!r}")
        return v

    @field_validator("editor_choices")
    @classmethod
    def validate_editor_choices(
        cls, v: tuple[EditorChoice, ...]
    ) -> tuple[EditorChoice, ...]:
        if not v:
            raise ValueError("editor_choices cannot be empty")
        return v

    @property
    def fallback_editor(self) -> EditorChoice:
        """Menu entry used when the user picks an option that doesn't exist."""
        return self.editor_choices[0]
