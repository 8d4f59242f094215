"""Pydantic v2 models describing a project to scaffold and its generated files.

``ProjectSpec`` is the validated set of user choices. ``FileArtifact`` is one
generated file, and ``GeneratedProject`` bundles the directories, artifacts
and run script derived from a spec.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

SUPPORTED_QT_VERSIONS: tuple[str, ...] = ("5", "6")

# Alphanumeric, hyphen, underscore and dot; must start alphanumeric so that
# "." / ".." and hidden directories are impossible.
PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class BuildTool(str, Enum):
    """Build-system flavour of the generated project."""
    CMAKE = "cmake"
    QMAKE = "qmake"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def validate_project_name(name: str) -> str:
    """Return *name* unchanged if it is a usable project name.

    Raises:
        ValueError: If the name is empty or contains characters that are
            unsafe in a directory name, CMake target or qmake ``TARGET``.
    """
    if not name:
        raise ValueError("Project name must not be empty.")
    if not PROJECT_NAME_PATTERN.match(name):
        raise ValueError(
            "Project name may only contain letters, digits, '-', '_' and '.', "
            "and must start with a letter or digit."
        )
    return name


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------

class ProjectSpec(BaseModel):
    """The choices that fully determine the generated project."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., description="Directory, target and window-title name")
    framework_version: str = Field(default="6", description="Qt major version")
    build_tool: BuildTool = Field(default=BuildTool.CMAKE, description="cmake or qmake")
    include_ui_file: bool = Field(default=False, description="Generate ui/widget.ui")

    @field_validator("project_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("framework_version")
    @classmethod
    def _check_version(cls, value: str) -> str:
        if value not in SUPPORTED_QT_VERSIONS:
            raise ValueError(
                f"Unsupported Qt version {value!r}; expected one of "
                f"{', '.join(SUPPORTED_QT_VERSIONS)}."
            )
        return value


class FileArtifact(BaseModel):
    """One generated file: a project-relative POSIX path and its final text."""

    model_config = ConfigDict(frozen=True)

    relative_path: str
    content: str

    @field_validator("relative_path")
    @classmethod
    def _check_path(cls, value: str) -> str:
        path = PurePosixPath(value)
        if not value or path.is_absolute() or value.startswith("\\"):
            raise ValueError(f"Artifact path must be relative: {value!r}")
        if ".." in path.parts or "\\" in value:
            raise ValueError(f"Artifact path escapes the project root: {value!r}")
        return value

    @property
    def parent(self) -> str:
        """Parent directory of the artifact ("" for files in the project root)."""
        parent = str(PurePosixPath(self.relative_path).parent)
        return "" if parent == "." else parent


class GeneratedProject(BaseModel):
    """Everything the materializer needs to write one project."""

    model_config = ConfigDict(frozen=True)

    directories: list[str] = Field(default_factory=list)
    artifacts: list[FileArtifact] = Field(default_factory=list)
    run_script: FileArtifact

    def all_files(self) -> list[FileArtifact]:
        """Artifacts followed by the run script, in write order."""
        return [*self.artifacts, self.run_script]

    def as_mapping(self) -> dict[str, str]:
        """Return ``{relative_path: content}`` for every generated file."""
        return {a.relative_path: a.content for a in self.all_files()}

    def check_layout(self) -> None:
        """Raise ``ValueError`` if any file lives outside the known directories."""
        allowed = {"", *self.directories}
        for artifact in self.all_files():
            if artifact.parent not in allowed:
                raise ValueError(
                    f"{artifact.relative_path} is not under a generated directory"
                )
