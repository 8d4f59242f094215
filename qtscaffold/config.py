"""qtscaffold configuration.

Typed settings for a single run.  Values come from built-in defaults,
environment variables (``CreatorConfig.from_env``) and command-line flags;
nothing is ever read from or written to a config file.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from qtscaffold.scaffolder.models import SUPPORTED_QT_VERSIONS, BuildTool, validate_project_name


# Fixed choices for ``--init``; not configurable.
FAST_PATH_DEFAULTS: dict[str, Any] = {
    "project_name": "hello-world-qt",
    "framework_version": "6",
    "build_tool": BuildTool.CMAKE,
    "include_ui_file": False,
}


class CreatorConfig(BaseModel):
    """Settings shared by the prompt collector, probe and materializer."""

    cwd: Path = Field(default_factory=Path.cwd, description="Where the project folder is created")
    default_project_name: str = Field(default="hello-world-qt")
    framework_versions: list[str] = Field(default_factory=lambda: list(SUPPORTED_QT_VERSIONS))
    default_framework_version: str = Field(default="6")
    default_build_tool: BuildTool = Field(default=BuildTool.CMAKE)
    abort_key: str = Field(default="q", min_length=1)
    qmake: str = Field(default="qmake", description="qmake executable name or path")
    probe_timeout: float = Field(default=30, ge=1, description="Seconds to wait for qmake -query")
    clear_screen: bool = Field(default=True, description="Clear the terminal between prompts")
    license_holder: str = Field(default="Your Name")
    license_year: str = Field(default="2024")

    @field_validator("default_project_name")
    @classmethod
    def _check_default_name(cls, value: str) -> str:
        return validate_project_name(value)

    @field_validator("framework_versions")
    @classmethod
    def _check_versions(cls, value: list[str]) -> list[str]:
        unknown = [v for v in value if v not in SUPPORTED_QT_VERSIONS]
        if not value or unknown:
            raise ValueError(
                f"framework_versions must be a non-empty subset of {list(SUPPORTED_QT_VERSIONS)}"
            )
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "CreatorConfig":
        """Build a ``CreatorConfig`` from environment variables.

        Recognised variables (all optional):
            QTSCAFFOLD_CWD, QTSCAFFOLD_DEFAULT_NAME, QTSCAFFOLD_QMAKE,
            QTSCAFFOLD_PROBE_TIMEOUT, QTSCAFFOLD_NO_CLEAR,
            QTSCAFFOLD_LICENSE_HOLDER.

        Keyword *overrides* win over the environment (used for CLI flags).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("QTSCAFFOLD_CWD"):
            kwargs["cwd"] = Path(os.environ["QTSCAFFOLD_CWD"])
        if os.environ.get("QTSCAFFOLD_DEFAULT_NAME"):
            kwargs["default_project_name"] = os.environ["QTSCAFFOLD_DEFAULT_NAME"]
        if os.environ.get("QTSCAFFOLD_QMAKE"):
            kwargs["qmake"] = os.environ["QTSCAFFOLD_QMAKE"]
        if os.environ.get("QTSCAFFOLD_PROBE_TIMEOUT"):
            kwargs["probe_timeout"] = float(os.environ["QTSCAFFOLD_PROBE_TIMEOUT"])
        if os.environ.get("QTSCAFFOLD_NO_CLEAR"):
            kwargs["clear_screen"] = False
        if os.environ.get("QTSCAFFOLD_LICENSE_HOLDER"):
            kwargs["license_holder"] = os.environ["QTSCAFFOLD_LICENSE_HOLDER"]

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)
