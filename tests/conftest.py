"""Shared pytest fixtures for the qtscaffold test suite.

Provides reusable fixtures for:
- A temporary working directory and matching ``CreatorConfig``
- ``ProjectSpec`` factories for every build-tool / UI-file combination
- Fake toolchain probes (available / unavailable)
- Scripted answers for the interactive prompt collector
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import pytest

from qtscaffold.config import CreatorConfig
from qtscaffold.scaffolder.models import BuildTool, ProjectSpec


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Empty directory that plays the role of the user's working directory."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    yield directory


@pytest.fixture
def config(workdir: Path) -> CreatorConfig:
    """Configuration rooted at ``workdir`` that never clears the terminal."""
    return CreatorConfig(cwd=workdir, clear_screen=False)


# ---------------------------------------------------------------------------
# Project specs
# ---------------------------------------------------------------------------

@pytest.fixture
def make_spec() -> Callable[..., ProjectSpec]:
    """Factory for ``ProjectSpec`` with sensible defaults."""

    def _make(**overrides: Any) -> ProjectSpec:
        values: dict[str, Any] = {
            "project_name": "demo",
            "framework_version": "6",
            "build_tool": BuildTool.CMAKE,
            "include_ui_file": False,
        }
        values.update(overrides)
        return ProjectSpec(**values)

    return _make


@pytest.fixture
def cmake_spec(make_spec) -> ProjectSpec:
    """Qt 6 + CMake, no UI file."""
    return make_spec()


@pytest.fixture
def qmake_ui_spec(make_spec) -> ProjectSpec:
    """Qt 5 + qmake with a Designer form."""
    return make_spec(
        project_name="designer_app",
        framework_version="5",
        build_tool=BuildTool.QMAKE,
        include_ui_file=True,
    )


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------

class FakeProbe:
    """Records probed versions and answers from a fixed set of installed ones."""

    def __init__(self, installed: Iterable[str] = ("5", "6")) -> None:
        self.installed = set(installed)
        self.calls: list[str] = []

    async def probe(self, major_version: str) -> bool:
        self.calls.append(major_version)
        return major_version in self.installed


@pytest.fixture
def probe_ok() -> FakeProbe:
    """Probe reporting both Qt 5 and Qt 6 as installed."""
    return FakeProbe()


@pytest.fixture
def probe_missing() -> FakeProbe:
    """Probe reporting no Qt installation at all."""
    return FakeProbe(installed=())


class ScriptedAsk:
    """Prompt replacement that replays canned answers in order."""

    def __init__(self, answers: Iterable[str]) -> None:
        self.answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str, default: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise AssertionError(f"Unexpected extra prompt: {prompt!r}")
        return self.answers.pop(0)


@pytest.fixture
def scripted_ask() -> Callable[..., ScriptedAsk]:
    """Factory: ``scripted_ask("6", "cmake", ...)``."""

    def _make(*answers: str) -> ScriptedAsk:
        return ScriptedAsk(answers)

    return _make
