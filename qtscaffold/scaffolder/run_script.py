"""Build-and-run script generation.

Produces the body of ``run.sh`` (POSIX hosts) or ``run.bat`` (Windows hosts)
for a generated project.  The same command table feeds the README and the
final instructions panel so all three always agree.
"""

from __future__ import annotations

from typing import NamedTuple

from .models import BuildTool
from .templates import TemplateRenderer


class BuildCommands(NamedTuple):
    """Shell commands for one build tool on one host flavour."""

    configure: str
    build: str
    binary: str
    script: str


_CONFIGURE: dict[BuildTool, str] = {
    BuildTool.CMAKE: "cmake ..",
    BuildTool.QMAKE: "qmake ..",
}

_BUILD_POSIX: dict[BuildTool, str] = {
    BuildTool.CMAKE: "cmake --build . --config Release",
    BuildTool.QMAKE: "make",
}

_BUILD_WINDOWS: dict[BuildTool, str] = {
    BuildTool.CMAKE: "cmake --build . --config Release",
    BuildTool.QMAKE: "mingw32-make",
}


def run_script_name(windows: bool) -> str:
    """Return ``run.bat`` on Windows-like hosts and ``run.sh`` elsewhere."""
    return "run.bat" if windows else "run.sh"


def build_commands(project_name: str, build_tool: BuildTool | str, windows: bool) -> BuildCommands:
    """Return the configure/build/run commands for *build_tool* on this host."""
    tool = BuildTool(build_tool)
    if windows:
        return BuildCommands(
            configure=_CONFIGURE[tool],
            build=_BUILD_WINDOWS[tool],
            binary=f".\\build\\Release\\{project_name}.exe",
            script=f".\\{run_script_name(windows)}",
        )
    return BuildCommands(
        configure=_CONFIGURE[tool],
        build=_BUILD_POSIX[tool],
        binary=f"./build/{project_name}",
        script=f"./{run_script_name(windows)}",
    )


def render_run_script(
    project_name: str,
    build_tool: BuildTool | str,
    windows: bool,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the run script body.

    The script creates ``build/``, configures and builds with the chosen
    tool, returns to the project root and launches the binary.  It assumes
    the build tool is on PATH and performs no fallback.
    """
    renderer = renderer or TemplateRenderer()
    commands = build_commands(project_name, build_tool, windows)
    template = "scripts/run.bat.j2" if windows else "scripts/run.sh.j2"
    return renderer.render(
        template,
        {
            "configure_command": commands.configure,
            "build_command": commands.build,
            "binary_path": commands.binary,
        },
    )
