"""Project rendering: turns a ``ProjectSpec`` into a ``GeneratedProject``.

The file set is a fixed table keyed on the build tool plus one optional
entry keyed on ``include_ui_file``.  Rendering is pure: the same spec and
host flag always give byte-identical artifacts, and nothing is written to
disk here (see ``materializer``).
"""

from __future__ import annotations

from typing import Any

from ..utils import is_windows_host
from .models import BuildTool, FileArtifact, GeneratedProject, ProjectSpec
from .run_script import build_commands, render_run_script, run_script_name
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# File table: (template, output path)
# ---------------------------------------------------------------------------

_COMMON_FILES: tuple[tuple[str, str], ...] = (
    ("headers/widget.h.j2", "headers/widget.h"),
    ("src/widget.cpp.j2", "src/widget.cpp"),
    ("src/main.cpp.j2", "src/main.cpp"),
    ("README.md.j2", "README.md"),
    ("LICENSE.j2", "LICENSE"),
)

# Output paths may reference ``{name}``.
_BUILD_DESCRIPTORS: dict[BuildTool, tuple[str, str]] = {
    BuildTool.CMAKE: ("CMakeLists.txt.j2", "CMakeLists.txt"),
    BuildTool.QMAKE: ("project.pro.j2", "{name}.pro"),
}

_UI_FILES: dict[bool, tuple[tuple[str, str], ...]] = {
    True: (("ui/widget.ui.j2", "ui/widget.ui"),),
    False: (),
}

_BASE_DIRECTORIES: tuple[str, ...] = ("headers", "src")


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Renders every file of a Qt widget project.

    Given a ``ProjectSpec``, produces:
    - ``headers/widget.h`` and ``src/widget.cpp`` (one ``QLabel`` widget)
    - ``src/main.cpp`` booting ``QApplication``
    - ``README.md`` and ``LICENSE``
    - ``CMakeLists.txt`` *or* ``<name>.pro``
    - ``ui/widget.ui`` when a Designer form was requested
    - ``run.sh`` / ``run.bat``
    """

    def __init__(
        self,
        renderer: TemplateRenderer | None = None,
        *,
        license_holder: str = "Your Name",
        license_year: str = "2024",
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.license_holder = license_holder
        self.license_year = license_year

    # -- Public API --------------------------------------------------------

    def render(self, spec: ProjectSpec, windows: bool | None = None) -> list[FileArtifact]:
        """Render the project files (without the run script) in write order."""
        windows = is_windows_host() if windows is None else windows
        context = self._build_context(spec, windows)
        return [
            FileArtifact(
                relative_path=output,
                content=self.renderer.render(template, context),
            )
            for template, output in self._file_table(spec)
        ]

    def render_mapping(self, spec: ProjectSpec, windows: bool | None = None) -> dict[str, str]:
        """Return ``{relative_path: content}`` for the project files."""
        return {a.relative_path: a.content for a in self.render(spec, windows)}

    def generate(self, spec: ProjectSpec, windows: bool | None = None) -> GeneratedProject:
        """Derive the full ``GeneratedProject``: directories, files and run script."""
        windows = is_windows_host() if windows is None else windows
        project = GeneratedProject(
            directories=self.directories(spec),
            artifacts=self.render(spec, windows),
            run_script=FileArtifact(
                relative_path=run_script_name(windows),
                content=render_run_script(
                    spec.project_name, spec.build_tool, windows, self.renderer
                ),
            ),
        )
        project.check_layout()
        return project

    @staticmethod
    def directories(spec: ProjectSpec) -> list[str]:
        """Sub-directories to create under the project root, in order."""
        dirs = list(_BASE_DIRECTORIES)
        if spec.include_ui_file:
            dirs.append("ui")
        return dirs

    # -- Internals ---------------------------------------------------------

    @staticmethod
    def _file_table(spec: ProjectSpec) -> list[tuple[str, str]]:
        descriptor_template, descriptor_output = _BUILD_DESCRIPTORS[spec.build_tool]
        return [
            *_COMMON_FILES,
            (descriptor_template, descriptor_output.format(name=spec.project_name)),
            *_UI_FILES[spec.include_ui_file],
        ]

    def _build_context(self, spec: ProjectSpec, windows: bool) -> dict[str, Any]:
        """Build the Jinja2 template context for *spec*."""
        commands = build_commands(spec.project_name, spec.build_tool, windows)
        return {
            "project_name": spec.project_name,
            "qt_version": spec.framework_version,
            "build_tool": spec.build_tool.value,
            "include_ui_file": spec.include_ui_file,
            "windows": windows,
            "configure_command": commands.configure,
            "build_command": commands.build,
            "binary_path": commands.binary,
            "script_command": commands.script,
            "license_holder": self.license_holder,
            "license_year": self.license_year,
        }
