"""qtscaffold project generation engine.

Turns a ``ProjectSpec`` into a ``GeneratedProject`` (pure rendering) and
writes it to disk (``ProjectMaterializer``).

Quick usage::

    from qtscaffold.scaffolder import ProjectGenerator, ProjectMaterializer, ProjectSpec

    spec = ProjectSpec(project_name="demo", framework_version="6", build_tool="cmake")
    project = ProjectGenerator().generate(spec)
    root = await ProjectMaterializer("/tmp").materialize(spec, project)
"""

from qtscaffold.scaffolder.generator import ProjectGenerator
from qtscaffold.scaffolder.materializer import ProjectMaterializer
from qtscaffold.scaffolder.models import (
    SUPPORTED_QT_VERSIONS,
    BuildTool,
    FileArtifact,
    GeneratedProject,
    ProjectSpec,
    validate_project_name,
)
from qtscaffold.scaffolder.run_script import build_commands, render_run_script, run_script_name
from qtscaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "SUPPORTED_QT_VERSIONS",
    "BuildTool",
    "FileArtifact",
    "GeneratedProject",
    "ProjectGenerator",
    "ProjectMaterializer",
    "ProjectSpec",
    "TemplateRenderer",
    "build_commands",
    "render_run_script",
    "run_script_name",
    "validate_project_name",
]
