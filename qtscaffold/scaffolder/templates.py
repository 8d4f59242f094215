"""Jinja2 template rendering for Qt project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``qtscaffold/scaffolder/templates/`` directory and renders them with the
project context.  Rendering never touches the output filesystem: callers get
strings back and the materializer decides where they go.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer loads ``.j2`` template files from a configurable
    template directory.  Autoescaping is off: the project name is substituted
    verbatim into C++, CMake, qmake and XML text, and
    ``ProjectSpec`` only admits ``[A-Za-z0-9_.-]`` names.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"src/main.cpp.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered content, stripped of surrounding whitespace and
            terminated by exactly one newline.
        """
        template = self.env.get_template(template_path)
        return _finalize(template.render(**context))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _finalize(content: str) -> str:
    return content.strip() + "\n"
