"""Interactive collection of the choices that make up a ``ProjectSpec``.

Two modes:

* **fast path** -- fixed defaults (Qt 6, CMake, no UI file, ``hello-world-qt``).
* **interactive** -- one prompt per field, in the order
  version -> (toolchain gate) -> build tool -> UI file -> project name.

The reserved abort key (``q``) at any prompt raises ``UserAbort`` before the
answer is validated.  An invalid answer is reported and the same field is
asked again; a failed toolchain gate is terminal.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError
from rich.markup import escape
from rich.prompt import Prompt

from qtscaffold.config import FAST_PATH_DEFAULTS, CreatorConfig
from qtscaffold.errors import DirectoryExistsError, ToolchainUnavailableError, UserAbort
from qtscaffold.scaffolder.models import BuildTool, ProjectSpec, validate_project_name
from qtscaffold.utils import clear_screen, console, print_error, print_header, print_warning

AskFn = Callable[[str, str], str]
ProbeFn = Callable[[str], Awaitable[bool]]

_YES = {"y", "yes"}
_NO = {"n", "no"}


@dataclass
class Question:
    """One prompt: what to show, the default, and how to parse the answer."""

    name: str
    message: str
    default: str
    parse: Callable[[str], Any]
    choices: list[str] = field(default_factory=list)

    def prompt_text(self) -> str:
        if self.choices:
            return f"{self.message} {escape('[' + '/'.join(self.choices) + ']')}"
        return self.message


def _rich_ask(prompt: str, default: str) -> str:
    return Prompt.ask(prompt, default=default, console=console)


class InteractionCollector:
    """Gathers framework version, build tool, UI-file flag and project name.

    Args:
        config: Run configuration (defaults, abort key, working directory).
        probe: Coroutine answering "is Qt <major> installed?".
        ask: Prompt function ``(prompt, default) -> answer``; defaults to
            ``rich.prompt.Prompt.ask``.
    """

    def __init__(
        self,
        config: CreatorConfig,
        probe: ProbeFn,
        *,
        ask: AskFn | None = None,
    ) -> None:
        self.config = config
        self.probe = probe
        self.ask = ask or _rich_ask

    # -- Modes -------------------------------------------------------------

    @staticmethod
    def fast_path() -> ProjectSpec:
        """Return the fixed ``--init`` choices."""
        return ProjectSpec(**FAST_PATH_DEFAULTS)

    async def collect(self) -> ProjectSpec:
        """Prompt for every field and return the validated spec.

        Raises:
            UserAbort: The abort key was entered.
            ToolchainUnavailableError: The chosen Qt version is not installed.
        """
        version = self._ask_until_valid(self._version_question())
        await self.gate(version)
        build_tool = self._ask_until_valid(self._build_tool_question())
        include_ui_file = self._ask_until_valid(self._ui_file_question())
        project_name = self._ask_until_valid(self._name_question())
        return ProjectSpec(
            project_name=project_name,
            framework_version=version,
            build_tool=build_tool,
            include_ui_file=include_ui_file,
        )

    async def gate(self, version: str) -> None:
        """Raise ``ToolchainUnavailableError`` unless Qt *version* is installed."""
        if not await self.probe(version):
            raise ToolchainUnavailableError(version)

    # -- Questions ---------------------------------------------------------

    def _version_question(self) -> Question:
        versions = self.config.framework_versions
        default = self.config.default_framework_version
        if default not in versions:
            default = versions[-1]
        return Question(
            name="framework_version",
            message="Qt version:",
            default=default,
            choices=list(versions),
            parse=lambda answer: _pick(answer, versions),
        )

    def _build_tool_question(self) -> Question:
        tools = [tool.value for tool in BuildTool]
        return Question(
            name="build_tool",
            message="Build system:",
            default=self.config.default_build_tool.value,
            choices=tools,
            parse=lambda answer: BuildTool(_pick(answer.lower(), tools)),
        )

    def _ui_file_question(self) -> Question:
        return Question(
            name="include_ui_file",
            message="Create a widget.ui file?",
            default="n",
            choices=["y", "n"],
            parse=_parse_yes_no,
        )

    def _name_question(self) -> Question:
        return Question(
            name="project_name",
            message="Project name:",
            default=self.config.default_project_name,
            parse=self._parse_project_name,
        )

    def _parse_project_name(self, answer: str) -> str:
        name = validate_project_name(answer)
        target = self.config.cwd / name
        if target.exists() or target.is_symlink():
            raise DirectoryExistsError(target)
        return name

    # -- Prompt loop -------------------------------------------------------

    def _ask_until_valid(self, question: Question) -> Any:
        error: str | None = None
        while True:
            self._show_header()
            if error:
                print_error(error)
            raw = self.ask(question.prompt_text(), question.default)
            answer = (raw or "").strip()
            if answer == self.config.abort_key:
                raise UserAbort()
            if not answer:
                answer = question.default
            try:
                return question.parse(answer)
            except (ValueError, ValidationError, DirectoryExistsError) as exc:
                error = _first_line(exc)

    def _show_header(self) -> None:
        clear_screen(self.config.clear_screen)
        print_header()
        print_warning(
            f"Type '{self.config.abort_key}' or press CTRL + C to abort the process."
        )


# ---------------------------------------------------------------------------
# Parsers
# ---------------------------------------------------------------------------

def _pick(answer: str, choices: list[str]) -> str:
    if answer not in choices:
        raise ValueError(f"Please choose one of: {', '.join(choices)}.")
    return answer


def _parse_yes_no(answer: str) -> bool:
    lowered = answer.lower()
    if lowered in _YES:
        return True
    if lowered in _NO:
        return False
    raise ValueError("Please answer 'y' or 'n'.")


def _first_line(exc: Exception) -> str:
    return str(exc).splitlines()[0] if str(exc) else exc.__class__.__name__
