"""qtscaffold orchestrator and command-line entry point.

Wires the prompt collector, the Qt toolchain gate, the project generator and
the materializer together, and maps every outcome to an exit code:

* ``0`` -- project created, or aborted with the reserved key
* ``1`` -- Qt not installed, target folder exists, or any other error
* ``130`` -- interrupted with CTRL + C

Usage::

    qtscaffold            # interactive
    qtscaffold --init     # Qt 6 + CMake hello-world-qt, no prompts
    python -m qtscaffold -C ~/src
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError
from rich.align import Align
from rich.panel import Panel
from rich.text import Text

from qtscaffold import __version__
from qtscaffold.config import CreatorConfig
from qtscaffold.errors import ScaffoldError, UserAbort
from qtscaffold.prompts import InteractionCollector
from qtscaffold.scaffolder import (
    BuildTool,
    ProjectGenerator,
    ProjectMaterializer,
    ProjectSpec,
    build_commands,
)
from qtscaffold.toolchain import QtToolchainProbe
from qtscaffold.utils import (
    clear_screen,
    console,
    is_windows_host,
    print_error,
    print_header,
    print_info,
    print_warning,
)

if TYPE_CHECKING:
    import argparse


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ProjectCreator:
    """Runs one scaffolding session from choices to files on disk.

    Attributes:
        config: Run configuration.
        probe: Qt toolchain gate.
        collector: Source of the ``ProjectSpec``.
        generator: Renders the project files.
        materializer: Writes them under ``config.cwd``.
        windows: Whether to emit Windows-flavoured scripts and instructions.
    """

    def __init__(
        self,
        config: CreatorConfig,
        *,
        probe: QtToolchainProbe | None = None,
        collector: InteractionCollector | None = None,
        generator: ProjectGenerator | None = None,
        materializer: ProjectMaterializer | None = None,
        windows: bool | None = None,
    ) -> None:
        self.config = config
        self.probe = probe or QtToolchainProbe(config.qmake, timeout=config.probe_timeout)
        self.collector = collector or InteractionCollector(config, self.probe.probe)
        self.generator = generator or ProjectGenerator(
            license_holder=config.license_holder,
            license_year=config.license_year,
        )
        self.materializer = materializer or ProjectMaterializer(config.cwd)
        self.windows = is_windows_host() if windows is None else windows

    async def run(self, fast_path: bool = False) -> int:
        """Execute the session and return the process exit code."""
        clear_screen(self.config.clear_screen)
        print_header()
        try:
            if fast_path:
                print_info("Initializing project...")
                spec = self.collector.fast_path()
                await self.collector.gate(spec.framework_version)
            else:
                spec = await self.collector.collect()
            root = await self.create(spec)
        except UserAbort as exc:
            print_error(str(exc))
            return EXIT_OK
        except ScaffoldError as exc:
            print_error(str(exc))
            return EXIT_FAILURE
        except KeyboardInterrupt:
            print_warning("Interrupted.")
            return EXIT_INTERRUPTED
        except Exception as exc:  # top-level handler
            print_error(f"An error occurred: {exc}")
            return EXIT_FAILURE

        self.show_instructions(spec, root)
        return EXIT_OK

    async def create(self, spec: ProjectSpec) -> Path:
        """Render *spec* and write it to disk; returns the project root."""
        project = self.generator.generate(spec, self.windows)
        return await self.materializer.materialize(spec, project, windows=self.windows)

    def show_instructions(self, spec: ProjectSpec, root: Path) -> None:
        """Print the boxed build-and-run instructions for the new project."""
        clear_screen(self.config.clear_screen)
        console.print(
            Panel(
                Align.center(instructions_text(spec.project_name, spec.build_tool, self.windows)),
                border_style="cyan",
                padding=1,
            )
        )
        console.print(f"[dim]Created {root}[/dim]")


def instructions_text(project_name: str, build_tool: BuildTool, windows: bool) -> Text:
    """Build the styled instructions shown after a successful run."""
    commands = build_commands(project_name, build_tool, windows)
    rule = "-" * 53
    text = Text(justify="center")
    text.append(f"{rule}\n  Project Created successfully\n{rule}\n")
    text.append("To build and run the app:\n")
    for line in (
        f"cd {project_name}",
        f"mkdir build && cd build && {commands.configure} && {commands.build}",
        f"cd .. && {commands.binary}",
    ):
        text.append(f"{line}\n", style="italic cyan")
    text.append("OR\n", style="bold bright_yellow")
    text.append("Build and Run using script:\n")
    text.append(f"cd {project_name}\n", style="italic cyan")
    text.append(commands.script, style="italic cyan")
    return text


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Return the ``qtscaffold`` argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="qtscaffold",
        description="CLI tool to set up a Qt project structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  qtscaffold\n"
            "  qtscaffold --init\n"
            "  qtscaffold -C ~/projects --no-clear\n"
        ),
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Initialize a default hello-world-qt project with cmake",
    )
    parser.add_argument(
        "--directory", "-C",
        default=None,
        help="Directory in which to create the project (default: current directory)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between prompts",
    )
    return parser


def _describe_config_error(exc: ValueError) -> str:
    if isinstance(exc, ValidationError):
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        return f"{field}: {first['msg']}"
    return str(exc)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for ``qtscaffold`` / ``python -m qtscaffold``."""
    args = build_parser().parse_args(argv)

    directory = Path(args.directory) if args.directory else None
    if directory is not None and not directory.is_dir():
        print_error(f"Error: directory not found: {directory}")
        return EXIT_FAILURE

    try:
        config = CreatorConfig.from_env(
            cwd=directory,
            clear_screen=False if args.no_clear else None,
        )
    except (ValueError, ValidationError) as exc:
        print_error(f"An error occurred: invalid configuration: {_describe_config_error(exc)}")
        return EXIT_FAILURE

    creator = ProjectCreator(config)
    try:
        return asyncio.run(creator.run(fast_path=args.init))
    except KeyboardInterrupt:
        print_warning("Interrupted.")
        return EXIT_INTERRUPTED


if __name__ == "__main__":
    sys.exit(main())
