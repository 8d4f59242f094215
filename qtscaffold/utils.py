"""Shared utility functions for qtscaffold.

Provides async command execution, host detection, file-permission helpers
and the Rich-based console output used for every user-facing message.
"""

from __future__ import annotations

import asyncio
import stat
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()

BANNER_TITLE = "QT PROJECT CREATOR"


# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], timeout: float = 30) -> tuple[int, str, str]:
    """Run a command asynchronously and capture its output.

    Args:
        cmd: Program and arguments.  No shell is involved.
        timeout: Maximum wall-clock seconds before the process is killed.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  A timeout is reported as
        returncode ``-1`` with an explanatory stderr.

    Raises:
        OSError: If the program cannot be started.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (-1, "", f"Command timed out after {timeout}s: {' '.join(cmd)}")

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


# ---------------------------------------------------------------------------
# Host / file-system helpers
# ---------------------------------------------------------------------------


def is_windows_host(platform: str | None = None) -> bool:
    """Return ``True`` when running on (or asked about) a Windows-like host."""
    platform = sys.platform if platform is None else platform
    return platform.startswith(("win32", "cygwin", "msys"))


def make_executable(path: Path) -> None:
    """Set the executable bit for user, group and others on *path*."""
    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header() -> None:
    """Print the boxed tool banner."""
    console.print(Panel.fit(f"[bold]{BANNER_TITLE}[/bold]", border_style="cyan", padding=1))


def clear_screen(enabled: bool = True) -> None:
    """Clear the terminal when *enabled* and stdout is a terminal."""
    if enabled and console.is_terminal:
        console.clear()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a cyan status message."""
    console.print(f"[cyan]{escape(message)}[/cyan]")
