"""Exception types raised by the qtscaffold pipeline.

Every failure the tool reports to the user derives from ``ScaffoldError``.
``UserAbort`` is not a ``ScaffoldError``: aborting with the
reserved key is a normal way to leave the tool and exits with code 0.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for errors that terminate a scaffolding run."""


class ToolchainUnavailableError(ScaffoldError):
    """Raised when no qmake for the requested Qt major version is on PATH."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"Qt{version} is not installed or not in PATH.")


class DirectoryExistsError(ScaffoldError):
    """Raised when the target project directory already exists."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(
            f"Folder '{self.path.name}' already exists. Please choose another name."
        )


class MaterializationError(ScaffoldError):
    """Raised when writing the generated project to disk fails part-way.

    The underlying ``OSError`` is available as ``__cause__``.
    """

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Could not create project at {self.path}: {reason}")


class UserAbort(Exception):
    """Raised when the user enters the reserved abort key at a prompt."""

    def __init__(self, message: str = "Aborted by user.") -> None:
        super().__init__(message)
