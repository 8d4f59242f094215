"""Writes a ``GeneratedProject`` to disk.

This is the only part of qtscaffold that mutates the filesystem.  The project
is assembled in a hidden staging directory next to the target and renamed
into place once every file is written, so a failed run never leaves a
half-populated project behind.
"""

from __future__ import annotations

import asyncio
import os
import secrets
import shutil
from pathlib import Path

from ..errors import DirectoryExistsError, MaterializationError
from ..utils import is_windows_host, make_executable
from .models import FileArtifact, GeneratedProject, ProjectSpec


class ProjectMaterializer:
    """Creates the project directory tree and writes every artifact.

    Args:
        cwd: Directory in which ``<project_name>/`` is created.  Defaults to
            the process working directory at construction time.
    """

    def __init__(self, cwd: str | Path | None = None) -> None:
        self.cwd = Path(cwd) if cwd is not None else Path.cwd()

    def target_for(self, project_name: str) -> Path:
        """Absolute-or-relative path of the project root for *project_name*."""
        return self.cwd / project_name

    def exists(self, project_name: str) -> bool:
        """Return ``True`` if something already occupies the target path."""
        return _occupied(self.target_for(project_name))

    async def materialize(
        self,
        spec: ProjectSpec,
        project: GeneratedProject,
        *,
        windows: bool | None = None,
    ) -> Path:
        """Write *project* under ``<cwd>/<spec.project_name>``.

        Returns:
            Path to the created project root.

        Raises:
            DirectoryExistsError: If the target already exists.  Raised before
                anything is written.
            MaterializationError: If a filesystem operation fails.  The
                staging directory is removed and the target is not created.
        """
        windows = is_windows_host() if windows is None else windows
        target = self.target_for(spec.project_name)
        if await asyncio.to_thread(_occupied, target):
            raise DirectoryExistsError(target)

        staging = self.cwd / f".{spec.project_name}.partial-{secrets.token_hex(4)}"
        try:
            await asyncio.to_thread(staging.mkdir)
            for directory in project.directories:
                await asyncio.to_thread((staging / directory).mkdir)

            for artifact in project.artifacts:
                await asyncio.to_thread(_write_artifact, staging, artifact)

            script_path = await asyncio.to_thread(_write_artifact, staging, project.run_script)
            if not windows:
                await asyncio.to_thread(make_executable, script_path)

            await asyncio.to_thread(_promote, staging, target)
        except BaseException as exc:
            # Synchronous so cleanup still runs when the task is being cancelled.
            shutil.rmtree(staging, ignore_errors=True)
            if isinstance(exc, OSError):
                raise MaterializationError(target, str(exc)) from exc
            raise

        return target


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _occupied(path: Path) -> bool:
    return path.exists() or path.is_symlink()


def _write_artifact(root: Path, artifact: FileArtifact) -> Path:
    """Write one artifact below *root*; the parent directory must exist."""
    path = root.joinpath(*artifact.relative_path.split("/"))
    # newline="" keeps "\n" on every host, so output is byte-identical everywhere.
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(artifact.content)
    return path


def _promote(staging: Path, target: Path) -> None:
    """Rename the finished staging directory onto *target*."""
    # os.rename silently replaces an empty directory on POSIX.
    if _occupied(target):
        raise DirectoryExistsError(target)
    os.rename(staging, target)
