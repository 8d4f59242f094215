"""Qt toolchain detection.

Answers one question: is a qmake for a given Qt major version reachable on
the search path?  The probe is a gate in front of scaffolding; it never
raises, and every failure simply means "not available".
"""

from __future__ import annotations

import shutil
from collections.abc import Awaitable, Callable

from qtscaffold.utils import run_command

# (argv, timeout) -> (returncode, stdout, stderr)
CommandRunner = Callable[..., Awaitable[tuple[int, str, str]]]


class QtToolchainProbe:
    """Checks for an installed Qt by asking qmake for ``QT_VERSION``.

    Args:
        qmake: Preferred qmake executable name or path.  ``qmake<major>``
            (e.g. ``qmake6``) is tried afterwards.
        timeout: Seconds to wait for ``qmake -query``.
        search_path: Value used instead of ``$PATH`` when locating qmake.
        runner: Coroutine used to execute qmake; defaults to ``run_command``.
    """

    def __init__(
        self,
        qmake: str = "qmake",
        *,
        timeout: float = 30,
        search_path: str | None = None,
        runner: CommandRunner | None = None,
    ) -> None:
        self.qmake = qmake
        self.timeout = timeout
        self.search_path = search_path
        self.runner = runner or run_command

    def candidates(self, major_version: str) -> list[str]:
        """Executable names to try, in order, without duplicates."""
        names = [self.qmake, f"qmake{major_version}"]
        return list(dict.fromkeys(names))

    async def probe(self, major_version: str) -> bool:
        """Return ``True`` iff a reachable qmake reports a version starting with *major_version*."""
        for name in self.candidates(major_version):
            version = await self.query_version(name)
            if version is not None and version.startswith(major_version):
                return True
        return False

    async def query_version(self, qmake: str) -> str | None:
        """Return the ``QT_VERSION`` reported by *qmake*, or ``None`` on any failure."""
        executable = shutil.which(qmake, path=self.search_path)
        if executable is None:
            return None
        try:
            returncode, stdout, _stderr = await self.runner(
                [executable, "-query", "QT_VERSION"], timeout=self.timeout
            )
        except (OSError, ValueError):
            return None
        if returncode != 0:
            return None
        lines = [line.strip() for line in stdout.splitlines() if line.strip()]
        return lines[-1] if lines else None
