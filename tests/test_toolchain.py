"""Unit tests for the Qt toolchain probe (qtscaffold.toolchain).

Tests cover:
- Version matching on the last line of ``qmake -query`` output
- Candidate order (configured qmake, then ``qmake<major>``)
- Every failure mode returning False instead of raising
"""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from qtscaffold.toolchain import QtToolchainProbe


pytestmark = pytest.mark.unit


def _which_only(*available: str):
    """``shutil.which`` replacement that finds only the given names."""

    def _which(name, path=None):
        return f"/usr/bin/{name}" if name in available else None

    return _which


class TestCandidates:
    def test_default_order(self):
        assert QtToolchainProbe().candidates("6") == ["qmake", "qmake6"]

    def test_deduplicates(self):
        assert QtToolchainProbe("qmake6").candidates("6") == ["qmake6"]


class TestProbe:
    async def test_matching_version(self):
        runner = AsyncMock(return_value=(0, "/usr/bin/qmake\n6.5.3", ""))
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            assert await probe.probe("6") is True
        runner.assert_awaited_once_with(["/usr/bin/qmake", "-query", "QT_VERSION"], timeout=30)

    async def test_other_major_version(self):
        runner = AsyncMock(return_value=(0, "5.15.2", ""))
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            assert await probe.probe("6") is False

    async def test_falls_back_to_versioned_qmake(self):
        async def runner(cmd, timeout):
            return (0, "5.15.2" if cmd[0].endswith("/qmake") else "6.6.0", "")

        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake", "qmake6")):
            assert await probe.probe("6") is True

    async def test_tool_absent(self):
        runner = AsyncMock()
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only()):
            assert await probe.probe("6") is False
        runner.assert_not_awaited()

    async def test_nonzero_exit(self):
        runner = AsyncMock(return_value=(1, "6.5.0", "boom"))
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            assert await probe.probe("6") is False

    async def test_timeout_reported_as_unavailable(self):
        runner = AsyncMock(return_value=(-1, "", "Command timed out after 30s"))
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            assert await probe.probe("6") is False

    async def test_empty_output(self):
        runner = AsyncMock(return_value=(0, "\n\n", ""))
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            assert await probe.probe("6") is False

    async def test_os_error_does_not_propagate(self):
        runner = AsyncMock(side_effect=PermissionError("denied"))
        probe = QtToolchainProbe(runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            assert await probe.probe("6") is False

    async def test_custom_timeout_is_forwarded(self):
        runner = AsyncMock(return_value=(0, "6.0.0", ""))
        probe = QtToolchainProbe(timeout=5, runner=runner)
        with patch("qtscaffold.toolchain.shutil.which", _which_only("qmake")):
            await probe.probe("6")
        assert runner.await_args.kwargs["timeout"] == 5


@pytest.mark.skipif(sys.platform.startswith("win"), reason="uses a POSIX shell script")
class TestProbeWithRealProcess:
    async def test_fake_qmake_on_search_path(self, tmp_path: Path):
        fake = tmp_path / "qmake"
        fake.write_text("#!/bin/sh\necho 6.7.1\n", encoding="utf-8")
        fake.chmod(fake.stat().st_mode | stat.S_IXUSR)

        probe = QtToolchainProbe(search_path=str(tmp_path))
        assert await probe.probe("6") is True
        assert await probe.probe("5") is False

    async def test_empty_search_path(self, tmp_path: Path):
        probe = QtToolchainProbe(search_path=str(tmp_path))
        assert await probe.probe("6") is False

    async def test_failing_qmake(self, tmp_path: Path):
        fake = tmp_path / "qmake"
        fake.write_text("#!/bin/sh\nexit 3\n", encoding="utf-8")
        os.chmod(fake, 0o755)
        probe = QtToolchainProbe(search_path=str(tmp_path))
        assert await probe.probe("6") is False
