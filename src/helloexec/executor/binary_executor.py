"""
Executor for precompiled hello-world binaries.

The build step places one native executable per compiled language in
the ``binaries`` directory.  The executor runs it with no arguments and
the default working directory.
"""

from __future__ import annotations

from pathlib import Path

from .base import ProgramExecutor, RunResult, SpawnError
from .strategy import Binary


class BinaryExecutor(ProgramExecutor):
    """Run a prebuilt executable from ``binaries/``."""

    def __init__(self, strategy: Binary) -> None:
        self.strategy = strategy

    def execute(self, language: str, resource_root: Path) -> RunResult:
        name = self.strategy.name
        path = self.binaries_dir(resource_root) / name
        try:
            return self._run_subprocess([str(path)])
        except OSError as exc:
            raise SpawnError(
                language,
                name,
                f"Failed to run '{name}': {exc}\nRun build-binaries.sh first.",
                exc,
            ) from exc
