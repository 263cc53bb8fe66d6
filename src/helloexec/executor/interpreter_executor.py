"""
Executor for scripting languages.

The script is bundled in ``binaries`` next to the native executables;
the interpreter itself is not bundled and must be on the host's
``PATH``.
"""

from __future__ import annotations

from pathlib import Path

from .base import ProgramExecutor, RunResult, SpawnError
from .strategy import Interpreter


class InterpreterExecutor(ProgramExecutor):
    """Invoke an interpreter from ``PATH`` on a bundled script."""

    def __init__(self, strategy: Interpreter) -> None:
        self.strategy = strategy

    def execute(self, language: str, resource_root: Path) -> RunResult:
        program = self.strategy.program
        script_path = self.binaries_dir(resource_root) / self.strategy.script
        # Script path is the only argument
        cmd = [program, str(script_path)]
        try:
            return self._run_subprocess(cmd)
        except OSError as exc:
            raise SpawnError(
                language,
                program,
                f"Failed to launch '{program}': {exc}\n"
                f"Make sure '{program}' is installed and on your PATH.",
                exc,
            ) from exc
