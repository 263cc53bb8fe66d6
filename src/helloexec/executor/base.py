"""
Base interfaces and dataclasses for the hello-world executors.

All concrete executors inherit from :class:`ProgramExecutor` and
implement :meth:`ProgramExecutor.execute`.  An executor turns one
execution strategy into a command line, spawns it and returns a
:class:`RunResult`.

The spawned programs are prebuilt and trusted; no resource limits or
timeouts are applied.  A hung child blocks the caller until it exits.
"""

from __future__ import annotations

import abc
import os
import subprocess
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

BINARIES_DIRNAME = "binaries"


@dataclass(frozen=True)
class RunResult:
    """Result of running a hello-world program.

    Attributes
    ----------
    stdout: str
        Standard output of the child, decoded as UTF-8 with invalid
        bytes replaced.
    stderr: str
        Standard error of the child, decoded the same way.
    exit_code: int
        Exit status of the process.  ``-1`` when the OS reports none,
        e.g. when the child was killed by a signal.
    duration_ms: int
        Wall-clock time between spawn and exit, in whole milliseconds.
    """

    stdout: str
    stderr: str
    exit_code: int
    duration_ms: int


class ExecutionError(Exception):
    """Base class for failures that prevent a run from producing a result.

    ``str(exc)`` is meant to be shown to the end user as-is.
    """

    def __init__(self, language: str, message: str) -> None:
        super().__init__(message)
        self.language = language


class SpawnError(ExecutionError):
    """The OS could not start the target program."""

    def __init__(self, language: str, program: str, message: str, cause: OSError) -> None:
        super().__init__(language, message)
        self.program = program
        self.cause = cause


class UnsupportedLanguageError(ExecutionError):
    """The language has no direct execution strategy."""

    def __init__(self, language: str) -> None:
        super().__init__(
            language,
            f"Language '{language}' requires a full build toolchain "
            "and cannot be run directly here.",
        )


def _decode(data: Optional[bytes]) -> str:
    return (data or b"").decode("utf-8", errors="replace")


def _normalize_exit_code(returncode: Optional[int]) -> int:
    # POSIX reports signal termination as -signum; there is no exit status then.
    if returncode is None:
        return -1
    if os.name == "posix" and returncode < 0:
        return -1
    return returncode


class ProgramExecutor(abc.ABC):
    """
    Abstract base class for executors.

    Executors locate their program relative to the ``binaries``
    directory of a resource root.  The resource root is supplied by the
    caller and must already exist; executors never create it.
    """

    @abc.abstractmethod
    def execute(self, language: str, resource_root: Path) -> RunResult:
        """Run the program for ``language``.

        Parameters
        ----------
        language: str
            The language identifier, used for error messages.
        resource_root: Path
            Directory containing the ``binaries`` folder.

        Returns
        -------
        RunResult
            Captures stdout, stderr, exit status and duration.

        Raises
        ------
        SpawnError
            If the program could not be started.
        """
        raise NotImplementedError

    @staticmethod
    def binaries_dir(resource_root: Path) -> Path:
        return Path(resource_root) / BINARIES_DIRNAME

    def _run_subprocess(self, args: List[str]) -> RunResult:
        """
        Spawn ``args``, wait for it and capture its output.

        The timer brackets only the child's lifetime.  ``OSError`` from
        the spawn is left to the caller, which knows which hint to give.
        """
        start_time = time.perf_counter()
        process = subprocess.Popen(
            args,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
        stdout, stderr = process.communicate()
        duration = int((time.perf_counter() - start_time) * 1000)
        return RunResult(
            stdout=_decode(stdout),
            stderr=_decode(stderr),
            exit_code=_normalize_exit_code(process.returncode),
            duration_ms=duration,
        )
