"""
Dispatch a language identifier to its hello-world program.

:func:`run` is the single entry point used by the API.  It resolves the
language, selects the executor for the strategy and returns the
executor's :class:`~helloexec.executor.RunResult`.  Failures are raised
as :class:`~helloexec.executor.ExecutionError` subclasses whose message
can be shown to the user directly.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Union

from .executor import (
    Binary,
    BinaryExecutor,
    Interpreter,
    InterpreterExecutor,
    ProgramExecutor,
    RunResult,
    SpawnError,
    UnsupportedLanguageError,
    resolve,
)

logger = logging.getLogger("helloexec.dispatcher")


def executor_for(language: str) -> ProgramExecutor:
    """Return the executor for ``language`` or raise if it cannot be run."""
    strategy = resolve(language)
    logger.debug("Resolved %r to %s", language, strategy)
    if isinstance(strategy, Binary):
        return BinaryExecutor(strategy)
    if isinstance(strategy, Interpreter):
        return InterpreterExecutor(strategy)
    raise UnsupportedLanguageError(language)


def run(language: str, resource_root: Union[str, os.PathLike]) -> RunResult:
    """Run the hello-world program for ``language``.

    Parameters
    ----------
    language: str
        Language identifier, looked up verbatim.
    resource_root: str or PathLike
        Installed resource directory.  Must already contain ``binaries``.

    Returns
    -------
    RunResult
        Output, exit code and duration of the child.  A non-zero exit
        code is still a successful run.

    Raises
    ------
    UnsupportedLanguageError
        If the language has no direct execution strategy.  Nothing is
        spawned in that case.
    SpawnError
        If the binary or interpreter could not be started.
    """
    try:
        executor = executor_for(language)
    except UnsupportedLanguageError:
        logger.warning("Refusing to run unsupported language %r", language)
        raise

    try:
        result = executor.execute(language, Path(resource_root))
    except SpawnError as exc:
        logger.warning("Could not start program for %r: %s", language, exc)
        raise

    logger.info(
        "Ran %s: exit_code=%s, duration_ms=%s",
        language,
        result.exit_code,
        result.duration_ms,
    )
    return result
