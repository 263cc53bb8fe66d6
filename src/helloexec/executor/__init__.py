"""
Execution backends for the hello-world dispatcher.

The resolver in ``strategy.py`` classifies a language identifier and
the dispatcher picks the matching executor: ``BinaryExecutor`` for
precompiled programs and ``InterpreterExecutor`` for scripts.  Both
share the spawn-and-capture helper of ``ProgramExecutor`` in
``base.py``.
"""

from .base import (
    ExecutionError,
    ProgramExecutor,
    RunResult,
    SpawnError,
    UnsupportedLanguageError,
)
from .binary_executor import BinaryExecutor
from .interpreter_executor import InterpreterExecutor
from .strategy import (
    STRATEGIES,
    Binary,
    ExecutionStrategy,
    Interpreter,
    Unsupported,
    resolve,
    supported_languages,
)

__all__ = [
    "ExecutionError",
    "ProgramExecutor",
    "RunResult",
    "SpawnError",
    "UnsupportedLanguageError",
    "BinaryExecutor",
    "InterpreterExecutor",
    "STRATEGIES",
    "Binary",
    "ExecutionStrategy",
    "Interpreter",
    "Unsupported",
    "resolve",
    "supported_languages",
]
