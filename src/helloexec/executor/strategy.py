"""
Execution strategies for the supported languages.

Every language identifier maps to exactly one strategy.  Compiled
languages ship a standalone executable in the ``binaries`` directory,
scripting languages ship a script that is handed to an interpreter
found on ``PATH``, and anything else cannot be run directly.

Adding a language means adding a row to :data:`STRATEGIES`; no other
code needs to change.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Union


@dataclass(frozen=True)
class Binary:
    """A precompiled executable located under ``binaries/``."""

    name: str

    mode = "binary"


@dataclass(frozen=True)
class Interpreter:
    """An interpreter program invoked on a script under ``binaries/``."""

    program: str
    script: str

    mode = "interpreter"


@dataclass(frozen=True)
class Unsupported:
    """The language needs a full build toolchain and cannot be run here."""

    mode = "unsupported"


ExecutionStrategy = Union[Binary, Interpreter, Unsupported]


STRATEGIES: Dict[str, ExecutionStrategy] = {
    "asm": Binary("hello_asm"),
    "c": Binary("hello_c"),
    "cpp": Binary("hello_cpp"),
    "zig": Binary("hello_zig"),
    "fortran": Binary("hello_fortran"),
    "rust": Binary("hello_rust"),
    "go": Binary("hello_go"),
    "d": Binary("hello_d"),
    "odin": Binary("hello_odin"),
    "python": Interpreter("python3", "hello.py"),
    "ruby": Interpreter("ruby", "hello.rb"),
    "lua": Interpreter("lua", "hello.lua"),
    "perl": Interpreter("perl", "hello.pl"),
    "javascript": Interpreter("node", "hello.js"),
    "typescript": Interpreter("ts-node", "hello.ts"),
    "php": Interpreter("php", "hello.php"),
    "bash": Interpreter("bash", "hello.sh"),
    "r": Interpreter("Rscript", "hello.r"),
}

_UNSUPPORTED = Unsupported()


def resolve(language: str) -> ExecutionStrategy:
    """Return the execution strategy for ``language``.

    Lookup is exact (no case folding).  Unknown identifiers, including
    the empty string, resolve to :class:`Unsupported`.
    """
    return STRATEGIES.get(language, _UNSUPPORTED)


def supported_languages() -> List[str]:
    return list(STRATEGIES)
