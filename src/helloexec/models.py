"""Pydantic models for request and response bodies.

These mirror the values returned by the dispatcher so the UI can render
them without knowing anything about processes.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .executor import Binary, ExecutionStrategy, Interpreter, RunResult


class RunRequest(BaseModel):
    """Request body for running a hello-world program."""

    language: str = Field(
        ..., description="Language identifier, e.g. 'c' or 'python'. Case sensitive."
    )


class RunResponse(BaseModel):
    """Captured outcome of a run."""

    stdout: str
    stderr: str
    exit_code: int
    duration_ms: int

    @classmethod
    def from_result(cls, result: RunResult) -> "RunResponse":
        return cls(
            stdout=result.stdout,
            stderr=result.stderr,
            exit_code=result.exit_code,
            duration_ms=result.duration_ms,
        )


class LanguageInfo(BaseModel):
    """How a language is executed."""

    language: str
    mode: str = Field(..., description="'binary', 'interpreter' or 'unsupported'.")
    program: Optional[str] = Field(
        default=None,
        description="Binary name or interpreter program. None when unsupported.",
    )
    script: Optional[str] = Field(
        default=None, description="Script file for interpreted languages."
    )

    @classmethod
    def from_strategy(cls, language: str, strategy: ExecutionStrategy) -> "LanguageInfo":
        if isinstance(strategy, Binary):
            return cls(language=language, mode=strategy.mode, program=strategy.name)
        if isinstance(strategy, Interpreter):
            return cls(
                language=language,
                mode=strategy.mode,
                program=strategy.program,
                script=strategy.script,
            )
        return cls(language=language, mode=strategy.mode)
