"""Tests for running hello-world programs through the dispatcher.

Binaries are stood in for by ``/bin/sh`` scripts, so these tests only
run on POSIX hosts.
"""

from __future__ import annotations

import os
import subprocess
import sys

import pytest

from helloexec import dispatcher
from helloexec.executor import (
    STRATEGIES,
    BinaryExecutor,
    ExecutionError,
    Interpreter,
    InterpreterExecutor,
    RunResult,
    SpawnError,
    UnsupportedLanguageError,
)

pytestmark = pytest.mark.skipif(os.name != "posix", reason="requires /bin/sh")


def test_binary_hello_world(resource_root, make_program):
    make_program("hello_c", 'echo "Hello, World!"\n')

    result = dispatcher.run("c", resource_root)

    assert isinstance(result, RunResult)
    assert result.exit_code == 0
    assert "Hello, World!" in result.stdout
    assert result.stderr.strip() == ""
    assert result.duration_ms >= 0


def test_accepts_string_resource_root(resource_root, make_program):
    make_program("hello_go", 'echo "Hello, Go!"\n')

    result = dispatcher.run("go", str(resource_root))

    assert "Hello, Go!" in result.stdout


def test_stderr_and_nonzero_exit_are_captured(resource_root, make_program):
    make_program("hello_rust", 'echo out\necho oops >&2\nexit 3\n')

    result = dispatcher.run("rust", resource_root)

    assert result.exit_code == 3
    assert "out" in result.stdout
    assert "oops" in result.stderr


def test_binary_receives_no_arguments(resource_root, make_program):
    make_program("hello_cpp", 'echo "argc=$#"\n')

    result = dispatcher.run("cpp", resource_root)

    assert result.stdout.strip() == "argc=0"


def test_signal_termination_reports_minus_one(resource_root, make_program):
    make_program("hello_zig", "kill -9 $$\n")

    result = dispatcher.run("zig", resource_root)

    assert result.exit_code == -1


def test_invalid_bytes_are_replaced(resource_root, make_program):
    make_program("hello_asm", "printf 'ok\\377\\376end'\nprintf '\\377' >&2\n")

    result = dispatcher.run("asm", resource_root)

    assert result.exit_code == 0
    assert "ok" in result.stdout
    assert "end" in result.stdout
    assert "�" in result.stdout
    assert "�" in result.stderr


def test_missing_binary_is_spawn_error(resource_root):
    with pytest.raises(SpawnError) as excinfo:
        dispatcher.run("fortran", resource_root)

    err = excinfo.value
    assert err.program == "hello_fortran"
    assert err.language == "fortran"
    assert isinstance(err.cause, FileNotFoundError)
    message = str(err)
    assert "Failed to run 'hello_fortran'" in message
    assert "Run build-binaries.sh first." in message


def test_non_executable_binary_is_spawn_error(resource_root, make_program):
    make_program("hello_d", 'echo "Hello"\n', executable=False)

    with pytest.raises(SpawnError) as excinfo:
        dispatcher.run("d", resource_root)

    assert isinstance(excinfo.value.cause, PermissionError)
    assert "hello_d" in str(excinfo.value)


def test_interpreter_runs_script(resource_root, monkeypatch):
    script = resource_root / "binaries" / "hello.py"
    script.write_text(
        "import sys\nprint('Hello, World!')\nprint(len(sys.argv))\n", encoding="utf-8"
    )
    monkeypatch.setitem(STRATEGIES, "python", Interpreter(sys.executable, "hello.py"))

    result = dispatcher.run("python", resource_root)

    assert result.exit_code == 0
    lines = result.stdout.split()
    assert "Hello," in lines
    # argv holds only the script path
    assert lines[-1] == "1"


def test_interpreter_missing_from_path(resource_root, tmp_path, monkeypatch):
    (resource_root / "binaries" / "hello.rb").write_text("puts 'hi'\n", encoding="utf-8")
    empty = tmp_path / "empty-path"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))

    with pytest.raises(SpawnError) as excinfo:
        dispatcher.run("ruby", resource_root)

    err = excinfo.value
    assert err.program == "ruby"
    message = str(err)
    assert "Failed to launch 'ruby'" in message
    assert "Make sure 'ruby' is installed and on your PATH." in message


def test_unsupported_never_spawns(resource_root, monkeypatch):
    def fail_popen(*args, **kwargs):
        raise AssertionError("no process should be spawned")

    monkeypatch.setattr(subprocess, "Popen", fail_popen)

    with pytest.raises(UnsupportedLanguageError) as excinfo:
        dispatcher.run("java", resource_root)

    assert isinstance(excinfo.value, ExecutionError)
    assert excinfo.value.language == "java"
    assert str(excinfo.value) == (
        "Language 'java' requires a full build toolchain and cannot be run directly here."
    )


def test_lookup_is_case_sensitive(resource_root, make_program):
    make_program("hello_c", 'echo "Hello"\n')

    with pytest.raises(UnsupportedLanguageError):
        dispatcher.run("C", resource_root)


def test_durations_are_measured_per_call(resource_root, make_program):
    make_program("hello_odin", 'echo fast\n')
    fast = dispatcher.run("odin", resource_root)

    make_program("hello_odin", 'sleep 0.3\necho slow\n')
    slow = dispatcher.run("odin", resource_root)

    assert "fast" in fast.stdout
    assert "slow" in slow.stdout
    assert slow.duration_ms >= 300
    assert slow.duration_ms > fast.duration_ms


def test_executor_for_picks_executor():
    assert isinstance(dispatcher.executor_for("c"), BinaryExecutor)
    assert isinstance(dispatcher.executor_for("lua"), InterpreterExecutor)
    with pytest.raises(UnsupportedLanguageError):
        dispatcher.executor_for("swift")


def test_result_is_immutable(resource_root, make_program):
    make_program("hello_c", 'echo "Hello"\n')
    result = dispatcher.run("c", resource_root)

    with pytest.raises(AttributeError):
        result.exit_code = 1

