"""Shared fixtures: throwaway resource roots with stand-in programs."""

from __future__ import annotations

import stat
from pathlib import Path

import pytest


@pytest.fixture
def resource_root(tmp_path: Path) -> Path:
    """A resource root with an empty ``binaries`` directory."""
    (tmp_path / "binaries").mkdir()
    return tmp_path


@pytest.fixture
def make_program(resource_root: Path):
    """Return a helper that writes an executable shell script into ``binaries``."""

    def _make(name: str, body: str, executable: bool = True) -> Path:
        path = resource_root / "binaries" / name
        path.write_text("#!/bin/sh\n" + body, encoding="utf-8")
        if executable:
            path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return path

    return _make
