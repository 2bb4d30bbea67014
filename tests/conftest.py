"""Shared fixtures: temporary number files and demo configs."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def number_file(tmp_path: Path) -> Path:
    path = tmp_path / "numbers.txt"
    path.write_text("  42\n", encoding="utf-8")
    return path


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    return tmp_path / "does-not-exist.txt"


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    """Write YAML text to a config file in tmp_path and return its path."""

    def _write(text: str) -> Path:
        path = tmp_path / "demo.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
