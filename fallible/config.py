# SPDX-License-Identifier: MIT
#
#  █████╗ ██████╗  █████╗ ███████╗
# ██╔══██╗██╔══██╗██╔══██╗██╔════╝
# ███████║██████╔╝███████║███████╗
# ██╔══██║██╔══██╗██╔══██║╚════██║
# ██║  ██║██║  ██║██║  ██║███████║
# ╚═╝  ╚═╝╚═╝  ╚═╝╚═╝  ╚═╝╚══════╝
# Copyright (C) 2026 Riza Emre ARAS <r.emrearas@proton.me>
#
# Licensed under the MIT License.
# See LICENSE and THIRD_PARTY_LICENSES for details.

"""Loads demo.yaml into typed dataclasses.

Pure loader — no demo logic. Every key is optional; missing keys keep
the built-in defaults. Relative paths resolve against the directory
holding the YAML file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from fallible.errors import AnyError
from fallible.logger import LEVELS
from fallible.primitives import read_text
from fallible.result import Fail, Ok, Result, propagating

_DEFAULT_NUMBERS = Path("numbers.txt")
_DEFAULT_SOURCE = Path(__file__).resolve().with_name("demos.py")
_TOP_LEVEL_KEYS = {"log_level", "number_file", "source_file", "inputs"}


@dataclass(frozen=True, slots=True)
class InputsConfig:
    """Literal inputs fed to the demo sections."""
    number: str = "123"
    doubled: str = "10"
    bad: str = "abc"
    reciprocal: str = "5"


@dataclass(frozen=True, slots=True)
class DemoConfig:
    log_level: str = "INFO"
    number_file: Path = _DEFAULT_NUMBERS
    source_file: Path = _DEFAULT_SOURCE
    inputs: InputsConfig = field(default_factory=InputsConfig)


def _resolve(base: Path, value: Any, default: Path) -> Path:
    if value is None:
        return default
    path = Path(str(value))
    return path if path.is_absolute() else base / path


def _build_inputs(raw: dict[str, Any]) -> InputsConfig:
    return InputsConfig(**{key: str(value) for key, value in raw.items()})


@propagating(AnyError)
def load_config(path: Path) -> Result[DemoConfig, AnyError]:
    """Load demo.yaml into DemoConfig. No validation beyond structure."""
    text = read_text(path).map_error(
        lambda exc: AnyError(description=f"Config file unreadable: {path}", source=exc)
    ).try_()

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        return Fail(error=AnyError(description=f"YAML parse error in {path}", source=exc))

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return Fail(error=AnyError(description=f"Config structure error: {path} must hold a mapping"))

    unknown = set(raw) - _TOP_LEVEL_KEYS
    if unknown:
        keys = sorted(unknown, key=str)
        return Fail(error=AnyError(description=f"Config structure error: unknown keys {keys}"))

    level = str(raw.get("log_level", "INFO")).upper()
    if level not in LEVELS:
        return Fail(error=AnyError(description=f"Config structure error: unknown log_level {level!r}"))

    base = path.parent
    try:
        config = DemoConfig(
            log_level=level,
            number_file=_resolve(base, raw.get("number_file"), _DEFAULT_NUMBERS),
            source_file=_resolve(base, raw.get("source_file"), _DEFAULT_SOURCE),
            inputs=_build_inputs(raw.get("inputs") or {}),
        )
    except (AttributeError, TypeError) as exc:
        return Fail(error=AnyError(description=f"Config structure error: {exc}", source=exc))

    return Ok(data=config)
