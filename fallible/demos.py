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

"""Demo sections — each one exercises part of the Result toolkit.

Sections run in order:
  1. Basics: predicates, unwrap_or, branching on the variant
  2. Propagation: try_() with OSError/ValueError → DemoError conversion
  3. Combinators: map, map_error, and_then
  4. Custom error: DemoError read from a number file
  5. Erased error: the same read, collapsed into AnyError

Narration goes to stdout. Recoverable failures are logged as warnings;
only the propagation section can end the run early.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from fallible.config import DemoConfig
from fallible.errors import AnyError, DemoError, RuleViolation
from fallible.logger import DemoSummary, get_logger
from fallible.primitives import parse_float, parse_int, read_text
from fallible.result import Fail, Ok, Result, propagating

log = get_logger(__name__)

T = TypeVar("T")
E = TypeVar("E")

EVEN_NUMBER = "数字不能是偶数"
ZERO_DIVISOR = "除数不能为 0"
NOT_A_NUMBER = "不是数字"


def _heading(title: str) -> None:
    print(f"\n=== {title} ===")


def _record(summary: DemoSummary, section: str, result: Result[T, E]) -> Result[T, E]:
    counter = summary.counter(section)
    if result.ok:
        counter.ok += 1
    else:
        counter.failed += 1
    return result


# ── Basics ─────────────────────────────────────────────────────


def basics() -> Result[None, AnyError]:
    ok_value: Result[int, str] = Ok(data=42)
    err_value: Result[int, str] = Fail(error="boom")

    print(f"ok_value.is_success() = {ok_value.is_success()}")
    print(f"err_value.is_failure() = {err_value.is_failure()}")
    print(f"unwrap_or: {err_value.unwrap_or(-1)}")

    if ok_value.ok:
        print(f"match Ok: {ok_value.data}")
    else:
        print(f"match Fail: {ok_value.error}")

    return Ok(data=None)


# ── Propagation ────────────────────────────────────────────────


def _reject_even(n: int) -> Result[int, DemoError]:
    # Arbitrary demo rule.
    if n % 2 == 0:
        return Fail(error=RuleViolation(message=EVEN_NUMBER))
    return Ok(data=n)


@propagating(DemoError)
def check_odd(text: str) -> Result[int, DemoError]:
    """Parse ``text`` and reject even numbers."""
    n = parse_int(text).try_()
    return _reject_even(n)


@propagating(DemoError)
def demonstrate_propagation(config: DemoConfig) -> Result[None, DemoError]:
    """Parse, read a file, then apply the odd-number rule.

    Every step uses try_(); the first failure is converted to DemoError
    and returned.
    """
    n = parse_int(config.inputs.number).try_()
    print(f"parsed = {n}")

    content = read_text(config.source_file).try_()
    print(f"{config.source_file.name} length = {len(content)}")

    _reject_even(n).try_()
    return Ok(data=None)


# ── Combinators ────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class CombinatorOutcome:
    doubled: Result[int, ValueError]
    mapped_error: Result[int, str]
    chained: Result[float, str]


def reciprocal(x: float) -> Result[float, str]:
    if x == 0.0:
        return Fail(error=ZERO_DIVISOR)
    return Ok(data=1.0 / x)


def demonstrate_combinators(config: DemoConfig) -> CombinatorOutcome:
    inputs = config.inputs

    doubled = parse_int(inputs.doubled).map(lambda v: v * 2)
    print(f"map doubled = {doubled!r}")

    mapped_error = parse_int(inputs.bad).map_error(lambda e: f"解析失败: {e}")
    print(f"map_error => {mapped_error!r}")

    chained = (
        parse_float(inputs.reciprocal)
        .map_error(lambda _: NOT_A_NUMBER)
        .and_then(reciprocal)
    )
    print(f"and_then chained = {chained!r}")

    return CombinatorOutcome(doubled=doubled, mapped_error=mapped_error, chained=chained)


# ── Number file ────────────────────────────────────────────────


@propagating(DemoError)
def read_number_from_file(path: Path | str) -> Result[int, DemoError]:
    """Read an unsigned integer from the trimmed contents of ``path``."""
    content = read_text(path).try_()
    return Ok(data=parse_int(content, unsigned=True).try_())


@propagating(AnyError)
def read_number_generic(path: Path | str) -> Result[int, AnyError]:
    """Same as read_number_from_file, with errors erased to AnyError."""
    content = read_text(path).try_()
    return Ok(data=parse_int(content, unsigned=True).try_())


# ── Run ────────────────────────────────────────────────────────


@propagating(AnyError)
def run(config: DemoConfig, summary: DemoSummary) -> Result[None, AnyError]:
    """Run every section in order, counting outcomes in ``summary``."""
    print("=== Result 基本用法 ===")
    _record(summary, "basics", basics()).try_()

    _heading("try_() 传播错误")
    _record(summary, "propagation", demonstrate_propagation(config)).try_()

    _heading("map / map_error / and_then 组合器")
    outcome = demonstrate_combinators(config)
    _record(summary, "combinators", outcome.chained)

    _heading("自定义错误类型与转换")
    number = _record(summary, "custom_error", read_number_from_file(config.number_file))
    if number.ok:
        print(f"读取成功: {number.data}")
    else:
        log.warning("读取失败: %s", number.error)

    _heading("将具体错误抹平为 AnyError")
    erased = _record(summary, "erased", read_number_generic(config.number_file))
    if erased.ok:
        print(f"erased 读取成功: {erased.data}")
    else:
        log.warning("erased 读取失败: %s", erased.error)

    return Ok(data=None)
