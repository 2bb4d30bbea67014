from __future__ import annotations

import pytest

from fallible.errors import AnyError, DemoError, IoFailure, ParseFailure
from fallible.primitives import parse_int
from fallible.result import (
    EarlyReturn,
    Fail,
    Ok,
    Result,
    convert,
    propagating,
    register_conversion,
)


class _LowError:
    pass


class _HighError:
    def __init__(self, low: _LowError) -> None:
        self.low = low


class _Unrelated:
    pass


register_conversion(_LowError, _HighError, _HighError)


# ── convert ────────────────────────────────────────────────────


def test_convert_uses_registered_pair() -> None:
    low = _LowError()
    high = convert(low, _HighError)
    assert isinstance(high, _HighError)
    assert high.low is low


def test_convert_passes_target_instances_through() -> None:
    high = _HighError(_LowError())
    assert convert(high, _HighError) is high


def test_convert_follows_subclasses_of_registered_source() -> None:
    err = FileNotFoundError(2, "No such file or directory")
    assert convert(err, DemoError) == IoFailure(source=err)


def test_convert_without_registration_is_type_error() -> None:
    with pytest.raises(TypeError, match="_Unrelated to DemoError"):
        convert(_Unrelated(), DemoError)


def test_convert_does_not_coerce_structurally() -> None:
    # _HighError has no conversion to AnyError even though it could be str()-ed
    with pytest.raises(TypeError):
        convert(_HighError(_LowError()), AnyError)


# ── propagating / try_ ─────────────────────────────────────────


def test_try_binds_success_value() -> None:
    @propagating(DemoError)
    def double(text: str) -> Result[int, DemoError]:
        return Ok(data=parse_int(text).try_() * 2)

    assert double("21") == Ok(data=42)


def test_shorthand_matches_manual_conversion() -> None:
    parsed = parse_int("abc")

    @propagating(DemoError)
    def shorthand() -> Result[int, DemoError]:
        return Ok(data=parsed.try_())

    def manual() -> Result[int, DemoError]:
        if parsed.ok:
            return Ok(data=parsed.data)
        return Fail(error=DemoError.from_parse(parsed.error))

    assert shorthand() == manual()
    assert isinstance(shorthand().error, ParseFailure)


def test_try_short_circuits_remaining_steps() -> None:
    reached: list[str] = []

    @propagating(DemoError)
    def pipeline() -> Result[None, DemoError]:
        parse_int("x").try_()
        reached.append("after")
        return Ok(data=None)

    assert pipeline().is_failure()
    assert reached == []


def test_try_evaluates_step_once() -> None:
    calls: list[int] = []

    def step() -> Result[int, ValueError]:
        calls.append(1)
        return Fail(error=ValueError("bad"))

    @propagating(DemoError)
    def pipeline() -> Result[int, DemoError]:
        return Ok(data=step().try_())

    pipeline()
    assert calls == [1]


def test_failure_already_of_target_type_is_unchanged() -> None:
    original = DemoError.from_parse(ValueError("bad"))

    @propagating(DemoError)
    def pipeline() -> Result[int, DemoError]:
        return Ok(data=Fail(error=original).try_())

    assert pipeline() == Fail(error=original)


def test_missing_conversion_surfaces_as_type_error() -> None:
    @propagating(DemoError)
    def pipeline() -> Result[int, DemoError]:
        return Ok(data=Fail(error=_Unrelated()).try_())

    with pytest.raises(TypeError):
        pipeline()


def test_except_exception_does_not_intercept_propagation() -> None:
    @propagating(DemoError)
    def guarded(text: str) -> Result[int, DemoError]:
        try:
            value = parse_int(text).try_()
        except Exception:
            return Ok(data=-1)
        return Ok(data=value)

    assert guarded("x").is_failure()


def test_nearest_propagating_frame_converts() -> None:
    @propagating(DemoError)
    def inner() -> Result[int, DemoError]:
        return Ok(data=parse_int("x").try_())

    @propagating(AnyError)
    def outer() -> Result[int, AnyError]:
        return Ok(data=inner().try_())

    result = outer()
    assert isinstance(result.error, AnyError)
    assert result.error.describe().startswith("Parse error:")


def test_try_outside_propagating_raises() -> None:
    with pytest.raises(EarlyReturn):
        Fail(error="loose").try_()
