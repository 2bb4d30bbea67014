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

"""Result pattern for error handling without exceptions.

Provides Ok[T] and Fail[E] as an alternative to raising exceptions.
Every function that can fail returns Result[T, E] = Ok[T] | Fail[E].

Combinators (map, map_error, and_then, or_else) chain fallible steps
without branching at every call site. Inside a function decorated with
``@propagating(TargetError)``, ``result.try_()`` unwraps a success or
returns the failure early, converted to ``TargetError`` through the
conversion registry.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, NoReturn, ParamSpec, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
P = ParamSpec("P")


class UnwrapError(Exception):
    """Raised when a Result is unwrapped as the wrong variant."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class EarlyReturn(BaseException):
    """Carries a failure from ``try_()`` to the nearest ``propagating`` frame.

    Derives from BaseException so ``except Exception`` blocks in the
    decorated body do not intercept it.
    """

    def __init__(self, failure: Fail[Any]) -> None:
        super().__init__(failure.error)
        self.failure = failure


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying typed data."""

    data: T
    ok: bool = field(default=True, init=False, repr=False)

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.data

    def expect(self, message: str) -> T:
        return self.data

    def unwrap_err(self) -> NoReturn:
        raise UnwrapError(f"called unwrap_err() on Ok: {self.data!r}")

    def unwrap_or(self, default: T) -> T:
        return self.data

    def unwrap_or_else(self, fn: Callable[[Any], T]) -> T:
        return self.data

    def map(self, fn: Callable[[T], U]) -> Ok[U]:
        return Ok(data=fn(self.data))

    def map_error(self, fn: Callable[[Any], Any]) -> Ok[T]:
        return self

    def and_then(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return fn(self.data)

    def or_else(self, fn: Callable[[Any], Result[T, F]]) -> Ok[T]:
        return self

    def try_(self) -> T:
        """Return the value; the propagation shorthand's success branch."""
        return self.data


@dataclass(frozen=True, slots=True)
class Fail(Generic[E]):
    """Failed result carrying the error value."""

    error: E
    ok: bool = field(default=False, init=False, repr=False)

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        self._raise(f"called unwrap() on Fail: {self.error}")

    def expect(self, message: str) -> NoReturn:
        self._raise(f"{message}: {self.error}")

    def unwrap_err(self) -> E:
        return self.error

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_or_else(self, fn: Callable[[E], T]) -> T:
        return fn(self.error)

    def map(self, fn: Callable[[Any], Any]) -> Fail[E]:
        return self

    def map_error(self, fn: Callable[[E], F]) -> Fail[F]:
        return Fail(error=fn(self.error))

    def and_then(self, fn: Callable[[Any], Any]) -> Fail[E]:
        return self

    def or_else(self, fn: Callable[[E], Result[T, F]]) -> Result[T, F]:
        return fn(self.error)

    def try_(self) -> NoReturn:
        """Abort the enclosing ``propagating`` function with this failure."""
        raise EarlyReturn(self)

    def _raise(self, message: str) -> NoReturn:
        if isinstance(self.error, BaseException):
            raise UnwrapError(message, self.error) from self.error
        raise UnwrapError(message, self.error)


Result = Ok[T] | Fail[E]


# ── Conversions ────────────────────────────────────────────────

_CONVERSIONS: dict[tuple[type, type], Callable[[Any], Any]] = {}


def register_conversion(
    source: type,
    target: type,
    fn: Callable[[Any], Any],
) -> None:
    """Register the conversion applied when a ``source`` error leaves a
    function that returns ``Result[_, target]``."""
    _CONVERSIONS[(source, target)] = fn


def convert(error: Any, target: type[F]) -> F:
    """Convert ``error`` to ``target`` using a registered conversion.

    Errors that already are a ``target`` pass through unchanged. Lookup
    walks the MRO of the error's type, so a conversion registered for
    ``OSError`` also covers ``FileNotFoundError``.

    Raises:
        TypeError: no conversion is registered for the pair.
    """
    if isinstance(error, target):
        return error
    for klass in type(error).__mro__:
        fn = _CONVERSIONS.get((klass, target))
        if fn is not None:
            return fn(error)
    raise TypeError(
        f"No conversion registered from {type(error).__name__} to {target.__name__}"
    )


def propagating(
    target: type[F],
) -> Callable[[Callable[P, Result[T, F]]], Callable[P, Result[T, F]]]:
    """Enable ``try_()`` inside the decorated function.

    A failing ``try_()`` ends the call; the decorated function returns
    ``Fail(convert(error, target))`` instead.
    """

    def decorator(fn: Callable[P, Result[T, F]]) -> Callable[P, Result[T, F]]:
        @functools.wraps(fn)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, F]:
            try:
                return fn(*args, **kwargs)
            except EarlyReturn as exc:
                return Fail(error=convert(exc.failure.error, target))

        return wrapper

    return decorator


def attempt(
    fn: Callable[[], T],
    *exceptions: type[BaseException],
) -> Result[T, BaseException]:
    """Run ``fn``, capturing the listed exception types as Fail."""
    caught = exceptions or (Exception,)
    try:
        return Ok(data=fn())
    except caught as exc:
        return Fail(error=exc)
