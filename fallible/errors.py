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

"""Error taxonomy — DemoError variants and the erased AnyError.

DemoError is a closed set of failure causes:
  IoFailure     wraps an OSError
  ParseFailure  wraps a ValueError from numeric parsing
  RuleViolation carries a business-rule message, no cause

AnyError keeps only a description and an optional cause. It is used at
module boundaries where callers report failures instead of branching
on their kind.

Importing this module registers the conversions consumed by
``propagating``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from fallible.result import register_conversion


@runtime_checkable
class Describable(Protocol):
    """Capability shared by every error kind in this package."""

    def describe(self) -> str: ...

    def cause(self) -> Any: ...


# ── DemoError ──────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class DemoError(ABC):
    """Base of the closed demo error taxonomy. Only the variants are built."""

    @abstractmethod
    def describe(self) -> str: ...

    def cause(self) -> BaseException | None:
        return None

    def __str__(self) -> str:
        return self.describe()

    @staticmethod
    def from_io(error: OSError) -> IoFailure:
        return IoFailure(source=error)

    @staticmethod
    def from_parse(error: ValueError) -> ParseFailure:
        return ParseFailure(source=error)


@dataclass(frozen=True, slots=True)
class IoFailure(DemoError):
    source: OSError

    def describe(self) -> str:
        return f"IO error: {self.source}"

    def cause(self) -> OSError:
        return self.source


@dataclass(frozen=True, slots=True)
class ParseFailure(DemoError):
    source: ValueError

    def describe(self) -> str:
        return f"Parse error: {self.source}"

    def cause(self) -> ValueError:
        return self.source


@dataclass(frozen=True, slots=True)
class RuleViolation(DemoError):
    message: str

    def describe(self) -> str:
        return self.message


# ── Erased ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class AnyError:
    """Failure reduced to its description and optional cause."""

    description: str
    source: Any = None

    def describe(self) -> str:
        return self.description

    def cause(self) -> Any:
        return self.source

    def __str__(self) -> str:
        return self.description


def erase(error: Any) -> AnyError:
    """Collapse a concrete error kind into AnyError.

    Accepts anything Describable, any exception, or a plain message.
    The erased value keeps the original's description and cause, not the
    original itself.
    """
    if isinstance(error, AnyError):
        return error
    if isinstance(error, Describable):
        return AnyError(description=error.describe(), source=error.cause())
    if isinstance(error, BaseException):
        return AnyError(description=str(error), source=error.__cause__)
    if isinstance(error, str):
        return AnyError(description=error)
    raise TypeError(f"Cannot erase {type(error).__name__} into AnyError")


def _describe(error: Any) -> str:
    if isinstance(error, Describable):
        return error.describe()
    return str(error)


def _cause_of(error: Any) -> Any:
    if isinstance(error, Describable):
        return error.cause()
    if isinstance(error, BaseException):
        return error.__cause__
    return None


def format_chain(error: Any) -> str:
    """Render ``error`` followed by every cause, joined with ``": "``."""
    parts: list[str] = []
    seen: set[int] = set()
    current = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        parts.append(_describe(current))
        current = _cause_of(current)
    return ": ".join(parts)


register_conversion(OSError, DemoError, DemoError.from_io)
register_conversion(ValueError, DemoError, DemoError.from_parse)

for _source in (DemoError, OSError, ValueError, ZeroDivisionError, str):
    register_conversion(_source, AnyError, erase)
