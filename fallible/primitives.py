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

"""Lower-level fallible operations — file reads and numeric parsing.

The only place exceptions from the standard library are caught and
turned into Fail values. Errors stay as raw OSError / ValueError;
callers decide whether to convert them into DemoError or AnyError.
"""

from __future__ import annotations

from pathlib import Path

from fallible.logger import get_logger
from fallible.result import Fail, Ok, Result

log = get_logger(__name__)


def read_text(path: Path | str) -> Result[str, OSError]:
    """Read the whole file at ``path`` as UTF-8 text.

    Every failure comes back as an OSError; decode errors and invalid
    paths are chained as its cause.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        log.debug("Read failed: %s", exc)
        return Fail(error=exc)
    except UnicodeDecodeError as exc:
        return Fail(error=_wrap_os_error(f"stream did not contain valid UTF-8: {path}", exc))
    except ValueError as exc:
        return Fail(error=_wrap_os_error(f"invalid path {str(path)!r}: {exc}", exc))

    log.debug("Read %d chars from %s", len(content), path)
    return Ok(data=content)


def _wrap_os_error(message: str, cause: BaseException) -> OSError:
    err = OSError(message)
    err.__cause__ = cause
    return err


def _plain_ascii(text: str) -> bool:
    # int() and float() also take "1_000" and non-ASCII digits.
    return text.isascii() and "_" not in text


def parse_int(text: str, *, unsigned: bool = False) -> Result[int, ValueError]:
    """Parse trimmed ``text`` as an integer.

    Only ASCII digits with an optional sign are accepted. With
    ``unsigned=True`` a leading minus sign is rejected.
    """
    stripped = text.strip()
    if not _plain_ascii(stripped):
        return Fail(error=ValueError(f"invalid literal for int(): {stripped!r}"))
    if unsigned and stripped.startswith("-"):
        return Fail(error=ValueError(f"invalid literal for unsigned int: {stripped!r}"))
    try:
        return Ok(data=int(stripped))
    except ValueError as exc:
        return Fail(error=exc)


def parse_float(text: str) -> Result[float, ValueError]:
    """Parse trimmed ``text`` as a float, ASCII only."""
    stripped = text.strip()
    if not _plain_ascii(stripped):
        return Fail(error=ValueError(f"could not convert string to float: {stripped!r}"))
    try:
        return Ok(data=float(stripped))
    except ValueError as exc:
        return Fail(error=exc)
