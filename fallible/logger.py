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

"""Structured logger with per-section counters and final summary.

Collects ok/failed counts per demo section so the entry point can
print a summary once the run ends, whatever the outcome.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

_FMT = "%(asctime)s [%(levelname)s] %(name)s — %(message)s"

LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

_loggers: dict[str, logging.Logger] = {}
_level = logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger configured with a consistent format."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FMT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(_level)
    _loggers[name] = logger
    return logger


def set_level(level: str) -> None:
    """Apply a level name to every logger handed out by get_logger.

    Unknown names fall back to INFO.
    """
    global _level
    _level = LEVELS.get(level.upper(), logging.INFO)
    for logger in _loggers.values():
        logger.setLevel(_level)


@dataclass
class SectionCounter:
    """Tracks ok/failed counts for a single demo section."""

    name: str
    ok: int = 0
    failed: int = 0


@dataclass
class DemoSummary:
    """Accumulates counters across all demo sections."""

    sections: dict[str, SectionCounter] = field(default_factory=dict)

    def counter(self, name: str) -> SectionCounter:
        """Get or create a counter for a named section."""
        if name not in self.sections:
            self.sections[name] = SectionCounter(name=name)
        return self.sections[name]

    @property
    def failed(self) -> int:
        return sum(s.failed for s in self.sections.values())

    def report(self) -> str:
        """Format a human-readable summary block."""
        lines: list[str] = ["", "Demo Summary", "=" * 40]
        for section in self.sections.values():
            parts = [f"{section.name}: {section.ok} ok"]
            if section.failed:
                parts.append(f"{section.failed} failed")
            lines.append("  ".join(parts))
        lines.append("=" * 40)
        return "\n".join(lines)
