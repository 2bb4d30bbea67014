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

"""Command-line entry point — the only fatal boundary.

Runs every Result demo section in order and prints what each step
produced. An unhandled failure is logged with its full cause chain and
ends the process with exit status 1.

Sections: Basics -> Propagation -> Combinators -> Custom error -> Erased error

Usage: fallible-demo [--config=demo.yaml] [--log-level=DEBUG]
       python -m fallible [--config=demo.yaml]
"""

from __future__ import annotations

import argparse
from pathlib import Path

from fallible.config import DemoConfig, load_config
from fallible.demos import run
from fallible.errors import format_chain
from fallible.logger import LEVELS, DemoSummary, get_logger, set_level

log = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fallible-demo",
        description="Walk through Ok/Fail, try_() propagation and error conversion",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to demo YAML (default: built-in settings)",
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LEVELS),
        default=None,
        help="Override the configured log level",
    )
    args = parser.parse_args(argv)

    config = DemoConfig()
    if args.config is not None:
        cfg_result = load_config(args.config.resolve())
        if not cfg_result.ok:
            log.error(format_chain(cfg_result.error))
            return 1
        config = cfg_result.data

    set_level(args.log_level or config.log_level)
    log.info("Number file: %s", config.number_file)

    summary = DemoSummary()
    result = run(config, summary)
    log.info(summary.report())
    if not result.ok:
        log.error("Demo failed: %s", format_chain(result.error))
        return 1

    return 0
