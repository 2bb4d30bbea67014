from __future__ import annotations

import runpy
from pathlib import Path
from typing import Callable

import pytest

from fallible import cli
from fallible.logger import set_level


@pytest.fixture(autouse=True)
def _restore_level():
    yield
    set_level("INFO")


def test_main_succeeds_with_config(
    write_config: Callable[[str], Path],
    number_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    path = write_config(f"number_file: {number_file}\n")
    assert cli.main(["--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "读取成功: 42" in out
    assert "erased 读取成功: 42" in out


def test_main_fails_on_rule_violation(
    write_config: Callable[[str], Path],
    number_file: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    path = write_config(f'number_file: {number_file}\ninputs:\n  number: "124"\n')
    assert cli.main(["--config", str(path)]) == 1
    assert "Demo failed: 数字不能是偶数" in caplog.text


def test_main_fails_on_bad_config(missing_file: Path, caplog: pytest.LogCaptureFixture) -> None:
    assert cli.main(["--config", str(missing_file)]) == 1
    assert "Config file unreadable" in caplog.text


def test_main_log_level_flag(
    write_config: Callable[[str], Path],
    number_file: Path,
    caplog: pytest.LogCaptureFixture,
) -> None:
    path = write_config(f"number_file: {number_file}\n")
    assert cli.main(["--config", str(path), "--log-level", "WARNING"]) == 0
    assert "Demo Summary" not in caplog.text


def test_main_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "LOUD"])


def test_main_reports_invalid_number_path(
    write_config: Callable[[str], Path],
    caplog: pytest.LogCaptureFixture,
) -> None:
    path = write_config('number_file: "a\\0b"\n')
    assert cli.main(["--config", str(path)]) == 0
    assert "读取失败: IO error: invalid path" in caplog.text


def test_module_entry_point_exits_with_status(
    missing_file: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr("sys.argv", ["fallible", "--config", str(missing_file)])
    with pytest.raises(SystemExit) as info:
        runpy.run_module("fallible", run_name="__main__")
    assert info.value.code == 1
