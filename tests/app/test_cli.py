from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from apimuslim.ui import cli as cli_module

if TYPE_CHECKING:
    import argparse

    from apimuslim.config import AppConfig


def test_cal_hijr_prints_conversion(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["cal", "hijr", "2024-03-15", "--tz", "Asia/Jakarta"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["method"] == "standar"
    assert payload["ce"]["dayName"] == "Jumat"
    assert payload["ce"]["monthName"] == "Maret"
    assert (payload["hijr"]["year"], payload["hijr"]["month"], payload["hijr"]["day"]) == (
        1445,
        9,
        5,
    )
    assert payload["hijr"]["monthName"] == "Ramadan"


def test_cal_ce_prints_conversion(capsys: pytest.CaptureFixture[str]) -> None:
    cli_module.main(["cal", "ce", "1445-09-01", "--method", "umalqura", "--tz", "Asia/Jakarta"])

    payload = json.loads(capsys.readouterr().out)
    assert payload["method"] == "islamic-umalqura"
    assert (payload["ce"]["year"], payload["ce"]["month"], payload["ce"]["day"]) == (2024, 3, 11)
    assert payload["ce"]["dayName"] == "Senin"


def test_cal_invalid_date_exits_with_validation_code() -> None:
    with pytest.raises(SystemExit) as exc:
        cli_module.main(["cal", "hijr", "2024-02-30"])

    assert exc.value.code == 2


def test_serve_uses_config_and_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    captured: dict[str, object] = {}

    def fake_serve(args: argparse.Namespace, config: AppConfig) -> None:
        captured["host"] = args.host or config.host
        captured["port"] = args.port or config.port

    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.setattr(cli_module, "_serve", fake_serve)

    cli_module.main(["serve"])
    assert captured == {"host": "0.0.0.0", "port": 8123}  # noqa: S104

    cli_module.main(["serve", "--host", "127.0.0.1", "--port", "9000"])
    assert captured == {"host": "127.0.0.1", "port": 9000}


def test_serve_failure_exits_with_error_code(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing_serve(*_: object) -> None:
        raise RuntimeError("port in use")

    monkeypatch.setattr(cli_module, "_serve", failing_serve)

    with pytest.raises(SystemExit) as exc:
        cli_module.main(["serve"])

    assert exc.value.code == 1
