from __future__ import annotations

from pathlib import Path

import pytest

from enumerant import main as demo


def test_demo_lines_should_render_quantity_type() -> None:
    assert demo.demo_lines() == [
        "QuantityType.LENGTH : QuantityType::LENGTH",
        "QuantityType.LENGTH.name : length",
        "QuantityType.LENGTH.value : 1",
        "str(QuantityType.LENGTH) : QuantityType::LENGTH",
        "int(QuantityType.LENGTH) : 1",
        "True",
        "True",
        "True",
    ]


def test_main_should_print_demo_with_config(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    enumerant_logger,
) -> None:
    config_path = tmp_path / "enumerant.yml"
    config_path.write_text(
        f"telemetry:\n  log_level: INFO\n  log_dir: {tmp_path / 'logs'}\ndemo:\n  measurement_system: imperial\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("ENUMERANT_CONFIG", str(config_path))

    assert demo.main() == 0

    out = capsys.readouterr().out.splitlines()
    assert out == demo.demo_lines()
    log_text = (tmp_path / "logs" / "enumerant.jsonl").read_text(encoding="utf-8")
    assert '"measurement_system": "imperial"' in log_text


def test_main_should_run_with_defaults(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
    enumerant_logger,
) -> None:
    monkeypatch.delenv("ENUMERANT_CONFIG", raising=False)
    assert demo.main() == 0
    assert capsys.readouterr().out.startswith("QuantityType.LENGTH : QuantityType::LENGTH")
