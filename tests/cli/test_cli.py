import json
from pathlib import Path

import pytest

from perceptron.cli import main
from perceptron.config import CONFIG_PATH_ENV_VAR


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch) -> None:
    monkeypatch.delenv(CONFIG_PATH_ENV_VAR, raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)


def test_main_prints_reference_decision(capsys) -> None:
    assert main([]) == 0
    assert capsys.readouterr().out == "Perceptron Output: 0\n"


@pytest.mark.parametrize(
    "argv, expected",
    [
        (["--inputs", "1", "1"], "1"),
        (["--inputs", "2", "0", "--bias", "-1.0"], "1"),
        (["--inputs", "--weights", "--bias", "-0.1"], "0"),
    ],
)
def test_main_applies_overrides(argv, expected, capsys) -> None:
    assert main(argv) == 0
    assert capsys.readouterr().out == f"Perceptron Output: {expected}\n"


def test_main_reads_config_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "neuron.json"
    path.write_text(json.dumps({"inputs": [1, 1], "weights": [0.5, -0.5], "bias": 0.1}))
    assert main(["--config", str(path)]) == 0
    assert capsys.readouterr().out == "Perceptron Output: 1\n"


def test_main_reads_config_from_env(tmp_path: Path, monkeypatch, capsys) -> None:
    path = tmp_path / "neuron.json"
    path.write_text(json.dumps({"inputs": [2, 0], "weights": [0.5, -0.5], "bias": -1.0}))
    monkeypatch.setenv(CONFIG_PATH_ENV_VAR, str(path))
    assert main([]) == 0
    assert capsys.readouterr().out == "Perceptron Output: 1\n"


def test_main_length_mismatch_exits_with_error(capsys) -> None:
    assert main(["--inputs", "1", "2", "3"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "does not match input count" in captured.err


def test_main_missing_config_file(tmp_path: Path, capsys) -> None:
    assert main(["--config", str(tmp_path / "missing.json")]) == 2
    assert capsys.readouterr().out == ""
