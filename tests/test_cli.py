import json

import pytest

from ra_sampling.cli import main


@pytest.fixture(autouse=True)
def no_log_config(monkeypatch, tmp_path):
    monkeypatch.setenv("RA_SAMPLING_LOG_CFG", str(tmp_path / "missing.toml"))


def test_text_output(capsys):
    assert main(["--n", "1000", "--k", "1", "--tau", "1", "--alpha", "0.95"]) == 0

    out = capsys.readouterr().out
    assert "Rank cutoff t: 10" in out
    assert "Minimum samples required: " in out


def test_json_output_with_curve_and_draw(capsys):
    code = main(
        [
            "--n", "2000",
            "--k", "3",
            "--tau", "2",
            "--alpha", "0.9",
            "--curve",
            "--draw",
            "--seed", "1",
            "--json",
        ]
    )
    assert code == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert payload["rank_cutoff"] == 40
    assert len(payload["confidence_curve"]) == 20
    candidates = payload["candidates"]
    assert candidates == sorted(set(candidates))
    assert len(candidates) <= payload["sample_size"]


def test_invalid_inputs_exit_code(capsys):
    assert main(["--n", "100", "--alpha", "1.5", "--json"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err
