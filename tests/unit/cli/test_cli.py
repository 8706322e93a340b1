import json
import sys

import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

from benford_engine.cli import main as cli_main
from benford_engine.cli.commands.analyze import split_tokens
from benford_engine.cli.main import app
from benford_engine.exceptions import ConfigValidationError, NoValidSamplesError

runner = CliRunner()


def test_table_json_lists_pdf_and_cdf():
    res = runner.invoke(app, ["table", "--base", "10", "--json"])
    assert res.exit_code == 0
    payload = json.loads(res.stdout)
    assert payload["domain"] == list(range(1, 10))
    assert len(payload["pdf"]) == 9
    assert payload["cdf"][-1] == pytest.approx(1.0)


def test_table_renders_rich_table():
    res = runner.invoke(app, ["table", "--base", "4"])
    assert res.exit_code == 0
    assert "Benford distribution (base 4)" in res.stdout


def test_sample_is_reproducible_with_seed():
    args = ["sample", "--base", "10", "--size", "5000", "--seed", "1", "--json"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0
    assert first.stdout == second.stdout
    payload = json.loads(first.stdout)
    assert payload["config"]["seed"] == 1
    assert payload["report"]["n_samples"] == 5000
    assert set(payload["report"]["statistics"]) == {"chi_square", "chi_square_pvalue", "cho_gaines", "leemis"}


def test_sample_reads_config_file(tmp_path):
    cfg = tmp_path / "analysis.yml"
    cfg.write_text("base: 16\nsample_size: 300\nseed: 4\n")
    res = runner.invoke(app, ["sample", "--config", str(cfg), "--json"])
    assert res.exit_code == 0
    payload = json.loads(res.stdout)
    assert payload["report"]["base"] == 16
    assert payload["report"]["critical_values"] == {}


def test_analyze_file(tmp_path):
    data = tmp_path / "amounts.txt"
    data.write_text("123, 456\n0.0789;abc 0 1000\n")
    res = runner.invoke(app, ["analyze", str(data), "--json"])
    assert res.exit_code == 0
    payload = json.loads(res.stdout)
    assert payload["n_samples"] == 4
    assert payload["dropped"] == 2
    assert payload["realized"][0] == pytest.approx(0.5)


def test_analyze_stdin_renders_report():
    res = runner.invoke(app, ["analyze", "--base", "10"], input="1 2 3 4 5 6 7 8 9 10\n")
    assert res.exit_code == 0
    assert "Goodness of fit" in res.stdout
    assert "Used 10 of 10 tokens" in res.stdout


def test_analyze_without_valid_numbers_raises():
    res = runner.invoke(app, ["analyze"], input="0 0 nan abc\n")
    assert res.exit_code != 0
    assert isinstance(res.exception, NoValidSamplesError)


def test_invalid_base_is_config_error():
    res = runner.invoke(app, ["table", "--base", "2"])
    assert isinstance(res.exception, ConfigValidationError)


@pytest.mark.parametrize(
    "argv, code",
    [
        (["benford", "table", "--base", "10"], 0),
        (["benford", "table", "--base", "2"], 1),
        (["benford", "analyze", "MISSING_FILE"], 1),
    ],
)
def test_main_maps_errors_to_exit_codes(monkeypatch, argv, code):
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", argv)
    with pytest.raises(SystemExit) as exc:
        cli_main.main()
    assert exc.value.code == code


def test_main_exit_code_for_no_valid_samples(monkeypatch, tmp_path):
    data = tmp_path / "zeros.txt"
    data.write_text("0 0 0\n")
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["benford", "analyze", str(data)])
    with pytest.raises(SystemExit) as exc:
        cli_main.main()
    assert exc.value.code == 2


def test_split_tokens():
    assert split_tokens(" 1,2;3\n\t4  ") == ["1", "2", "3", "4"]
    assert split_tokens("") == []


@pytest.mark.parametrize(
    "content",
    ["sample_size: lots\n", "seed: 1.5\n", "sample_size: 2.5\n", "seed: abc\n", "significance: high\n"],
)
def test_main_reports_mistyped_config_values_as_config_errors(monkeypatch, tmp_path, content):
    cfg = tmp_path / "analysis.yml"
    cfg.write_text(content)
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["benford", "sample", "--config", str(cfg), "--json"])
    with pytest.raises(SystemExit) as exc:
        cli_main.main()
    assert exc.value.code == 1
