import json
from pathlib import Path

from typer.testing import CliRunner

from readability_lint.cli import app
from tests.utils import EASY, OBERON

runner = CliRunner()


def test_cli_check_reports_hard_sentence(tmp_path: Path):
    """check prints one line per warning, prefixed with the document id."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["check", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    assert (
        "moons.txt:1:1-3:32: Unexpected hard to read sentence, according to "
        "4 out of 7 algorithms [confidence: 4/7]"
    ) in result.stdout
    assert "cats.txt" not in result.stdout


def test_cli_check_single_file_uses_file_name(tmp_path: Path):
    path = tmp_path / "moons.txt"
    path.write_text(OBERON, encoding="utf-8")
    result = runner.invoke(app, ["check", "--input-path", str(path)])
    assert result.exit_code == 0
    assert result.stdout.startswith("moons.txt:1:1-3:32: ")


def test_cli_check_json_output(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["check", "--input-path", str(corpus_dir), "--json"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    files = {entry["path"]: entry["messages"] for entry in payload["files"]}
    assert files["cats.txt"] == []
    (message,) = files["moons.txt"]
    assert message["confidenceLabel"] == "4/7"
    assert message["ruleId"] == "readability"
    assert message["source"] == "retext-readability"
    assert message["expected"] == []
    assert message["place"]["end"] == {"line": 3, "column": 32, "offset": 132}


def test_cli_check_options_override_config(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    config_path = tmp_path / "config.yaml"
    config_path.write_text("age: 18\n", encoding="utf-8")

    quiet = runner.invoke(
        app,
        ["check", "--input-path", str(corpus_dir), "--config", str(config_path), "--json"],
    )
    assert json.loads(quiet.stdout)["files"][1]["messages"] == []

    loud = runner.invoke(
        app,
        [
            "check",
            "--input-path",
            str(corpus_dir / "moons.txt"),
            "--config",
            str(config_path),
            "--age",
            "14",
            "--json",
        ],
    )
    (entry,) = json.loads(loud.stdout)["files"]
    assert entry["messages"][0]["confidenceLabel"] == "5/7"


def test_cli_frail_exits_non_zero_on_warnings(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["check", "--input-path", str(corpus_dir), "--frail"])
    assert result.exit_code == 1

    easy_only = runner.invoke(
        app, ["check", "--input-path", str(corpus_dir / "cats.txt"), "--frail"]
    )
    assert easy_only.exit_code == 0


def test_cli_rejects_invalid_threshold(tmp_path: Path):
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(
        app, ["check", "--input-path", str(corpus_dir), "--threshold", "3"]
    )
    assert result.exit_code != 0


def test_cli_print_config():
    """print-config dumps the configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "min_words: 5" in result.stdout
    assert "age: 16" in result.stdout


def _create_sample_corpus(tmp_path: Path) -> Path:
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    (corpus_dir / "cats.txt").write_text(EASY + ".\n", encoding="utf-8")
    (corpus_dir / "moons.txt").write_text(OBERON, encoding="utf-8")
    (corpus_dir / "ignored.csv").write_text("a,b\n", encoding="utf-8")
    return corpus_dir
