"""Tests for the command-line interface."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from bayes_text_classifier.cli import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestClassifyCommand:
    def test_rich_output(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(main, ["classify", "--data", str(train_tsv), "buy dinner now"])
        assert result.exit_code == 0, result.output
        assert "spam" in result.output
        assert "-3.1864" in result.output

    def test_json_output(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(
            main, ["classify", "-d", str(train_tsv), "-o", "json", "buy dinner now"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["label"] == "spam"
        assert data["class_index"] == 0
        assert data["scores"]["ham"] == pytest.approx(-3.614475)

    def test_json_explain(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(
            main, ["classify", "-d", str(train_tsv), "-o", "json", "--explain", "buy dinner now"]
        )
        data = json.loads(result.output)
        spam = data["explain"][0]
        assert spam["label"] == "spam"
        assert [w["word"] for w in spam["words"]] == ["buy", "dinner", "now"]

    def test_rich_explain(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(
            main, ["classify", "-d", str(train_tsv), "--explain", "buy dinner now"]
        )
        assert result.exit_code == 0, result.output
        assert "[spam]" in result.output
        assert "log10(2 / 3)" in result.output

    def test_label_order(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(
            main,
            ["classify", "-d", str(train_tsv), "-l", "ham,spam", "-o", "json", "buy dinner now"],
        )
        data = json.loads(result.output)
        assert data["label"] == "spam"
        assert data["class_index"] == 1

    def test_unknown_label_exits(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(main, ["classify", "-d", str(train_tsv), "-l", "ham", "x"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_duplicate_labels_exit(self, runner: CliRunner, train_tsv: Path) -> None:
        result = runner.invoke(main, ["classify", "-d", str(train_tsv), "-l", "ham,spam,ham", "x"])
        assert result.exit_code == 1
        assert "Duplicate" in result.output

    def test_missing_data_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(main, ["classify", "-d", str(tmp_path / "nope.tsv"), "x"])
        assert result.exit_code != 0

    def test_empty_data_file(self, runner: CliRunner, tmp_path: Path) -> None:
        empty = tmp_path / "empty.tsv"
        empty.write_text("", encoding="utf-8")
        result = runner.invoke(main, ["classify", "-d", str(empty), "x"])
        assert result.exit_code == 1
        assert "no samples" in result.output


class TestEvaluateCommand:
    def test_json_metrics(self, runner: CliRunner, train_tsv: Path, test_tsv: Path) -> None:
        result = runner.invoke(
            main, ["evaluate", "-d", str(train_tsv), "-t", str(test_tsv), "-o", "json"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["accuracy"] == 1.0

    def test_rich_metrics(self, runner: CliRunner, train_tsv: Path, test_tsv: Path) -> None:
        result = runner.invoke(main, ["evaluate", "-d", str(train_tsv), "-t", str(test_tsv)])
        assert result.exit_code == 0, result.output
        assert "Accuracy: 100.00%" in result.output

    def test_unknown_test_label(self, runner: CliRunner, train_tsv: Path, tmp_path: Path) -> None:
        other = tmp_path / "other.tsv"
        other.write_text("eggs\tsomething\n", encoding="utf-8")
        result = runner.invoke(main, ["evaluate", "-d", str(train_tsv), "-t", str(other)])
        assert result.exit_code == 1


class TestDemoCommand:
    def test_answer(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0, result.output
        assert "Answer: Spam" in result.output

    def test_explain(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo", "--explain"])
        assert result.exit_code == 0, result.output
        assert "[Ham]" in result.output
        assert "Answer: Spam" in result.output

    def test_verbose_flag(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--verbose", "demo"])
        assert result.exit_code == 0, result.output
        assert "Answer: Spam" in result.output
