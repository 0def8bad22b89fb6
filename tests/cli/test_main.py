"""Tests for the four-digit CLI commands that need no live oracle."""

from pathlib import Path

from typer.testing import CliRunner

from four_digit.cli.main import app
from four_digit.library.domain.entry import QAEntry
from four_digit.library.infrastructure.json_repository import JsonLibraryRepository

_runner = CliRunner()

_CONFIG = """\
name: four-digit-cli-test
oracle:
  model: fake-model
storage:
  data_dir: ./data
"""


def _make_config(tmp_path: Path, entries: list[QAEntry]) -> Path:
    config_path = tmp_path / "four-digit.yaml"
    config_path.write_text(_CONFIG, encoding="utf-8")
    JsonLibraryRepository(path=tmp_path / "data" / "questions.json").save(entries)
    return config_path


class TestAsk:
    def test_prints_library_answer(self, tmp_path: Path) -> None:
        config_path = _make_config(tmp_path, [QAEntry(question="What is 2+2", number=4)])

        result = _runner.invoke(app, ["ask", str(config_path), "what is 2+2"])

        assert result.exit_code == 0
        assert "4 (library)" in result.stdout

    def test_blank_question_exits_with_error(self, tmp_path: Path) -> None:
        config_path = _make_config(tmp_path, [])

        result = _runner.invoke(app, ["ask", str(config_path), "   "])

        assert result.exit_code == 1
        assert "question is required" in result.stdout


class TestSuggest:
    def test_lists_requested_number_of_questions(self, tmp_path: Path) -> None:
        entries = [QAEntry(question=f"Question {i}?", number=i + 1) for i in range(10)]
        config_path = _make_config(tmp_path, entries)

        result = _runner.invoke(app, ["suggest", str(config_path), "--count", "3"])

        assert result.exit_code == 0
        assert result.stdout.count("Question ") == 3

    def test_empty_library_exits_with_error(self, tmp_path: Path) -> None:
        config_path = _make_config(tmp_path, [])

        result = _runner.invoke(app, ["suggest", str(config_path)])

        assert result.exit_code == 1
        assert "library is empty" in result.stdout


class TestConfigErrors:
    def test_missing_config_exits_with_error(self, tmp_path: Path) -> None:
        result = _runner.invoke(app, ["suggest", str(tmp_path / "nope.yaml")])

        assert result.exit_code == 1
        assert "Failed to load config" in result.stdout

    def test_invalid_log_format_exits_with_error(self, tmp_path: Path) -> None:
        config_path = _make_config(tmp_path, [])

        result = _runner.invoke(
            app, ["suggest", str(config_path), "--log-format", "xml"]
        )

        assert result.exit_code == 1
        assert "Invalid log format" in result.stdout
