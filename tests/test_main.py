"""Tests for the command-line entry point"""
import os
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

from main import main
from tests.conftest import write_lines


def _write_tree(root: Path) -> None:
    write_lines(root / "logs" / "metrics.out", [
        {"metric": {"gauge": 1, "name": "a"}},
        {"metric": {"counter": 1, "name": "b"}},
        {"metric": {"counter": 1, "name": "b"}},
        {"metric": {"name": "x", "unknown_type": 5}},
    ])


class TestMainCLI:
    """Test argument handling and exit behavior"""

    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "ROOT_PATH" in result.output

    def test_version(self):
        result = CliRunner().invoke(main, ["--version"])

        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_missing_root_path(self):
        result = CliRunner().invoke(main, [])

        assert result.exit_code != 0
        assert "ROOT_PATH" in result.output

    @patch("main.ScanPipeline")
    def test_invalid_write_flag_aborts_before_scanning(self, mock_pipeline):
        """Test that anything other than true/false is rejected up front"""
        with patch("collectors.files.os.scandir") as mock_scandir:
            result = CliRunner().invoke(main, ["/nonexistent", "maybe"])

        assert result.exit_code == 2
        assert "maybe" in result.output
        mock_pipeline.assert_not_called()
        mock_scandir.assert_not_called()

    def test_report_without_writing(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_tree(Path("."))

            result = runner.invoke(main, ["."])

            assert result.exit_code == 0, result.output
            assert "Total number of files: 1" in result.output
            assert "Total number of metrics: 4" in result.output
            assert "  gauge: 1" in result.output
            assert "  counter: 2" in result.output
            assert "  histogram: 0" in result.output
            assert "  distribution: 0" in result.output
            assert "Unknown metric" in result.output
            assert not os.path.exists("unique_metrics.txt")

    def test_explicit_false_does_not_write(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_tree(Path("."))

            result = runner.invoke(main, [".", "false"])

            assert result.exit_code == 0, result.output
            assert not os.path.exists("unique_metrics.txt")

    def test_true_writes_unique_metrics(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_tree(Path("."))

            with patch.dict(os.environ, {"UNIQUE_METRICS_FILE": "unique_metrics.txt"}):
                result = runner.invoke(main, [".", "true"])

            assert result.exit_code == 0, result.output
            assert "Total number of unique metrics: 3" in result.output
            content = Path("unique_metrics.txt").read_text()
            assert sorted(content.split("\n")) == ['"a"', '"b"', '"x"']

    def test_parse_error_exits_non_zero(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            write_lines(Path("metrics.out"), ["{not json"])

            result = runner.invoke(main, [".", "true"])

            assert result.exit_code == 1
            assert "Failed to parse file" in result.output
            assert "Metric types:" not in result.output
            assert not os.path.exists("unique_metrics.txt")

    def test_schema_error_exits_non_zero(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            write_lines(Path("metrics.out"), [{"metric": 5}])

            result = runner.invoke(main, ["."])

            assert result.exit_code == 1
            assert "'metric' key to have an object value" in result.output

    def test_log_level_option(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_tree(Path("."))

            result = runner.invoke(main, [".", "--log-level", "error"])

            assert result.exit_code == 0, result.output
            assert "Unknown metric" not in result.output
            assert "  counter: 2" in result.output

    def test_diagnostics_shown_at_warning_level(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            _write_tree(Path("."))
            write_lines(Path("metrics-extra.out"), ["[1, 2]"])

            result = runner.invoke(main, [".", "--log-level", "warning"])

            assert result.exit_code == 0, result.output
            assert "Unknown metric" in result.output
            assert "Ignoring non-object" in result.output
            assert "Scanner starting up" not in result.output

    def test_deeply_nested_line_reports_parse_error(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("metrics.out").write_text('{"a": ' + "[" * 5000 + "]" * 5000 + "}\n", encoding="utf-8")

            result = runner.invoke(main, ["."])

            assert result.exit_code == 1
            assert not isinstance(result.exception, RecursionError)
            assert "Failed to parse file" in result.output

    def test_lone_surrogate_name_reports_parse_error(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            Path("metrics.out").write_text('{"metric": {"gauge": 1, "name": "a\\ud800"}}\n', encoding="utf-8")

            result = runner.invoke(main, [".", "true"])

            assert result.exit_code == 1
            assert not isinstance(result.exception, UnicodeError)
            assert "Failed to parse file" in result.output
            assert not os.path.exists("unique_metrics.txt")

    def test_counted_metric_without_name_without_write_flag(self):
        runner = CliRunner()
        with runner.isolated_filesystem():
            write_lines(Path("metrics.out"), [{"metric": {"gauge": 1}}])

            result = runner.invoke(main, ["."])

            assert result.exit_code == 0, result.output
            assert "  gauge: 1" in result.output
            assert "unique metrics" not in result.output
