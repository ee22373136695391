"""Tests for the application shell and the command line."""

import json

import numpy as np
import pytest

from lexbench.app import load_source, run_timing_analysis
from lexbench.benchmark import AllTokensSelection, BenchmarkConfig, OperationKind
from lexbench.cli import build_cli, build_config, main
from lexbench.containers import DuplicatePolicy
from lexbench.errors import InvalidInput, NoLexemesAvailable
from lexbench.lexeme import LexemeCategory
from lexbench.logging import LogLevel
from lexbench.reporting import JsonReportSink


class TestLoadSource:
    """Test reading source text."""

    def test_bundled_sample(self):
        """Test the default sample is Java-like source."""
        source = load_source()
        assert "class" in source
        assert "//" in source

    def test_from_path(self, tmp_path):
        """Test reading a given file."""
        path = tmp_path / "Main.java"
        path.write_text("int x = 1;")
        assert load_source(path) == "int x = 1;"

    def test_missing_file(self, tmp_path):
        """Test a missing file is an input error."""
        with pytest.raises(InvalidInput, match="Failed to load source file"):
            load_source(tmp_path / "missing.java")


class TestRunTimingAnalysis:
    """Test the application shell."""

    def test_runs_and_emits(self, sample_code, memory_logger, memory_handler):
        """Test results reach every sink and progress is logged."""
        emitted = []

        class CollectingSink(JsonReportSink):
            def emit(self, results):
                emitted.append(results)

        results = run_timing_analysis(
            sample_code,
            config=BenchmarkConfig(repeat_count=5, seed=1),
            sinks=[CollectingSink(), CollectingSink()],
            logger=memory_logger,
        )
        assert emitted == [results, results]
        assert len(results) == 15
        assert "INFO Performing timing analysis..." in memory_handler.messages

    def test_category_narrows_seed(self, sample_code):
        """Test a configured category seeds only that category's tokens."""
        config = BenchmarkConfig(
            containers=["HASH_SET"],
            repeat_count=0,
            category=LexemeCategory.DELIMITER,
        )
        results = run_timing_analysis(
            sample_code, config=config, rng=np.random.default_rng(0), selection=AllTokensSelection()
        )
        assert results.get("HASH_SET", OperationKind.ADD).count == 6

    def test_empty_source(self):
        """Test empty source fails before the engine runs."""
        with pytest.raises(InvalidInput):
            run_timing_analysis("")

    def test_nothing_to_seed(self):
        """Test a category with no matches cannot seed the containers."""
        config = BenchmarkConfig(category=LexemeCategory.COMMENT)
        with pytest.raises(NoLexemesAvailable):
            run_timing_analysis("int x = 1;", config=config)


class TestBenchmarkCLI:
    """Test argument parsing."""

    def test_defaults(self):
        """Test parsing with no arguments."""
        args = build_cli().parse([])
        assert args.repeat_count is None
        assert args.log_level is LogLevel.INFO
        assert args.charts == "charts"
        assert not args.no_charts
        assert not args.json
        config = build_config(args)
        assert config.repeat_count == 10
        assert config == BenchmarkConfig(repeat_count=10)

    def test_full_arguments(self):
        """Test every option reaches the config."""
        args = build_cli().parse(
            [
                "25",
                "--category", "keyword",
                "--containers", "deque, stack",
                "--policy", "stack=allow",
                "--policy", "DEQUE=skip",
                "--seed", "9",
                "--log-level", "debug",
            ]
        )
        config = build_config(args)
        assert config.repeat_count == 25
        assert config.category is LexemeCategory.KEYWORD
        assert config.containers == ["DEQUE", "STACK"]
        assert config.duplicate_policies == {
            "STACK": DuplicatePolicy.ALLOW,
            "DEQUE": DuplicatePolicy.SKIP,
        }
        assert config.seed == 9
        assert args.log_level is LogLevel.DEBUG

    @pytest.mark.parametrize(
        "argv",
        [
            ["-3"],
            ["ten"],
            ["--policy", "DEQUE"],
            ["--policy", "DEQUE=sometimes"],
            ["--category", "whitespace"],
            ["--log-level", "loud"],
            ["--charts", "out", "--no-charts"],
        ],
    )
    def test_invalid_arguments(self, argv):
        """Test bad arguments exit with a usage error."""
        with pytest.raises(SystemExit) as exc:
            build_cli().parse(argv)
        assert exc.value.code == 2


class TestMain:
    """Test the entry point end to end."""

    def test_default_run(self, capsys, monkeypatch, tmp_path):
        """Test a run with no repeat count logs the default notice and prints the table."""
        monkeypatch.chdir(tmp_path)
        assert main(["--no-charts", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Hardware info:" in out
        assert "No argument provided. Running default timing analysis..." in out
        assert "Performing timing analysis..." in out
        assert "Operation Performance" in out
        assert "HASH_SET -> REMOVE 95% Confidence interval:" in out
        assert not (tmp_path / "charts").exists()

    def test_json_output(self, capsys, tmp_path):
        """Test --json prints a decodable document."""
        assert main(["3", "--no-charts", "--json", "--containers", "DEQUE", "--log-level", "ERROR"]) == 0
        out = capsys.readouterr().out.strip()
        doc = json.loads(out.splitlines()[-1])
        assert [row["container"] for row in doc["rows"]] == ["DEQUE"] * 3

    def test_charts_and_log_file(self, capsys, tmp_path):
        """Test charts are written and log lines reach the file."""
        charts = tmp_path / "charts"
        log_file = tmp_path / "run.txt"
        assert main(["2", "--charts", str(charts), "--log-file", str(log_file), "--seed", "4"]) == 0
        assert (charts / "average_performance.png").exists()
        assert (charts / "confidence_performance.png").exists()
        assert "Performing timing analysis..." in log_file.read_text()

    def test_unknown_container_fails(self, capsys):
        """Test an unknown container is reported and exits 1."""
        assert main(["1", "--no-charts", "--containers", "TREE"]) == 1
        assert "ERROR" in capsys.readouterr().out

    def test_missing_source_fails(self, capsys, tmp_path):
        """Test a missing source file is reported and exits 1."""
        assert main(["--no-charts", "--source", str(tmp_path / "nope.java")]) == 1
        assert "Failed to load source file" in capsys.readouterr().out

    def test_bad_log_file(self, tmp_path):
        """Test an unsupported log file extension is a usage error."""
        with pytest.raises(SystemExit) as exc:
            main(["--log-file", str(tmp_path / "run.log")])
        assert exc.value.code == 2
