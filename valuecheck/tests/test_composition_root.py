"""Integration tests for the composition root.

These tests verify that configuration loads and validates, that the
configured report adapter is selected, and that run()/main() map
outcomes to the documented exit codes.
"""

import json
import logging
import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from valuecheck.adapters.reporting.markdown import MarkdownReportAdapter
from valuecheck.adapters.reporting.stdout import StdoutReportAdapter
from valuecheck.config import load_settings
from valuecheck.main import build_handler, build_reporter, configure_logging, main, run


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty directory so no stray .env is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.initial_capacity == 16
        assert settings.load_factor == 0.75
        assert settings.max_samples == 64
        assert settings.report_backend == "stdout"
        assert settings.log_level == "INFO"

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "INITIAL_CAPACITY": "32",
                "LOAD_FACTOR": "0.5",
                "REPORT_BACKEND": "markdown",
                "LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.initial_capacity == 32
            assert settings.load_factor == 0.5
            assert settings.report_backend == "markdown"
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, isolated_cwd: Path) -> None:
        env_file = isolated_cwd / "custom.env"
        env_file.write_text("MAX_SAMPLES=8\nVERBOSE=true\n", encoding="utf-8")
        settings = load_settings(str(env_file))
        assert settings.max_samples == 8
        assert settings.verbose is True

    @pytest.mark.parametrize(
        "name, value",
        [
            ("INITIAL_CAPACITY", "0"),
            ("LOAD_FACTOR", "0"),
            ("LOAD_FACTOR", "1.5"),
            ("MAX_SAMPLES", "-1"),
            ("REPORT_BACKEND", "slack"),
        ],
    )
    def test_load_settings_rejects_invalid_values(self, name: str, value: str) -> None:
        with patch.dict(os.environ, {name: value}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()


class TestWiring:
    def test_stdout_reporter_by_default(self) -> None:
        assert isinstance(build_reporter(load_settings()), StdoutReportAdapter)

    def test_markdown_reporter(self, isolated_cwd: Path) -> None:
        with patch.dict(
            os.environ,
            {"REPORT_BACKEND": "markdown", "REPORT_OUTPUT_DIR": str(isolated_cwd / "out")},
        ):
            reporter = build_reporter(load_settings())
        assert isinstance(reporter, MarkdownReportAdapter)
        assert (isolated_cwd / "out").is_dir()

    def test_handler_uses_configured_limits(self) -> None:
        with patch.dict(os.environ, {"MAX_SAMPLES": "5", "INITIAL_CAPACITY": "4"}):
            handler = build_handler(load_settings())
        assert handler.checker.max_samples == 5
        assert handler.initial_capacity == 4


class TestRun:
    def test_check_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["check"]) == 0
        output = capsys.readouterr().out
        assert "CONTRACT REPORT" in output
        assert '"as_expected": true' in output

    def test_scenarios_exit_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["scenarios"]) == 0
        assert "10/10 matched" in capsys.readouterr().out

    def test_lookup_prints_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert run(["lookup", "Aden", "Bela", "--probe", "Aden", "--strategy", "equals-only"]) == 0
        result = json.loads(capsys.readouterr().out)
        assert result["found"] is False

    def test_unknown_suite_exits_one(self) -> None:
        assert run(["check", "--suite", "nope"]) == 1

    def test_sample_cap_exits_one(self) -> None:
        with patch.dict(os.environ, {"MAX_SAMPLES": "2"}):
            assert run(["check", "--suite", "student-natural"]) == 1

    def test_interactive_exits_on_eof(self) -> None:
        with patch("builtins.input", side_effect=EOFError):
            assert run(["interactive"]) == 0

    def test_interactive_runs_commands(self, capsys: pytest.CaptureFixture[str]) -> None:
        lines = iter(['lookup {"names": ["Aden"], "probe": "Aden"}', "exit"])
        with patch("builtins.input", side_effect=lambda _prompt: next(lines)):
            assert run(["interactive"]) == 0
        assert '"found": true' in capsys.readouterr().out


class TestMain:
    def test_main_exit_code_success(self) -> None:
        with patch("valuecheck.main.run", return_value=0):
            with pytest.raises(SystemExit) as excinfo:
                main()
        assert excinfo.value.code == 0

    def test_main_keyboard_interrupt(self) -> None:
        with patch("valuecheck.main.run", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as excinfo:
                main()
        assert excinfo.value.code == 130

    def test_main_fatal_error(self) -> None:
        with patch("valuecheck.main.run", side_effect=RuntimeError("boom")):
            with pytest.raises(SystemExit) as excinfo:
                main()
        assert excinfo.value.code == 1


class TestConfigureLogging:
    def test_logs_go_to_stderr(self) -> None:
        with patch("valuecheck.main.logging.basicConfig") as basic_config:
            configure_logging("DEBUG", "text")
        (handler,) = basic_config.call_args.kwargs["handlers"]
        assert handler.stream is sys.stderr
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_json_format(self) -> None:
        with patch("valuecheck.main.logging.basicConfig") as basic_config:
            configure_logging("INFO", "json")
        assert basic_config.call_args.kwargs["format"].startswith('{"time"')

