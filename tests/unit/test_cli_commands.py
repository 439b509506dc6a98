"""Unit tests for the CLI — Typer command registration and lenient input.

Exercises every subcommand via typer.testing.CliRunner, including the
numeric and JSON fallbacks and the usage text for unknown commands.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from buildmeter.cli._payload import int_arg, load_json, load_model
from buildmeter.cli.app import app
from buildmeter.models.snapshots import MonitoringSnapshot

runner = CliRunner()

COMMANDS = [
    "show",
    "files",
    "message",
    "success",
    "error",
    "warning",
    "monitor-status",
    "log-stream",
    "progress-monitor",
    "build-metrics",
    "critical-alert",
    "classify-log",
]


# ---------------------------------------------------------------------------
# Test: Usage and registration
# ---------------------------------------------------------------------------


class TestCliApp:
    def test_no_args_prints_usage(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Usage: buildmeter [command] [args...]" in result.output

    def test_unknown_command_prints_usage(self):
        result = runner.invoke(app, ["frobnicate", "1", "2"])
        assert result.exit_code == 0
        assert "Usage: buildmeter [command] [args...]" in result.output
        assert "classify-log <log_line>" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("show", "files", "monitor-status", "critical-alert"):
            assert command in result.output

    @pytest.mark.parametrize("command", COMMANDS)
    def test_command_registered(self, command: str):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# Test: Progress commands
# ---------------------------------------------------------------------------


class TestProgressCommands:
    def test_show(self, strip):
        result = runner.invoke(app, ["show", "5", "10", "Compiling files"])
        assert result.exit_code == 0
        assert strip(result.output) == "[" + "█" * 20 + "░" * 20 + "] 50% | Compiling files"

    def test_show_with_stats(self, strip):
        result = runner.invoke(app, ["show", "10", "10", "Done", '{"fileCount": 4, "eta": "0s"}'])
        assert strip(result.output).endswith("100% | 4 files | ETA: 0s | Done\n")

    def test_show_numeric_fallbacks(self, strip):
        result = runner.invoke(app, ["show", "abc", "0"])
        assert result.exit_code == 0
        assert "0% | Processing..." in strip(result.output)

    def test_show_ignores_bad_stats_silently(self, strip):
        result = runner.invoke(app, ["show", "1", "4", "x", "{not json"])
        assert result.exit_code == 0
        assert "Error parsing" not in result.output
        assert "25% | x" in strip(result.output)

    def test_show_negative_total_is_reported(self, strip):
        result = runner.invoke(app, ["show", "1", "-5", "x"])
        assert result.exit_code == 0
        assert "[❌ ERROR] total must be positive, got -5" in strip(result.output)

    def test_show_negative_step_binds_positionally(self, strip):
        result = runner.invoke(app, ["show", "-5", "10", "x"])
        assert result.exit_code == 0
        assert strip(result.output) == "[" + "░" * 40 + "] -50% | x"

    def test_show_ignores_extra_arguments(self, strip):
        result = runner.invoke(app, ["show", "1", "2", "m", "{}", "extra", "--more"])
        assert result.exit_code == 0
        assert strip(result.output) == "[" + "█" * 20 + "░" * 20 + "] 50% | m"

    def test_files(self, strip):
        result = runner.invoke(app, ["files", "123", "500", "main.cpp", "2048000"])
        assert result.exit_code == 0
        assert strip(result.output).endswith("25% | 123/500 | 2.0 MB/s | main.cpp")

    def test_files_defaults(self, strip):
        result = runner.invoke(app, ["files"])
        assert strip(result.output).endswith("0% | 0/1 | unknown")

    def test_progress_monitor(self, strip):
        result = runner.invoke(
            app,
            [
                "progress-monitor",
                "3",
                "10",
                "Building",
                "{}",
                '{"session_active": true, "recent_logs": ["ERROR: a", "INFO: b"]}',
            ],
        )
        assert result.exit_code == 0
        output = strip(result.output)
        assert "30% | Building" in output
        assert "[● MONITOR]" in output
        assert "LOG STREAM" in output

    def test_progress_monitor_skips_malformed_log_record(self, strip):
        monitoring = json.dumps(
            {
                "session_active": True,
                "errors_detected": 2,
                "recent_logs": [{"level": "fatal", "original": "x"}, "ERROR: y"],
            }
        )
        result = runner.invoke(app, ["progress-monitor", "3", "10", "Building", "{}", monitoring])
        assert result.exit_code == 0
        output = strip(result.output)
        assert "[● MONITOR]" in output
        assert "❌2" in output
        assert output.rstrip().endswith("ERROR: y")

    def test_progress_monitor_without_monitoring(self, strip):
        result = runner.invoke(app, ["progress-monitor", "3", "10", "Building"])
        assert "MONITOR" not in strip(result.output)


# ---------------------------------------------------------------------------
# Test: Message commands
# ---------------------------------------------------------------------------


class TestMessageCommands:
    @pytest.mark.parametrize(
        ("command", "expected"),
        [
            ("success", "[✅ SUCCESS] Operation completed successfully"),
            ("error", "[❌ ERROR] Operation failed"),
            ("warning", "[⚠️  WARNING] Warning occurred"),
        ],
    )
    def test_defaults(self, strip, command: str, expected: str):
        result = runner.invoke(app, [command])
        assert strip(result.output) == expected + "\n"

    def test_message(self, strip):
        result = runner.invoke(app, ["message", "Starting build process"])
        assert strip(result.output).endswith("] Starting build process\n")


# ---------------------------------------------------------------------------
# Test: Monitoring commands
# ---------------------------------------------------------------------------


class TestMonitoringCommands:
    def test_monitor_status(self, strip):
        payload = '{"session_active": true, "platform": "android", "errors_detected": 2}'
        result = runner.invoke(app, ["monitor-status", payload])
        assert result.exit_code == 0
        assert strip(result.output) == "[● MONITOR]   android/unknown ❌2\n"

    def test_monitor_status_reports_bad_json(self, strip):
        result = runner.invoke(app, ["monitor-status", "{oops"])
        assert result.exit_code == 0
        assert "Error parsing monitoring data JSON" in result.output
        assert "[○ MONITOR]" in strip(result.output)

    def test_monitor_status_reports_invalid_payload(self):
        result = runner.invoke(app, ["monitor-status", '{"errors_detected": "many"}'])
        assert result.exit_code == 0
        assert "Error parsing monitoring data JSON" in result.output

    def test_log_stream(self, strip):
        result = runner.invoke(
            app, ["log-stream", '["ERROR: Build failed", "WARNING: Deprecated API"]']
        )
        assert result.exit_code == 0
        lines = strip(result.output).splitlines()
        assert lines[0] == "[📜 LOG STREAM]"
        assert lines[1].endswith("ERROR: Build failed")
        assert lines[2].endswith("WARNING: Deprecated API")

    def test_log_stream_max_lines(self, strip):
        entries = json.dumps([f"line {i}" for i in range(10)])
        result = runner.invoke(app, ["log-stream", entries, "2"])
        lines = strip(result.output).splitlines()
        assert len(lines) == 3
        assert lines[-1].endswith("line 9")

    def test_log_stream_empty(self):
        result = runner.invoke(app, ["log-stream", "[]"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_log_stream_not_a_list(self):
        result = runner.invoke(app, ["log-stream", '{"a": 1}'])
        assert result.exit_code == 0
        assert result.output == ""

    def test_log_stream_bad_json(self):
        result = runner.invoke(app, ["log-stream", "[unclosed"])
        assert result.exit_code == 0
        assert "Error parsing log entries JSON" in result.output
        assert "LOG STREAM" not in result.output

    def test_build_metrics(self, strip):
        result = runner.invoke(
            app, ["build-metrics", '{"platform": "android", "total_errors": 1, "elapsed_time": 45}']
        )
        assert result.exit_code == 0
        output = strip(result.output)
        assert "Platform: android | Mode: unknown | Elapsed: 0s" in output
        assert "Issues: 1 errors, 0 warnings" in output

    def test_build_metrics_negative_counter_reported(self, strip):
        result = runner.invoke(app, ["build-metrics", '{"total_errors": -3}'])
        assert result.exit_code == 0
        assert "Error parsing build data JSON" in result.output
        assert "Issues:" not in strip(result.output)

    def test_build_metrics_bad_json(self):
        result = runner.invoke(app, ["build-metrics", "nope"])
        assert result.exit_code == 0
        assert "Error parsing build data JSON" in result.output
        assert "BUILD METRICS" in result.output

    def test_critical_alert(self, strip):
        payload = '{"title": "Build Failed", "message": "Compilation error in main.lua"}'
        result = runner.invoke(app, ["critical-alert", payload])
        assert result.exit_code == 0
        output = strip(result.output)
        assert "║ Build Failed" in output
        assert "Compilation error in main.lua" in output

    def test_critical_alert_bad_json(self):
        result = runner.invoke(app, ["critical-alert", "{"])
        assert "Error parsing alert data JSON" in result.output
        assert "Critical Event" in result.output

    def test_classify_log(self):
        result = runner.invoke(app, ["classify-log", "ERROR: Failed to compile main.lua"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["level"] == "error"
        assert data["pattern"] == "ERROR|Error"
        assert data["original"] == "ERROR: Failed to compile main.lua"
        assert "timestamp" in data

    @pytest.mark.parametrize("line", ["--- BUILD FAILED ---", "-v: verbose output"])
    def test_classify_log_dash_prefixed_line(self, line: str):
        result = runner.invoke(app, ["classify-log", line])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["original"] == line

    def test_message_dash_prefixed_text(self, strip):
        result = runner.invoke(app, ["warning", "--- disk almost full ---"])
        assert result.exit_code == 0
        assert strip(result.output) == "[⚠️  WARNING] --- disk almost full ---\n"

    def test_classify_log_default(self):
        result = runner.invoke(app, ["classify-log"])
        data = json.loads(result.stdout)
        assert data["level"] == "debug"
        assert data["pattern"] == "unclassified"


# ---------------------------------------------------------------------------
# Test: Payload helpers
# ---------------------------------------------------------------------------


class TestPayloadHelpers:
    @pytest.mark.parametrize(
        ("raw", "default", "expected"),
        [
            (None, 10, 10),
            ("7", 10, 7),
            ("12abc", 10, 12),
            ("  3", 10, 3),
            ("abc", 10, 10),
            ("0", 10, 10),
            ("-4", 10, -4),
            ("", 5, 5),
        ],
    )
    def test_int_arg(self, raw, default, expected):
        assert int_arg(raw, default) == expected

    def test_load_json_absent(self):
        assert load_json(None) is None
        assert load_json("") is None

    def test_load_json_silent(self, capsys: pytest.CaptureFixture[str]):
        assert load_json("{bad") is None
        assert "Error parsing" not in capsys.readouterr().err

    def test_load_model_non_object(self):
        assert load_model("[1, 2]", MonitoringSnapshot).is_empty
