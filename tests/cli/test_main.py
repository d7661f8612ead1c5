"""Tests for the usage-meter CLI commands."""

import json
from collections import namedtuple
from pathlib import Path
from typing import Any
from unittest.mock import patch

from typer.testing import CliRunner

from usage_meter.cli.main import app

_NetIO = namedtuple("_NetIO", ["bytes_sent", "bytes_recv"])

_PSUTIL_TARGET = "usage_meter.counter.infrastructure.psutil_provider.psutil.net_io_counters"

_COUNTERS = {
    "lo": _NetIO(bytes_sent=1, bytes_recv=1),
    "wlan0": _NetIO(bytes_sent=150, bytes_recv=300),
    "rmnet0": _NetIO(bytes_sent=50, bytes_recv=100),
}

runner = CliRunner()


def _responses(output: str) -> list[dict[str, Any]]:
    """Return the response objects in *output*, skipping JSON log lines."""
    responses: list[dict[str, Any]] = []
    for line in output.splitlines():
        try:
            parsed = json.loads(line)
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict) and "status" in parsed and "event" not in parsed:
            responses.append(parsed)
    return responses


def _write_config(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "meter.yaml"
    path.write_text(body, encoding="utf-8")
    return path


class TestCallCommand:
    def test_get_network_stats_prints_report(self) -> None:
        with patch(_PSUTIL_TARGET, return_value=_COUNTERS):
            result = runner.invoke(app, ["call", "getNetworkStats", "--log-format", "json"])

        assert result.exit_code == 0
        assert _responses(result.output) == [
            {
                "status": "success",
                "result": {
                    "mobileRxBytes": 100,
                    "mobileTxBytes": 50,
                    "totalRxBytes": 400,
                    "totalTxBytes": 200,
                },
            }
        ]

    def test_unknown_method_prints_not_implemented(self) -> None:
        result = runner.invoke(app, ["call", "getBatteryLevel", "--log-format", "json"])

        assert result.exit_code == 0
        assert _responses(result.output) == [{"status": "not_implemented"}]

    def test_check_permission_uses_configured_path(self, tmp_path: Path) -> None:
        stats = tmp_path / "dev"
        stats.write_text("x", encoding="utf-8")
        config = _write_config(tmp_path, f"permission:\n  stats_path: {stats}\n")

        result = runner.invoke(
            app,
            ["call", "checkUsageStatsPermission", "--config", str(config), "--log-format", "json"],
        )

        assert result.exit_code == 0
        assert _responses(result.output) == [{"status": "success", "result": True}]

    def test_windowed_mode_reports_unsupported_api(self, tmp_path: Path) -> None:
        config = _write_config(
            tmp_path,
            "service:\n  network_stats_mode: windowed\nwindow:\n  subscriber_id: imsi-1\n",
        )

        result = runner.invoke(
            app, ["call", "getNetworkStats", "--config", str(config), "--log-format", "json"]
        )

        assert result.exit_code == 0
        response = _responses(result.output)[0]
        assert response["status"] == "error"
        assert response["code"] == "UNSUPPORTED_API"

    def test_missing_config_exits_with_error(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["call", "getNetworkStats", "--config", str(tmp_path / "absent.yaml")]
        )

        assert result.exit_code == 1
        assert "Failed to load config" in result.output

    def test_invalid_log_format_exits_with_error(self) -> None:
        result = runner.invoke(app, ["call", "getNetworkStats", "--log-format", "xml"])

        assert result.exit_code == 1
        assert "Invalid log format" in result.output


class TestServeCommand:
    def test_answers_each_stdin_line(self) -> None:
        stdin = "\n".join(
            [
                json.dumps({"id": 1, "method": "requestUsageStatsPermission"}),
                json.dumps({"id": 2, "method": "unknown"}),
                "garbage",
            ]
        )

        with patch("usage_meter.permission.infrastructure.access_gate.webbrowser.open"):
            result = runner.invoke(app, ["serve", "--log-format", "json"], input=stdin + "\n")

        assert result.exit_code == 0
        responses = _responses(result.output)
        assert responses[0] == {"id": 1, "status": "success", "result": None}
        assert responses[1] == {"id": 2, "status": "not_implemented"}
        assert responses[2]["code"] == "BAD_REQUEST"


class TestReportCommand:
    def test_renders_counter_table(self) -> None:
        with patch(_PSUTIL_TARGET, return_value=_COUNTERS):
            result = runner.invoke(app, ["report", "--log-format", "json"])

        assert result.exit_code == 0
        assert "mobileRxBytes" in result.output
        assert "400" in result.output

    def test_ignores_windowed_mode(self, tmp_path: Path) -> None:
        config = _write_config(tmp_path, "service:\n  network_stats_mode: windowed\n")

        with patch(_PSUTIL_TARGET, return_value=_COUNTERS):
            result = runner.invoke(
                app, ["report", "--config", str(config), "--log-format", "json"]
            )

        assert result.exit_code == 0
        assert "totalTxBytes" in result.output
