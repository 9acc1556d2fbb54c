"""Tests for CLI command orchestration."""

from __future__ import annotations

import json
import logging
from typing import Any

import pytest
from click.testing import CliRunner

import sysexit.cli.main as cli_main
from sysexit.cli.config import setup_logging
from sysexit.cli.exit_codes import CONFIG_ERROR, INTERNAL_BUG, USER_ERROR, VALIDATION_ERROR
from sysexit.codes import Code
from sysexit.constants import SIGBASE


@pytest.fixture(autouse=True)
def observed_levels(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Replace logging setup with a recorder of requested levels."""
    levels: list[int] = []

    def _setup_logging(*, level: int, stream: Any = None) -> None:
        del stream
        levels.append(level)

    monkeypatch.setattr(cli_main, "setup_logging", _setup_logging)
    monkeypatch.delenv("SYSEXIT_JSON", raising=False)
    monkeypatch.delenv("SYSEXIT_LOG_LEVEL", raising=False)
    return levels


def invoke(*args: str, env: dict[str, str] | None = None):
    """Run the CLI group with the given arguments."""
    return CliRunner().invoke(cli_main.main, list(args), env=env)


def test_cli_uses_default_info_logging_level(observed_levels: list[int]) -> None:
    """Verify CLI configures INFO logging by default."""
    result = invoke("describe", "0")

    assert result.exit_code == 0
    assert observed_levels == [20]


def test_cli_uses_warning_logging_level_in_quiet_mode(observed_levels: list[int]) -> None:
    """Verify --quiet configures WARNING logging."""
    result = invoke("--quiet", "describe", "0")

    assert result.exit_code == 0
    assert observed_levels == [30]


def test_cli_uses_debug_logging_level_in_verbose_mode(observed_levels: list[int]) -> None:
    """Verify --verbose enables DEBUG logging level."""
    result = invoke("--verbose", "describe", "0")

    assert result.exit_code == 0
    assert observed_levels == [10]


def test_cli_reads_log_level_from_environment(observed_levels: list[int]) -> None:
    """Verify SYSEXIT_LOG_LEVEL sets the default logging level."""
    result = invoke("describe", "0", env={"SYSEXIT_LOG_LEVEL": "error"})

    assert result.exit_code == 0
    assert observed_levels == [40]


def test_cli_invalid_environment_exits_with_config_code() -> None:
    """Verify unsupported settings exit with the configuration error code."""
    result = invoke("describe", "0", env={"SYSEXIT_LOG_LEVEL": "loud"})

    assert result.exit_code == CONFIG_ERROR == 78
    assert "Unsupported SYSEXIT_LOG_LEVEL" in result.output


def test_describe_prints_descriptions() -> None:
    """Verify describe explains integers and names in argument order."""
    result = invoke("describe", "74", "usage", "--", "-1")

    assert result.exit_code == 0
    assert result.output.splitlines() == ["i/o error (74)", "usage (64)", "unknown (2)"]


def test_describe_rejects_unknown_name_with_usage_code() -> None:
    """Verify bad arguments exit with the sysexits usage code."""
    result = invoke("describe", "bogus")

    assert result.exit_code == USER_ERROR == 64
    assert "Not an exit status or code name: bogus" in result.output


def test_describe_json_output() -> None:
    """Verify --json renders descriptions as a JSON document."""
    result = invoke("--json", "describe", "74")

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "codes": [{"name": "IOERR", "reason": "i/o error", "value": 74}]
    }


def test_json_mode_from_environment_and_text_override() -> None:
    """Verify SYSEXIT_JSON enables JSON unless --text is passed."""
    as_json = invoke("describe", "0", env={"SYSEXIT_JSON": "1"})
    as_text = invoke("--text", "describe", "0", env={"SYSEXIT_JSON": "1"})

    assert json.loads(as_json.output)["codes"][0]["name"] == "SUCCESS"
    assert as_text.output == "success (0)\n"


def test_status_classifies_return_codes(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify status treats negative return codes as signals."""
    monkeypatch.setattr("sysexit.status.is_unix", lambda: True)

    result = invoke("status", "--", "0", "65", "-9")

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "0: success (0)",
        "65: data (65)",
        f"-9: kill signal ({SIGBASE + 9})",
    ]


def test_check_reports_flags_and_succeeds_for_valid_values() -> None:
    """Verify check exits cleanly when every value is a valid status."""
    result = invoke("check", "0", "100", "130")

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "0: valid, reserved",
        "100: valid, unreserved",
        "130: valid, reserved",
    ]


def test_check_exits_with_validation_code_for_invalid_values() -> None:
    """Verify out-of-range statuses exit with the data error code."""
    result = invoke("check", "--", "64", "300", "-1")

    assert result.exit_code == VALIDATION_ERROR == 65
    assert "2 of 3 value(s) outside 0-255" in result.output


def test_list_prints_every_code() -> None:
    """Verify list renders one row per code."""
    result = invoke("list")

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == len(Code)
    assert " 74  IOERR           i/o error" in lines


def test_code_prints_value() -> None:
    """Verify code prints the integer for a name."""
    result = invoke("code", "not-executable")

    assert result.exit_code == 0
    assert result.output == "126\n"


def test_code_exit_flag_exits_with_value() -> None:
    """Verify --exit turns the named code into the process exit status."""
    result = invoke("code", "cantcreat", "--exit")

    assert result.exit_code == 73
    assert result.output == ""


def test_code_rejects_unknown_name() -> None:
    """Verify unknown code names exit with the usage code."""
    result = invoke("code", "nope")

    assert result.exit_code == USER_ERROR
    assert "Unknown exit code name" in result.output


def test_unknown_command_exits_with_usage_code() -> None:
    """Verify click usage errors are remapped to the sysexits usage code."""
    result = invoke("explode")

    assert result.exit_code == USER_ERROR


def test_unexpected_failure_exits_with_internal_bug_code(monkeypatch: pytest.MonkeyPatch) -> None:
    """Verify unhandled exceptions exit with the software error code."""

    def _boom(status: Any) -> Code:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_main, "from_status", _boom)

    result = invoke("status", "0")

    assert result.exit_code == INTERNAL_BUG == 70


def test_version_option_prints_version() -> None:
    """Verify --version reports the package version."""
    result = invoke("--version")

    assert result.exit_code == 0
    assert cli_main.about.__version__ in result.output


def test_verbose_json_output_keeps_logs_off_stdout(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Verify debug logging goes to stderr so --json stdout stays parseable."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    monkeypatch.setattr(cli_main, "setup_logging", setup_logging)

    cli_main.main.main(["--verbose", "--json", "describe", "300"], standalone_mode=False)

    captured = capsys.readouterr()
    assert json.loads(captured.out) == {
        "codes": [{"name": "UNKNOWN", "reason": "unknown", "value": 2}]
    }
    assert "Exit status 300 matches no known code" in captured.err
    assert "Describing 1 value(s)" in captured.err
