"""CLI presentation helpers for human and JSON output modes."""

from __future__ import annotations

import json
from typing import Any, Iterable, Mapping, Sequence

import click

from sysexit.codes import Code


def _code_payload(code: Code) -> dict[str, Any]:
    return {"name": code.name, "value": int(code), "reason": code.reason}


class CliPresenter:
    """Render command outputs for human and machine-readable modes."""

    def __init__(self, *, json_output: bool, quiet: bool) -> None:
        """Store output-mode flags for rendering decisions."""
        self.json_output = json_output
        self.quiet = quiet

    @property
    def emits_human_output(self) -> bool:
        """Return whether human-readable informational output should be emitted."""
        return not self.json_output and not self.quiet

    def emit_notice(self, message: str) -> None:
        """Emit one human-readable informational message."""
        if self.emits_human_output:
            click.echo(message)

    def emit_codes(self, codes: Sequence[Code]) -> None:
        """Emit one description per code."""
        if self.json_output:
            self.emit_json({"codes": [_code_payload(code) for code in codes]})
            return
        for code in codes:
            click.echo(str(code))

    def emit_code_table(self, codes: Iterable[Code]) -> None:
        """Emit the value, name and reason of every code as aligned columns."""
        codes = list(codes)
        if self.json_output:
            self.emit_json({"codes": [_code_payload(code) for code in codes]})
            return
        for code in codes:
            click.echo(f"{int(code):>3}  {code.name:<15} {code.reason}")

    def emit_statuses(self, results: Sequence[tuple[int, Code]]) -> None:
        """Emit the classification of each subprocess return code."""
        if self.json_output:
            self.emit_json(
                {
                    "statuses": [
                        {"returncode": returncode, **_code_payload(code)}
                        for returncode, code in results
                    ]
                }
            )
            return
        for returncode, code in results:
            click.echo(f"{returncode}: {code!s}")

    def emit_checks(self, checks: Sequence[tuple[int, bool, bool]]) -> None:
        """Emit validity and reservation flags for each exit status."""
        if self.json_output:
            self.emit_json(
                {
                    "checks": [
                        {"value": value, "valid": valid, "reserved": reserved}
                        for value, valid, reserved in checks
                    ]
                }
            )
            return
        for value, valid, reserved in checks:
            click.echo(
                f"{value}: {'valid' if valid else 'invalid'}, "
                f"{'reserved' if reserved else 'unreserved'}"
            )
        invalid = sum(1 for _, valid, _ in checks if not valid)
        if invalid:
            self.emit_notice(f"{invalid} of {len(checks)} value(s) outside 0-255")

    def emit_value(self, code: Code) -> None:
        """Emit the bare integer value of a code."""
        if self.json_output:
            self.emit_json(_code_payload(code))
            return
        click.echo(int(code))

    def emit_json(self, payload: Mapping[str, Any]) -> None:
        """Emit one machine-readable JSON object to stdout."""
        click.echo(json.dumps(payload, sort_keys=True))
