"""Tests for CLI callback validators."""

from __future__ import annotations

import click
import pytest

from sysexit.cli.validators import validate_code_name, validate_code_values
from sysexit.codes import Code


def test_validate_code_values_accepts_integers_and_names() -> None:
    """Verify mixed integer and name arguments convert to codes."""
    ctx = click.Context(click.Command("sysexit"))

    returned = validate_code_values(ctx, None, ("74", "usage", "-1", "200", "EX_NOPERM"))

    assert returned == (Code.IOERR, Code.USAGE, Code.UNKNOWN, Code.UNKNOWN, Code.NOPERM)


def test_validate_code_values_rejects_unknown_names() -> None:
    """Verify unknown names raise a click validation error."""
    ctx = click.Context(click.Command("sysexit"))

    with pytest.raises(click.BadParameter, match="Not an exit status or code name: bogus"):
        validate_code_values(ctx, None, ("74", "bogus"))


def test_validate_code_values_accepts_empty_input() -> None:
    """Verify empty argument lists are passed through unchanged."""
    ctx = click.Context(click.Command("sysexit"))

    assert validate_code_values(ctx, None, ()) == ()


def test_validate_code_name_resolves_and_rejects() -> None:
    """Verify single-name resolution and its validation error."""
    ctx = click.Context(click.Command("sysexit"))

    assert validate_code_name(ctx, None, "tempfail") is Code.TEMPFAIL
    with pytest.raises(click.BadParameter, match="Unknown exit code name"):
        validate_code_name(ctx, None, "74")
