import logging

import click

from sysexit import __version__ as about
from sysexit.cli.config import setup_logging
from sysexit.cli.exit_codes import (
    CONFIG_ERROR,
    INTERNAL_BUG,
    USER_ERROR,
    VALIDATION_ERROR,
)
from sysexit.cli.presenter import CliPresenter
from sysexit.cli.validators import validate_code_name, validate_code_values
from sysexit.codes import Code
from sysexit.config import load_settings
from sysexit.errors import ConfigurationError
from sysexit.status import ExitStatus, from_status, is_reserved, is_valid

# Get a logger for this module.
log = logging.getLogger(__name__)

# Define an epilog message with examples.
EPILOG = f"""
Examples:

{click.style('• explain exit status 74', fg="green")}

    $ sysexit describe 74

{click.style('• classify a subprocess return code of a process killed by SIGKILL', fg="green")}

    $ sysexit status -- -9

{click.style('• exit a shell script with the sysexits(3) usage code', fg="green")}

    $ sysexit code usage --exit
"""

# Lets negative integers through as arguments instead of unknown options.
NUMERIC_ARGS = {"ignore_unknown_options": True}


class SysexitGroup(click.Group):
    """Command group mapping usage and unexpected errors onto sysexits codes."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as exc:
            exc.exit_code = USER_ERROR
            raise

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except click.UsageError as exc:
            exc.exit_code = USER_ERROR
            raise
        except (click.ClickException, click.exceptions.Exit, click.exceptions.Abort):
            raise
        except Exception:
            log.exception("Unexpected failure")
            ctx.exit(INTERNAL_BUG)


@click.group(
    cls=SysexitGroup,
    help=about.__description__,
    epilog=EPILOG,
)
@click.version_option(
    about.__version__,
    prog_name=about.__title__,
    message="%(prog)s, version %(version)s\nSee {url} for the code table".format(url=about.__url__),
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Only log warnings and errors",
)
@click.option(
    "--json", "json_flag",
    is_flag=True,
    default=False,
    help="Emit JSON instead of text",
)
@click.option(
    "--text", "text_flag",
    is_flag=True,
    default=False,
    help="Emit text even when SYSEXIT_JSON is set",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, quiet: bool, json_flag: bool, text_flag: bool):
    """
    Root command of the sysexit CLI.

    Loads environment settings, configures logging and stores the presenter
    shared by all subcommands.

    Parameters:
        ctx (click.Context): Click context.
        verbose (bool): Flag enabling DEBUG logging.
        quiet (bool): Flag restricting logging to WARNING and informational output.
        json_flag (bool): Flag forcing JSON output.
        text_flag (bool): Flag forcing text output over SYSEXIT_JSON.
    """
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(CONFIG_ERROR)

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = settings.log_level
    setup_logging(level=level)

    json_output = not text_flag and (json_flag or settings.json_output)
    ctx.obj = CliPresenter(json_output=json_output, quiet=quiet)


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("values", nargs=-1, required=True, callback=validate_code_values)
@click.pass_obj
def describe(presenter: CliPresenter, values: tuple[Code, ...]):
    """Explain exit statuses given as integers or code names."""
    log.debug("Describing %d value(s)", len(values))
    presenter.emit_codes(values)


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("returncodes", nargs=-1, required=True, type=click.INT)
@click.pass_obj
def status(presenter: CliPresenter, returncodes: tuple[int, ...]):
    """Classify subprocess return codes; -N means killed by signal N."""
    results = [
        (returncode, from_status(ExitStatus.from_returncode(returncode)))
        for returncode in returncodes
    ]
    presenter.emit_statuses(results)


@main.command(context_settings=NUMERIC_ARGS)
@click.argument("values", nargs=-1, required=True, type=click.INT)
@click.pass_context
def check(ctx: click.Context, values: tuple[int, ...]):
    """Report whether exit statuses are valid and reserved."""
    checks = [(value, is_valid(value), is_reserved(value)) for value in values]
    ctx.obj.emit_checks(checks)
    if not all(valid for _, valid, _ in checks):
        ctx.exit(VALIDATION_ERROR)


@main.command(name="list")
@click.pass_obj
def list_codes(presenter: CliPresenter):
    """List every known exit code."""
    presenter.emit_code_table(Code)


@main.command()
@click.argument("name", callback=validate_code_name)
@click.option(
    "--exit", "exit_",
    is_flag=True,
    default=False,
    help="Exit with the code instead of printing it",
)
@click.pass_context
def code(ctx: click.Context, name: Code, exit_: bool):
    """Print the integer value of a named exit code."""
    if exit_:
        log.debug("Exiting with %s", name)
        ctx.exit(int(name))
    ctx.obj.emit_value(name)


if __name__ == "__main__":
    main(prog_name=about.__title__)
