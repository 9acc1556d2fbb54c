import click

from sysexit.codes import Code
from sysexit.errors import UnknownCodeNameError
from sysexit.status import from_int


def _parse_code(value: str) -> Code:
    try:
        return from_int(int(value))
    except ValueError:
        pass
    try:
        return Code.from_name(value)
    except UnknownCodeNameError:
        raise click.BadParameter(f"Not an exit status or code name: {value}")


def validate_code_values(ctx: click.Context, param, value):
    """
    Convert integer or name arguments into exit codes.

    Integers go through the total integer conversion, so numbers outside the
    taxonomy become ``Code.UNKNOWN``. Anything else must name a code.

    Parameters:
        ctx (click.Context): The Click context.
        param: The parameter definition.
        value: The tuple of raw strings provided.

    Returns:
        A tuple of ``Code`` members; raises click.BadParameter for unknown names.
    """
    if not value:
        return value
    return tuple(_parse_code(item) for item in value)


def validate_code_name(ctx: click.Context, param, value):
    """
    Resolve a single code name argument.

    Parameters:
        ctx (click.Context): The Click context.
        param: The parameter definition.
        value: The raw name.

    Returns:
        The matching ``Code``; raises click.BadParameter if none matches.
    """
    try:
        return Code.from_name(value)
    except UnknownCodeNameError as exc:
        raise click.BadParameter(str(exc))
