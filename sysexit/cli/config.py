import logging
import sys
from typing import TextIO


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Configure logging for the command line.

    Replaces any existing root handlers with one stream handler writing to
    ``stream`` (stderr by default) using a fixed ``{``-style format.

    Parameters:
        level (int): Root logger level.
        stream (TextIO | None): Destination stream; defaults to ``sys.stderr``.
    """
    stream_handler = logging.StreamHandler(stream or sys.stderr)
    logging.basicConfig(
        handlers=[stream_handler],
        format=(
            "{asctime:^} | {levelname: ^8} | {filename: ^14} {lineno: <4} | {message}"
        ),
        style="{",
        datefmt="%d.%m.%Y %H:%M:%S",
        level=level,
        force=True,
    )

