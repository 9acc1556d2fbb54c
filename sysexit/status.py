"""Classification of raw exit statuses, process results and I/O failures.

Every conversion here is total: integers that match no known encoding become
``Code.UNKNOWN`` and unrecognised I/O failures become ``Code.IOERR``.
"""

from __future__ import annotations

import errno
import logging
import os
from dataclasses import dataclass

from sysexit.codes import SIGNAL_CODES, Code
from sysexit.constants import EXIT_STATUS_MAX, EXIT_STATUS_MIN, SIGBASE, IoErrorKind
from sysexit.types import ExitStatusLike, ProcessResultLike
from sysexit.utils import is_unix

log = logging.getLogger(__name__)

_CODES_BY_VALUE = {int(code): code for code in Code}

_IO_ERROR_CODES = {
    IoErrorKind.NOT_FOUND: Code.OSFILE,
    IoErrorKind.PERMISSION_DENIED: Code.NOPERM,
    IoErrorKind.ADDR_IN_USE: Code.UNAVAILABLE,
    IoErrorKind.ADDR_NOT_AVAILABLE: Code.UNAVAILABLE,
    IoErrorKind.CONNECTION_REFUSED: Code.PROTOCOL,
    IoErrorKind.CONNECTION_RESET: Code.PROTOCOL,
    IoErrorKind.CONNECTION_ABORTED: Code.PROTOCOL,
    IoErrorKind.NOT_CONNECTED: Code.PROTOCOL,
    IoErrorKind.BROKEN_PIPE: Code.PROTOCOL,
    IoErrorKind.ALREADY_EXISTS: Code.CANTCREAT,
    IoErrorKind.INVALID_INPUT: Code.DATAERR,
    IoErrorKind.INVALID_DATA: Code.DATAERR,
}

# Checked in order; UnicodeError must precede its ValueError base.
_EXCEPTION_KINDS: tuple[tuple[type[BaseException], IoErrorKind], ...] = (
    (FileNotFoundError, IoErrorKind.NOT_FOUND),
    (PermissionError, IoErrorKind.PERMISSION_DENIED),
    (ConnectionRefusedError, IoErrorKind.CONNECTION_REFUSED),
    (ConnectionResetError, IoErrorKind.CONNECTION_RESET),
    (ConnectionAbortedError, IoErrorKind.CONNECTION_ABORTED),
    (BrokenPipeError, IoErrorKind.BROKEN_PIPE),
    (FileExistsError, IoErrorKind.ALREADY_EXISTS),
    (BlockingIOError, IoErrorKind.WOULD_BLOCK),
    (TimeoutError, IoErrorKind.TIMED_OUT),
    (InterruptedError, IoErrorKind.INTERRUPTED),
    (EOFError, IoErrorKind.UNEXPECTED_EOF),
    (UnicodeError, IoErrorKind.INVALID_DATA),
    (ValueError, IoErrorKind.INVALID_INPUT),
)

# OSError numbers without a dedicated builtin subclass.
_ERRNO_KINDS = {
    errno.EADDRINUSE: IoErrorKind.ADDR_IN_USE,
    errno.EADDRNOTAVAIL: IoErrorKind.ADDR_NOT_AVAILABLE,
    errno.ENOTCONN: IoErrorKind.NOT_CONNECTED,
    errno.EINVAL: IoErrorKind.INVALID_INPUT,
}

_RESERVED_RANGES = (
    (Code.SUCCESS, Code.UNKNOWN),
    (Code.USAGE, Code.CONFIG),
    (Code.NOT_EXECUTABLE, max(SIGNAL_CODES)),
)


@dataclass(frozen=True, slots=True)
class ExitStatus:
    """How a process terminated: a normal exit code, a fatal signal, or neither."""

    code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int | None) -> ExitStatus:
        """
        Build a status from a ``subprocess`` return code.

        ``subprocess`` reports death by signal N as ``-N`` and a process that
        has not terminated yet as ``None``.

        Parameters:
            returncode (int | None): The ``returncode`` attribute of a process result.

        Returns:
            ExitStatus: The equivalent termination status.
        """
        if returncode is None:
            return cls()
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(code=returncode)

    @classmethod
    def from_wait_status(cls, wait_status: int) -> ExitStatus:
        """
        Build a status from a raw ``os.wait()``/``os.waitpid()`` status word.

        A stopped (not terminated) process yields an empty status.

        Parameters:
            wait_status (int): The encoded status returned by the wait call.

        Returns:
            ExitStatus: The decoded termination status.
        """
        try:
            returncode = os.waitstatus_to_exitcode(wait_status)
        except ValueError:
            # Stopped, not terminated.
            return cls()
        return cls.from_returncode(returncode)


def _as_exit_status(status: ExitStatusLike | ProcessResultLike) -> ExitStatus:
    if isinstance(status, ExitStatus):
        return status
    if hasattr(status, "code") and hasattr(status, "signal"):
        return ExitStatus(code=status.code, signal=status.signal)
    if hasattr(status, "returncode"):
        return ExitStatus.from_returncode(status.returncode)
    raise TypeError(f"Cannot read an exit status from {type(status).__name__}")


def from_int(n: int) -> Code:
    """
    Convert an integer exit status to its code.

    Parameters:
        n (int): Any integer; it does not need to be a valid exit status.

    Returns:
        Code: The matching code, or ``Code.UNKNOWN`` when ``n`` matches none.
    """
    code = _CODES_BY_VALUE.get(n)
    if code is None:
        log.debug("Exit status %s matches no known code", n)
        return Code.UNKNOWN
    return code


def from_optional(maybe_n: int | None) -> Code:
    """Convert an optional exit status; ``None`` becomes ``Code.UNKNOWN``."""
    if maybe_n is None:
        return Code.UNKNOWN
    return from_int(maybe_n)


def platform_exit_code(status: ExitStatusLike | ProcessResultLike) -> int | None:
    """
    Derive the integer exit status a shell would report for a terminated process.

    The normal exit code wins when present. Otherwise, on Unix-family hosts, a
    terminating signal N is reported as ``SIGBASE + N``.

    Parameters:
        status: An ``ExitStatus``, an object with ``code``/``signal`` attributes,
            or a ``subprocess`` result with a ``returncode`` attribute.

    Returns:
        int | None: The exit status, or ``None`` when it cannot be determined.

    Raises:
        TypeError: If ``status`` exposes neither shape.
    """
    exit_status = _as_exit_status(status)
    if exit_status.code is not None:
        return exit_status.code
    if exit_status.signal is not None and is_unix():
        return SIGBASE + exit_status.signal
    return None


def from_status(status: ExitStatusLike | ProcessResultLike) -> Code:
    """
    Classify a process termination result.

    A process killed by SIGHUP classifies as ``Code.SIGHUP`` (129). When the
    status cannot be determined ``Code.UNKNOWN`` is returned.
    """
    n = platform_exit_code(status)
    if n is None:
        log.debug("Exit status of %r cannot be determined", status)
    return from_optional(n)


def from_io_error_kind(kind: IoErrorKind) -> Code:
    """Map an I/O failure kind to a code, defaulting to ``Code.IOERR``."""
    return _IO_ERROR_CODES.get(kind, Code.IOERR)


def io_error_kind(exc: BaseException) -> IoErrorKind:
    """
    Classify an exception into an I/O failure kind.

    Parameters:
        exc (BaseException): Typically an ``OSError`` raised by file or socket code.

    Returns:
        IoErrorKind: The matching kind, or ``IoErrorKind.OTHER``.
    """
    for exc_type, kind in _EXCEPTION_KINDS:
        if isinstance(exc, exc_type):
            return kind
    if isinstance(exc, OSError) and exc.errno in _ERRNO_KINDS:
        return _ERRNO_KINDS[exc.errno]
    return IoErrorKind.OTHER


def from_exception(exc: BaseException) -> Code:
    """Pick the exit code for a process that failed with ``exc``."""
    return from_io_error_kind(io_error_kind(exc))


def is_success(status: ExitStatusLike | ProcessResultLike) -> bool:
    """Determine if a process termination result was successful."""
    return from_status(status) is Code.SUCCESS


def is_error(status: ExitStatusLike | ProcessResultLike) -> bool:
    """Determine if a process termination result was unsuccessful."""
    return not is_success(status)


def is_reserved(n: int) -> bool:
    """Test if an exit status is reserved and has a special meaning in shells."""
    return any(low <= n <= high for low, high in _RESERVED_RANGES)


def is_valid(n: int) -> bool:
    """Test if an exit status is within the 0-255 (inclusive) range."""
    return EXIT_STATUS_MIN <= n <= EXIT_STATUS_MAX
