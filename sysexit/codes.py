"""The closed taxonomy of well-known exit codes.

The table encodes the generic statuses 0-2, the sysexits(3) codes 64-78 from
OpenBSD, the bash(1) statuses for commands that cannot be run, and the statuses
shells create when a command is terminated by a fatal signal. For signal N the
status is ``SIGBASE + N``, so SIGHUP (1) is recognised as 129.
"""

from __future__ import annotations

from enum import IntEnum, unique

from sysexit.constants import SIGBASE, signal_number
from sysexit.errors import UnknownCodeNameError
from sysexit.utils import normalize_code_name


@unique
class Code(IntEnum):
    """Exit code categories; members can be passed straight to ``sys.exit()``."""

    # The process exited successfully.
    SUCCESS = 0
    # Generic failure.
    FAILURE = 1
    # Catch-all when the process exits for an unknown reason.
    UNKNOWN = 2

    # The command was used incorrectly: wrong number of arguments, a bad
    # flag, bad syntax in a parameter.
    USAGE = 64
    # The input data was incorrect. Only for user data, not system files.
    DATAERR = 65
    # An input file (not a system file) did not exist or was not readable.
    NOINPUT = 66
    # The user specified did not exist.
    NOUSER = 67
    # The host specified did not exist.
    NOHOST = 68
    # A service is unavailable, or something failed for an unknown reason.
    UNAVAILABLE = 69
    # An internal software error unrelated to the operating system.
    SOFTWARE = 70
    # An operating system error, e.g. "cannot fork" or "cannot create pipe".
    OSERR = 71
    # Some system file (/etc/passwd, /var/run/utmp) is missing or broken.
    OSFILE = 72
    # A (user specified) output file cannot be created.
    CANTCREAT = 73
    # An error occurred while doing I/O on some file.
    IOERR = 74
    # Temporary failure; the request should be reattempted later.
    TEMPFAIL = 75
    # The remote system returned something "not possible" in a protocol exchange.
    PROTOCOL = 76
    # Insufficient permission for a high-level operation (not file system access).
    NOPERM = 77
    # Something was found in an unconfigured or misconfigured state.
    CONFIG = 78

    # Command was found but is not executable by the shell.
    NOT_EXECUTABLE = 126
    # Command, or a library it requires, was not found.
    NOT_FOUND = 127

    SIGHUP = SIGBASE + signal_number("SIGHUP")
    SIGINT = SIGBASE + signal_number("SIGINT")
    SIGKILL = SIGBASE + signal_number("SIGKILL")
    SIGPIPE = SIGBASE + signal_number("SIGPIPE")
    SIGALRM = SIGBASE + signal_number("SIGALRM")
    SIGTERM = SIGBASE + signal_number("SIGTERM")
    SIGUSR1 = SIGBASE + signal_number("SIGUSR1")
    SIGUSR2 = SIGBASE + signal_number("SIGUSR2")
    SIGVTALRM = SIGBASE + signal_number("SIGVTALRM")

    @property
    def reason(self) -> str:
        """Return the lowercase phrase explaining this exit code."""
        return _REASONS[self]

    @property
    def is_signal(self) -> bool:
        """Return whether this code stands for termination by a fatal signal."""
        return self.name.startswith("SIG")

    @property
    def signum(self) -> int | None:
        """Return the signal number behind a signal code, or ``None``."""
        return int(self) - SIGBASE if self.is_signal else None

    @classmethod
    def from_name(cls, name: str) -> Code:
        """
        Look up a code by name, ignoring case.

        Accepts member names ("NOT_FOUND"), sysexits.h spellings ("EX_USAGE"),
        hyphenated forms ("not-found") and bare signal names ("hup").

        Raises:
            UnknownCodeNameError: If no member matches.
        """
        normalized = normalize_code_name(name)
        for candidate in (normalized, f"SIG{normalized}"):
            member = cls.__members__.get(candidate)
            if member is not None:
                return member
        raise UnknownCodeNameError(name)

    def __str__(self) -> str:
        return describe(self)


_REASONS = {
    Code.SUCCESS: "success",
    Code.FAILURE: "failure",
    Code.UNKNOWN: "unknown",
    Code.USAGE: "usage",
    Code.DATAERR: "data",
    Code.NOINPUT: "no input",
    Code.NOUSER: "no user",
    Code.NOHOST: "no host",
    Code.UNAVAILABLE: "unavailable",
    Code.SOFTWARE: "software",
    Code.OSERR: "os err",
    Code.OSFILE: "os file",
    Code.CANTCREAT: "cannot create",
    Code.IOERR: "i/o error",
    Code.TEMPFAIL: "temporary failure",
    Code.PROTOCOL: "protocol",
    Code.NOPERM: "permission denied",
    Code.CONFIG: "config",
    Code.NOT_EXECUTABLE: "not executable",
    Code.NOT_FOUND: "not found",
    Code.SIGHUP: "hangup signal",
    Code.SIGINT: "terminal interrupt signal",
    Code.SIGKILL: "kill signal",
    Code.SIGPIPE: "write on a pipe with no one to read it signal",
    Code.SIGALRM: "alarm clock signal",
    Code.SIGTERM: "termination signal",
    Code.SIGUSR1: "user-defined signal 1",
    Code.SIGUSR2: "user-defined signal 2",
    Code.SIGVTALRM: "virtual timer expired signal",
}

SIGNAL_CODES = tuple(code for code in Code if code.is_signal)


def describe(code: Code) -> str:
    """Render a code as ``"<reason> (<n>)"``, e.g. ``"i/o error (74)"``."""
    return f"{code.reason} ({int(code)})"
