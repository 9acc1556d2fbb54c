import signal
from enum import Enum

# Shells report death by signal N as the exit status SIGBASE + N.
SIGBASE = 128

EXIT_STATUS_MIN = 0
EXIT_STATUS_MAX = 255

# Linux numbering, used where the host's signal module lacks a signal.
_FALLBACK_SIGNALS = {
    "SIGHUP": 1,
    "SIGINT": 2,
    "SIGKILL": 9,
    "SIGUSR1": 10,
    "SIGUSR2": 12,
    "SIGPIPE": 13,
    "SIGALRM": 14,
    "SIGTERM": 15,
    "SIGVTALRM": 26,
}


def signal_number(name: str) -> int:
    """
    Return the host's number for a signal name.

    Parameters:
        name (str): Signal name such as "SIGHUP".

    Returns:
        int: The platform signal number, or the Linux number when the host
        does not define the signal.
    """
    return int(getattr(signal, name, _FALLBACK_SIGNALS[name]))


class IoErrorKind(Enum):
    """Represents platform-independent kinds of I/O failure."""
    NOT_FOUND = "not-found"
    PERMISSION_DENIED = "permission-denied"
    CONNECTION_REFUSED = "connection-refused"
    CONNECTION_RESET = "connection-reset"
    CONNECTION_ABORTED = "connection-aborted"
    NOT_CONNECTED = "not-connected"
    ADDR_IN_USE = "addr-in-use"
    ADDR_NOT_AVAILABLE = "addr-not-available"
    BROKEN_PIPE = "broken-pipe"
    ALREADY_EXISTS = "already-exists"
    WOULD_BLOCK = "would-block"
    INVALID_INPUT = "invalid-input"
    INVALID_DATA = "invalid-data"
    TIMED_OUT = "timed-out"
    WRITE_ZERO = "write-zero"
    INTERRUPTED = "interrupted"
    UNEXPECTED_EOF = "unexpected-eof"
    OTHER = "other"
