from .codes import Code, describe
from .constants import SIGBASE, IoErrorKind
from .errors import ConfigurationError, SysexitError, UnknownCodeNameError
from .status import (
    ExitStatus,
    from_exception,
    from_int,
    from_io_error_kind,
    from_optional,
    from_status,
    io_error_kind,
    is_error,
    is_reserved,
    is_success,
    is_valid,
    platform_exit_code,
)

__all__ = [
    "Code",
    "describe",
    "SIGBASE",
    "IoErrorKind",
    "ConfigurationError",
    "SysexitError",
    "UnknownCodeNameError",
    "ExitStatus",
    "from_exception",
    "from_int",
    "from_io_error_kind",
    "from_optional",
    "from_status",
    "io_error_kind",
    "is_error",
    "is_reserved",
    "is_success",
    "is_valid",
    "platform_exit_code",
]
