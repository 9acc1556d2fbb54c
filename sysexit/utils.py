"""Generic helpers for platform detection and exit code name parsing."""

import os
import re


def is_unix() -> bool:
    """
    Determine whether the current operating system belongs to the Unix family.

    Only Unix-family hosts report a terminating signal alongside exit codes.

    Returns:
        bool: True on POSIX platforms (Linux, macOS, the BSDs), False otherwise.
    """
    return os.name == "posix"


def normalize_code_name(name: str) -> str:
    """
    Normalize a user-supplied exit code name to enum member spelling.

    Surrounding whitespace is dropped, runs of spaces and hyphens collapse to a
    single underscore, the result is upper-cased and the sysexits.h "EX_" prefix
    is removed.

    Parameters:
        name (str): A name such as "ex_usage", "not-found" or "SIGHUP".

    Returns:
        str: The normalized name, e.g. "USAGE", "NOT_FOUND" or "SIGHUP".
    """
    normalized = re.sub(r"[\s\-]+", "_", name.strip()).upper()
    if normalized.startswith("EX_"):
        normalized = normalized[len("EX_"):]
    return normalized
