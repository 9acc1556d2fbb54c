"""Exceptions raised by sysexit components."""

from __future__ import annotations


class SysexitError(Exception):
    """Base exception for sysexit-specific failures."""


class UnknownCodeNameError(SysexitError, ValueError):
    """Raised when a name does not match any exit code category."""

    def __init__(self, name: str) -> None:
        """Store the rejected name for callers rendering their own message."""
        super().__init__(f"Unknown exit code name: {name!r}")
        self.name = name


class ConfigurationError(SysexitError):
    """Raised when environment configuration holds an unsupported value."""
