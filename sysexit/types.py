"""Typed protocol contracts for process termination results."""

from __future__ import annotations

from typing import Protocol


class ExitStatusLike(Protocol):
    """Termination result exposing a normal exit code and a terminating signal."""

    @property
    def code(self) -> int | None:
        """Exit code when the process exited normally, else ``None``."""

    @property
    def signal(self) -> int | None:
        """Signal number when the process was killed by a signal, else ``None``."""


class ProcessResultLike(Protocol):
    """Shape shared by ``subprocess.CompletedProcess``, ``Popen`` and ``CalledProcessError``."""

    @property
    def returncode(self) -> int | None:
        """Exit code, negated signal number on POSIX, or ``None`` while running."""
