"""Error hierarchy for lock file linting.

Every fatal condition is raised as a ``LockerError`` subclass and
propagated to the CLI, which is the only place that prints errors
and picks an exit code.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from locker.constants import ExitCode


class ErrorKind(Enum):
    IO = "io_error"  # lock file unreadable
    DECODE = "decode_error"  # malformed JSON or locked record
    UNSUPPORTED_VERSION = "unsupported_version"


class LockerError(Exception):
    """Base class for fatal lint errors."""

    kind: ErrorKind
    exit_code: ExitCode = ExitCode.FAILURE


class LockReadError(LockerError):
    kind = ErrorKind.IO

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Cannot read lock file '{path}': {reason}")
        self.path = path
        self.reason = reason


class DecodeError(LockerError):
    kind = ErrorKind.DECODE


class UnsupportedVersionError(LockerError):
    kind = ErrorKind.UNSUPPORTED_VERSION

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported flake.lock version: {version}")
        self.version = version
