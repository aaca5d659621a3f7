"""Shared constants — single source of truth for cross-module values."""

from __future__ import annotations

from enum import IntEnum, StrEnum

SUPPORTED_LOCK_VERSION = 7
DEFAULT_LOCK_PATH = "flake.lock"


class OutputFormat(StrEnum):
    """Report formats accepted by ``--format``."""

    TEXT = "text"
    JSON = "json"


class ExitCode(IntEnum):
    """Process exit status returned by the CLI."""

    OK = 0
    FAILURE = 1
