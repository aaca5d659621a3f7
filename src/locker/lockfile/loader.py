"""Read, decode and version-check flake.lock files."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from locker.constants import SUPPORTED_LOCK_VERSION
from locker.errors import DecodeError, LockReadError, UnsupportedVersionError
from locker.lockfile.schemas import LockDocument

logger = logging.getLogger(__name__)


def parse_lock(raw: str | bytes) -> LockDocument:
    """Decode a flake.lock JSON document.

    Raises ``DecodeError`` if the text is not valid JSON, if ``nodes``
    or ``version`` is missing, or if a ``locked`` record has an unknown
    ``type`` or lacks a field its kind requires.
    """
    try:
        document = LockDocument.model_validate_json(raw)
    except ValidationError as exc:
        raise DecodeError(
            f"Invalid flake.lock: {_first_problem(exc)}"
        ) from exc

    logger.debug(
        "event=lock_decoded version=%s nodes=%d",
        document.schema_version,
        len(document.nodes),
    )
    return document


def read_lock(path: str | Path) -> LockDocument:
    """Read ``path`` as UTF-8 and decode it."""
    lock_path = Path(path)
    try:
        raw = lock_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) else str(exc)
        raise LockReadError(lock_path, reason or str(exc)) from exc
    return parse_lock(raw)


def check_version(document: LockDocument) -> LockDocument:
    """Reject documents whose schema version is not supported."""
    if document.schema_version != SUPPORTED_LOCK_VERSION:
        logger.debug(
            "event=lock_version_rejected version=%s",
            document.schema_version,
        )
        raise UnsupportedVersionError(document.schema_version)
    return document


def _first_problem(exc: ValidationError) -> str:
    """Render the first validation error as ``loc: message``."""
    errors = exc.errors(include_url=False)
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first["loc"])
    extra = len(errors) - 1
    suffix = f" (and {extra} more)" if extra else ""
    if loc:
        return f"{loc}: {first['msg']}{suffix}"
    return f"{first['msg']}{suffix}"
