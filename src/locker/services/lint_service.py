"""Lint orchestration — read, decode, check, canonicalize, detect."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from locker.analysis.canonical import canonicalize
from locker.analysis.duplicates import find_duplicates
from locker.lockfile.loader import check_version, read_lock
from locker.lockfile.schemas import LockDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LintResult:
    """Outcome of linting one lock file."""

    inputs: dict[str, str]  # input name -> canonical URI
    duplicates: dict[str, list[str]]  # canonical URI -> repeated inputs
    path: Path | None = None
    skipped: tuple[str, ...] = field(default_factory=tuple)

    @property
    def has_duplicates(self) -> bool:
        return bool(self.duplicates)


def lint_document(
    document: LockDocument, path: Path | None = None
) -> LintResult:
    """Lint an already decoded document.

    Raises ``UnsupportedVersionError`` before any canonicalization if
    the schema version is not supported.
    """
    check_version(document)

    inputs = canonicalize(document.nodes)
    skipped = tuple(
        name
        for name, node in document.nodes.items()
        if node.locked is None
    )
    duplicates = find_duplicates(inputs)

    logger.info(
        "event=lint_complete inputs=%d skipped=%d duplicate_uris=%d",
        len(inputs),
        len(skipped),
        len(duplicates),
    )
    for uri, names in duplicates.items():
        logger.debug(
            "event=duplicate_uri uri=%s names=%s",
            uri,
            ",".join(names),
        )

    return LintResult(
        inputs=inputs,
        duplicates=duplicates,
        path=path,
        skipped=skipped,
    )


def lint_lock(path: str | Path) -> LintResult:
    """Read and lint the lock file at ``path``."""
    lock_path = Path(path)
    logger.debug("event=lint_start path=%s", lock_path)
    return lint_document(read_lock(lock_path), path=lock_path)
