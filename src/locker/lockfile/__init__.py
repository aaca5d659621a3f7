"""flake.lock decoding."""

from locker.lockfile.loader import check_version, parse_lock, read_lock
from locker.lockfile.schemas import (
    LockDocument,
    LockedSource,
    Node,
    PathSource,
    ScmSource,
    UrlSource,
)

__all__ = [
    "LockDocument",
    "LockedSource",
    "Node",
    "PathSource",
    "ScmSource",
    "UrlSource",
    "check_version",
    "parse_lock",
    "read_lock",
]
