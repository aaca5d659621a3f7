"""Canonical source identities and duplicate detection."""

from locker.analysis.canonical import canonical_uri, canonicalize
from locker.analysis.duplicates import find_duplicates

__all__ = ["canonical_uri", "canonicalize", "find_duplicates"]
