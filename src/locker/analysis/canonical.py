"""Map locked sources to canonical flake URIs.

Forge coordinates are case-insensitive, so owner and repo are
lowercased. URLs and paths are kept verbatim.
"""

from __future__ import annotations

from collections.abc import Mapping

from locker.lockfile.schemas import (
    LockedSource,
    Node,
    PathSource,
    ScmSource,
    UrlSource,
)


def canonical_uri(source: LockedSource) -> str:
    """Return the canonical URI identifying ``source``."""
    match source:
        case ScmSource(type=kind, owner=owner, repo=repo):
            return f"{kind}:{owner.lower()}/{repo.lower()}"
        case UrlSource(type=kind, url=url):
            return f"{kind}:{url}"
        case PathSource(path=path):
            return f"path:{path}"


def canonicalize(nodes: Mapping[str, Node]) -> dict[str, str]:
    """Map every node that has a ``locked`` source to its canonical URI.

    Nodes without ``locked`` (such as the root node) are skipped.
    """
    return {
        name: canonical_uri(node.locked)
        for name, node in nodes.items()
        if node.locked is not None
    }
