"""Pydantic models for the flake.lock document (schema version 7).

``locked`` records are a closed union discriminated on ``type``. Each
variant declares only the fields its kind carries, so a record with an
unknown kind or a missing field is rejected while decoding.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class _LockedRecord(BaseModel):
    # rev, narHash, lastModified, ref, ... are not needed for linting
    model_config = ConfigDict(frozen=True, extra="ignore")


class ScmSource(_LockedRecord):
    """A repository on a forge, addressed by owner and repo."""

    type: Literal["github", "gitlab", "sourcehut"]
    owner: str
    repo: str


class UrlSource(_LockedRecord):
    """A source fetched from a URL."""

    type: Literal["git", "hg", "tarball"]
    url: str


class PathSource(_LockedRecord):
    """A source on the local filesystem."""

    type: Literal["path"]
    path: str


LockedSource = Annotated[
    ScmSource | UrlSource | PathSource,
    Field(discriminator="type"),
]


class Node(BaseModel):
    """One named entry in ``nodes``; the root node has no ``locked``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    locked: LockedSource | None = None


class LockDocument(BaseModel):
    """Top-level flake.lock document."""

    model_config = ConfigDict(
        frozen=True, extra="ignore", populate_by_name=True
    )

    schema_version: int = Field(alias="version", strict=True)
    nodes: dict[str, Node]
    root: str | None = None
