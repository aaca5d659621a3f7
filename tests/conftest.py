"""Shared test fixtures — sample lock documents."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SAMPLE_LOCK: dict[str, Any] = {
    "nodes": {
        "input1": {
            "locked": {"type": "github", "owner": "user1", "repo": "repo1"}
        },
        "input2": {
            "locked": {"type": "github", "owner": "user2", "repo": "repo2"}
        },
        "input3": {
            "locked": {"type": "github", "owner": "user1", "repo": "repo1"}
        },
        "input4": {
            "locked": {
                "type": "git",
                "url": "https://example.com/repo.git",
            }
        },
        "input5": {
            "locked": {
                "type": "git",
                "url": "https://example.com/repo.git",
            }
        },
    },
    "version": 7,
    "root": ".",
}


@pytest.fixture
def sample_lock_text() -> str:
    """Five inputs: two pairs share a source, one is unique."""
    return json.dumps(SAMPLE_LOCK)


@pytest.fixture
def real_world_lock_path() -> Path:
    """A full flake.lock with many repeated nixpkgs pins."""
    return FIXTURES_DIR / "flake-lock.json"


@pytest.fixture
def write_lock(tmp_path: Path) -> Callable[[Any], Path]:
    """Write a payload (dict or raw text) to ``flake.lock`` in tmp_path."""

    def _write(payload: Any, name: str = "flake.lock") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write
