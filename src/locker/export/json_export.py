"""JSON export — structured envelope."""

from __future__ import annotations

import json
from typing import Any

from locker.services.lint_service import LintResult


def export_json(result: LintResult) -> str:
    """Export a lint result as structured JSON."""
    payload: dict[str, Any] = {
        "path": str(result.path) if result.path is not None else None,
        "duplicate_count": len(result.duplicates),
        "duplicates": [
            {"uri": uri, "inputs": list(names)}
            for uri, names in result.duplicates.items()
        ],
        "inputs": dict(result.inputs),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
