"""Find canonical URIs shared by more than one input."""

from __future__ import annotations

from collections.abc import Mapping


def find_duplicates(inputs: Mapping[str, str]) -> dict[str, list[str]]:
    """Group input names by repeated canonical URI.

    The first input seen for a URI is treated as the original and is
    not listed; every later input with the same URI is appended to that
    URI's group. Only URIs with at least one repeat appear as keys.
    """
    seen: set[str] = set()
    duplicates: dict[str, list[str]] = {}
    for name, uri in inputs.items():
        if uri in seen:
            duplicates.setdefault(uri, []).append(name)
        else:
            seen.add(uri)
    return duplicates
