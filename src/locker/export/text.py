"""Plain-text report — summary on stdout, one line per group on stderr."""

from __future__ import annotations

from dataclasses import dataclass

from locker.services.lint_service import LintResult

NO_DUPLICATES_MESSAGE = "No duplicate inputs found."
DUPLICATES_HEADER = (
    "The following flake uris contained duplicate entries "
    "in your flake.lock:"
)


@dataclass(frozen=True)
class TextReport:
    """Lines destined for standard output and the diagnostic stream."""

    stdout: tuple[str, ...]
    stderr: tuple[str, ...] = ()


def format_text_report(result: LintResult) -> TextReport:
    if not result.has_duplicates:
        return TextReport(stdout=(NO_DUPLICATES_MESSAGE,))

    return TextReport(
        stdout=(DUPLICATES_HEADER,),
        stderr=tuple(
            format_group(uri, names)
            for uri, names in result.duplicates.items()
        ),
    )


def format_group(uri: str, names: list[str]) -> str:
    """Return ``  '<uri>': name1, name2``."""
    return f"  '{uri}': {', '.join(names)}"
