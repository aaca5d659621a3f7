"""Report rendering for lint results."""

from locker.export.json_export import export_json
from locker.export.text import TextReport, format_text_report

__all__ = ["TextReport", "export_json", "format_text_report"]
