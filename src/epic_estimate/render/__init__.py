"""Output rendering modules."""

from epic_estimate.render.json_report import (
    SCHEMA_VERSION,
    build_epic_record,
    render_json_report,
)
from epic_estimate.render.markdown_report import format_days, render_markdown_report

__all__ = [
    "SCHEMA_VERSION",
    "build_epic_record",
    "format_days",
    "render_json_report",
    "render_markdown_report",
]
