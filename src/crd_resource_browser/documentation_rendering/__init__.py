"""Documentation rendering exports."""

from .field_reference import FieldRow, build_field_rows, render_resource_text, render_schema_text
from .workbook_export import (
    OVERVIEW_SHEET_NAME,
    SPEC_SHEET_NAME,
    STATUS_SHEET_NAME,
    write_field_reference_workbook,
)

__all__ = [
    "FieldRow",
    "OVERVIEW_SHEET_NAME",
    "SPEC_SHEET_NAME",
    "STATUS_SHEET_NAME",
    "build_field_rows",
    "render_resource_text",
    "render_schema_text",
    "write_field_reference_workbook",
]
