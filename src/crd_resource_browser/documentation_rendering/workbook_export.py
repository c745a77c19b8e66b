"""Excel field reference export service."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from crd_resource_browser.resource_resolution.resolution_contracts import ResolvedResource

from .field_reference import FieldRow, build_field_rows

OVERVIEW_SHEET_NAME = "Overview"
SPEC_SHEET_NAME = "Spec"
STATUS_SHEET_NAME = "Status"

FIELD_COLUMNS: tuple[str, ...] = ("Path", "Type", "Required")
DETAIL_COLUMNS: tuple[str, ...] = ("Description", "Default", "Enum")


def write_field_reference_workbook(resolved: ResolvedResource, output_path: Path | str) -> Path:
    """Write the overview, spec and status field tables of one resource version."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = OVERVIEW_SHEET_NAME
    _write_overview(sheet, resolved)

    for title, root_id, schema in (
        (SPEC_SHEET_NAME, "spec", resolved.spec),
        (STATUS_SHEET_NAME, "status", resolved.status),
    ):
        _write_field_sheet(workbook.create_sheet(title), build_field_rows(root_id, schema))

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(output_path)
    return output_path.resolve()


def _write_overview(sheet: Worksheet, resolved: ResolvedResource) -> None:
    entries = [
        ("name", resolved.name),
        ("group", resolved.group),
        ("kind", resolved.kind),
        ("version", resolved.version_on_focus),
        ("deprecated", "yes" if resolved.deprecated else "no"),
        ("app_version", resolved.app_version),
        ("valid_versions", ", ".join(resolved.valid_versions)),
        ("release", resolved.release_label),
        ("release_folder", resolved.release_folder),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
    sheet.column_dimensions["A"].width = 18
    sheet.column_dimensions["B"].width = 60


def _write_field_sheet(sheet: Worksheet, rows: Sequence[FieldRow]) -> None:
    _write_group_headers(sheet, len(FIELD_COLUMNS), len(DETAIL_COLUMNS))
    columns = FIELD_COLUMNS + DETAIL_COLUMNS
    for column_index, name in enumerate(columns, start=1):
        sheet.cell(row=2, column=column_index, value=name)

    widths = [len(name) for name in columns]
    for row_index, row in enumerate(rows, start=3):
        values = (
            row.path,
            row.type,
            "yes" if row.required else "",
            row.description,
            row.default,
            row.enum,
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)
            widths[column_index - 1] = max(widths[column_index - 1], len(value))

    for column_index, width in enumerate(widths, start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = max(12, min(width + 2, 80))
    sheet.freeze_panes = "A3"


def _write_group_headers(sheet: Worksheet, field_count: int, detail_count: int) -> None:
    groups = [
        ("Field", 1, field_count),
        ("Details", field_count + 1, detail_count),
    ]
    for label, start_column, count in groups:
        end_column = start_column + count - 1
        start_letter = get_column_letter(start_column)
        end_letter = get_column_letter(end_column)
        sheet.merge_cells(f"{start_letter}1:{end_letter}1")
        sheet[f"{start_letter}1"].value = label
        sheet[f"{start_letter}1"].style = "Headline 1"
