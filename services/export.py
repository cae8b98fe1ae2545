"""Workbook export for computed plan sheets."""
from __future__ import annotations

import io
import logging
from datetime import date
from typing import List, Protocol, Sequence

import pandas as pd
from openpyxl.utils import get_column_letter

from models import Sheet

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MIN_COLUMN_WIDTH = 10
MAX_SHEET_NAME = 31


class ExportError(RuntimeError):
    """Raised when the workbook cannot be produced."""


class SheetExporter(Protocol):
    mime_type: str

    def export(self, sheets: Sequence[Sheet]) -> bytes:
        ...


def column_widths(sheet: Sheet, *, minimum: int = MIN_COLUMN_WIDTH) -> List[int]:
    """Width per column: longest cell text, never below *minimum*."""
    widths: List[int] = []
    for index in range(len(sheet.header)):
        longest = minimum
        for row in sheet.rows:
            cell = row[index] if index < len(row) else ""
            longest = max(longest, len(str(cell)))
        widths.append(longest)
    return widths


def export_filename(today: date | None = None) -> str:
    stamp = (today or date.today()).isoformat()
    return f"personal_finance_plan_{stamp}.xlsx"


class ExcelSheetExporter:
    """Write each sheet to its own tab via :class:`pandas.ExcelWriter`."""

    mime_type = XLSX_MIME
    engine = "openpyxl"

    def __init__(self, *, min_column_width: int = MIN_COLUMN_WIDTH) -> None:
        self.min_column_width = min_column_width

    def export(self, sheets: Sequence[Sheet]) -> bytes:
        if not sheets:
            raise ExportError("There are no sheets to export.")
        buffer = io.BytesIO()
        try:
            with pd.ExcelWriter(buffer, engine=self.engine) as writer:
                for sheet in sheets:
                    tab_name = sheet.name[:MAX_SHEET_NAME]
                    sheet.to_dataframe().to_excel(writer, sheet_name=tab_name, index=False)
                    worksheet = writer.sheets[tab_name]
                    widths = column_widths(sheet, minimum=self.min_column_width)
                    for index, width in enumerate(widths, start=1):
                        worksheet.column_dimensions[get_column_letter(index)].width = width
        except ImportError as exc:
            logger.error("Excel engine %r is not installed", self.engine)
            raise ExportError("The spreadsheet library is not available.") from exc
        except (OSError, ValueError) as exc:
            logger.exception("Workbook export failed")
            raise ExportError("An unexpected error occurred while generating the Excel file.") from exc
        buffer.seek(0)
        payload = buffer.getvalue()
        logger.info("Exported %d sheets (%d bytes)", len(sheets), len(payload))
        return payload


__all__ = [
    "ExcelSheetExporter",
    "ExportError",
    "MIN_COLUMN_WIDTH",
    "SheetExporter",
    "XLSX_MIME",
    "column_widths",
    "export_filename",
]
