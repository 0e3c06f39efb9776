"""Spreadsheet export of report entries"""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

logger = logging.getLogger(__name__)

HEADER_SAMPLE_SIZE = 10
MAX_SHEET_TITLE = 31
MAX_COLUMN_WIDTH = 60
_INVALID_TITLE_CHARS = re.compile(r"[\[\]:*?/\\]")


def collect_columns(entries: List[Any]) -> List[str]:
    """Union of keys over the first object entries, in first-seen order"""
    columns: Dict[str, None] = {}
    for item in entries[:HEADER_SAMPLE_SIZE]:
        if isinstance(item, dict):
            for key in item:
                columns.setdefault(key, None)
    return list(columns)


def cell_value(value: Any) -> Any:
    """Native scalars; nested values as compact JSON. Control characters are dropped."""
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if not isinstance(value, str):
        value = json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def sheet_title(name: str) -> str:
    title = _INVALID_TITLE_CHARS.sub("_", name).strip() or "Sheet1"
    return title[:MAX_SHEET_TITLE]


def export_entries_to_excel(
    entries: List[Any],
    sheet_name: str,
    output_dir: Path,
    now: Optional[datetime] = None,
) -> Optional[Path]:
    """
    Write entries to BankEntries_<yyyyMMdd_HHmmss>.xlsx in output_dir.

    Returns the file path, or None when entries is empty.
    """
    if not entries:
        logger.warning("No data to export")
        return None

    columns = collect_columns(entries)

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = sheet_title(sheet_name)

    bold = Font(bold=True)
    for col, name in enumerate(columns, start=1):
        cell = worksheet.cell(row=1, column=col, value=cell_value(name))
        cell.data_type = "s"
        cell.font = bold

    for row, item in enumerate(entries, start=2):
        if not isinstance(item, dict):
            continue
        for col, name in enumerate(columns, start=1):
            if name in item:
                cell = worksheet.cell(row=row, column=col, value=cell_value(item[name]))
                # Text from the API is never a formula
                if isinstance(cell.value, str):
                    cell.data_type = "s"

    # Auto-fit columns
    for col, name in enumerate(columns, start=1):
        letter = get_column_letter(col)
        width = max(len(str(cell.value)) for cell in worksheet[letter] if cell.value is not None)
        worksheet.column_dimensions[letter].width = min(width + 2, MAX_COLUMN_WIDTH)

    output_dir.mkdir(parents=True, exist_ok=True)
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    file_path = output_dir / f"BankEntries_{stamp}.xlsx"
    workbook.save(file_path)

    logger.info(f"Excel file with {len(entries)} entries saved to {file_path}")
    return file_path
