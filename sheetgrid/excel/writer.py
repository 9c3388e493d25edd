# -*- coding: utf-8 -*-
"""
그리드 -> Excel 워크북 변환

그리드의 셀 값, 셀 스타일, 행 높이, 열 너비, 병합 영역을 openpyxl 워크북에 기록하고
바이트 또는 임시 파일로 저장합니다.
"""

import logging
import os
import tempfile
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Sequence

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from ..config import GridConfig
from ..core.models import CellKind, CellStyle, CellValue
from ..grid.grid import Grid
from .records import ColumnProperty, grid_from_records


logger = logging.getLogger('sheetgrid.excel.writer')


def _to_excel_value(value: CellValue) -> Any:
    """CellValue -> openpyxl 셀 값"""
    kind = value.kind
    if kind is CellKind.BLANK:
        return None
    if kind is CellKind.FORMULA:
        return f"={value.value}"
    return value.value


def _apply_style(excel_cell, style: CellStyle):
    """CellStyle을 openpyxl 셀에 적용 (None인 항목은 건너뜀)"""
    if style.font is not None:
        excel_cell.font = style.font
    if style.border is not None:
        excel_cell.border = style.border
    if style.fill is not None:
        excel_cell.fill = style.fill
    if style.number_format:
        excel_cell.number_format = style.number_format
    if style.alignment is not None:
        excel_cell.alignment = style.alignment
    if style.protection is not None:
        excel_cell.protection = style.protection


def fill_worksheet(ws: Worksheet, grid: Grid):
    """그리드 내용을 워크시트에 기록"""
    for row_idx, row in grid.iter_rows():
        excel_row = row_idx + 1  # 1-based

        if row.height is not None:
            ws.row_dimensions[excel_row].height = row.height

        for col, cell in row.iter_cells():
            excel_cell = ws.cell(row=excel_row, column=col + 1)
            excel_cell.value = _to_excel_value(cell.value)
            # "="로 시작하는 문자열을 openpyxl이 수식으로 판단하지 않도록
            if cell.value.kind is CellKind.TEXT:
                excel_cell.data_type = 's'
            if cell.style is not None:
                _apply_style(excel_cell, cell.style)

    for col, width in grid.column_widths.items():
        ws.column_dimensions[get_column_letter(col + 1)].width = width

    # 값 기록 후 병합 (앵커가 아닌 셀은 openpyxl이 MergedCell로 바꿈)
    for region in grid.regions:
        ws.merge_cells(
            start_row=region.first_row + 1,
            start_column=region.first_col + 1,
            end_row=region.last_row + 1,
            end_column=region.last_col + 1,
        )


def write_workbook(grid: Grid, title: Optional[str] = None) -> Workbook:
    """그리드로 새 워크북 생성"""
    wb = Workbook()
    ws = wb.active
    if title:
        ws.title = title
    fill_worksheet(ws, grid)
    return wb


def grid_to_bytes(grid: Grid, title: Optional[str] = None) -> bytes:
    """그리드를 xlsx 바이트로 변환"""
    wb = write_workbook(grid, title)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def write_to_temp_file(grid: Grid, title: Optional[str] = None) -> Path:
    """
    그리드를 임시 xlsx 파일로 저장

    Returns:
        임시 파일 경로 (삭제는 호출자 책임)
    """
    wb = write_workbook(grid, title)
    fd, path = tempfile.mkstemp(prefix="excel", suffix=".xlsx")
    os.close(fd)

    try:
        wb.save(path)
    except OSError as e:
        Path(path).unlink(missing_ok=True)
        raise RuntimeError(f"Excel 쓰기 실패: {path}") from e

    logger.debug("임시 파일 저장: %s", path)
    return Path(path)


def write_records_to_temp_file(
    records: Sequence[Any],
    columns: Sequence[ColumnProperty],
    config: Optional[GridConfig] = None
) -> Path:
    """레코드 목록을 헤더 포함 표로 만들어 임시 xlsx 파일로 저장"""
    grid = grid_from_records(records, columns, config)
    return write_to_temp_file(grid)
