# -*- coding: utf-8 -*-
"""
Excel 워크시트 -> 그리드 로드

openpyxl 워크시트의 셀 값, 셀 스타일, 행 높이, 열 너비, 병합 영역을 그리드로 옮깁니다.
openpyxl에서 병합 영역의 앵커가 아닌 셀(MergedCell)은 값이 없으므로 건너뜁니다.
"""

import copy
import datetime as dt
import logging
from pathlib import Path
from typing import Optional, Union

from openpyxl import load_workbook
from openpyxl.cell.cell import MergedCell
from openpyxl.worksheet.worksheet import Worksheet

from ..config import GridConfig
from ..core.models import CellStyle, CellValue, MergedRegion
from ..core.address import column_index
from ..grid.grid import Grid


logger = logging.getLogger('sheetgrid.excel.loader')


def _to_cell_value(excel_cell) -> CellValue:
    """openpyxl 셀 -> CellValue"""
    value = excel_cell.value

    if value is None:
        return CellValue.blank()
    if excel_cell.data_type == 'f':
        # ArrayFormula 등은 text 속성에 수식이 있음
        text = value if isinstance(value, str) else getattr(value, 'text', str(value))
        return CellValue.formula(text)
    if isinstance(value, bool):
        return CellValue.boolean(value)
    if isinstance(value, (int, float)):
        return CellValue.number(value)
    if isinstance(value, dt.datetime):
        return CellValue.datetime(value)
    if isinstance(value, dt.date):
        return CellValue.date(value)
    if isinstance(value, dt.time):
        return CellValue.text(value.isoformat())
    return CellValue.text(str(value))


def _read_style(excel_cell) -> CellStyle:
    """openpyxl 셀 스타일 복사"""
    return CellStyle(
        font=copy.copy(excel_cell.font),
        border=copy.copy(excel_cell.border),
        fill=copy.copy(excel_cell.fill),
        number_format=excel_cell.number_format,
        alignment=copy.copy(excel_cell.alignment),
        protection=copy.copy(excel_cell.protection),
    )


def load_worksheet(ws: Worksheet, config: Optional[GridConfig] = None) -> Grid:
    """워크시트를 그리드로 변환"""
    grid = Grid(config)

    for row in ws.iter_rows():
        for excel_cell in row:
            if isinstance(excel_cell, MergedCell):
                continue
            if excel_cell.value is None and not excel_cell.has_style:
                continue

            cell = grid.get_or_create_cell(excel_cell.row - 1, excel_cell.column - 1)
            cell.value = _to_cell_value(excel_cell)
            if excel_cell.has_style:
                cell.style = _read_style(excel_cell)

    # 행 높이
    for row_number, dimension in ws.row_dimensions.items():
        if dimension.height is not None:
            grid.get_or_create_row(row_number - 1).height = dimension.height

    # 열 너비
    for letter, dimension in ws.column_dimensions.items():
        if dimension.customWidth and dimension.width:
            grid.column_widths[column_index(letter)] = dimension.width

    # 병합 영역
    for merged_range in ws.merged_cells.ranges:
        grid.add_merged_region(MergedRegion(
            merged_range.min_row - 1,
            merged_range.min_col - 1,
            merged_range.max_row - 1,
            merged_range.max_col - 1,
        ))

    logger.debug("워크시트 로드: %s, %s", ws.title, grid)
    return grid


def load_grid(
    source: Union[str, Path, Worksheet],
    sheet_name: Optional[str] = None,
    config: Optional[GridConfig] = None
) -> Grid:
    """
    Excel 파일(또는 워크시트)에서 그리드 로드

    Args:
        source: xlsx 파일 경로 또는 openpyxl 워크시트
        sheet_name: 시트 이름 (None이면 활성 시트)
        config: 그리드 설정
    """
    if isinstance(source, Worksheet):
        return load_worksheet(source, config)

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(f"파일을 찾을 수 없습니다: {path}")

    wb = load_workbook(path)
    try:
        ws = wb[sheet_name] if sheet_name else wb.active
        return load_worksheet(ws, config)
    finally:
        wb.close()
