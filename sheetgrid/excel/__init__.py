# -*- coding: utf-8 -*-
"""
excel 모듈 - 그리드 <-> Excel 워크북 변환

그리드 엔진은 이 모듈에 의존하지 않습니다.
"""

from .records import ColumnProperty, column_properties, grid_from_records
from .loader import load_grid, load_worksheet
from .writer import (
    fill_worksheet,
    write_workbook,
    grid_to_bytes,
    write_to_temp_file,
    write_records_to_temp_file,
)

__all__ = [
    'ColumnProperty',
    'column_properties',
    'grid_from_records',
    'load_grid',
    'load_worksheet',
    'fill_worksheet',
    'write_workbook',
    'grid_to_bytes',
    'write_to_temp_file',
    'write_records_to_temp_file',
]
