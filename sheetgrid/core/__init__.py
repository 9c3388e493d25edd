# -*- coding: utf-8 -*-
"""
core 모듈 - 공통 데이터 모델 및 유틸리티

셀 값/셀/행/병합 영역 모델, A1 주소 변환, 값 표시 형식, 예외
"""

from .models import CellKind, CellValue, CellStyle, Cell, Row, MergedRegion
from .address import column_letter, column_index, cell_address, parse_address, parse_range
from .formatter import to_cell_value, format_value, format_cell, format_number, to_number
from .errors import (
    GridError,
    GridArgumentError,
    InvalidRangeError,
    OverlappingRegionError,
    WriteRejectedError,
    WriteResult,
)

__all__ = [
    # 모델
    'CellKind',
    'CellValue',
    'CellStyle',
    'Cell',
    'Row',
    'MergedRegion',
    # 주소
    'column_letter',
    'column_index',
    'cell_address',
    'parse_address',
    'parse_range',
    # 표시 형식
    'to_cell_value',
    'format_value',
    'format_cell',
    'format_number',
    'to_number',
    # 예외
    'GridError',
    'GridArgumentError',
    'InvalidRangeError',
    'OverlappingRegionError',
    'WriteRejectedError',
    'WriteResult',
]
