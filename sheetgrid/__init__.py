# -*- coding: utf-8 -*-
"""
sheetgrid 패키지

병합 영역을 지원하는 메모리 내 표(그리드) 엔진

모듈:
- core: 셀/행/병합 영역 모델, A1 주소 변환, 값 표시 형식, 예외
- grid: 그리드 조회/쓰기, 행 편집, 병합 축약, 검색
- excel: 그리드 <-> Excel 워크북 변환 (openpyxl)
"""

from .config import (
    PACKAGE_ROOT,
    DEFAULT_CONFIG_PATH,
    GridConfig,
    GridConfigLoader,
    load_grid_config,
    setup_logging,
)
from .core import (
    CellKind,
    CellValue,
    Cell,
    Row,
    MergedRegion,
    WriteResult,
    GridError,
    GridArgumentError,
    InvalidRangeError,
    cell_address,
    column_letter,
)
from .grid import Grid, Direction, sum_numbers, concat_text

__version__ = '0.1.0'

__all__ = [
    'PACKAGE_ROOT',
    'DEFAULT_CONFIG_PATH',
    'GridConfig',
    'GridConfigLoader',
    'load_grid_config',
    'setup_logging',
    'CellKind',
    'CellValue',
    'Cell',
    'Row',
    'MergedRegion',
    'WriteResult',
    'GridError',
    'GridArgumentError',
    'InvalidRangeError',
    'cell_address',
    'column_letter',
    'Grid',
    'Direction',
    'sum_numbers',
    'concat_text',
]
