# -*- coding: utf-8 -*-
"""
그리드 엔진 모듈

- grid: 그리드 (조회, 병합 영역, 셀 쓰기)
- row_shifter: 행 삽입/삭제/비우기/범위 복사
- reducer: 병합 영역 축약
- searcher: 키워드 검색
"""

from .grid import Grid
from .row_shifter import RowShifter, copy_cell_value
from .reducer import RegionReducer, Accumulator, sum_numbers, concat_text, keep_first
from .searcher import CellSearcher, Direction, to_direction

__all__ = [
    'Grid',
    # 행 편집
    'RowShifter',
    'copy_cell_value',
    # 병합 축약
    'RegionReducer',
    'Accumulator',
    'sum_numbers',
    'concat_text',
    'keep_first',
    # 검색
    'CellSearcher',
    'Direction',
    'to_direction',
]
