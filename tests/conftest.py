# -*- coding: utf-8 -*-
"""공통 테스트 픽스처"""

import sys
from pathlib import Path

import pytest

# 설치 없이 실행할 때 패키지 경로 추가
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from sheetgrid.grid import Grid
from sheetgrid.core import CellValue, MergedRegion


@pytest.fixture
def grid():
    """빈 그리드"""
    return Grid()


@pytest.fixture
def five_row_grid():
    """
    5행 x 2열 그리드, 각 행 높이 = 10 + 행 번호

    (r, 0) = "r{r}", (r, 1) = r * 10
    """
    g = Grid()
    for r in range(5):
        g.write_cell(r, 0, f"r{r}")
        g.write_cell(r, 1, r * 10)
        g.get_row(r).height = 10 + r
    return g


@pytest.fixture
def grouped_grid():
    """
    3~5행 0열 세로 병합 (세 셀 모두 "GroupA"), 1열은 10 / 20 / 30

    +---------+----+
    | 제목    |    |   row 0
    | 품목    | 값 |   row 2
    | GroupA  | 10 |   row 3
    |  (3행)  | 20 |   row 4
    |         | 30 |   row 5
    +---------+----+
    """
    g = Grid()
    g.write_cell(0, 0, "제목")
    g.write_cell(2, 0, "품목")
    g.write_cell(2, 1, "값")
    for r, amount in zip((3, 4, 5), (10, 20, 30)):
        # 모든 셀에 값이 들어 있는 내보내기 형식
        g.get_or_create_cell(r, 0).value = CellValue.text("GroupA")
        g.write_cell(r, 1, amount)
    g.add_merged_region(MergedRegion(3, 0, 5, 0))
    return g
