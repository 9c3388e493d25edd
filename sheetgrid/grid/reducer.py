# -*- coding: utf-8 -*-
"""
병합 영역 축약(reduce) 모듈

merged_col 열의 세로 병합 영역마다, same_cols 열 값이 모두 같은 행들을
첫 번째 행 하나로 합칩니다. 합치는 방식은 열별 누적 함수(accumulator)로 지정합니다.

사용 예:
    reducer = RegionReducer(grid)
    removed = reducer.reduce(
        start_row=1,
        merged_col=0,
        same_cols=[0, 2],
        accumulators={3: sum_numbers, 4: concat_text(", ")},
    )

처리 중에는 행 인덱스가 바뀌지 않도록, 합쳐진 행은 모든 영역을 처리한 뒤
인덱스 내림차순으로 한 번에 제거합니다 (행 내용만 제거, 아래 행 이동 없음).
"""

import logging
from typing import Callable, Dict, List, Mapping, Sequence, TYPE_CHECKING

from ..core.models import Cell, CellKind, CellValue
from ..core.formatter import to_number, format_value

if TYPE_CHECKING:
    from .grid import Grid


logger = logging.getLogger('sheetgrid.grid.reducer')

# (남는 행의 셀, 합쳐지는 행의 셀) -> 남는 셀을 직접 수정
Accumulator = Callable[[Cell, Cell], None]


# ========== 기본 누적 함수 ==========

def sum_numbers(total: Cell, current: Cell):
    """숫자 합계 (숫자로 해석할 수 없는 값은 건너뜀)"""
    value = to_number(current.value)
    if value is None:
        return

    if total.is_blank:
        base = 0.0
    else:
        base = to_number(total.value)
        if base is None:
            logger.debug("숫자가 아닌 셀에는 합계를 누적하지 않습니다: %s", total.value)
            return

    total.value = CellValue.number(base + value)


def concat_text(separator: str = " ") -> Accumulator:
    """문자열 이어붙이기 누적 함수 생성 (빈 값은 건너뜀)"""

    def accumulate(total: Cell, current: Cell):
        text = format_value(current.value)
        if not text:
            return
        existing = format_value(total.value)
        if existing:
            total.value = CellValue.text(f"{existing}{separator}{text}")
        else:
            total.value = CellValue.text(text)

    return accumulate


def keep_first(total: Cell, current: Cell):
    """남는 셀이 비어 있을 때만 값 채우기"""
    if total.is_blank and current.value.kind is not CellKind.FORMULA:
        total.value = current.value


class RegionReducer:
    """병합 영역 축약"""

    def __init__(self, grid: "Grid"):
        """
        Args:
            grid: 대상 그리드
        """
        self.grid = grid

    def reduce(
        self,
        start_row: int,
        merged_col: int,
        same_cols: Sequence[int],
        accumulators: Mapping[int, Accumulator]
    ) -> List[int]:
        """
        병합 영역 축약 실행

        Args:
            start_row: 이 행부터 그룹화 (이전에 끝나는 병합 영역은 건너뜀)
            merged_col: 병합 영역의 앵커 열
            same_cols: 값이 같아야 하는 열 목록 (그룹 키)
            accumulators: {열: 누적 함수}

        Returns:
            제거된 행 인덱스 (오름차순)
        """
        grid = self.grid
        pending_removal = set()

        regions = [
            region for region in grid.regions
            if region.first_col == merged_col
            and region.is_vertical
            and region.last_row >= start_row
        ]

        for region in regions:
            first_row = max(region.first_row, start_row)
            groups = self._group_rows(first_row, region.last_row, same_cols)

            for row_indexes in groups.values():
                if len(row_indexes) < 2:
                    continue

                surviving_row = grid.get_row(row_indexes[0])
                for row_idx in row_indexes[1:]:
                    current_row = grid.get_row(row_idx)
                    for col, accumulator in accumulators.items():
                        accumulator(
                            surviving_row.get_or_create_cell(col),
                            current_row.get_or_create_cell(col)
                        )
                    pending_removal.add(row_idx)

        for row_idx in sorted(pending_removal, reverse=True):
            grid.drop_row(row_idx)

        if pending_removal:
            logger.debug("병합 축약으로 제거된 행: %s", sorted(pending_removal))

        return sorted(pending_removal)

    def _group_rows(self, first_row: int, last_row: int, same_cols: Sequence[int]) -> Dict[str, List[int]]:
        """범위 내 존재하는 행을 그룹 키로 분류 (처음 나타난 순서 유지)"""
        groups: Dict[str, List[int]] = {}
        for row_idx in range(first_row, last_row + 1):
            if self.grid.get_row(row_idx) is None:
                continue
            key = self._group_key(row_idx, same_cols)
            groups.setdefault(key, []).append(row_idx)
        return groups

    def _group_key(self, row_idx: int, same_cols: Sequence[int]) -> str:
        """same_cols 열의 표시 값을 구분자로 이어붙인 키 (값 없는 열은 제외)"""
        values = []
        for col in same_cols:
            value = self.grid.effective_value(row_idx, col)
            if value is not None:
                values.append(value)
        return self.grid.config.key_separator.join(values)
