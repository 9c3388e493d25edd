# -*- coding: utf-8 -*-
"""
그리드 모듈

행(Row) x 열(Cell) 그리드와 병합 영역(MergedRegion) 목록을 관리합니다.

병합 영역은 앵커 셀(좌상단)만 실제 값을 가지며,
나머지 셀의 표시 값(effective value)은 앵커 셀의 값입니다.

사용 예:
    grid = Grid()
    grid.write_cell(3, 0, "그룹A", span_rows=3)
    grid.write_cell(3, 1, 10)
    grid.effective_value(5, 0)   # "그룹A"

    grid.insert_rows(2, 3)
    grid.search_nearby("합계", Direction.UP)
"""

import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..config import GridConfig
from ..core.models import Cell, CellValue, MergedRegion, Row
from ..core.address import cell_address
from ..core.formatter import format_cell, to_cell_value
from ..core.errors import (
    GridArgumentError,
    InvalidRangeError,
    OverlappingRegionError,
    WriteRejectedError,
    WriteResult,
)
from .row_shifter import RowShifter
from .reducer import Accumulator, RegionReducer
from .searcher import CellSearcher, Direction


logger = logging.getLogger('sheetgrid.grid')


def _check_position(row: int, col: int):
    """좌표 검증 (음수 불가)"""
    if row < 0 or col < 0:
        raise GridArgumentError(f"행/열 인덱스는 음수일 수 없습니다: ({row}, {col})")


class Grid:
    """스프레드시트 형태의 그리드"""

    def __init__(self, config: Optional[GridConfig] = None):
        """
        Args:
            config: 그리드 설정 (None이면 기본값)
        """
        self.config = config or GridConfig()

        # 행 인덱스 -> Row (빈 행 허용)
        self.rows: Dict[int, Row] = {}

        # 병합 영역 목록 (서로 겹치지 않아야 함)
        self.regions: List[MergedRegion] = []

        # 열별 너비 (col -> 문자 단위 너비)
        self.column_widths: Dict[int, float] = {}

    # ========== 행/셀 접근 ==========

    def get_row(self, row: int) -> Optional[Row]:
        return self.rows.get(row)

    def get_or_create_row(self, row: int) -> Row:
        """행 반환, 없으면 빈 행 생성"""
        if row < 0:
            raise GridArgumentError(f"행 인덱스는 음수일 수 없습니다: {row}")
        existing = self.rows.get(row)
        if existing is None:
            existing = Row(height=self.config.default_row_height)
            self.rows[row] = existing
        return existing

    def get_cell(self, row: int, col: int) -> Optional[Cell]:
        """저장된 셀 반환 (병합 영역 고려하지 않음)"""
        existing = self.rows.get(row)
        if existing is None:
            return None
        return existing.get_cell(col)

    def get_or_create_cell(self, row: int, col: int) -> Cell:
        _check_position(row, col)
        return self.get_or_create_row(row).get_or_create_cell(col)

    def iter_rows(self) -> Iterator[Tuple[int, Row]]:
        """행 순서대로 (row_idx, row) 반환"""
        for row_idx in sorted(self.rows):
            yield row_idx, self.rows[row_idx]

    def drop_row(self, row: int) -> Optional[Row]:
        """행 내용 제거 (아래 행은 이동하지 않음)"""
        return self.rows.pop(row, None)

    @property
    def last_row_num(self) -> int:
        """마지막 행 인덱스 (빈 그리드면 -1)"""
        if not self.rows:
            return -1
        return max(self.rows)

    @property
    def num_merged_regions(self) -> int:
        return len(self.regions)

    # ========== 병합 영역 조회 ==========

    def get_merged_region(self, row: int, col: int) -> Optional[MergedRegion]:
        """(row, col)을 포함하는 병합 영역, 없으면 None"""
        _check_position(row, col)
        for region in self.regions:
            if region.contains(row, col):
                return region
        return None

    def is_anchor_cell(self, row: int, col: int) -> bool:
        """(row, col)이 어떤 병합 영역의 좌상단 셀인지 확인"""
        _check_position(row, col)
        return any(region.is_anchor(row, col) for region in self.regions)

    def effective_value(self, row: int, col: int) -> Optional[str]:
        """
        병합 영역을 고려한 셀 표시 값

        1. 행이 없으면 None
        2. 셀이 있으면 표시 값, 빈 문자열이고 병합 영역 안이면 앵커 셀 값
           (모든 셀이 존재하고 앵커가 아닌 셀은 ""인 내보내기 형식)
        3. 셀이 없고 병합 영역 안이면 앵커 셀 값
           (앵커 셀만 존재하는 내보내기 형식)
        4. 그 외 None

        결과는 앞뒤 공백을 제거합니다. 그리드를 변경하지 않습니다.
        """
        if row < 0 or col < 0:
            return None

        existing = self.rows.get(row)
        if existing is None:
            return None

        cell = existing.get_cell(col)
        if cell is None:
            region = self.get_merged_region(row, col)
            value = self._format_anchor(region) if region else None
        else:
            value = format_cell(cell, self.config)
            if value == "":
                region = self.get_merged_region(row, col)
                if region is not None:
                    value = self._format_anchor(region)

        return value.strip() if value is not None else None

    def _format_anchor(self, region: MergedRegion) -> Optional[str]:
        """병합 영역 앵커 셀의 표시 값"""
        return format_cell(self.get_cell(*region.anchor), self.config)

    # ========== 셀 쓰기 ==========

    def write_cell(
        self,
        row: int,
        col: int,
        value: Any,
        span_rows: int = 1,
        strict: bool = False
    ) -> WriteResult:
        """
        셀에 값 쓰기

        value가 None이거나, 병합 영역의 앵커가 아닌 셀이면 쓰지 않습니다.
        span_rows가 1보다 크면 (row ~ row + span_rows - 1, col) 세로 병합 영역을 추가합니다.

        Args:
            row: 행 인덱스
            col: 열 인덱스
            value: 값 (숫자, bool, datetime/date, 문자열, CellValue)
            span_rows: 병합할 행 수
            strict: True면 앵커가 아닌 병합 셀 쓰기 시 WriteRejectedError 발생

        Returns:
            WriteResult
        """
        _check_position(row, col)
        if span_rows < 0:
            raise GridArgumentError(f"span_rows는 음수일 수 없습니다: {span_rows}")

        if value is None:
            return WriteResult.SKIPPED_NONE

        region = self.get_merged_region(row, col)
        if region is not None and not region.is_anchor(row, col):
            if strict:
                raise WriteRejectedError(row, col, region)
            logger.debug("병합 셀 쓰기 무시: (%d, %d) in %s", row, col, region)
            return WriteResult.REJECTED_MERGED

        cell = self.get_or_create_cell(row, col)
        cell.value = to_cell_value(value, self.config)

        if span_rows > 1:
            span_region = MergedRegion(row, col, row + span_rows - 1, col)
            # 같은 앵커에 다시 쓸 때 중복 등록하지 않음
            if span_region not in self.regions:
                self.add_merged_region(span_region)

        return WriteResult.WRITTEN

    def insert_sum_formula(self, row: int, col: int, sum_start_row: int, sum_end_row: int) -> str:
        """
        합계 수식 삽입

        (row, col)에 SUM(시작:끝) 수식을 기록합니다. 수식은 평가하지 않습니다.

        Returns:
            수식 텍스트 (예: "SUM(B2:B5)")
        """
        _check_position(row, col)
        if sum_start_row < 0 or sum_end_row < sum_start_row:
            raise InvalidRangeError(
                f"합계 범위가 올바르지 않습니다: {sum_start_row} ~ {sum_end_row}"
            )

        formula = f"SUM({cell_address(sum_start_row, col)}:{cell_address(sum_end_row, col)})"
        self.get_or_create_cell(row, col).value = CellValue.formula(formula)
        return formula

    # ========== 병합 영역 편집 ==========

    def add_merged_region(self, region: MergedRegion) -> bool:
        """
        병합 영역 추가

        단일 셀 영역은 무시합니다. 기존 영역과의 겹침은 검사하지 않습니다
        (필요하면 validate_merged_regions 호출).

        Returns:
            추가 여부
        """
        if region.is_degenerate:
            logger.debug("단일 셀 병합 영역 무시: %s", region)
            return False
        self.regions.append(region)
        return True

    def split_cell(self, row: int, col: int) -> Optional[MergedRegion]:
        """
        (row, col)이 속한 병합 영역 해제

        (row, col)을 포함하는 영역은 모두 제거합니다.
        셀 값은 현재 위치에 그대로 남습니다.

        Returns:
            해제된 첫 번째 영역, 없으면 None
        """
        region = self.get_merged_region(row, col)
        if region is None:
            return None
        self.regions[:] = [r for r in self.regions if not r.contains(row, col)]
        return region

    def validate_merged_regions(self):
        """병합 영역 겹침 검사 (겹치면 OverlappingRegionError)"""
        for i, first in enumerate(self.regions):
            for second in self.regions[i + 1:]:
                if first.intersects(second):
                    raise OverlappingRegionError(first, second)

    # ========== 행 편집 (RowShifter 위임) ==========

    def insert_rows(self, start_row: int, count: int):
        RowShifter(self).insert_rows(start_row, count)

    def clear_range(self, first_row: int, first_col: int, last_row: int, last_col: int):
        RowShifter(self).clear_range(first_row, first_col, last_row, last_col)

    def clear_rows(self, start_row: int, end_row: int):
        RowShifter(self).clear_rows(start_row, end_row)

    def remove_rows(self, start_row: int, end_row: int):
        RowShifter(self).remove_rows(start_row, end_row)

    def remove_row(self, row: int):
        RowShifter(self).remove_row(row)

    def copy_range(self, source: "Grid", source_range: MergedRegion, target_row: int, target_col: int):
        """source 그리드의 범위를 이 그리드의 (target_row, target_col)로 복사"""
        RowShifter(self).copy_range(source, source_range, target_row, target_col)

    # ========== 병합 축약 (RegionReducer 위임) ==========

    def merged_region_reduce(
        self,
        start_row: int,
        merged_col: int,
        same_cols: Sequence[int],
        accumulators: Mapping[int, Accumulator]
    ) -> List[int]:
        return RegionReducer(self).reduce(start_row, merged_col, same_cols, accumulators)

    # ========== 검색 (CellSearcher 위임) ==========

    def search_cell(self, keyword: str) -> Optional[Tuple[int, int]]:
        return CellSearcher(self).search_cell(keyword)

    def search_nearby(self, keyword: str, direction: Any) -> Optional[str]:
        return CellSearcher(self).search_nearby(keyword, direction)

    def __repr__(self) -> str:
        return (f"Grid(rows={len(self.rows)}, last_row_num={self.last_row_num}, "
                f"regions={len(self.regions)})")
