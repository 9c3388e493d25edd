# -*- coding: utf-8 -*-
"""
행 편집 모듈

그리드의 행 삽입/삭제/비우기/범위 복사를 처리합니다.

주요 기능:
- insert_rows: 행 삽입 (아래 행과 병합 영역을 밀어내고 스타일만 복사한 빈 행 생성)
- clear_range / clear_rows: 값만 비우기 (스타일, 병합 영역 유지)
- remove_rows: 행 삭제 후 아래 행을 위로 이동
- copy_range: 다른 그리드(또는 같은 그리드)의 범위를 값/스타일/병합 포함 복사

주의:
- 삭제되는 행을 걸치는 병합 영역은 보정하지 않습니다 (알려진 제한).
- 삽입 위치를 걸치는 병합 영역은 이동하지 않습니다.
"""

import logging
from typing import TYPE_CHECKING

from ..core.models import Cell, MergedRegion, Row
from ..core.errors import GridArgumentError, InvalidRangeError, OverlappingRegionError

if TYPE_CHECKING:
    from .grid import Grid


logger = logging.getLogger('sheetgrid.grid.row_shifter')


def copy_cell_value(source: Cell, target: Cell):
    """
    source 셀 값을 target 셀로 복사

    수식 셀은 복사하지 않습니다 (target 유지).
    """
    if source.value.is_formula:
        return
    if source.is_blank:
        target.set_blank()
        return
    target.value = source.value


class RowShifter:
    """그리드 행 편집"""

    def __init__(self, grid: "Grid"):
        """
        Args:
            grid: 대상 그리드
        """
        self.grid = grid

    # ========== 행 삽입 ==========

    def insert_rows(self, start_row: int, count: int):
        """
        start_row 위치에 count개 행 삽입

        start_row 이후 행과 병합 영역은 count만큼 아래로 이동하고,
        새 행은 원래 start_row 행의 높이/셀 스타일만 복사합니다 (값 없음).
        """
        if count <= 0:
            logger.debug("삽입할 행 수가 0 이하: %d", count)
            return
        if start_row < 0:
            raise GridArgumentError(f"행 인덱스는 음수일 수 없습니다: {start_row}")

        grid = self.grid
        source_row = grid.get_or_create_row(start_row)

        # 아래쪽부터 이동
        for row_idx in sorted((r for r in grid.rows if r >= start_row), reverse=True):
            grid.rows[row_idx + count] = grid.rows.pop(row_idx)

        shifted = []
        for region in grid.regions:
            if region.first_row >= start_row:
                shifted.append(region.offset(count))
            else:
                if region.last_row >= start_row:
                    logger.warning("삽입 위치를 걸치는 병합 영역은 이동하지 않습니다: %s", region)
                shifted.append(region)
        grid.regions[:] = shifted

        # 비워진 자리에 스타일만 복사한 행 생성
        for row_idx in range(start_row, start_row + count):
            grid.rows[row_idx] = self._copy_row_style(source_row)

    def _copy_row_style(self, source_row: Row) -> Row:
        new_row = Row(height=source_row.height)
        for col, cell in source_row.iter_cells():
            style = cell.style.copy() if cell.style is not None else None
            new_row.cells[col] = Cell(style=style)
        return new_row

    # ========== 값 비우기 ==========

    def clear_range(self, first_row: int, first_col: int, last_row: int, last_col: int):
        """
        (first_row, first_col) ~ (last_row, last_col) 범위의 값 비우기 (양 끝 포함)

        셀 스타일과 병합 영역은 유지합니다.
        """
        if last_row < first_row or last_col < first_col:
            raise InvalidRangeError(
                f"범위가 올바르지 않습니다: ({first_row}, {first_col}) ~ ({last_row}, {last_col})"
            )
        if first_row < 0 or first_col < 0:
            raise GridArgumentError(f"행/열 인덱스는 음수일 수 없습니다: ({first_row}, {first_col})")

        for row_idx in range(first_row, last_row + 1):
            row = self.grid.get_row(row_idx)
            if row is None:
                continue
            for col in range(first_col, last_col + 1):
                cell = row.get_cell(col)
                if cell is not None:
                    cell.set_blank()

    def clear_rows(self, start_row: int, end_row: int):
        """start_row ~ end_row 행의 모든 값 비우기 (양 끝 포함, 스타일 유지)"""
        if end_row < start_row:
            raise InvalidRangeError(f"끝 행은 시작 행보다 크거나 같아야 합니다: {start_row} ~ {end_row}")

        for row_idx in range(start_row, end_row + 1):
            row = self.grid.get_row(row_idx)
            if row is None:
                continue
            for _, cell in row.iter_cells():
                cell.set_blank()

    # ========== 행 삭제 ==========

    def remove_rows(self, start_row: int, end_row: int):
        """
        start_row ~ end_row 행 삭제 (양 끝 포함)

        start_row 행을 (end_row - start_row + 1)번 삭제합니다.
        """
        if end_row < start_row:
            raise InvalidRangeError(f"끝 행은 시작 행보다 크거나 같아야 합니다: {start_row} ~ {end_row}")

        for _ in range(end_row - start_row + 1):
            self.remove_row(start_row)

    def remove_row(self, row_idx: int):
        """
        한 행 삭제

        마지막 행보다 위면 아래 행들을 한 칸씩 위로 이동하고,
        마지막 행이면 행 내용만 제거합니다.
        """
        grid = self.grid
        last_row = grid.last_row_num

        if row_idx < 0 or row_idx > last_row:
            return

        for region in grid.regions:
            if region.first_row <= row_idx <= region.last_row and region.is_vertical:
                logger.warning("삭제되는 행을 걸치는 병합 영역은 보정하지 않습니다: %s", region)

        if row_idx == last_row:
            grid.drop_row(row_idx)
            return

        grid.drop_row(row_idx)
        for idx in sorted(r for r in grid.rows if r > row_idx):
            grid.rows[idx - 1] = grid.rows.pop(idx)

        grid.regions[:] = [
            region.offset(-1) if region.first_row > row_idx else region
            for region in grid.regions
        ]

    # ========== 범위 복사 ==========

    def copy_range(self, source: "Grid", source_range: MergedRegion, target_row: int, target_col: int):
        """
        source 그리드의 source_range를 (target_row, target_col) 기준으로 복사

        값(수식 제외), 셀 스타일, 열 너비, 행 높이를 복사하고,
        source_range 안에 완전히 포함된 병합 영역도 위치를 옮겨 추가합니다.
        옮긴 영역이 대상 그리드의 기존 영역과 겹치면 아무것도 쓰지 않고
        OverlappingRegionError를 발생시킵니다.
        """
        if target_row < 0 or target_col < 0:
            raise GridArgumentError(f"행/열 인덱스는 음수일 수 없습니다: ({target_row}, {target_col})")

        target = self.grid

        row_delta = target_row - source_range.first_row
        col_delta = target_col - source_range.first_col
        new_regions = [
            region.offset(row_delta, col_delta)
            for region in source.regions
            if source_range.contains_region(region)
        ]
        self._check_overlap(new_regions)

        # 같은 그리드 안에서 겹치는 복사를 위해 원본 스냅샷 먼저 수집
        snapshot = []
        for row_offset, src_row_idx in enumerate(range(source_range.first_row, source_range.last_row + 1)):
            src_row = source.get_row(src_row_idx) or Row()
            cells = []
            for col_offset, src_col in enumerate(range(source_range.first_col, source_range.last_col + 1)):
                src_cell = src_row.get_cell(src_col) or Cell()
                cells.append((col_offset, src_col, Cell(src_cell.value, src_cell.style)))
            snapshot.append((row_offset, src_row.height, cells))

        for row_offset, height, cells in snapshot:
            target_row_obj = target.get_or_create_row(target_row + row_offset)
            for col_offset, src_col, src_cell in cells:
                target_cell = target_row_obj.get_or_create_cell(target_col + col_offset)
                copy_cell_value(src_cell, target_cell)
                target_cell.style = src_cell.style.copy() if src_cell.style is not None else None

                width = source.column_widths.get(src_col)
                if width is not None:
                    target.column_widths[target_col + col_offset] = width
            target_row_obj.height = height

        for region in new_regions:
            target.add_merged_region(region)

    def _check_overlap(self, new_regions):
        """추가할 영역끼리, 그리고 기존 영역과의 겹침 검사"""
        existing = list(self.grid.regions)
        for region in new_regions:
            for other in existing:
                if region.intersects(other):
                    raise OverlappingRegionError(other, region)
            existing.append(region)
