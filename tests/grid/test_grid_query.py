# -*- coding: utf-8 -*-
"""병합 영역 조회 / 표시 값 테스트"""

import pytest

from sheetgrid.core import CellValue, GridArgumentError, MergedRegion
from sheetgrid.grid import Grid


class TestGetMergedRegion:

    def test_returns_region_for_every_covered_cell(self, grid):
        regions = [MergedRegion(0, 0, 1, 2), MergedRegion(3, 1, 5, 1)]
        for region in regions:
            grid.add_merged_region(region)

        for region in regions:
            for r in range(region.first_row, region.last_row + 1):
                for c in range(region.first_col, region.last_col + 1):
                    assert grid.get_merged_region(r, c) == region

    def test_returns_none_outside_regions(self, grid):
        grid.add_merged_region(MergedRegion(0, 0, 1, 2))
        assert grid.get_merged_region(2, 0) is None
        assert grid.get_merged_region(0, 3) is None

    def test_negative_position_raises_error(self, grid):
        with pytest.raises(GridArgumentError):
            grid.get_merged_region(-1, 0)

    def test_is_anchor_cell(self, grid):
        grid.add_merged_region(MergedRegion(2, 1, 4, 3))
        assert grid.is_anchor_cell(2, 1)
        assert not grid.is_anchor_cell(3, 1)
        assert not grid.is_anchor_cell(0, 0)


class TestEffectiveValue:

    def test_missing_row_is_none(self, grid):
        assert grid.effective_value(10, 0) is None

    def test_missing_cell_outside_region_is_none(self, grid):
        grid.write_cell(0, 0, "a")
        assert grid.effective_value(0, 5) is None

    def test_plain_cell_is_trimmed(self, grid):
        grid.write_cell(1, 1, "  X  ")
        assert grid.effective_value(1, 1) == "X"

    def test_write_then_read_round_trip(self, grid):
        grid.write_cell(1, 1, "X")
        assert grid.effective_value(1, 1) == "X"

    def test_only_anchor_populated(self, grid):
        """앵커 셀만 존재하는 형식: 나머지 셀은 없음"""
        grid.write_cell(0, 0, "병합값")
        grid.get_or_create_row(1)
        grid.add_merged_region(MergedRegion(0, 0, 1, 1))

        assert grid.get_cell(1, 1) is None
        assert grid.effective_value(0, 1) == "병합값"
        assert grid.effective_value(1, 1) == "병합값"

    def test_all_cells_present_with_empty_placeholders(self, grid):
        """모든 셀이 존재하고 앵커가 아닌 셀은 빈 문자열인 형식"""
        grid.write_cell(0, 0, "병합값")
        grid.get_or_create_cell(0, 1).value = CellValue.text("")
        grid.get_or_create_cell(1, 0)
        grid.add_merged_region(MergedRegion(0, 0, 1, 1))

        assert grid.effective_value(0, 1) == "병합값"
        assert grid.effective_value(1, 0) == "병합값"

    def test_region_cell_in_missing_row_is_none(self, grid):
        grid.write_cell(0, 0, "병합값")
        grid.add_merged_region(MergedRegion(0, 0, 2, 0))
        assert grid.effective_value(2, 0) is None

    def test_empty_cell_outside_region_stays_empty(self, grid):
        grid.get_or_create_cell(0, 0)
        assert grid.effective_value(0, 0) == ""

    def test_number_is_formatted(self, grid):
        grid.write_cell(0, 0, 60)
        grid.write_cell(0, 1, 2.5)
        assert grid.effective_value(0, 0) == "60"
        assert grid.effective_value(0, 1) == "2.5"

    def test_fraction_is_shown_with_ten_digits(self, grid):
        grid.write_cell(0, 0, 1 / 3)
        assert grid.effective_value(0, 0) == "0.3333333333"
        assert grid.search_cell("0.3333333333") == (0, 0)

    def test_formula_is_none(self, grid):
        grid.insert_sum_formula(3, 0, 0, 2)
        assert grid.effective_value(3, 0) is None

    def test_negative_position_is_none(self, grid):
        grid.write_cell(0, 0, "a")
        assert grid.effective_value(-1, 0) is None
        assert grid.effective_value(0, -1) is None

    def test_is_idempotent_and_side_effect_free(self, grid):
        grid.write_cell(0, 0, "a")
        grid.get_or_create_row(1)
        grid.add_merged_region(MergedRegion(0, 0, 1, 0))
        rows_before = set(grid.rows)

        first = grid.effective_value(1, 0)
        second = grid.effective_value(1, 0)

        assert first == second == "a"
        assert set(grid.rows) == rows_before
        assert grid.get_cell(1, 0) is None


class TestGridBasics:

    def test_last_row_num(self):
        grid = Grid()
        assert grid.last_row_num == -1
        grid.get_or_create_row(4)
        grid.get_or_create_row(1)
        assert grid.last_row_num == 4
        assert [idx for idx, _ in grid.iter_rows()] == [1, 4]

    def test_rows_are_independent_between_grids(self):
        first = Grid()
        second = Grid()
        first.write_cell(0, 0, "a")
        assert second.effective_value(0, 0) is None
