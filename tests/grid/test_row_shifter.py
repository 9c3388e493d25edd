# -*- coding: utf-8 -*-
"""행 삽입/비우기/삭제/범위 복사 테스트"""

import pytest

from sheetgrid.core import (
    Cell,
    CellStyle,
    CellValue,
    GridArgumentError,
    InvalidRangeError,
    MergedRegion,
    OverlappingRegionError,
)
from sheetgrid.grid import Grid, RowShifter, copy_cell_value


class TestInsertRows:

    def test_rows_shift_down_and_new_rows_copy_style(self, five_row_grid):
        grid = five_row_grid
        style = CellStyle(number_format="#,##0")
        grid.get_cell(2, 1).style = style

        grid.insert_rows(2, 3)

        assert grid.effective_value(5, 0) == "r2"
        assert grid.effective_value(7, 0) == "r4"
        assert grid.effective_value(1, 0) == "r1"
        for r in (2, 3, 4):
            row = grid.get_row(r)
            assert row.height == 12
            assert all(cell.is_blank for _, cell in row.iter_cells())
            assert row.get_cell(1).style == style
            assert row.get_cell(1).style is not style

    def test_regions_below_are_offset(self, five_row_grid):
        grid = five_row_grid
        grid.add_merged_region(MergedRegion(3, 0, 4, 0))
        grid.add_merged_region(MergedRegion(0, 1, 1, 1))

        grid.insert_rows(2, 2)

        assert MergedRegion(5, 0, 6, 0) in grid.regions
        assert MergedRegion(0, 1, 1, 1) in grid.regions

    def test_missing_start_row_is_created(self, grid):
        grid.write_cell(3, 0, "아래")

        grid.insert_rows(1, 2)

        assert grid.effective_value(5, 0) == "아래"
        assert grid.get_row(1) is not None
        assert grid.get_row(2) is not None
        assert grid.get_row(3) is not None

    def test_non_positive_count_is_noop(self, five_row_grid):
        before = {idx: grid_row for idx, grid_row in five_row_grid.iter_rows()}
        five_row_grid.insert_rows(1, 0)
        five_row_grid.insert_rows(1, -2)
        assert dict(five_row_grid.iter_rows()) == before

    def test_negative_start_raises_error(self, grid):
        with pytest.raises(GridArgumentError):
            grid.insert_rows(-1, 1)


class TestClear:

    def test_clear_range_keeps_style_and_regions(self, five_row_grid):
        grid = five_row_grid
        style = CellStyle(number_format="0")
        grid.get_cell(1, 1).style = style
        grid.add_merged_region(MergedRegion(1, 0, 2, 0))

        grid.clear_range(1, 1, 2, 1)

        assert grid.get_cell(1, 1).is_blank
        assert grid.get_cell(1, 1).style is style
        assert grid.get_cell(2, 1).is_blank
        assert grid.effective_value(1, 0) == "r1"
        assert grid.effective_value(3, 1) == "30"
        assert grid.regions == [MergedRegion(1, 0, 2, 0)]

    def test_clear_range_skips_missing_rows(self, grid):
        grid.write_cell(0, 0, "a")
        grid.clear_range(0, 0, 10, 10)
        assert grid.get_cell(0, 0).is_blank
        assert set(grid.rows) == {0}

    def test_clear_range_inverted_raises_error(self, five_row_grid):
        with pytest.raises(InvalidRangeError):
            five_row_grid.clear_range(3, 0, 2, 1)
        with pytest.raises(InvalidRangeError):
            five_row_grid.clear_range(0, 2, 1, 1)
        assert five_row_grid.effective_value(3, 0) == "r3"

    def test_clear_rows(self, five_row_grid):
        five_row_grid.clear_rows(1, 2)
        assert five_row_grid.effective_value(1, 0) == ""
        assert five_row_grid.effective_value(2, 1) == ""
        assert five_row_grid.effective_value(3, 0) == "r3"

    def test_clear_rows_inverted_raises_error(self, five_row_grid):
        with pytest.raises(InvalidRangeError):
            five_row_grid.clear_rows(2, 1)


class TestRemoveRows:

    def test_rows_below_shift_up(self, five_row_grid):
        five_row_grid.remove_rows(1, 2)

        assert five_row_grid.effective_value(0, 0) == "r0"
        assert five_row_grid.effective_value(1, 0) == "r3"
        assert five_row_grid.effective_value(2, 0) == "r4"
        assert five_row_grid.last_row_num == 2

    def test_remove_last_row(self, five_row_grid):
        five_row_grid.remove_row(4)
        assert five_row_grid.last_row_num == 3
        assert five_row_grid.get_row(4) is None

    def test_out_of_range_is_noop(self, five_row_grid):
        five_row_grid.remove_row(10)
        assert five_row_grid.last_row_num == 4

    def test_regions_below_shift_up(self, five_row_grid):
        five_row_grid.add_merged_region(MergedRegion(3, 0, 4, 0))
        five_row_grid.remove_row(1)
        assert five_row_grid.regions == [MergedRegion(2, 0, 3, 0)]

    def test_region_spanning_removed_row_is_not_repaired(self, five_row_grid):
        region = MergedRegion(1, 0, 3, 0)
        five_row_grid.add_merged_region(region)

        five_row_grid.remove_row(2)

        assert five_row_grid.regions == [region]

    def test_inverted_range_raises_error(self, five_row_grid):
        with pytest.raises(InvalidRangeError):
            five_row_grid.remove_rows(3, 1)
        assert five_row_grid.last_row_num == 4


class TestCopyRange:

    def test_copy_values_styles_and_regions(self):
        source = Grid()
        style = CellStyle(number_format="0.0")
        source.write_cell(0, 0, "제목", span_rows=2)
        source.get_or_create_row(1)
        source.write_cell(0, 1, 5)
        source.get_cell(0, 1).style = style
        source.get_row(0).height = 30
        source.column_widths[1] = 18
        source.insert_sum_formula(1, 1, 0, 0)

        target = Grid()
        target.write_cell(6, 3, "유지")
        target.copy_range(source, MergedRegion(0, 0, 1, 1), 5, 2)

        assert target.effective_value(5, 2) == "제목"
        assert target.effective_value(6, 2) == "제목"
        assert target.effective_value(5, 3) == "5"
        assert target.get_cell(5, 3).style == style
        assert target.get_cell(5, 3).style is not style
        assert target.get_row(5).height == 30
        assert target.column_widths[3] == 18
        # 수식 셀은 복사하지 않음
        assert target.effective_value(6, 3) == "유지"
        assert target.regions == [MergedRegion(5, 2, 6, 2)]
        # 원본 영역은 그대로
        assert source.regions == [MergedRegion(0, 0, 1, 0)]

    def test_partially_covered_region_is_not_copied(self):
        source = Grid()
        source.write_cell(0, 0, "a", span_rows=3)

        target = Grid()
        target.copy_range(source, MergedRegion(0, 0, 1, 0), 0, 0)

        assert target.regions == []

    def test_overlapping_copy_raises_error(self):
        grid = Grid()
        grid.write_cell(0, 0, "a", span_rows=3)

        with pytest.raises(OverlappingRegionError):
            grid.copy_range(grid, MergedRegion(0, 0, 2, 0), 1, 0)

    def test_overlap_is_detected_before_any_write(self):
        source = Grid()
        source.write_cell(0, 0, "새값", span_rows=2)

        target = Grid()
        target.write_cell(4, 0, "기존", span_rows=3)
        target.get_or_create_row(3).height = 9

        with pytest.raises(OverlappingRegionError):
            target.copy_range(source, MergedRegion(0, 0, 1, 0), 3, 0)

        assert target.regions == [MergedRegion(4, 0, 6, 0)]
        assert target.get_cell(3, 0) is None
        assert target.get_row(3).height == 9
        assert target.effective_value(4, 0) == "기존"

    def test_negative_target_raises_error(self):
        with pytest.raises(GridArgumentError):
            RowShifter(Grid()).copy_range(Grid(), MergedRegion(0, 0, 0, 0), -1, 0)


class TestCopyCellValue:

    def test_copies_value(self):
        target = Cell(CellValue.text("old"))
        copy_cell_value(Cell(CellValue.number(3)), target)
        assert target.value == CellValue.number(3)

    def test_blank_source_blanks_target(self):
        target = Cell(CellValue.text("old"))
        copy_cell_value(Cell(), target)
        assert target.is_blank

    def test_formula_source_is_ignored(self):
        target = Cell(CellValue.text("old"))
        copy_cell_value(Cell(CellValue.formula("SUM(A1:A2)")), target)
        assert target.value == CellValue.text("old")
