# -*- coding: utf-8 -*-
"""
A1 형식 셀 주소 변환

그리드 내부 좌표는 0-based (row, col)이고,
스프레드시트 주소는 1-based 열 문자 + 행 번호입니다.
- (0, 0) -> "A1"
- (0, 25) -> "Z1"
- (0, 26) -> "AA1"
"""

from typing import Tuple

from openpyxl.utils import get_column_letter, column_index_from_string, range_boundaries
from openpyxl.utils.cell import coordinate_from_string


def column_letter(col: int) -> str:
    """0-based 열 인덱스 -> 열 문자 (26진수, A~Z, 0 자리 없음)"""
    if col < 0:
        raise ValueError(f"열 인덱스는 음수일 수 없습니다: {col}")
    return get_column_letter(col + 1)


def column_index(letters: str) -> int:
    """열 문자 -> 0-based 열 인덱스"""
    return column_index_from_string(letters.upper()) - 1


def cell_address(row: int, col: int) -> str:
    """0-based (row, col) -> A1 형식 주소"""
    if row < 0:
        raise ValueError(f"행 인덱스는 음수일 수 없습니다: {row}")
    return f"{column_letter(col)}{row + 1}"


def parse_address(address: str) -> Tuple[int, int]:
    """A1 형식 주소 -> 0-based (row, col)"""
    letters, row_number = coordinate_from_string(address.replace('$', '').upper())
    return row_number - 1, column_index(letters)


def parse_range(range_string: str) -> Tuple[int, int, int, int]:
    """
    A1 형식 범위 -> 0-based (first_row, first_col, last_row, last_col)

    "B2" 처럼 단일 셀이면 시작과 끝이 같습니다.
    """
    min_col, min_row, max_col, max_row = range_boundaries(range_string.replace('$', '').upper())
    if None in (min_col, min_row, max_col, max_row):
        raise ValueError(f"행/열 전체 범위는 지원하지 않습니다: {range_string}")
    return min_row - 1, min_col - 1, max_row - 1, max_col - 1
