# -*- coding: utf-8 -*-
"""
그리드 데이터 모델

개요:
- CellKind / CellValue: 셀 값 (Blank, Number, Boolean, DateTime, Date, Text, Formula)
- CellStyle: 셀 스타일 메타데이터 (엔진은 해석하지 않고 복사만 함)
- Cell: 셀 (값 + 스타일)
- Row: 행 (열 인덱스 -> Cell, 높이)
- MergedRegion: 병합 영역 (first_row, first_col, last_row, last_col)
"""

import copy
import datetime as dt
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Tuple

from .address import cell_address, parse_range


class CellKind(Enum):
    """셀 값 종류"""
    BLANK = "blank"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    TEXT = "text"
    FORMULA = "formula"


@dataclass(frozen=True)
class CellValue:
    """
    셀 값 (태그 + 값)

    kind에 따라 value 타입이 정해집니다.
    - BLANK: None
    - NUMBER: float
    - BOOLEAN: bool
    - DATETIME: datetime.datetime
    - DATE: datetime.date
    - TEXT: str
    - FORMULA: str (앞의 '=' 없는 수식 텍스트)
    """
    kind: CellKind = CellKind.BLANK
    value: Any = None

    @classmethod
    def blank(cls) -> "CellValue":
        return cls(CellKind.BLANK, None)

    @classmethod
    def number(cls, value: float) -> "CellValue":
        return cls(CellKind.NUMBER, float(value))

    @classmethod
    def boolean(cls, value: bool) -> "CellValue":
        return cls(CellKind.BOOLEAN, bool(value))

    @classmethod
    def datetime(cls, value: dt.datetime) -> "CellValue":
        return cls(CellKind.DATETIME, value)

    @classmethod
    def date(cls, value: dt.date) -> "CellValue":
        return cls(CellKind.DATE, value)

    @classmethod
    def text(cls, value: str) -> "CellValue":
        return cls(CellKind.TEXT, str(value))

    @classmethod
    def formula(cls, expression: str) -> "CellValue":
        return cls(CellKind.FORMULA, expression.lstrip('='))

    @property
    def is_blank(self) -> bool:
        return self.kind is CellKind.BLANK

    @property
    def is_formula(self) -> bool:
        return self.kind is CellKind.FORMULA


@dataclass
class CellStyle:
    """
    셀 스타일 메타데이터

    openpyxl 스타일 객체(Font, Border, PatternFill, Alignment, Protection)를
    그대로 담아 두는 용도입니다. 그리드 엔진은 내용을 해석하지 않습니다.
    """
    font: Any = None
    border: Any = None
    fill: Any = None
    number_format: Optional[str] = None
    alignment: Any = None
    protection: Any = None

    def copy(self) -> "CellStyle":
        return copy.deepcopy(self)


@dataclass
class Cell:
    """셀 정보"""
    value: CellValue = field(default_factory=CellValue.blank)
    style: Optional[CellStyle] = None

    def set_blank(self):
        """값만 비우기 (스타일 유지)"""
        self.value = CellValue.blank()

    @property
    def is_blank(self) -> bool:
        return self.value.is_blank


@dataclass
class Row:
    """행 정보 (열 인덱스 -> Cell, 빈 열 허용)"""
    cells: Dict[int, Cell] = field(default_factory=dict)

    # 행 높이 (pt)
    height: Optional[float] = None

    def get_cell(self, col: int) -> Optional[Cell]:
        return self.cells.get(col)

    def get_or_create_cell(self, col: int) -> Cell:
        cell = self.cells.get(col)
        if cell is None:
            cell = Cell()
            self.cells[col] = cell
        return cell

    def iter_cells(self) -> Iterator[Tuple[int, Cell]]:
        """열 순서대로 (col, cell) 반환"""
        for col in sorted(self.cells):
            yield col, self.cells[col]

    @property
    def last_cell_num(self) -> int:
        """마지막 열 인덱스 + 1 (빈 행이면 0)"""
        if not self.cells:
            return 0
        return max(self.cells) + 1


@dataclass(frozen=True)
class MergedRegion:
    """
    병합 영역

    (first_row, first_col) ~ (last_row, last_col) 사각형, 양 끝 포함.
    앵커 셀은 (first_row, first_col)입니다.
    """
    first_row: int
    first_col: int
    last_row: int
    last_col: int

    def __post_init__(self):
        if min(self.first_row, self.first_col) < 0:
            raise ValueError(f"병합 영역 좌표는 음수일 수 없습니다: {self}")
        if self.first_row > self.last_row or self.first_col > self.last_col:
            raise ValueError(f"병합 영역 범위가 올바르지 않습니다: {self}")

    def contains(self, row: int, col: int) -> bool:
        """특정 (row, col) 위치를 이 영역이 커버하는지 확인"""
        return (self.first_row <= row <= self.last_row and
                self.first_col <= col <= self.last_col)

    def contains_region(self, other: "MergedRegion") -> bool:
        """다른 영역이 이 영역 안에 완전히 포함되는지 확인"""
        return (self.first_row <= other.first_row and other.last_row <= self.last_row and
                self.first_col <= other.first_col and other.last_col <= self.last_col)

    def intersects(self, other: "MergedRegion") -> bool:
        return not (other.last_row < self.first_row or other.first_row > self.last_row or
                    other.last_col < self.first_col or other.first_col > self.last_col)

    def is_anchor(self, row: int, col: int) -> bool:
        return row == self.first_row and col == self.first_col

    def offset(self, row_delta: int, col_delta: int = 0) -> "MergedRegion":
        """좌표를 이동한 새 영역 반환"""
        return MergedRegion(
            self.first_row + row_delta,
            self.first_col + col_delta,
            self.last_row + row_delta,
            self.last_col + col_delta,
        )

    @property
    def anchor(self) -> Tuple[int, int]:
        return self.first_row, self.first_col

    @property
    def is_degenerate(self) -> bool:
        """단일 셀 영역 여부"""
        return self.first_row == self.last_row and self.first_col == self.last_col

    @property
    def is_vertical(self) -> bool:
        """여러 행에 걸친 영역 여부"""
        return self.first_row < self.last_row

    @property
    def row_count(self) -> int:
        return self.last_row - self.first_row + 1

    def to_range_string(self) -> str:
        """A1 형식 범위 문자열 (예: A1:B3)"""
        return (f"{cell_address(self.first_row, self.first_col)}:"
                f"{cell_address(self.last_row, self.last_col)}")

    @classmethod
    def from_range_string(cls, range_string: str) -> "MergedRegion":
        """A1 형식 범위 문자열에서 생성"""
        first_row, first_col, last_row, last_col = parse_range(range_string)
        return cls(first_row, first_col, last_row, last_col)
