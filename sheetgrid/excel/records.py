# -*- coding: utf-8 -*-
"""
레코드 목록 -> 그리드 변환

열 정의(ColumnProperty)에 따라 0행에 헤더를, 1행부터 레코드 값을 기록합니다.

사용 예:
    @dataclass
    class Order:
        name: str = field(metadata={'header': '품목', 'width': 20})
        amount: int = field(metadata={'header': '수량'})
        memo: str = ""   # metadata 없는 필드는 제외

    grid = grid_from_records(orders, column_properties(Order))
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from ..config import GridConfig
from ..grid.grid import Grid


# xlsx 열 너비 상한 (문자 단위)
MAX_COLUMN_WIDTH = 255


@dataclass
class ColumnProperty:
    """열 정의"""
    field_name: str
    header: str

    # 열 너비 (문자 단위, None이면 지정 안 함)
    width: Optional[int] = None

    def __post_init__(self):
        if self.width is not None and self.width >= MAX_COLUMN_WIDTH:
            raise ValueError(
                f"열 너비는 {MAX_COLUMN_WIDTH}자 미만이어야 합니다: {self.field_name}={self.width}"
            )


def column_properties(record_type: Any) -> List[ColumnProperty]:
    """
    dataclass 필드 metadata에서 열 정의 추출

    metadata에 'header'가 있는 필드만 선언 순서대로 포함합니다.
    """
    if not dataclasses.is_dataclass(record_type):
        raise TypeError(f"dataclass가 아닙니다: {record_type!r}")

    columns = []
    for f in dataclasses.fields(record_type):
        header = f.metadata.get('header')
        if header is None:
            continue
        columns.append(ColumnProperty(
            field_name=f.name,
            header=header,
            width=f.metadata.get('width'),
        ))
    return columns


def _get_field(record: Any, field_name: str) -> Any:
    """dict 키 또는 속성으로 값 조회"""
    if isinstance(record, Mapping):
        return record.get(field_name)
    return getattr(record, field_name, None)


def grid_from_records(
    records: Sequence[Any],
    columns: Sequence[ColumnProperty],
    config: Optional[GridConfig] = None
) -> Grid:
    """
    레코드 목록으로 그리드 생성

    Args:
        records: dict 또는 속성을 가진 객체 목록
        columns: 열 정의
        config: 그리드 설정

    Returns:
        0행 헤더 + 레코드 행으로 채워진 그리드
    """
    if not records:
        raise ValueError("데이터가 비어 있습니다.")
    if not columns:
        raise ValueError("기록할 열이 없습니다.")

    grid = Grid(config)
    max_width = grid.config.max_column_width

    for col, prop in enumerate(columns):
        if prop.width is not None and prop.width >= max_width:
            raise ValueError(f"열 너비는 {max_width}자 미만이어야 합니다: {prop.field_name}={prop.width}")
        grid.write_cell(0, col, prop.header)
        if prop.width is not None and prop.width >= 0:
            grid.column_widths[col] = prop.width

    for row_idx, record in enumerate(records, start=1):
        for col, prop in enumerate(columns):
            # 값이 없어도 빈 셀은 생성
            grid.get_or_create_cell(row_idx, col)
            grid.write_cell(row_idx, col, _get_field(record, prop.field_name))

    return grid
