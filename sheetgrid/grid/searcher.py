# -*- coding: utf-8 -*-
"""
그리드 검색 모듈

좌상단(0, 0)부터 행 우선으로 셀 표시 값을 비교합니다 (완전 일치만).
"""

from enum import IntEnum
from typing import Any, Iterator, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .grid import Grid


class Direction(IntEnum):
    """인접 셀 방향"""
    UP = 1
    RIGHT = 2
    DOWN = 3
    LEFT = 4

    @property
    def delta(self) -> Tuple[int, int]:
        """(행 이동, 열 이동)"""
        return _DELTAS[self]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}


def to_direction(value: Any) -> Optional[Direction]:
    """Direction / 정수 / 이름 문자열 -> Direction (알 수 없으면 None)"""
    if isinstance(value, Direction):
        return value
    if isinstance(value, str):
        return Direction.__members__.get(value.strip().upper())
    try:
        return Direction(value)
    except (ValueError, TypeError):
        return None


class CellSearcher:
    """키워드 셀 검색"""

    def __init__(self, grid: "Grid"):
        self.grid = grid

    def _iter_positions(self) -> Iterator[Tuple[int, int]]:
        """존재하는 행의 0 ~ last_cell_num 열 위치"""
        for row_idx, row in self.grid.iter_rows():
            for col in range(row.last_cell_num + 1):
                yield row_idx, col

    def search_cell(self, keyword: str) -> Optional[Tuple[int, int]]:
        """keyword와 표시 값이 같은 첫 번째 셀 위치 (없으면 None)"""
        if not keyword or not keyword.strip():
            return None

        for row_idx, col in self._iter_positions():
            if self.grid.effective_value(row_idx, col) == keyword:
                return row_idx, col
        return None

    def search_nearby(self, keyword: str, direction: Any) -> Optional[str]:
        """
        keyword 셀의 인접 셀 표시 값

        Args:
            keyword: 찾을 값
            direction: Direction (또는 1:위, 2:오른쪽, 3:아래, 4:왼쪽)

        Returns:
            인접 셀 표시 값, 키워드가 없거나 방향이 잘못되었거나 인접 셀이 없으면 None
        """
        direction = to_direction(direction)
        if direction is None:
            return None

        position = self.search_cell(keyword)
        if position is None:
            return None

        row_delta, col_delta = direction.delta
        return self.grid.effective_value(position[0] + row_delta, position[1] + col_delta)
