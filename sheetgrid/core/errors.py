# -*- coding: utf-8 -*-
"""
그리드 엔진 예외 및 쓰기 결과

- GridError: 기본 예외
- GridArgumentError: 잘못된 인자 (음수 좌표, 0 이하 개수 등)
- InvalidRangeError: 뒤집힌 범위
- OverlappingRegionError: 병합 영역 겹침 (검증 요청 시)
- WriteRejectedError: strict 쓰기에서 거부된 경우
- WriteResult: write_cell 결과
"""

from enum import Enum


class GridError(Exception):
    """그리드 엔진 기본 예외"""


class GridArgumentError(GridError, ValueError):
    """잘못된 인자"""


class InvalidRangeError(GridArgumentError):
    """범위가 올바르지 않음 (끝 < 시작)"""


class OverlappingRegionError(GridError):
    """병합 영역이 서로 겹침"""

    def __init__(self, first, second):
        super().__init__(f"병합 영역이 겹칩니다: {first} / {second}")
        self.first = first
        self.second = second


class WriteRejectedError(GridError):
    """병합 영역의 앵커가 아닌 셀에 쓰기 시도"""

    def __init__(self, row: int, col: int, region=None):
        super().__init__(f"병합 셀의 앵커가 아닌 위치에는 쓸 수 없습니다: ({row}, {col}) in {region}")
        self.row = row
        self.col = col
        self.region = region


class WriteResult(Enum):
    """write_cell 결과"""
    WRITTEN = "written"
    SKIPPED_NONE = "skipped_none"          # 값이 None
    REJECTED_MERGED = "rejected_merged"    # 병합 영역 내 앵커가 아닌 셀

    @property
    def ok(self) -> bool:
        return self is WriteResult.WRITTEN
