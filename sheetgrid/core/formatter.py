# -*- coding: utf-8 -*-
"""
셀 값 변환/표시 모듈

개요:
- to_cell_value: 파이썬 값 -> CellValue (타입별 변환)
- format_value: CellValue -> 표시 문자열 (스프레드시트 '일반' 서식 기준)
- format_cell: Cell -> 표시 문자열
"""

import datetime as dt
from decimal import Decimal
from typing import Any, Optional

from .models import Cell, CellKind, CellValue
from ..config import GridConfig


_DEFAULT_CONFIG = GridConfig()


def to_cell_value(value: Any, config: Optional[GridConfig] = None) -> CellValue:
    """
    값 타입에 맞는 CellValue 생성

    - CellValue: 그대로
    - bool: Boolean (int보다 먼저 확인)
    - int/float/Decimal: Number (float)
    - datetime: datetime_format 형식의 Text
    - date: Date
    - 그 외: str(value)의 Text
    """
    config = config or _DEFAULT_CONFIG

    if isinstance(value, CellValue):
        return value
    if value is None:
        return CellValue.blank()
    if isinstance(value, bool):
        return CellValue.boolean(value)
    if isinstance(value, (int, float, Decimal)):
        return CellValue.number(float(value))
    # datetime은 date의 하위 클래스이므로 먼저 확인
    if isinstance(value, dt.datetime):
        return CellValue.text(value.strftime(config.datetime_format))
    if isinstance(value, dt.date):
        return CellValue.date(value)
    return CellValue.text(str(value))


def format_number(number: float) -> str:
    """숫자 표시 (정수면 소수점 없이)"""
    if number != number:  # NaN
        return "NaN"
    if number in (float('inf'), float('-inf')):
        return "Infinity" if number > 0 else "-Infinity"
    if number.is_integer() and abs(number) < 1e15:
        return str(int(number))
    return format(number, '.10g')


def format_value(value: CellValue, config: Optional[GridConfig] = None) -> Optional[str]:
    """
    CellValue를 표시 문자열로 변환

    수식은 평가하지 않으므로 None을 반환합니다.
    """
    config = config or _DEFAULT_CONFIG
    kind = value.kind

    if kind is CellKind.BLANK:
        return ""
    if kind is CellKind.NUMBER:
        return format_number(value.value)
    if kind is CellKind.BOOLEAN:
        return "TRUE" if value.value else "FALSE"
    if kind is CellKind.DATETIME:
        return value.value.strftime(config.datetime_format)
    if kind is CellKind.DATE:
        return value.value.strftime(config.date_format)
    if kind is CellKind.TEXT:
        return value.value
    return None


def format_cell(cell: Optional[Cell], config: Optional[GridConfig] = None) -> Optional[str]:
    """셀 표시 문자열 (셀이 없으면 None)"""
    if cell is None:
        return None
    return format_value(cell.value, config)


def to_number(value: CellValue) -> Optional[float]:
    """숫자로 해석 가능한 값이면 float 반환"""
    if value.kind is CellKind.NUMBER:
        return value.value
    if value.kind is CellKind.BOOLEAN:
        return 1.0 if value.value else 0.0
    if value.kind is CellKind.TEXT:
        try:
            return float(value.value.strip().replace(',', ''))
        except ValueError:
            return None
    return None
