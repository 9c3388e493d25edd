# -*- coding: utf-8 -*-
"""
프로젝트 설정 및 경로 관리

환경변수 또는 기본값을 통해 설정 파일 경로를 결정하고,
grid_config.yaml 에서 그리드 엔진 설정을 로드합니다.
"""

import os
import logging
import yaml
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union


# ============================================================
# 기본 경로 설정
# ============================================================

# 패키지 루트 디렉토리
PACKAGE_ROOT = Path(__file__).parent.resolve()

# 설정 파일 경로 (환경변수로 설정 가능)
DEFAULT_CONFIG_PATH = Path(
    os.environ.get('SHEETGRID_CONFIG', str(PACKAGE_ROOT / 'grid_config.yaml'))
)


# ============================================================
# 그리드 설정
# ============================================================

@dataclass
class GridConfig:
    """그리드 엔진 설정"""
    # 날짜/시간 표시 형식 (strftime)
    datetime_format: str = "%Y-%m-%d %H:%M:%S"
    date_format: str = "%Y-%m-%d"

    # 병합 축약 시 그룹 키 구분자
    key_separator: str = "-"

    # 열 너비 상한 (문자 단위)
    max_column_width: int = 255

    # 새 행 기본 높이 (pt, None이면 지정 안 함)
    default_row_height: Optional[float] = None

    # 로깅 레벨 이름
    log_level: str = "INFO"


class GridConfigLoader:
    """그리드 설정 로더"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        self._config: Optional[GridConfig] = None

    def load(self, config_path: Optional[Union[str, Path]] = None) -> GridConfig:
        """YAML 설정 파일 로드 (파일이 없으면 기본값)"""
        path = Path(config_path) if config_path else self.config_path

        if path and path.exists():
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            self._config = self._parse_config(data)
        else:
            self._config = GridConfig()

        return self._config

    def _parse_config(self, data: Dict[str, Any]) -> GridConfig:
        """설정 데이터 파싱"""
        if not isinstance(data, dict):
            raise ValueError(f"설정 파일 형식이 올바르지 않습니다: {self.config_path}")

        grid_data = data.get('grid', data)
        known = {f.name for f in fields(GridConfig)}

        config = GridConfig()
        for key, value in grid_data.items():
            if key not in known:
                continue
            setattr(config, key, value)

        logging_data = data.get('logging', {})
        if isinstance(logging_data, dict) and 'level' in logging_data:
            config.log_level = str(logging_data['level']).upper()

        if not config.key_separator:
            raise ValueError("key_separator는 빈 문자열일 수 없습니다.")
        if int(config.max_column_width) <= 0:
            raise ValueError("max_column_width는 0보다 커야 합니다.")

        return config

    @property
    def config(self) -> GridConfig:
        """현재 로드된 설정"""
        if self._config is None:
            self.load()
        return self._config


# 편의 함수
def load_grid_config(config_path: Optional[Union[str, Path]] = None) -> GridConfig:
    """그리드 설정 로드"""
    loader = GridConfigLoader(config_path)
    return loader.load()


# ============================================================
# 로깅 설정
# ============================================================

def setup_logging(
    level: Optional[Union[int, str]] = None,
    config: Optional[GridConfig] = None
) -> logging.Logger:
    """
    로깅 설정

    Args:
        level: 로깅 레벨 (지정하면 config보다 우선)
        config: log_level을 사용할 그리드 설정 (None이면 INFO)
    """
    if level is None:
        level = config.log_level if config is not None else logging.INFO

    logger = logging.getLogger('sheetgrid')

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
