"""
core/config.py - 중앙 설정 관리

애플리케이션 전역 기본값, 환경변수 헬퍼, 로깅 설정,
가용 영역 선택기 설정(YAML)을 한 곳에서 관리합니다.

Usage:
    from core.config import settings, get_default_region, load_selector_config

    region = get_default_region()          # AWS_REGION 또는 기본값
    config = load_selector_config("azs.yaml")
    config.required_zones                   # 3
    config.zones_to_avoid                   # frozenset({"us-east-1e", ...})

환경변수:
    AWS_REGION / AWS_DEFAULT_REGION: 기본 리전
    AWS_PROFILE / AWS_DEFAULT_PROFILE: 기본 프로파일
    AZS_CONFIG: 선택기 설정 파일 경로
    AZS_REQUIRED_ZONES: 선택할 가용 영역 수
    LOG_LEVEL / LOG_FORMAT: 로깅 설정
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from core.exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """전역 기본 설정 (불변)"""

    DEFAULT_REGION: str = "us-west-2"

    # 선택 결과 길이 (항상 이 개수만큼 반환)
    REQUIRED_AVAILABILITY_ZONES: int = 3

    # 워크로드에 문제가 알려진 가용 영역
    ZONES_TO_AVOID: frozenset[str] = frozenset({"us-east-1e", "us-east1-a", "us-east1-b"})

    # boto3 클라이언트 (전송 계층)
    API_TIMEOUT: int = 30
    API_CONNECT_TIMEOUT: int = 10
    API_RETRY_COUNT: int = 3

    CONFIG_ENV_VAR: str = "AZS_CONFIG"


settings = Settings()


# =============================================================================
# 프로젝트 경로
# =============================================================================


def get_project_root() -> Path:
    """프로젝트 루트 경로"""
    return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_version() -> str:
    """version.txt에서 버전 문자열 로드"""
    version_file = get_project_root() / "version.txt"
    try:
        return version_file.read_text(encoding="utf-8").strip() or "0.0.0"
    except OSError:
        return "0.0.0"


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환 (인식 불가 값은 default)"""
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in ("true", "1", "yes", "on"):
        return True
    if value in ("false", "0", "no", "off"):
        return False
    return default


def get_env_int(name: str, default: int) -> int:
    """환경변수를 int로 변환 (변환 실패 시 default)"""
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def get_default_profile() -> str | None:
    """AWS_PROFILE → AWS_DEFAULT_PROFILE 순으로 조회"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE")


def get_default_region() -> str:
    """AWS_REGION → AWS_DEFAULT_REGION → settings.DEFAULT_REGION"""
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


# =============================================================================
# 로깅 설정
# =============================================================================


@dataclass
class LogConfig:
    """로깅 설정"""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL, LOG_FORMAT 환경변수에서 로드"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
        )

    @property
    def level_no(self) -> int:
        level = logging.getLevelName(self.level)
        return level if isinstance(level, int) else logging.INFO


# =============================================================================
# 선택기 설정 (YAML)
# =============================================================================


@dataclass(frozen=True)
class SelectorConfig:
    """가용 영역 선택기 설정

    Attributes:
        required_zones: 반환할 가용 영역 수
        zones_to_avoid: 상태와 무관하게 제외할 영역 이름
    """

    required_zones: int = settings.REQUIRED_AVAILABILITY_ZONES
    zones_to_avoid: frozenset[str] = field(default_factory=lambda: settings.ZONES_TO_AVOID)

    def with_overrides(
        self,
        required_zones: int | None = None,
        extra_zones_to_avoid: tuple[str, ...] | list[str] = (),
        use_default_avoid: bool = True,
    ) -> SelectorConfig:
        """CLI 옵션 등으로 일부 값을 덮어쓴 새 설정 반환"""
        avoid = set(self.zones_to_avoid) if use_default_avoid else set()
        avoid.update(extra_zones_to_avoid)
        return SelectorConfig(
            required_zones=required_zones if required_zones is not None else self.required_zones,
            zones_to_avoid=frozenset(avoid),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SelectorConfig:
        """설정 딕셔너리에서 생성

        Raises:
            ConfigError: 값 타입이 잘못된 경우
        """
        required = data.get("required_zones", settings.REQUIRED_AVAILABILITY_ZONES)
        if isinstance(required, bool) or not isinstance(required, int) or required < 1:
            raise ConfigError("required_zones", f"1 이상의 정수여야 합니다: {required!r}")

        avoid = data.get("zones_to_avoid", sorted(settings.ZONES_TO_AVOID))
        if avoid is None:
            avoid = []
        if not isinstance(avoid, list) or not all(isinstance(z, str) for z in avoid):
            raise ConfigError("zones_to_avoid", f"문자열 리스트여야 합니다: {avoid!r}")

        return cls(required_zones=required, zones_to_avoid=frozenset(avoid))


def load_selector_config(path: str | Path | None = None) -> SelectorConfig:
    """선택기 설정 로드

    path가 없으면 AZS_CONFIG 환경변수를 확인하고,
    그것도 없으면 기본값(+ AZS_REQUIRED_ZONES)을 사용합니다.

    Args:
        path: YAML 설정 파일 경로

    Returns:
        SelectorConfig

    Raises:
        ConfigError: 파일을 읽을 수 없거나 형식이 잘못된 경우
    """
    path = path or os.environ.get(settings.CONFIG_ENV_VAR)
    if not path:
        return SelectorConfig(
            required_zones=get_env_int("AZS_REQUIRED_ZONES", settings.REQUIRED_AVAILABILITY_ZONES),
        )

    config_file = Path(path)
    try:
        with config_file.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(str(config_file), "설정 파일을 읽을 수 없습니다", cause=e) from e
    except yaml.YAMLError as e:
        raise ConfigError(str(config_file), "YAML 형식 오류", cause=e) from e

    if not isinstance(data, dict):
        raise ConfigError(str(config_file), "최상위 값은 매핑이어야 합니다")

    logger.debug(f"선택기 설정 로드: {config_file}")
    return SelectorConfig.from_dict(data)
