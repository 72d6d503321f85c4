"""
tests/conftest.py - pytest 공통 픽스처

가용 영역 조회 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(zone_query, make_zones):
        zone_query.zones = make_zones("us-west-2", ["us-west-2a", "us-west-2b"])
        ...
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from core.az.types import Zone, ZoneState  # noqa: E402

# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트 환경 설정"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AZS_CONFIG", raising=False)
    monkeypatch.delenv("AZS_REQUIRED_ZONES", raising=False)


# =============================================================================
# 가용 영역 픽스처
# =============================================================================


@dataclass
class FakeZoneQuery:
    """호출 기록을 남기는 ZoneQuery 구현"""

    zones: list[Zone] = field(default_factory=list)
    error: Exception | None = None
    calls: list[str] = field(default_factory=list)

    def describe_zones(self, region: str) -> list[Zone]:
        self.calls.append(region)
        if self.error is not None:
            raise self.error
        return list(self.zones)


def _make_zones(region: str, names: list[str], state: ZoneState = ZoneState.AVAILABLE) -> list[Zone]:
    return [Zone(region_name=region, zone_name=name, state=state) for name in names]


@pytest.fixture
def make_zones():
    """Zone 리스트 생성 헬퍼"""
    return _make_zones


@pytest.fixture
def zone_query():
    """빈 FakeZoneQuery"""
    return FakeZoneQuery()


@pytest.fixture
def us_west_2_zones():
    """us-west-2: 사용 가능한 영역 3개"""
    return _make_zones("US West (Oregon)", ["us-west2-a", "us-west2-b", "us-west2-c"])


@pytest.fixture
def us_east_1_zones():
    """us-east-1: 제외 대상 2개 + 사용 가능 1개"""
    return _make_zones("US East (N. Virginia)", ["us-east1-a", "us-east1-b", "us-east1-c"])
