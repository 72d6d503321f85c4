"""
core/az/types.py - 가용 영역 데이터 타입

EC2 DescribeAvailabilityZones 응답 한 항목을 표현합니다.
조회 응답마다 새로 만들어지고, 필터링/읽기만 한 뒤 버려집니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ZoneState(str, Enum):
    """가용 영역 상태 (EC2 AvailabilityZoneState)"""

    AVAILABLE = "available"
    INFORMATION = "information"
    IMPAIRED = "impaired"
    UNAVAILABLE = "unavailable"
    CONSTRAINED = "constrained"
    UNKNOWN = "unknown"

    @classmethod
    def from_value(cls, value: str | None) -> ZoneState:
        """API 문자열 → ZoneState (알 수 없는 값은 UNKNOWN)"""
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


@dataclass(frozen=True)
class Zone:
    """가용 영역

    Attributes:
        region_name: 리전 이름
        zone_name: 영역 이름 (리전 내 고유, 예: "us-west-2a")
        state: 가용 상태
        zone_id: 영역 ID (예: "usw2-az1")
        zone_type: "availability-zone", "local-zone" 등
    """

    region_name: str
    zone_name: str
    state: ZoneState = ZoneState.AVAILABLE
    zone_id: str = ""
    zone_type: str = "availability-zone"

    @property
    def is_available(self) -> bool:
        return self.state is ZoneState.AVAILABLE

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> Zone:
        """describe_availability_zones 응답의 AvailabilityZones 항목에서 생성"""
        return cls(
            region_name=item.get("RegionName", ""),
            zone_name=item.get("ZoneName", ""),
            state=ZoneState.from_value(item.get("State")),
            zone_id=item.get("ZoneId", ""),
            zone_type=item.get("ZoneType", "availability-zone"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "region_name": self.region_name,
            "zone_name": self.zone_name,
            "state": self.state.value,
            "zone_id": self.zone_id,
            "zone_type": self.zone_type,
        }
