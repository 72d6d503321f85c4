"""
core/az/selector.py - 가용 영역 선택기

리전의 가용 영역을 한 번 조회해서 워커 노드를 배치할 영역 이름을
정확히 required_zones개 골라냅니다.

선택 규칙:
    1. 상태가 available이고 zones_to_avoid에 없는 영역만 사용
    2. 제공자 응답 순서를 그대로 유지 (정렬하지 않음)
    3. 사용 가능한 영역이 부족하면 처음부터 다시 돌며 채움 (round-robin)
    4. 사용 가능한 영역이 없으면 NoEligibleZonesError

Usage:
    from core.az import EC2ZoneProvider, new_selector_with_defaults

    selector = new_selector_with_defaults(EC2ZoneProvider(session))
    selector.select_zones("us-west-2")
    # ['us-west-2a', 'us-west-2b', 'us-west-2c']
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import cycle, islice
from typing import TYPE_CHECKING

from core.config import settings
from core.exceptions import NoEligibleZonesError, ValidationError, ZoneDiscoveryError

from .rules import ZoneUsageRule, avoid_zones, is_available, is_usable

if TYPE_CHECKING:
    from core.config import SelectorConfig

    from .provider import ZoneQuery

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvailabilityZoneSelector:
    """가용 영역 선택기

    호출 간에 바뀌는 상태가 없으므로 여러 스레드에서 재사용할 수 있습니다.
    (주입된 query가 동시 호출에 안전하다는 전제)

    Attributes:
        query: 가용 영역 조회 capability
        zones_to_avoid: 상태와 무관하게 제외할 영역 이름
        required_zones: 반환할 영역 수
        extra_rules: 추가 사용 규칙
    """

    query: ZoneQuery
    zones_to_avoid: frozenset[str] = field(default_factory=lambda: settings.ZONES_TO_AVOID)
    required_zones: int = settings.REQUIRED_AVAILABILITY_ZONES
    extra_rules: Sequence[ZoneUsageRule] = ()

    def __post_init__(self) -> None:
        if isinstance(self.required_zones, bool) or not isinstance(self.required_zones, int) or self.required_zones < 1:
            raise ValidationError("required_zones", self.required_zones, "1 이상의 정수")
        # frozen이라 object.__setattr__ 사용
        object.__setattr__(self, "zones_to_avoid", frozenset(self.zones_to_avoid))
        object.__setattr__(self, "extra_rules", tuple(self.extra_rules))

    @classmethod
    def from_config(cls, query: ZoneQuery, config: SelectorConfig) -> AvailabilityZoneSelector:
        return cls(
            query=query,
            zones_to_avoid=config.zones_to_avoid,
            required_zones=config.required_zones,
        )

    @property
    def rules(self) -> tuple[ZoneUsageRule, ...]:
        return (is_available, avoid_zones(self.zones_to_avoid), *self.extra_rules)

    def select_zones(self, region: str) -> list[str]:
        """리전에서 사용할 가용 영역 이름 목록 반환

        Args:
            region: 리전 이름 (검증하지 않음, 제공자에게 맡김)

        Returns:
            길이가 정확히 required_zones인 영역 이름 리스트 (중복 가능)

        Raises:
            ZoneDiscoveryError: 조회 실패 (원인 예외 보존, 재시도 없음)
            NoEligibleZonesError: 규칙을 통과한 영역이 없음
        """
        try:
            zones = self.query.describe_zones(region)
        except Exception as e:
            raise ZoneDiscoveryError(region, cause=e) from e

        rules = self.rules
        usable = [zone.zone_name for zone in zones if is_usable(zone, rules)]
        if not usable:
            raise NoEligibleZonesError(region, discovered=len(zones))

        if len(usable) < self.required_zones:
            logger.debug(f"{region}: 사용 가능한 영역 {len(usable)}개, {self.required_zones}개를 채우기 위해 반복 사용")

        selected = list(islice(cycle(usable), self.required_zones))
        logger.debug(f"{region}: 선택된 영역 {selected}")
        return selected


def new_selector_with_defaults(query: ZoneQuery) -> AvailabilityZoneSelector:
    """기본 설정(settings)으로 선택기 생성"""
    return AvailabilityZoneSelector(
        query=query,
        zones_to_avoid=settings.ZONES_TO_AVOID,
        required_zones=settings.REQUIRED_AVAILABILITY_ZONES,
    )
