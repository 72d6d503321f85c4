"""
core/az/rules.py - 가용 영역 사용 규칙

규칙은 Zone을 받아 사용 가능 여부를 반환하는 함수입니다.
선택기는 모든 규칙을 통과한 영역만 결과에 넣습니다.

Usage:
    from core.az.rules import avoid_zones, is_available, is_usable

    rules = [is_available, avoid_zones({"us-east-1e"})]
    usable = [z for z in zones if is_usable(z, rules)]
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from .types import Zone

ZoneUsageRule = Callable[[Zone], bool]


def is_available(zone: Zone) -> bool:
    """상태가 available인 영역만 허용"""
    return zone.is_available


def avoid_zones(zones_to_avoid: Iterable[str]) -> ZoneUsageRule:
    """주어진 이름의 영역을 상태와 무관하게 제외하는 규칙 생성

    Args:
        zones_to_avoid: 제외할 영역 이름

    Returns:
        ZoneUsageRule
    """
    avoid = frozenset(zones_to_avoid)

    def rule(zone: Zone) -> bool:
        return zone.zone_name not in avoid

    return rule


def is_usable(zone: Zone, rules: Sequence[ZoneUsageRule]) -> bool:
    return all(rule(zone) for rule in rules)
