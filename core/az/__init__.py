"""
core/az - 가용 영역 선택

Usage:
    from core.az import AvailabilityZoneSelector, EC2ZoneProvider, new_selector_with_defaults

    selector = new_selector_with_defaults(EC2ZoneProvider(session))
    zones = selector.select_zones("us-west-2")
"""

from .provider import EC2ZoneProvider, ZoneQuery
from .rules import ZoneUsageRule, avoid_zones, is_available, is_usable
from .selector import AvailabilityZoneSelector, new_selector_with_defaults
from .types import Zone, ZoneState

__all__ = [
    "AvailabilityZoneSelector",
    "EC2ZoneProvider",
    "Zone",
    "ZoneQuery",
    "ZoneState",
    "ZoneUsageRule",
    "avoid_zones",
    "is_available",
    "is_usable",
    "new_selector_with_defaults",
]
