"""
cli/i18n/messages/cli_commands.py - CLI Command Messages
"""

from __future__ import annotations

CLI_MESSAGES = {
    # =========================================================================
    # select
    # =========================================================================
    "selected_zones": {
        "ko": "{region} 리전 선택 결과",
        "en": "Selected zones in {region}",
    },
    "col_index": {
        "ko": "#",
        "en": "#",
    },
    "col_zone": {
        "ko": "가용 영역",
        "en": "Availability Zone",
    },
    "repeated_zones": {
        "ko": "사용 가능한 영역이 {count}개뿐이라 일부 영역이 반복됩니다",
        "en": "Only {count} eligible zone(s); some zones are repeated",
    },
    "select_failed": {
        "ko": "가용 영역 선택 실패: {message}",
        "en": "Zone selection failed: {message}",
    },
    "no_eligible_hint": {
        "ko": "--avoid / --no-default-avoid 옵션이나 설정 파일의 zones_to_avoid를 확인하세요",
        "en": "Check --avoid / --no-default-avoid or zones_to_avoid in the config file",
    },
    "access_denied_hint": {
        "ko": "ec2:DescribeAvailabilityZones 권한이 필요합니다",
        "en": "ec2:DescribeAvailabilityZones permission is required",
    },
    "aws_session_failed": {
        "ko": "AWS 세션 생성 실패: {message}",
        "en": "Failed to create AWS session: {message}",
    },
    "cancelled": {
        "ko": "취소되었습니다",
        "en": "Cancelled",
    },
    # =========================================================================
    # zones
    # =========================================================================
    "zones_title": {
        "ko": "{region} 리전 가용 영역",
        "en": "Availability zones in {region}",
    },
    "col_zone_id": {
        "ko": "영역 ID",
        "en": "Zone ID",
    },
    "col_state": {
        "ko": "상태",
        "en": "State",
    },
    "col_eligible": {
        "ko": "선택 대상",
        "en": "Eligible",
    },
    "no_zones": {
        "ko": "조회된 가용 영역이 없습니다",
        "en": "No availability zones found",
    },
}
