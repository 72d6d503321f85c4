"""
core/az/provider.py - 가용 영역 조회 capability

선택기는 ZoneQuery 프로토콜만 알고, 실제 전송/인증은 호출자가
넘겨주는 어댑터가 담당합니다. EC2ZoneProvider는 boto3 기반 기본 어댑터입니다.

Usage:
    import boto3
    from core.az.provider import EC2ZoneProvider

    provider = EC2ZoneProvider(boto3.Session(profile_name="dev"))
    zones = provider.describe_zones("us-west-2")
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from botocore.exceptions import BotoCoreError, ClientError

from core.aws.client import get_client
from core.exceptions import APICallError

from .types import Zone

if TYPE_CHECKING:
    import boto3

logger = logging.getLogger(__name__)


class ZoneQuery(Protocol):
    """리전의 가용 영역 목록을 조회하는 capability

    실패 시 예외를 던집니다. 반환 순서는 제공자 응답 순서를 유지해야 합니다.
    """

    def describe_zones(self, region: str) -> list[Zone]: ...


class EC2ZoneProvider:
    """EC2 DescribeAvailabilityZones 어댑터

    호출마다 해당 리전의 client를 만들고 region-name 필터로 한 번 조회합니다.
    페이지네이션은 없습니다 (API가 지원하지 않음).

    Args:
        session: boto3 Session
        **client_options: get_client()에 전달할 옵션 (max_attempts 등)
    """

    def __init__(self, session: boto3.Session, **client_options: Any):
        self.session = session
        self.client_options = client_options

    def describe_zones(self, region: str) -> list[Zone]:
        """리전의 가용 영역 조회

        Raises:
            APICallError: API 호출 실패
        """
        try:
            ec2 = get_client(self.session, "ec2", region_name=region, **self.client_options)
            response = ec2.describe_availability_zones(
                Filters=[{"Name": "region-name", "Values": [region]}],
            )
        except ClientError as e:
            raise APICallError.from_client_error("ec2", "describe_availability_zones", e) from e
        except BotoCoreError as e:
            raise APICallError("ec2", "describe_availability_zones", error_message=str(e), cause=e) from e

        zones = [Zone.from_api(item) for item in response.get("AvailabilityZones", [])]
        logger.debug(f"{region}: 가용 영역 {len(zones)}개 조회")
        return zones
