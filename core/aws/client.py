"""
core/aws/client.py - boto3 client 생성 헬퍼

타임아웃과 전송 계층 retry 정책이 설정된 boto3 client를 생성합니다.
가용 영역 선택기 자체는 재시도하지 않으며, 재시도 여부는 여기서
만든 client의 botocore Config에만 속합니다.

Example:
    from core.aws.client import get_client

    ec2 = get_client(session, "ec2", region_name="us-west-2")

    # 전송 계층 재시도 없이 1회만 호출
    ec2 = get_client(session, "ec2", region_name="us-west-2", max_attempts=1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, cast

from core.config import settings

if TYPE_CHECKING:
    import boto3

# Retry mode 타입 (botocore TypedDict와 호환)
RetryMode = Literal["legacy", "standard", "adaptive"]

DEFAULT_MAX_ATTEMPTS = settings.API_RETRY_COUNT
DEFAULT_RETRY_MODE: RetryMode = "standard"
DEFAULT_CONNECT_TIMEOUT = settings.API_CONNECT_TIMEOUT  # 초
DEFAULT_READ_TIMEOUT = settings.API_TIMEOUT  # 초


def get_client(
    session: boto3.Session,
    service_name: str,
    region_name: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    retry_mode: RetryMode = DEFAULT_RETRY_MODE,
    connect_timeout: int = DEFAULT_CONNECT_TIMEOUT,
    read_timeout: int = DEFAULT_READ_TIMEOUT,
    **kwargs: Any,
) -> Any:
    """Config가 적용된 boto3 client 생성

    Args:
        session: boto3 Session
        service_name: AWS 서비스 이름 (ec2 등)
        region_name: 리전 (None이면 세션 기본값)
        max_attempts: 최대 시도 횟수 (1이면 재시도 없음)
        retry_mode: 재시도 모드 ('standard' 또는 'adaptive')
        connect_timeout: 연결 타임아웃 (초)
        read_timeout: 읽기 타임아웃 (초)
        **kwargs: session.client()에 전달할 추가 인자

    Returns:
        boto3 client
    """
    from botocore.config import Config

    config = Config(
        retries={"max_attempts": max_attempts, "mode": retry_mode},  # pyright: ignore[reportArgumentType]
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
    )

    # 기존 config가 있으면 병합
    if "config" in kwargs:
        existing = kwargs.pop("config")
        config = config.merge(existing)

    # cast to Any to bypass boto3-stubs Literal type requirements
    return session.client(  # pyright: ignore[reportCallIssue]
        cast(Any, service_name),
        region_name=region_name,
        config=config,
        **kwargs,
    )
