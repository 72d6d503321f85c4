"""
core/aws - AWS 전송 계층 헬퍼

Usage:
    from core.aws import get_client

    ec2 = get_client(session, "ec2", region_name="us-west-2")
"""

from .client import get_client

__all__ = ["get_client"]
