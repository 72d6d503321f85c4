# core/__init__.py
"""
core - 가용 영역 선택 코어

아키텍처:
    core/
    ├── az/             # 가용 영역 타입, 사용 규칙, 조회 어댑터, 선택기
    ├── aws/            # boto3 client 생성 헬퍼
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    import boto3
    from core.az import EC2ZoneProvider, new_selector_with_defaults

    selector = new_selector_with_defaults(EC2ZoneProvider(boto3.Session()))
    zones = selector.select_zones("us-west-2")
"""

from core import aws, az, config, exceptions

__all__: list[str] = [
    "aws",
    "az",
    "config",
    "exceptions",
]
