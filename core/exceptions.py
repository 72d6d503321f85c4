"""
core/exceptions.py - 통합 예외 계층 구조

가용 영역 선택 과정에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    AZSError (베이스)
    ├── APICallError (AWS API 호출 실패)
    ├── ZoneSelectionError (가용 영역 선택)
    │   ├── ZoneDiscoveryError
    │   └── NoEligibleZonesError
    ├── ConfigError (설정 관련)
    └── ValidationError (입력 검증)

Usage:
    from core.exceptions import ZoneDiscoveryError, NoEligibleZonesError

    try:
        zones = selector.select_zones("us-west-2")
    except ZoneDiscoveryError as e:
        print(format_error_for_user(e))
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class AZSError(Exception):
    """az-selector 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """예외 정보를 딕셔너리로 반환"""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "cause": str(self.cause) if self.cause else None,
            "details": self.details,
        }


# =============================================================================
# AWS API 호출 관련 예외
# =============================================================================


class APICallError(AZSError):
    """AWS API 호출 관련 예외

    boto3/botocore의 ClientError를 래핑하여 일관된 예외 처리를 제공합니다.
    """

    def __init__(
        self,
        service: str,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        message = f"{service}.{operation}"
        if error_code:
            message = f"{message} 실패 ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    @classmethod
    def from_client_error(
        cls,
        service: str,
        operation: str,
        client_error: Exception,
    ) -> "APICallError":
        """botocore.exceptions.ClientError로부터 생성

        Args:
            service: AWS 서비스 이름
            operation: API 작업 이름
            client_error: ClientError 예외

        Returns:
            APICallError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        if hasattr(client_error, "response"):
            error_info = client_error.response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            service=service,
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
        )


# =============================================================================
# 가용 영역 선택 관련 예외
# =============================================================================


class ZoneSelectionError(AZSError):
    """가용 영역 선택 관련 예외"""

    def __init__(
        self,
        region: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"가용 영역 선택 오류 [{region}]: {message}"
        super().__init__(full_message, cause)
        self.region = region
        self.details["region"] = region


class ZoneDiscoveryError(ZoneSelectionError):
    """가용 영역 조회 실패 (zone discovery failed)

    조회 capability가 던진 원인 예외를 cause로 보존합니다.
    재시도는 하지 않습니다.
    """

    def __init__(self, region: str, cause: Optional[Exception] = None):
        super().__init__(region, "zone discovery failed", cause)


class NoEligibleZonesError(ZoneSelectionError):
    """필터링 후 사용 가능한 가용 영역이 하나도 없음"""

    def __init__(self, region: str, discovered: int = 0):
        super().__init__(region, f"사용 가능한 가용 영역이 없습니다 (조회된 영역 {discovered}개)")
        self.discovered = discovered
        self.details["discovered"] = discovered


# =============================================================================
# 설정 관련 예외
# =============================================================================


class ConfigError(AZSError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(AZSError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

_ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
    "UnauthorizedOperation",
}

_THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
}


def _error_code(error: Exception) -> Optional[str]:
    """예외 체인을 따라가며 AWS 에러 코드 추출"""
    current: Optional[BaseException] = error
    while current is not None:
        if isinstance(current, APICallError) and current.error_code:
            return current.error_code
        if hasattr(current, "response"):
            return current.response.get("Error", {}).get("Code", "")
        current = current.cause if isinstance(current, AZSError) else None
    return None


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return _error_code(error) in _ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        스로틀링 오류이면 True
    """
    return _error_code(error) in _THROTTLING_CODES


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    if isinstance(error, AZSError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    if hasattr(error, "response"):
        error_info = error.response.get("Error", {})
        code = error_info.get("Code", "UnknownError")
        message = error_info.get("Message", str(error))

        friendly_messages = {
            "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
            "UnauthorizedOperation": "권한이 없습니다. IAM 정책을 확인하세요.",
            "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
            "InvalidClientTokenId": "잘못된 자격 증명입니다.",
            "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
        }

        return friendly_messages.get(code, f"{code}: {message}")

    return str(error)
