"""
tests/core/test_exceptions.py - core/exceptions.py 테스트
"""

from botocore.exceptions import ClientError

from core.exceptions import (
    APICallError,
    AZSError,
    ConfigError,
    NoEligibleZonesError,
    ValidationError,
    ZoneDiscoveryError,
    ZoneSelectionError,
    format_error_for_user,
    is_access_denied,
    is_throttling,
)


def _client_error(code: str, message: str = "msg") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "DescribeAvailabilityZones")


class TestAZSError:
    """AZSError 베이스 테스트"""

    def test_str_without_cause(self):
        assert str(AZSError("실패")) == "실패"

    def test_str_with_cause(self):
        assert str(AZSError("실패", cause=ValueError("원인"))) == "실패: 원인"

    def test_to_dict(self):
        error = AZSError("실패", cause=ValueError("원인"), details={"k": "v"})

        assert error.to_dict() == {
            "error_type": "AZSError",
            "message": "실패",
            "cause": "원인",
            "details": {"k": "v"},
        }


class TestAPICallError:
    """APICallError 테스트"""

    def test_from_client_error(self):
        error = APICallError.from_client_error("ec2", "describe_availability_zones", _client_error("AccessDenied"))

        assert error.error_code == "AccessDenied"
        assert error.error_message == "msg"
        assert "ec2.describe_availability_zones" in error.message
        assert error.details["service"] == "ec2"

    def test_from_plain_exception(self):
        error = APICallError.from_client_error("ec2", "describe_availability_zones", RuntimeError("x"))

        assert error.error_code is None
        assert isinstance(error.cause, RuntimeError)


class TestZoneSelectionErrors:
    """가용 영역 선택 예외 테스트"""

    def test_discovery_error(self):
        cause = RuntimeError("network down")
        error = ZoneDiscoveryError("us-west-2", cause=cause)

        assert isinstance(error, ZoneSelectionError)
        assert error.region == "us-west-2"
        assert error.cause is cause
        assert "zone discovery failed" in str(error)
        assert "network down" in str(error)
        assert error.details["region"] == "us-west-2"

    def test_no_eligible_zones_error(self):
        error = NoEligibleZonesError("us-east-1", discovered=2)

        assert isinstance(error, ZoneSelectionError)
        assert error.discovered == 2
        assert error.details == {"region": "us-east-1", "discovered": 2}
        assert "us-east-1" in str(error)


class TestConfigAndValidationErrors:
    def test_config_error(self):
        error = ConfigError("required_zones", "잘못된 값")
        assert error.config_key == "required_zones"
        assert "required_zones" in str(error)

    def test_validation_error(self):
        error = ValidationError("required_zones", 0, "1 이상의 정수")
        assert error.details == {"field": "required_zones", "value": "0", "expected": "1 이상의 정수"}


class TestErrorHelpers:
    """예외 유틸리티 함수 테스트"""

    def test_is_access_denied_client_error(self):
        assert is_access_denied(_client_error("UnauthorizedOperation")) is True
        assert is_access_denied(_client_error("InternalError")) is False

    def test_is_access_denied_through_chain(self):
        api_error = APICallError.from_client_error("ec2", "describe_availability_zones", _client_error("AccessDenied"))
        error = ZoneDiscoveryError("us-west-2", cause=api_error)

        assert is_access_denied(error) is True

    def test_is_throttling(self):
        assert is_throttling(_client_error("RequestLimitExceeded")) is True
        assert is_throttling(APICallError("ec2", "op", error_code="Throttling")) is True
        assert is_throttling(RuntimeError("x")) is False

    def test_format_error_for_user(self):
        assert format_error_for_user(NoEligibleZonesError("us-east-1")) == str(NoEligibleZonesError("us-east-1"))
        assert format_error_for_user(_client_error("ExpiredToken")) == "인증 토큰이 만료되었습니다. 다시 로그인하세요."
        assert format_error_for_user(_client_error("Weird", "odd")) == "Weird: odd"
        assert format_error_for_user(RuntimeError("plain")) == "plain"
