# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
CLI 전용 UI 컴포넌트 (콘솔 출력, 로깅 설정)
"""

from .console import (
    INDENT,
    SYMBOL_ERROR,
    SYMBOL_WARNING,
    console,
    get_console,
    print_error,
    print_sub_info,
    print_table,
    print_warning,
    setup_logging,
)

__all__ = [
    "INDENT",
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "console",
    "get_console",
    "print_error",
    "print_sub_info",
    "print_table",
    "print_warning",
    "setup_logging",
]
