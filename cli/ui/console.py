"""
cli/ui/console.py - Rich 콘솔 유틸리티

일관된 콘솔 출력과 로깅 설정을 위한 함수들
"""

import logging
import platform

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from core.config import LogConfig

# botocore 노이즈 로그 제한
logging.getLogger("botocore.httpchecksum").setLevel(logging.WARNING)
logging.getLogger("botocore.credentials").setLevel(logging.WARNING)
logging.getLogger("botocore.loaders").setLevel(logging.WARNING)
logging.getLogger("botocore.session").setLevel(logging.WARNING)


def get_console() -> Console:
    """Rich Console 인스턴스를 생성하고 반환합니다."""
    is_windows = platform.system().lower() == "windows"

    return Console(
        color_system="auto",
        highlight=False,
        soft_wrap=True,
        markup=True,
        emoji=not is_windows,
    )


# 전역 콘솔 인스턴스
console = get_console()


def setup_logging(debug: bool = False) -> logging.Logger:
    """루트 logger에 Rich 핸들러를 설정합니다.

    LOG_LEVEL 환경변수를 따르되, debug=True면 DEBUG로 설정합니다.

    Args:
        debug: 디버그 로그 출력 여부

    Returns:
        logging.Logger: 설정된 루트 logger
    """
    log_config = LogConfig.from_env()
    root = logging.getLogger()
    root.setLevel(logging.DEBUG if debug else log_config.level_no)

    # 중복 핸들러 방지
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=console, rich_tracebacks=True, show_path=debug)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt=log_config.date_format))
        root.addHandler(handler)

    return root


# =============================================================================
# 표준 출력 스타일
# =============================================================================

SYMBOL_ERROR = "✗"
SYMBOL_WARNING = "!"

INDENT = "   "


def print_error(message: str) -> None:
    """에러 메시지 출력 (빨간색 X)"""
    console.print(f"[red]{SYMBOL_ERROR} {message}[/red]")


def print_warning(message: str) -> None:
    """경고 메시지 출력 (노란색 경고)"""
    console.print(f"[yellow]{SYMBOL_WARNING} {message}[/yellow]")


def print_sub_info(message: str) -> None:
    """하위 정보 출력 (들여쓰기 + dim)"""
    console.print(f"{INDENT}[dim]{message}[/dim]")


def print_table(
    title: str,
    columns: list[str],
    rows: list[list],
) -> None:
    """테이블 형식으로 데이터를 출력합니다.

    Args:
        title: 테이블 제목
        columns: 컬럼 헤더 리스트
        rows: 행 데이터 리스트
    """
    table = Table(title=title, show_header=True, header_style="bold magenta")

    for column in columns:
        table.add_column(column)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)

