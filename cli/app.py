"""
cli/app.py - 메인 CLI 엔트리포인트

Click 기반의 CLI 애플리케이션 진입점입니다.

명령어 구조:
    azs --version                       # 버전 표시
    azs select -r us-west-2             # 워커 노드용 가용 영역 선택
    azs select -r us-east-1 -n 2 -f json
    azs select --avoid us-west-2d --no-default-avoid
    azs zones -r us-west-2              # 조회된 영역과 선택 대상 여부

종료 코드:
    0: 성공
    1: 선택 실패 (조회 실패, 사용 가능한 영역 없음, 설정 오류)
    130: 사용자 취소
"""

import json
import logging
from typing import NoReturn

import boto3
import click
from botocore.exceptions import BotoCoreError
from click import Context
from rich.markup import escape

from cli.i18n import set_lang, t
from cli.ui.console import console, print_error, print_sub_info, print_table, print_warning, setup_logging
from core.az import AvailabilityZoneSelector, EC2ZoneProvider, is_usable
from core.config import SelectorConfig, get_default_profile, get_default_region, get_version, load_selector_config
from core.exceptions import (
    AZSError,
    NoEligibleZonesError,
    format_error_for_user,
    is_access_denied,
)

# WARNING 레벨로 설정하여 INFO 로그가 명령 출력에 섞이지 않도록 함
logging.basicConfig(
    level=logging.WARNING,
    format="%(asctime)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

logger = logging.getLogger(__name__)

VERSION = get_version()


def _fail(error: Exception) -> NoReturn:
    """에러 메시지 출력 후 종료 코드 1로 종료"""
    print_error(t("cli.select_failed", message=escape(format_error_for_user(error))))
    if isinstance(error, NoEligibleZonesError):
        print_sub_info(t("cli.no_eligible_hint"))
    elif is_access_denied(error):
        print_sub_info(t("cli.access_denied_hint"))
    raise SystemExit(1)


def _build_selector(
    profile: str | None,
    config_path: str | None,
    required_zones: int | None,
    avoid: tuple[str, ...],
    no_default_avoid: bool,
) -> AvailabilityZoneSelector:
    """옵션과 설정 파일로 선택기 구성"""
    config: SelectorConfig = load_selector_config(config_path).with_overrides(
        required_zones=required_zones,
        extra_zones_to_avoid=avoid,
        use_default_avoid=not no_default_avoid,
    )
    try:
        session = boto3.Session(profile_name=profile or get_default_profile())
    except BotoCoreError as e:
        print_error(t("cli.aws_session_failed", message=escape(str(e))))
        raise SystemExit(1) from e

    logger.debug(f"required_zones={config.required_zones}, zones_to_avoid={sorted(config.zones_to_avoid)}")
    return AvailabilityZoneSelector.from_config(EC2ZoneProvider(session), config)


# 공통 옵션
_selector_options = [
    click.option("-r", "--region", default=None, help="리전 (기본: AWS_REGION 또는 us-west-2)"),
    click.option("-p", "--profile", default=None, help="AWS 프로파일 (기본: AWS_PROFILE)"),
    click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="선택기 설정 파일 (YAML, 기본: AZS_CONFIG)",
    ),
    click.option("--avoid", multiple=True, help="추가로 제외할 가용 영역 (다중 가능)"),
    click.option("--no-default-avoid", is_flag=True, help="기본 제외 목록을 사용하지 않음"),
]


def selector_options(func):
    for option in reversed(_selector_options):
        func = option(func)
    return func


@click.group()
@click.version_option(VERSION, prog_name="azs")
@click.option(
    "--lang",
    type=click.Choice(["ko", "en"]),
    default="ko",
    help="UI 언어 설정 / UI language (ko: 한국어, en: English)",
)
@click.option("--debug", is_flag=True, help="디버그 로그 출력")
@click.pass_context
def cli(ctx: Context, lang: str, debug: bool) -> None:
    """AZS - 워커 노드용 가용 영역 선택 도구"""
    set_lang(lang)
    if debug:
        setup_logging(debug=True)

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["debug"] = debug


@cli.command("select")
@selector_options
@click.option(
    "-n",
    "--count",
    "required_zones",
    type=click.IntRange(min=1),
    default=None,
    help="선택할 가용 영역 수 (기본: 3)",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    type=click.Choice(["console", "json", "text"]),
    default="console",
    help="출력 형식",
)
def select_command(
    region: str | None,
    profile: str | None,
    config_path: str | None,
    avoid: tuple[str, ...],
    no_default_avoid: bool,
    required_zones: int | None,
    output_format: str,
) -> None:
    """워커 노드를 배치할 가용 영역 선택

    \b
    Examples:
        azs select -r us-west-2
        azs select -r us-east-1 -n 2 -f json
        azs select -c azs.yaml --avoid us-east-1a
    """
    region = region or get_default_region()

    try:
        selector = _build_selector(profile, config_path, required_zones, avoid, no_default_avoid)
        zones = selector.select_zones(region)
    except AZSError as e:
        _fail(e)
    except KeyboardInterrupt:
        console.print(f"\n[dim]{t('cli.cancelled')}[/dim]")
        raise SystemExit(130) from None

    if output_format == "json":
        click.echo(json.dumps({"region": region, "zones": zones}, ensure_ascii=False, indent=2))
        return
    if output_format == "text":
        click.echo(" ".join(zones))
        return

    print_table(
        t("cli.selected_zones", region=region),
        [t("cli.col_index"), t("cli.col_zone")],
        [[i, zone] for i, zone in enumerate(zones, 1)],
    )
    distinct = len(set(zones))
    if distinct < len(zones):
        print_warning(t("cli.repeated_zones", count=distinct))


@cli.command("zones")
@selector_options
@click.option("--json", "as_json", is_flag=True, help="JSON 형식으로 출력")
def zones_command(
    region: str | None,
    profile: str | None,
    config_path: str | None,
    avoid: tuple[str, ...],
    no_default_avoid: bool,
    as_json: bool,
) -> None:
    """리전의 가용 영역과 선택 대상 여부 표시

    \b
    Examples:
        azs zones -r us-east-1
        azs zones -r us-east-1 --json
    """
    region = region or get_default_region()

    try:
        selector = _build_selector(profile, config_path, None, avoid, no_default_avoid)
        zones = selector.query.describe_zones(region)
    except AZSError as e:
        _fail(e)

    rules = selector.rules
    rows = [(zone, is_usable(zone, rules)) for zone in zones]

    if as_json:
        data = [{**zone.to_dict(), "eligible": eligible} for zone, eligible in rows]
        click.echo(json.dumps(data, ensure_ascii=False, indent=2))
        return

    if not rows:
        print_warning(t("cli.no_zones"))
        return

    print_table(
        t("cli.zones_title", region=region),
        [t("cli.col_zone"), t("cli.col_zone_id"), t("cli.col_state"), t("cli.col_eligible")],
        [[zone.zone_name, zone.zone_id, zone.state.value, "O" if eligible else "-"] for zone, eligible in rows],
    )


if __name__ == "__main__":
    cli()
