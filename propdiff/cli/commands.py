"""Typer commands for the deprecation collector.

Commands:
    - collect: 전체 pipeline 실행 + JSON 출력
    - groups: 관련 group 목록 (property 수 포함)
    - diff: unchanged / changed identifier 목록
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from propdiff.catalog.diff import diff as diff_groups
from propdiff.catalog.models import DeprecationLevel
from propdiff.catalog.selector import select_groups
from propdiff.collector import DeprecationCollector
from propdiff.config.settings import CollectorSettings, get_settings
from propdiff.core.exceptions import PropdiffError
from propdiff.core.logger import setup_logger_from_config
from propdiff.logging.config import get_logging_config

app = typer.Typer(
    name="propdiff",
    help="Spring configuration metadata deprecation collector",
    no_args_is_help=True,
)
console = Console()

LegacyOpt = Annotated[
    list[Path] | None,
    typer.Option("--legacy", "-l", help="Legacy search path entry (dir or jar)"),
]
ModernOpt = Annotated[
    list[Path] | None,
    typer.Option("--modern", "-m", help="Modern search path entry (dir or jar)"),
]
KeywordOpt = Annotated[
    list[str] | None,
    typer.Option("--keyword", "-k", help="Group name keyword (repeatable)"),
]


@app.callback()
def _configure(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    config = get_logging_config()
    if verbose:
        config = config.model_copy(update={"console_level": "DEBUG"})
    setup_logger_from_config(config)


def _settings(**overrides: Any) -> CollectorSettings:
    """CLI 옵션으로 settings 덮어쓰기 (None은 무시)."""
    update = {k: v for k, v in overrides.items() if v is not None}
    return get_settings().model_copy(update=update)


def _parse_level(level: str | None) -> DeprecationLevel | None:
    if level is None:
        return None
    try:
        return DeprecationLevel(level.lower())
    except ValueError:
        console.print(f"[red]Invalid level: {level}[/red]")
        console.print(f"Valid: {', '.join(lv.value for lv in DeprecationLevel)}")
        raise typer.Exit(code=1) from None


@app.command()
def collect(
    legacy: LegacyOpt = None,
    modern: ModernOpt = None,
    legacy_pattern: Annotated[
        str | None, typer.Option("--legacy-pattern", help="Legacy metadata file pattern")
    ] = None,
    modern_pattern: Annotated[
        str | None, typer.Option("--modern-pattern", help="Modern metadata file pattern")
    ] = None,
    keyword: KeywordOpt = None,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Output JSON file")
    ] = None,
    reason: Annotated[str | None, typer.Option("--reason", help="Deprecation reason")] = None,
    replacement: Annotated[
        str | None, typer.Option("--replacement", help="Replacement placeholder")
    ] = None,
    level: Annotated[
        str | None, typer.Option("--level", help="Deprecation level (warning/error)")
    ] = None,
) -> None:
    """Legacy에만 있는 property를 deprecated로 표시하여 JSON 출력."""
    settings = _settings(
        legacy_search_path=legacy,
        modern_search_path=modern,
        legacy_pattern=legacy_pattern,
        modern_pattern=modern_pattern,
        keywords=keyword,
        deprecation_reason=reason,
        deprecation_replacement=replacement,
        deprecation_level=_parse_level(level),
    )
    collector = DeprecationCollector(settings)
    try:
        result = collector.collect(output_path=output)
    except PropdiffError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None

    console.print(
        f"[green]{len(result.properties)} changed properties[/green] "
        f"({len(result.diff.unchanged)} unchanged) -> {result.output_path}"
    )


@app.command()
def groups(
    paths: Annotated[list[Path], typer.Argument(help="Search path entries (dir or jar)")],
    pattern: Annotated[
        str | None, typer.Option("--pattern", "-p", help="Metadata file pattern")
    ] = None,
    keyword: KeywordOpt = None,
) -> None:
    """관련 group 목록."""
    settings = _settings(keywords=keyword)
    collector = DeprecationCollector(settings)
    try:
        catalog = collector.load(paths, pattern or settings.legacy_pattern)
    except PropdiffError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None

    selected = select_groups(catalog, settings.keywords)
    if not selected:
        console.print("[yellow]No groups match the given keywords.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold", title=f"Groups ({len(selected)})")
    table.add_column("Group", style="bold", min_width=20)
    table.add_column("Properties", width=10, justify="right")
    for name in sorted(selected):
        table.add_row(name, str(len(selected[name].properties)))
    console.print(table)


@app.command()
def diff(
    legacy: LegacyOpt = None,
    modern: ModernOpt = None,
    keyword: KeywordOpt = None,
) -> None:
    """Unchanged / changed property 목록 (파일 출력 없음)."""
    settings = _settings(legacy_search_path=legacy, modern_search_path=modern, keywords=keyword)
    collector = DeprecationCollector(settings)
    try:
        legacy_catalog = collector.load_legacy()
        modern_catalog = collector.load_modern()
    except PropdiffError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from None

    result = diff_groups(
        select_groups(legacy_catalog, settings.keywords),
        select_groups(modern_catalog, settings.keywords),
    )

    table = Table(
        show_header=True,
        header_style="bold",
        title=f"Unchanged {len(result.unchanged)} / Changed {len(result.changed)}",
    )
    table.add_column("Property", min_width=24)
    table.add_column("Status", width=10)
    for prop_id in sorted(result.unchanged):
        table.add_row(prop_id, "[green]unchanged[/green]")
    for prop_id in sorted(result.changed):
        table.add_row(prop_id, "[red]changed[/red]")
    console.print(table)
