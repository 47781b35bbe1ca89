"""CLI interface using Typer.

Available commands:
    - collect: Legacy/modern 비교 후 deprecated property JSON 출력
    - groups: 관련 group 목록
    - diff: unchanged / changed property 목록 (파일 출력 없음)

Usage:
    propdiff collect --legacy libs/legacy --modern libs/modern
    propdiff groups libs/legacy/app.jar
    propdiff diff --legacy libs/legacy --modern libs/modern
"""

import typer


def create_app() -> typer.Typer:
    """Create the main CLI application.

    Lazy import를 사용하여 커맨드 모듈을 필요할 때만 로드합니다.
    """
    from propdiff.cli.commands import app

    return app


def main() -> None:
    """Entry point for the ``propdiff`` console script."""
    app = create_app()
    app()
