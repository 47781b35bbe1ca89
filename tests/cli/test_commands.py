"""Tests for propdiff/cli/commands.py."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from loguru import logger
from typer.testing import CliRunner

from propdiff.cli.commands import app
from propdiff.config.settings import CollectorSettings

runner = CliRunner()


@pytest.fixture(autouse=True)
def _reset_logger() -> Iterator[None]:
    yield
    logger.remove()


@pytest.fixture
def settings(tmp_path: Path) -> CollectorSettings:
    return CollectorSettings(output_dir=tmp_path / "out")


class TestCollect:
    def test_collect(
        self, settings: CollectorSettings, legacy_dir: Path, modern_dir: Path
    ) -> None:
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(
                app, ["collect", "--legacy", str(legacy_dir), "--modern", str(modern_dir)]
            )
        assert result.exit_code == 0, result.output
        assert "3 changed properties" in result.output

        document = json.loads(settings.output_path.read_text(encoding="utf-8"))
        assert len(document["properties"]) == 3

    def test_collect_options(
        self, settings: CollectorSettings, legacy_dir: Path, modern_dir: Path, tmp_path: Path
    ) -> None:
        output = tmp_path / "custom.json"
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(
                app,
                [
                    "collect",
                    "-l",
                    str(legacy_dir),
                    "-m",
                    str(modern_dir),
                    "-k",
                    "keyvault",
                    "-o",
                    str(output),
                    "--level",
                    "WARNING",
                    "--reason",
                    "moved to spring.cloud.azure",
                ],
            )
        assert result.exit_code == 0, result.output

        document = json.loads(output.read_text(encoding="utf-8"))
        assert [p["name"] for p in document["properties"]] == [
            "azure.keyvault.enabled",
            "azure.keyvault.uri",
        ]
        deprecation = document["properties"][0]["deprecation"]
        assert deprecation["level"] == "warning"
        assert deprecation["reason"] == "moved to spring.cloud.azure"

    def test_invalid_level(self, settings: CollectorSettings) -> None:
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(app, ["collect", "--level", "fatal"])
        assert result.exit_code == 1
        assert "Invalid level" in result.output

    def test_load_error_exit_code(
        self, settings: CollectorSettings, legacy_dir: Path, modern_dir: Path
    ) -> None:
        (modern_dir / "spring-cloud-azure-4.0-configuration-metadata.json").write_text(
            "not json", encoding="utf-8"
        )
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(
                app, ["collect", "--legacy", str(legacy_dir), "--modern", str(modern_dir)]
            )
        assert result.exit_code == 1
        assert "Malformed" in result.output
        assert not settings.output_path.exists()


class TestGroups:
    def test_groups(self, settings: CollectorSettings, legacy_dir: Path) -> None:
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(app, ["groups", str(legacy_dir)])
        assert result.exit_code == 0, result.output
        assert "Groups (3)" in result.output
        assert "azure.keyvault" in result.output
        assert "server" not in result.output

    def test_groups_no_match(self, settings: CollectorSettings, legacy_dir: Path) -> None:
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(app, ["groups", str(legacy_dir), "-k", "servicebus"])
        assert result.exit_code == 0
        assert "No groups match" in result.output


class TestDiff:
    def test_diff(self, settings: CollectorSettings, legacy_dir: Path, modern_dir: Path) -> None:
        with patch("propdiff.cli.commands.get_settings", return_value=settings):
            result = runner.invoke(
                app, ["diff", "--legacy", str(legacy_dir), "--modern", str(modern_dir)]
            )
        assert result.exit_code == 0, result.output
        assert "Unchanged 1 / Changed 3" in result.output
        assert "azure.cosmos.key" in result.output
        assert not settings.output_path.exists()


class TestCreateApp:
    def test_help(self) -> None:
        from propdiff.cli import create_app

        result = runner.invoke(create_app(), ["--help"])
        assert result.exit_code == 0
        assert "collect" in result.output
