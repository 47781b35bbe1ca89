"""Shared fixtures for tests.

이 모듈은 테스트에서 공통으로 사용되는 픽스처를 제공합니다.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from propdiff.catalog.models import Deprecation, DeprecationLevel, Group, Property

# ---------------------------------------------------------------------------
# 디렉토리 경로 → pytest 마커 자동 매핑
# ---------------------------------------------------------------------------
_DIR_MARKER_MAP: dict[str, str] = {
    "/cli/": "integration",
    "/collector/": "integration",
    "/catalog/": "unit",
    "/core/": "unit",
    "/config/": "unit",
}


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    """디렉토리 경로 기반 자동 마커 부여."""
    for item in items:
        fspath = str(item.fspath)
        for dir_pattern, marker_name in _DIR_MARKER_MAP.items():
            if dir_pattern in fspath:
                item.add_marker(getattr(pytest.mark, marker_name))
                break


LEGACY_DOCUMENT: dict[str, Any] = {
    "groups": [
        {
            "name": "spring.cloud.azure",
            "type": "com.microsoft.azure.spring.AzureProperties",
            "sourceType": "com.microsoft.azure.spring.AzureProperties",
        },
        {
            "name": "azure.keyvault",
            "type": "com.microsoft.azure.keyvault.KeyVaultProperties",
            "sourceType": "com.microsoft.azure.keyvault.KeyVaultProperties",
        },
        {
            "name": "azure.cosmos",
            "type": "com.microsoft.azure.cosmos.CosmosProperties",
            "sourceType": "com.microsoft.azure.cosmos.CosmosProperties",
        },
        {
            "name": "server",
            "type": "org.springframework.boot.ServerProperties",
            "sourceType": "org.springframework.boot.ServerProperties",
        },
    ],
    "properties": [
        {
            "name": "azure.keyvault.uri",
            "type": "java.lang.String",
            "description": "Key Vault URI.",
            "sourceType": "com.microsoft.azure.keyvault.KeyVaultProperties",
        },
        {
            "name": "azure.keyvault.enabled",
            "type": "java.lang.Boolean",
            "defaultValue": True,
            "sourceType": "com.microsoft.azure.keyvault.KeyVaultProperties",
        },
        {
            "name": "azure.cosmos.key",
            "type": "java.lang.String",
            "sourceType": "com.microsoft.azure.cosmos.CosmosProperties",
        },
        {
            "name": "azure.cosmos.consistency-levels",
            "type": "java.util.List<java.lang.String>",
            "defaultValue": ["SESSION", "EVENTUAL"],
            "sourceType": "com.microsoft.azure.cosmos.CosmosProperties",
        },
        {
            "name": "server.port",
            "type": "java.lang.Integer",
            "defaultValue": 8080,
            "sourceType": "org.springframework.boot.ServerProperties",
        },
    ],
    "hints": [],
}

MODERN_DOCUMENT: dict[str, Any] = {
    "groups": [
        {
            "name": "spring.cloud.azure.keyvault",
            "type": "com.azure.spring.KeyVaultProperties",
            "sourceType": "com.azure.spring.KeyVaultProperties",
        },
        {
            "name": "azure.cosmos",
            "type": "com.azure.spring.CosmosProperties",
            "sourceType": "com.azure.spring.CosmosProperties",
        },
    ],
    "properties": [
        {
            "name": "spring.cloud.azure.keyvault.endpoint",
            "type": "java.lang.String",
            "sourceType": "com.azure.spring.KeyVaultProperties",
        },
        {
            "name": "azure.cosmos.key",
            "type": "java.lang.String",
            "description": "Cosmos account key.",
            "sourceType": "com.azure.spring.CosmosProperties",
        },
    ],
}


@pytest.fixture
def write_metadata(tmp_path: Path) -> Callable[[str, dict[str, Any]], Path]:
    """``tmp_path/<relative>``에 메타데이터 JSON 작성."""

    def _write(relative: str, document: dict[str, Any]) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def legacy_dir(tmp_path: Path, write_metadata: Callable[[str, dict[str, Any]], Path]) -> Path:
    write_metadata("legacy/META-INF/spring-configuration-metadata.json", LEGACY_DOCUMENT)
    return tmp_path / "legacy"


@pytest.fixture
def modern_dir(tmp_path: Path, write_metadata: Callable[[str, dict[str, Any]], Path]) -> Path:
    write_metadata("modern/spring-cloud-azure-4.0-configuration-metadata.json", MODERN_DOCUMENT)
    return tmp_path / "modern"


@pytest.fixture
def marker() -> Deprecation:
    return Deprecation(level=DeprecationLevel.ERROR, reason="why", replacement="what")


@pytest.fixture
def make_group() -> Callable[..., Group]:
    """테스트용 Group 생성 헬퍼."""

    def _make(name: str, *prop_ids: str) -> Group:
        return Group(name=name, properties={pid: Property(id=pid) for pid in prop_ids})

    return _make
