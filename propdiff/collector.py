"""Deprecation collector pipeline.

load -> select -> diff -> annotate -> order -> serialize

Legacy 카탈로그에서 modern 카탈로그에 없는 property를 찾아
placeholder deprecation marker를 붙이고 JSON으로 출력한다.
"""

from __future__ import annotations

import warnings
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from loguru import logger

from propdiff.catalog.annotator import annotate, placeholder_marker
from propdiff.catalog.diff import CatalogDiff, diff
from propdiff.catalog.loader import load_catalog
from propdiff.catalog.models import Catalog, Group, Property
from propdiff.catalog.ordering import sort_properties
from propdiff.catalog.resources import discover
from propdiff.catalog.selector import select_groups
from propdiff.catalog.serializer import write_document
from propdiff.config.settings import CollectorSettings, get_settings
from propdiff.core.exceptions import EmptyResultWarning


@dataclass(frozen=True)
class CollectorResult:
    """Pipeline 실행 결과."""

    legacy_groups: dict[str, Group]
    modern_groups: dict[str, Group]
    diff: CatalogDiff
    properties: list[Property]
    output_path: Path | None = None


class DeprecationCollector:
    """Legacy/modern 카탈로그 비교 후 deprecated property 수집."""

    def __init__(self, settings: CollectorSettings | None = None) -> None:
        self.settings = settings or get_settings()

    def load(self, search_path: Iterable[Path], pattern: str) -> Catalog:
        """Search path에서 pattern 매칭 문서를 찾아 Catalog 생성."""
        sources = discover(search_path, pattern)
        logger.info("Loading {} metadata source(s) matching {}", len(sources), pattern)
        return load_catalog(sources)

    def load_legacy(self) -> Catalog:
        return self.load(self.settings.legacy_search_path, self.settings.legacy_pattern)

    def load_modern(self) -> Catalog:
        return self.load(self.settings.modern_search_path, self.settings.modern_pattern)

    def run(self, legacy: Catalog | None = None, modern: Catalog | None = None) -> CollectorResult:
        """비교 + annotation + 정렬 (파일 출력 없음).

        Args:
            legacy: Legacy 카탈로그 (None이면 settings 기준으로 로드)
            modern: Modern 카탈로그 (None이면 settings 기준으로 로드)
        """
        if legacy is None:
            legacy = self.load_legacy()
        if modern is None:
            modern = self.load_modern()

        keywords = self.settings.keywords
        legacy_groups = select_groups(legacy, keywords)
        modern_groups = select_groups(modern, keywords)
        _report_groups("legacy", legacy_groups)
        _report_groups("modern", modern_groups)
        if not legacy_groups or not modern_groups:
            _warn_empty(
                f"No relevant groups found (legacy={len(legacy_groups)}, "
                f"modern={len(modern_groups)})"
            )

        result = diff(legacy_groups, modern_groups)
        _report_diff(result)

        changed_props = [
            prop
            for group in legacy_groups.values()
            for prop in group.properties.values()
            if prop.id in result.changed
        ]
        marker = placeholder_marker(
            reason=self.settings.deprecation_reason,
            replacement=self.settings.deprecation_replacement,
            level=self.settings.deprecation_level,
        )
        properties = sort_properties(annotate(changed_props, marker))
        if not properties:
            _warn_empty("No changed properties found")

        return CollectorResult(
            legacy_groups=legacy_groups,
            modern_groups=modern_groups,
            diff=result,
            properties=properties,
        )

    def collect(
        self,
        legacy: Catalog | None = None,
        modern: Catalog | None = None,
        output_path: Path | None = None,
    ) -> CollectorResult:
        """전체 pipeline 실행 후 JSON 파일 출력."""
        result = self.run(legacy, modern)
        target = output_path or self.settings.output_path
        logger.info("Begin to serialize all {} changed properties", len(result.properties))
        write_document(result.properties, target)
        return replace(result, output_path=target)


# ─── Reporting ───────────────────────────────────────────────────────


def _report_groups(label: str, groups: Mapping[str, Group]) -> None:
    logger.info("{} relevant group(s) in {} catalog", len(groups), label)
    for name in sorted(groups):
        logger.debug("  {}", name)


def _report_diff(result: CatalogDiff) -> None:
    logger.info("There are {} legacy properties", len(result.legacy_ids))
    logger.info("There are {} modern properties", len(result.modern_ids))
    logger.info("There are {} unchanged properties", len(result.unchanged))
    for prop_id in sorted(result.unchanged):
        logger.debug("  unchanged: {}", prop_id)
    logger.info("There are {} changed properties", len(result.changed))
    for prop_id in sorted(result.changed):
        logger.debug("  changed: {}", prop_id)


def _warn_empty(message: str) -> None:
    logger.warning(message)
    warnings.warn(message, EmptyResultWarning, stacklevel=3)
