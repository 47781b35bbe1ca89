"""Deprecation marker annotation (copy-on-write)."""

from __future__ import annotations

from collections.abc import Iterable

from propdiff.catalog.models import Deprecation, DeprecationLevel, Property

PLACEHOLDER_REASON = "Todo: add deprecation reason"
PLACEHOLDER_REPLACEMENT = (
    "Todo: add replacement if exists, or delete this entry if none replacement exists"
)


def placeholder_marker(
    reason: str = PLACEHOLDER_REASON,
    replacement: str = PLACEHOLDER_REPLACEMENT,
    level: DeprecationLevel = DeprecationLevel.ERROR,
) -> Deprecation:
    """사람이 채워 넣을 placeholder marker 생성."""
    return Deprecation(level=level, reason=reason, replacement=replacement)


def annotate(properties: Iterable[Property], marker: Deprecation) -> list[Property]:
    """모든 property에 동일한 marker 부착.

    기존 marker는 덮어쓴다. 입력 순서를 유지하며 원본 인스턴스는 변경하지 않는다.
    """
    return [prop.with_deprecation(marker) for prop in properties]
