"""Identifier set algebra between legacy and modern group maps.

Property는 identifier가 같으면 "unchanged"로 본다.
type, description, default value 차이는 비교하지 않는다.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from propdiff.catalog.models import Group


@dataclass(frozen=True)
class CatalogDiff:
    """두 group map의 identifier 비교 결과."""

    legacy_ids: frozenset[str]
    modern_ids: frozenset[str]
    unchanged: frozenset[str]
    changed: frozenset[str]


def flatten(groups: Mapping[str, Group]) -> set[str]:
    """모든 group의 property identifier 합집합."""
    return {prop_id for group in groups.values() for prop_id in group.properties}


def unchanged(legacy_groups: Mapping[str, Group], modern_groups: Mapping[str, Group]) -> set[str]:
    """양쪽 모두에 존재하는 identifier (교집합)."""
    return flatten(legacy_groups) & flatten(modern_groups)


def changed(legacy_groups: Mapping[str, Group], unchanged_ids: set[str] | frozenset[str]) -> set[str]:
    """Legacy에만 존재하는 identifier (차집합)."""
    return flatten(legacy_groups) - unchanged_ids


def diff(legacy_groups: Mapping[str, Group], modern_groups: Mapping[str, Group]) -> CatalogDiff:
    legacy_ids = flatten(legacy_groups)
    modern_ids = flatten(modern_groups)
    common = legacy_ids & modern_ids
    return CatalogDiff(
        legacy_ids=frozenset(legacy_ids),
        modern_ids=frozenset(modern_ids),
        unchanged=frozenset(common),
        changed=frozenset(legacy_ids - common),
    )
