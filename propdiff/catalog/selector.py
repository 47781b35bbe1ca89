"""Relevant group selection by name keyword."""

from __future__ import annotations

from collections.abc import Iterable

from propdiff.catalog.models import Catalog, Group


def select_groups(catalog: Catalog, keywords: Iterable[str]) -> dict[str, Group]:
    """이름에 keyword 중 하나라도 포함된 group만 선택 (case-sensitive).

    Args:
        catalog: 원본 카탈로그 (변경되지 않음)
        keywords: group 이름 substring 키워드

    Returns:
        group name -> Group (매칭 없으면 빈 dict)
    """
    keywords = tuple(keywords)
    return {
        name: group
        for name, group in catalog.groups.items()
        if any(keyword in name for keyword in keywords)
    }
