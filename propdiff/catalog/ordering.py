"""Deterministic property ordering before serialization.

Key: ``(is_deprecated, identifier)`` 오름차순, identifier가 없으면 앞쪽.
"""

from __future__ import annotations

from collections.abc import Iterable

from propdiff.catalog.models import Property


def sort_key(prop: Property) -> tuple[bool, bool, str]:
    return (prop.is_deprecated, prop.id is not None, prop.id or "")


def sort_properties(properties: Iterable[Property]) -> list[Property]:
    """Stable sort (동일 key는 입력 순서 유지)."""
    return sorted(properties, key=sort_key)
