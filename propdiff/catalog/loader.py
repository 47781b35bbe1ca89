"""Build a Catalog from serialized configuration metadata documents.

문서 형식::

    {"groups": [{"name", "type"?, "sourceType"?, "description"?}, ...],
     "properties": [{"name", "type"?, "description"?, "sourceType"?,
                     "defaultValue"?, "deprecated"?, "deprecation"?}, ...]}

Property는 ``type``이 ``sourceType``과 같고 이름이 identifier의 prefix인
group 중 가장 긴 이름의 group에 배치되고, 매칭되는 group이 없으면 ``_ROOT_GROUP_``에 들어간다.
같은 이름의 group이 여러 문서에 있으면 property를 합친다 (먼저 로드된 정의 우선).
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from propdiff.catalog.models import ROOT_GROUP, Catalog, DeprecationLevel, Group, Property
from propdiff.catalog.resources import MetadataSource
from propdiff.core.exceptions import LoadError

SourceLike = MetadataSource | Path | bytes | str


class CatalogBuilder:
    """여러 메타데이터 문서를 하나의 Catalog로 병합."""

    def __init__(self) -> None:
        self._groups: dict[str, dict[str, Any]] = {}
        self._properties: dict[str, dict[str, Property]] = {}

    def add(self, source: SourceLike) -> CatalogBuilder:
        """문서 하나를 파싱하여 병합. 실패 시 LoadError."""
        location, raw = _read_source(source)
        try:
            document = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            msg = "Malformed metadata document"
            raise LoadError(msg, context={"source": location}) from exc

        if not isinstance(document, dict):
            msg = "Metadata document must be a JSON object"
            raise LoadError(msg, context={"source": location})

        groups = _parse_groups(_section(document, "groups"), location)
        properties = _parse_properties(_section(document, "properties"), location)

        for group in groups:
            self._groups.setdefault(group.name, group.model_dump(by_alias=False))
            self._properties.setdefault(group.name, {})

        sources = [(g.name, g.type) for g in groups]
        for prop in properties:
            if not prop.id:
                msg = "Property entry without name"
                raise LoadError(msg, context={"source": location})
            group_name = _group_for(prop, sources)
            bucket = self._properties.setdefault(group_name, {})
            if prop.id in bucket:
                logger.debug("Duplicate property {} in {} ignored", prop.id, location)
                continue
            bucket[prop.id] = prop

        logger.debug(
            "Loaded {} group(s), {} property(ies) from {}", len(groups), len(properties), location
        )
        return self

    def build(self) -> Catalog:
        groups: dict[str, Group] = {}
        for name, props in self._properties.items():
            meta = self._groups.get(name, {"name": name})
            groups[name] = Group(**{**meta, "properties": props})
        return Catalog(groups=groups)


def load_catalog(sources: Iterable[SourceLike]) -> Catalog:
    """메타데이터 소스들을 로드하여 단일 Catalog 생성.

    Args:
        sources: MetadataSource, 파일 경로, 또는 raw JSON 문서

    Returns:
        병합된 Catalog (소스가 없으면 빈 Catalog)

    Raises:
        LoadError: 소스가 없거나 읽을 수 없거나 형식이 잘못된 경우
    """
    builder = CatalogBuilder()
    for source in sources:
        builder.add(source)
    return builder.build()


# ─── Internal helpers ────────────────────────────────────────────────


def _read_source(source: SourceLike) -> tuple[str, bytes | str]:
    if isinstance(source, MetadataSource):
        return source.location, source.read()
    if isinstance(source, Path):
        path_source = MetadataSource.from_path(source)
        return path_source.location, path_source.read()
    return "<inline>", source


def _parse_groups(raw: object, location: str) -> list[Group]:
    if not isinstance(raw, list):
        msg = "'groups' must be a list"
        raise LoadError(msg, context={"source": location})
    try:
        return [Group.model_validate(item) for item in raw]
    except ValidationError as exc:
        msg = "Invalid group entry"
        raise LoadError(msg, context={"source": location}) from exc


def _parse_properties(raw: object, location: str) -> list[Property]:
    if not isinstance(raw, list):
        msg = "'properties' must be a list"
        raise LoadError(msg, context={"source": location})
    try:
        return [Property.model_validate(_normalize_property(item)) for item in raw]
    except ValidationError as exc:
        msg = "Invalid property entry"
        raise LoadError(msg, context={"source": location}) from exc


def _normalize_property(item: object) -> object:
    """``deprecated`` flag와 level 기본값(WARNING) 처리."""
    if not isinstance(item, dict):
        return item
    data = dict(item)
    deprecation = data.get("deprecation")
    if isinstance(deprecation, dict):
        data["deprecation"] = {"level": DeprecationLevel.WARNING, **deprecation}
        if data["deprecation"]["level"] is None:
            data["deprecation"]["level"] = DeprecationLevel.WARNING
    elif deprecation is None and data.get("deprecated") is True:
        data["deprecation"] = {"level": DeprecationLevel.WARNING}
    return data


def _section(document: dict[str, Any], key: str) -> object:
    """명시적 null은 빈 list, 그 외 값은 그대로 (검증은 호출자)."""
    value = document.get(key)
    return [] if value is None else value


def _group_for(prop: Property, sources: list[tuple[str, str | None]]) -> str:
    """Type이 같고 identifier prefix인 group 중 가장 긴 이름."""
    if prop.source_type is None or prop.id is None:
        return ROOT_GROUP
    matches = [
        name
        for name, group_type in sources
        if group_type == prop.source_type and prop.id.startswith(name)
    ]
    return max(matches, key=len, default=ROOT_GROUP)
