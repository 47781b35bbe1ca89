"""Configuration metadata JSON serializer.

출력 형식::

    {"properties": [{"name", "type"?, "description"?, "defaultValue"?,
                     "deprecation"?: {"level"?, "reason"?, "replacement"?}}]}

값이 없는 필드는 ``null``로 쓰지 않고 생략한다.
"""

from __future__ import annotations

import json
import math
import os
import tempfile
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from loguru import logger

from propdiff.catalog.models import Deprecation, Property
from propdiff.core.exceptions import SerializationError

INDENT = 2


def to_document(properties: Iterable[Property]) -> dict[str, Any]:
    """입력 순서 그대로 ``{"properties": [...]}`` 생성."""
    return {"properties": [to_json_object(prop) for prop in properties]}


def to_json_object(prop: Property) -> dict[str, Any]:
    if prop.id is None:
        msg = "Property without name cannot be serialized"
        raise SerializationError(msg, context={"property": None})
    obj: dict[str, Any] = {"name": prop.id}
    if prop.type is not None:
        obj["type"] = prop.type
    if prop.description is not None:
        obj["description"] = prop.description
    if prop.default_value is not None:
        obj["defaultValue"] = _default_value(prop)
    if prop.deprecation is not None:
        obj["deprecation"] = _deprecation(prop.deprecation)
    return obj


def serialize(properties: Iterable[Property]) -> bytes:
    """Pretty-printed (indent 2) UTF-8 JSON bytes.

    Raises:
        SerializationError: default value를 JSON으로 표현할 수 없는 경우
    """
    text = json.dumps(to_document(properties), indent=INDENT, ensure_ascii=False)
    return text.encode("utf-8")


def write_document(properties: Iterable[Property], path: Path) -> Path:
    """직렬화 후 atomic write (임시 파일 -> rename).

    직렬화가 실패하면 파일 시스템을 건드리지 않는다.
    """
    payload = serialize(properties)
    path.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        tmp_path.replace(path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise

    logger.info("Wrote {} bytes to {}", len(payload), path)
    return path


# ─── Internal helpers ────────────────────────────────────────────────


def _deprecation(deprecation: Deprecation) -> dict[str, str]:
    obj: dict[str, str] = {}
    if deprecation.level is not None:
        obj["level"] = deprecation.level.name.lower()
    if deprecation.reason is not None:
        obj["reason"] = deprecation.reason
    if deprecation.replacement is not None:
        obj["replacement"] = deprecation.replacement
    return obj


def _scalar_kind(value: object) -> str | None:
    # bool은 int의 subclass이므로 먼저 검사
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "number"
    if isinstance(value, float):
        return "number" if math.isfinite(value) else None
    if isinstance(value, str):
        return "string"
    return None


def _default_value(prop: Property) -> Any:
    value = prop.default_value
    if _scalar_kind(value) is not None:
        return value

    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        kinds = {_scalar_kind(item) for item in value}
        if None not in kinds and len(kinds) <= 1:
            return list(value)

    msg = "Unsupported default value"
    raise SerializationError(
        msg, context={"property": prop.id, "value_type": type(value).__name__}
    )
