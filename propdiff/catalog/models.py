"""Configuration metadata Pydantic models.

설정 메타데이터 카탈로그를 구조화하는 모델:
- Deprecation: deprecation marker (level, reason, replacement)
- Property: 개별 설정 property
- Group: 이름 있는 property 묶음
- Catalog: 전체 카탈로그 (group name -> Group)
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

ROOT_GROUP = "_ROOT_GROUP_"

# ─── Enums ───────────────────────────────────────────────────────────


class DeprecationLevel(StrEnum):
    """Deprecation 수준."""

    WARNING = "warning"
    ERROR = "error"


# ─── Models ──────────────────────────────────────────────────────────


class Deprecation(BaseModel):
    """Deprecation marker. 세 필드 모두 독립적으로 optional."""

    model_config = ConfigDict(frozen=True)

    level: DeprecationLevel | None = Field(default=None, description="warning / error")
    reason: str | None = Field(default=None, description="Deprecation 사유")
    replacement: str | None = Field(default=None, description="대체 property")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: object) -> object:
        """Level 문자열은 대소문자 무시."""
        if isinstance(v, str):
            return v.lower()
        return v


class Property(BaseModel):
    """개별 설정 property.

    ``deprecation``을 제외한 필드는 로드 이후 변하지 않는다.
    Marker 부착은 ``with_deprecation()``으로 새 인스턴스를 만든다.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str | None = Field(default=None, alias="name", description="Dot-delimited identifier")
    type: str | None = Field(default=None, description="Type descriptor")
    description: str | None = Field(default=None, description="설명")
    default_value: Any = Field(default=None, alias="defaultValue", description="Default value")
    source_type: str | None = Field(
        default=None, alias="sourceType", description="Property를 제공한 source type"
    )
    deprecation: Deprecation | None = Field(default=None, description="Deprecation marker")

    @property
    def is_deprecated(self) -> bool:
        return self.deprecation is not None

    def with_deprecation(self, marker: Deprecation) -> Property:
        """Marker가 부착된 새 Property 반환 (원본 불변)."""
        return self.model_copy(update={"deprecation": marker})


class Group(BaseModel):
    """이름 있는 property 묶음."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(description="Group 이름 (property prefix)")
    type: str | None = Field(default=None, description="Group을 정의한 type")
    source_type: str | None = Field(default=None, alias="sourceType")
    description: str | None = Field(default=None)
    properties: dict[str, Property] = Field(default_factory=dict)


class Catalog(BaseModel):
    """전체 설정 카탈로그."""

    model_config = ConfigDict(frozen=True)

    groups: dict[str, Group] = Field(default_factory=dict)

    def all_properties(self) -> list[Property]:
        """모든 group의 property (group 순서 유지)."""
        return [prop for group in self.groups.values() for prop in group.properties.values()]
