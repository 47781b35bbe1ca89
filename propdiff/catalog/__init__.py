"""Configuration metadata catalog — load, select, diff, annotate, serialize.

- Catalog, Group, Property, Deprecation: 메타데이터 모델
- load_catalog / discover: 메타데이터 문서 로드
- select_groups: 관련 group 선택
- diff / unchanged / changed: identifier 비교
- annotate / placeholder_marker: deprecation marker 부착
- sort_properties: 출력 순서 결정
- serialize / write_document: JSON 출력
"""

from propdiff.catalog.annotator import annotate, placeholder_marker
from propdiff.catalog.diff import CatalogDiff, changed, diff, flatten, unchanged
from propdiff.catalog.loader import CatalogBuilder, load_catalog
from propdiff.catalog.models import (
    ROOT_GROUP,
    Catalog,
    Deprecation,
    DeprecationLevel,
    Group,
    Property,
)
from propdiff.catalog.ordering import sort_key, sort_properties
from propdiff.catalog.resources import MetadataSource, discover
from propdiff.catalog.selector import select_groups
from propdiff.catalog.serializer import serialize, to_document, to_json_object, write_document

__all__ = [
    "ROOT_GROUP",
    "Catalog",
    "CatalogBuilder",
    "CatalogDiff",
    "Deprecation",
    "DeprecationLevel",
    "Group",
    "MetadataSource",
    "Property",
    "annotate",
    "changed",
    "diff",
    "discover",
    "flatten",
    "load_catalog",
    "placeholder_marker",
    "select_groups",
    "serialize",
    "sort_key",
    "sort_properties",
    "to_document",
    "to_json_object",
    "unchanged",
    "write_document",
]
