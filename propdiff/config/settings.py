"""Pydantic Settings for the deprecation collector.

All settings are loaded from environment variables (PROPDIFF_ prefix)
and/or a .env file with type validation.

Features:
    - Relevant-group keyword set (group selector input)
    - Legacy / modern search paths and resource patterns
    - Output location and placeholder deprecation marker
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from propdiff.catalog.annotator import PLACEHOLDER_REASON, PLACEHOLDER_REPLACEMENT
from propdiff.catalog.models import DeprecationLevel

DEFAULT_KEYWORDS: tuple[str, ...] = ("azure", "keyvault", "servicebus", "eventhub", "cosmos")


class CollectorSettings(BaseSettings):
    """Deprecation collector 설정.

    Environment Variables:
        - PROPDIFF_KEYWORDS: 관련 그룹 키워드 (JSON list)
        - PROPDIFF_LEGACY_SEARCH_PATH / PROPDIFF_MODERN_SEARCH_PATH: 검색 경로 (JSON list)
        - PROPDIFF_OUTPUT_DIR: 출력 디렉토리 (기본: 현재 디렉토리)

    Example:
        >>> settings = get_settings()
        >>> settings.output_path
        PosixPath('additional-spring-configuration-metadata.json')
    """

    model_config = SettingsConfigDict(
        env_prefix="PROPDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Group Selection
    # ==========================================================================
    keywords: list[str] = Field(
        default_factory=lambda: list(DEFAULT_KEYWORDS),
        description="그룹 이름 substring 매칭 키워드 (case-sensitive)",
    )

    # ==========================================================================
    # Resource Discovery
    # ==========================================================================
    legacy_search_path: list[Path] = Field(
        default_factory=lambda: [Path()],
        description="Legacy 메타데이터 검색 경로 (디렉토리 또는 jar/zip)",
    )
    modern_search_path: list[Path] = Field(
        default_factory=lambda: [Path()],
        description="Modern 메타데이터 검색 경로 (디렉토리 또는 jar/zip)",
    )
    legacy_pattern: str = Field(
        default="META-INF/spring-configuration-metadata.json",
        description="Legacy 메타데이터 파일 패턴",
    )
    modern_pattern: str = Field(
        default="spring-cloud-azure-4.0-configuration-metadata.json",
        description="Modern 메타데이터 파일 패턴",
    )

    # ==========================================================================
    # Output
    # ==========================================================================
    output_dir: Path = Field(
        default=Path(),
        description="출력 디렉토리",
    )
    output_file: str = Field(
        default="additional-spring-configuration-metadata.json",
        description="출력 파일 이름",
    )

    # ==========================================================================
    # Deprecation Marker
    # ==========================================================================
    deprecation_level: DeprecationLevel = Field(
        default=DeprecationLevel.ERROR,
        description="Deprecation level",
    )
    deprecation_reason: str = Field(
        default=PLACEHOLDER_REASON,
        description="Deprecation reason placeholder",
    )
    deprecation_replacement: str = Field(
        default=PLACEHOLDER_REPLACEMENT,
        description="Replacement placeholder",
    )

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("output_file")
    @classmethod
    def validate_output_file(cls, v: str) -> str:
        """출력 파일 이름에 경로 구분자 금지."""
        if not v or "/" in v or "\\" in v:
            msg = f"output_file must be a plain file name: {v!r}"
            raise ValueError(msg)
        return v

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_file


@lru_cache
def get_settings() -> CollectorSettings:
    """설정 싱글톤 반환 (캐시됨)."""
    return CollectorSettings()
