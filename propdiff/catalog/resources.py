"""Metadata resource discovery on a search path.

Search path entry 유형:
- 디렉토리: ``glob(pattern)`` 매칭 파일
- ``.jar`` / ``.zip`` 아카이브: ``fnmatch`` 매칭 멤버
- 존재하지 않는 경로: skip (debug 로그)
"""

from __future__ import annotations

import fnmatch
import zipfile
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from propdiff.core.exceptions import LoadError

_ARCHIVE_SUFFIXES = frozenset({".jar", ".zip"})


@dataclass(frozen=True)
class MetadataSource:
    """하나의 메타데이터 문서 위치.

    ``read()``는 호출 시점에 열고, 전부 읽고, 닫는다.
    """

    location: str
    reader: Callable[[], bytes]

    def read(self) -> bytes:
        try:
            return self.reader()
        except (OSError, KeyError, zipfile.BadZipFile) as exc:
            msg = "Failed to read metadata source"
            raise LoadError(msg, context={"source": self.location}) from exc

    @classmethod
    def from_path(cls, path: Path) -> MetadataSource:
        return cls(location=str(path), reader=path.read_bytes)

    @classmethod
    def from_archive(cls, archive: Path, member: str) -> MetadataSource:
        def _read() -> bytes:
            with zipfile.ZipFile(archive) as zf:
                return zf.read(member)

        return cls(location=f"{archive}!/{member}", reader=_read)


def discover(search_path: Iterable[Path], pattern: str) -> list[MetadataSource]:
    """Search path 순서대로 pattern에 매칭되는 메타데이터 소스 수집.

    Args:
        search_path: 디렉토리 또는 jar/zip 경로 목록
        pattern: glob 패턴 (e.g., ``META-INF/spring-configuration-metadata.json``)

    Returns:
        발견된 MetadataSource 리스트 (entry 순서, entry 내부는 이름순)
    """
    pattern = pattern.lstrip("/")
    sources: list[MetadataSource] = []

    for entry in search_path:
        entry = Path(entry)
        if entry.is_dir():
            found = [
                MetadataSource.from_path(p) for p in sorted(entry.glob(pattern)) if p.is_file()
            ]
        elif entry.is_file() and entry.suffix.lower() in _ARCHIVE_SUFFIXES:
            found = _discover_in_archive(entry, pattern)
        else:
            logger.debug("Skipping search path entry: {}", entry)
            continue

        logger.debug("Found {} metadata source(s) in {}", len(found), entry)
        sources.extend(found)

    return sources


def _discover_in_archive(archive: Path, pattern: str) -> list[MetadataSource]:
    try:
        with zipfile.ZipFile(archive) as zf:
            members = sorted(name for name in zf.namelist() if not name.endswith("/"))
    except (OSError, zipfile.BadZipFile) as exc:
        msg = "Failed to open archive"
        raise LoadError(msg, context={"source": str(archive)}) from exc

    return [
        MetadataSource.from_archive(archive, name)
        for name in members
        if fnmatch.fnmatchcase(name, pattern)
    ]
