"""Custom exception hierarchy for the metadata collector.

Exception Categories:
    - LoadError: metadata source missing, unreadable, or malformed (fatal)
    - SerializationError: default value cannot be represented in JSON (fatal)
    - EmptyResultWarning: nothing to compare or nothing changed (non-fatal)
"""


class PropdiffError(Exception):
    """모든 collector 관련 예외의 기본 클래스.

    이 예외를 직접 발생시키지 말고, 하위 클래스를 사용하세요.

    Attributes:
        message: 에러 메시지
        context: 추가 컨텍스트 정보 (디버깅용)
    """

    def __init__(self, message: str, *, context: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, object] = context or {}

    def __str__(self) -> str:
        """에러 메시지와 컨텍스트를 포함한 문자열 반환."""
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} [{ctx_str}]"
        return self.message


class LoadError(PropdiffError):
    """메타데이터 소스 로드 실패 (파일 없음, 읽기 실패, JSON/스키마 오류).

    Example:
        >>> raise LoadError(
        ...     "Malformed metadata document",
        ...     context={"source": "META-INF/spring-configuration-metadata.json"},
        ... )
    """


class SerializationError(PropdiffError):
    """JSON으로 표현할 수 없는 default value."""


class EmptyResultWarning(UserWarning):
    """관련 그룹 또는 변경된 property가 0개 (실행은 계속됨)."""
