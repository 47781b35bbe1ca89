"""Logging configuration for the collector.

- LoggingConfig: LOG_* 환경 변수 기반 설정
- get_logging_config: 설정 로드 헬퍼
"""

from propdiff.logging.config import LoggingConfig, get_logging_config

__all__ = [
    "LoggingConfig",
    "get_logging_config",
]
