"""Loguru logging configuration.

All logging in the application should use the configured loguru logger.
Library modules only emit records; sinks are attached by the CLI entry point.

Features:
    - Console sink (human-readable, stderr)
    - Optional rotating text file sink
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from propdiff.logging.config import LoggingConfig, get_logging_config

# =============================================================================
# Console Format Templates
# =============================================================================

CONSOLE_FORMAT_DEFAULT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


# =============================================================================
# Setup Functions
# =============================================================================


def setup_logger_from_config(config: LoggingConfig | None = None) -> None:
    """Initialize logger from Pydantic config model.

    Args:
        config: LoggingConfig instance (loads from env if None)

    Example:
        >>> from propdiff.core.logger import setup_logger_from_config
        >>> setup_logger_from_config()  # Loads from LOG_* env vars
    """
    if config is None:
        config = get_logging_config()

    # Remove default handler to prevent duplicate logs
    logger.remove()

    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT_DEFAULT,
        level=config.console_level,
        colorize=True,
        backtrace=config.backtrace,
        diagnose=config.diagnose,
    )

    if config.file_enabled:
        _setup_text_file_sink(config)

    logger.debug(
        "Logger initialized",
        console_level=config.console_level,
        file_enabled=config.file_enabled,
    )


def _setup_text_file_sink(config: LoggingConfig) -> None:
    """Set up text file sink with loguru's built-in rotation."""
    log_path = Path(config.log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_path / "propdiff_{time:YYYY-MM-DD}.log",
        format=CONSOLE_FORMAT_DEFAULT,
        level=config.file_level,
        rotation=config.rotation,
        retention=config.retention,
        compression=config.compression,
        backtrace=config.backtrace,
        diagnose=False,
    )


__all__ = [
    "logger",
    "setup_logger_from_config",
]
