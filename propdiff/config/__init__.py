"""Collector settings (pydantic-settings)."""

from propdiff.config.settings import CollectorSettings, get_settings

__all__ = [
    "CollectorSettings",
    "get_settings",
]
