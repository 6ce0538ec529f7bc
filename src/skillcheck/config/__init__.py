"""
Configuration module for skillcheck.

Exports the main components for convenient imports.
"""

from .loader import load_config
from .schema import AppConfig, LoggingConfig, SkillsConfig

__all__ = [
    "load_config",
    "AppConfig",
    "LoggingConfig",
    "SkillsConfig",
]
