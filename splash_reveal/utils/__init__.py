"""
工具函数模块
"""

from .config_manager import ConfigManager, SplashSettings
from .constants import SettingsKeys, SplashConstants
from .exceptions import (
    ConfigurationError,
    EmptyPaletteError,
    InvalidColorError,
    SplashError,
    SplashStateError,
)

__all__ = [
    'ConfigManager',
    'ConfigurationError',
    'EmptyPaletteError',
    'InvalidColorError',
    'SettingsKeys',
    'SplashConstants',
    'SplashError',
    'SplashSettings',
    'SplashStateError',
]
