"""
Core configuration module for Tessera.

Provides centralized configuration management with support for logger and UI settings,
environment variables and INI file loading.
"""

from tessera.core.config.config import Config, CoreConfig, CoreSettings, SettingsLike, get_config, ui_setting

__all__ = ["Config", "CoreConfig", "CoreSettings", "SettingsLike", "get_config", "ui_setting"]
