"""
Core configuration module for commentdeck.

Provides centralized configuration management with support for the packaged
INI defaults, `.env` files and environment variable overrides.
"""

from commentdeck.core.config.config import Config, CoreConfig, CoreSettings, SettingsLike

__all__ = ["Config", "CoreConfig", "CoreSettings", "SettingsLike"]
