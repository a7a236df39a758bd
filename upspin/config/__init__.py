"""
Configuration System

Configuration Priority (highest to lowest):
    1. Programmatic (passed to UpspinConfig())
    2. Environment variables (UPSPIN_* prefix)
    3. Built-in defaults

UpspinConfig.from_file() reads a TOML file and applies it as programmatic
overrides on top of the environment.
"""

from upspin.config.settings import UpspinConfig

__all__ = ["UpspinConfig"]
