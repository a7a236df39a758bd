"""
UpspinConfig - Configuration Management

Sensible defaults with full override capability.

Example:
    >>> # Use defaults (reads from environment)
    >>> client = Upspin()

    >>> # Explicit configuration
    >>> config = UpspinConfig(command="/usr/local/bin/upspin")
    >>> client = Upspin(config=config)

    >>> # From config file
    >>> config = UpspinConfig.from_file("./upspin-get.toml")

Environment Variables:
    UPSPIN_TOOL - Tool implementation ("command")
    UPSPIN_COMMAND - Path or name of the upspin executable
    UPSPIN_CONFIG_FILE - Upspin config file passed as `-config`
    UPSPIN_READ_MARKER - Text marking a read right in `upspin info` output
    UPSPIN_EVERYONE_MARKER - Text marking the everyone group in that output
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, cast

# TOML support: tomllib is built-in for Python 3.11+, use tomli for 3.10
try:
    import tomllib

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomllib.load(f))

except ImportError:
    import tomli

    def _load_toml(path: Path) -> dict[str, Any]:
        with open(path, "rb") as f:
            return cast(dict[str, Any], tomli.load(f))


class UpspinConfig:
    """Configuration for upspin-get."""

    # === Tool Configuration ===

    tool: str = "command"
    """Tool implementation: "command" (the upspin executable)"""

    command: str = "upspin"
    """Executable name or path, resolved through PATH when bare"""

    config_file: str | None = None
    """Upspin config file, passed to the program as `-config <file>`"""

    # === Access Check Configuration ===

    read_marker: str = "can read"
    """Substring identifying a read-rights line in `upspin info` output"""

    everyone_marker: str = "All"
    """Substring identifying the everyone group on that line"""

    def __init__(self, **kwargs: Any) -> None:
        """
        Initialize configuration.

        Args:
            **kwargs: Override any configuration option
        """
        # Load from environment first
        self._load_from_env()

        # Apply explicit overrides
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                raise ValueError(f"Unknown configuration option: {key}")

    def _load_from_env(self) -> None:
        """Load configuration from environment variables."""
        if tool := os.getenv("UPSPIN_TOOL"):
            self.tool = tool
        if command := os.getenv("UPSPIN_COMMAND"):
            self.command = command
        if config_file := os.getenv("UPSPIN_CONFIG_FILE"):
            self.config_file = config_file
        if marker := os.getenv("UPSPIN_READ_MARKER"):
            self.read_marker = marker
        if marker := os.getenv("UPSPIN_EVERYONE_MARKER"):
            self.everyone_marker = marker

    @classmethod
    def from_file(cls, path: str | Path) -> "UpspinConfig":
        """
        Load configuration from TOML file.

        Example TOML:
            [tool]
            command = "/usr/local/bin/upspin"
            config_file = "~/upspin/config"

            [access]
            read_marker = "can read"
            everyone_marker = "All"

        Top-level keys matching an option name are accepted too.

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        data = _load_toml(path)

        flat_config: dict[str, Any] = {}
        for section in ("tool", "access"):
            if isinstance(data.get(section), dict):
                flat_config.update(data[section])

        for key, value in data.items():
            if not isinstance(value, dict):
                flat_config[key] = value

        return cls(**flat_config)

    @classmethod
    def from_env(cls) -> "UpspinConfig":
        """Load configuration from environment variables only."""
        return cls()

    def with_overrides(self, **kwargs: Any) -> "UpspinConfig":
        """Return new config with specified overrides. None values are ignored."""
        new_config = UpspinConfig.__new__(UpspinConfig)
        for key in dir(self):
            if not key.startswith("_") and not callable(getattr(self, key)):
                setattr(new_config, key, getattr(self, key))
        for key, value in kwargs.items():
            if value is None:
                continue
            if not hasattr(new_config, key):
                raise ValueError(f"Unknown configuration option: {key}")
            setattr(new_config, key, value)
        return new_config
