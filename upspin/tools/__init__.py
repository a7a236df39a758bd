"""
Upspin Tools

Implementations of the operations delegated to the external upspin program.

Modules:
    base: Abstract tool interface (UpspinTool)
    command: Subprocess implementation (CommandLineTool)

Supported Tools:
    - "command": the upspin executable, found on PATH or configured explicitly
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from upspin.tools.base import UpspinTool
from upspin.tools.command import CommandLineTool

if TYPE_CHECKING:
    from upspin.config import UpspinConfig

__all__ = ["UpspinTool", "CommandLineTool", "create_tool"]


def create_tool(config: "UpspinConfig") -> UpspinTool:
    """Create the tool named by `config.tool`."""
    if config.tool == "command":
        return CommandLineTool(config.command, config_file=config.config_file)
    raise ValueError(f"Unknown upspin tool: {config.tool}")
