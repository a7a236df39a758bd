"""
Type Definitions

Pydantic models for the data this package passes around.

    - UpspinPath: Parsed `<owner>/<path>` address
    - CommandResult: One invocation of the upspin program
    - DownloadResult: A completed download
"""

from upspin.types.path import SEPARATOR, UpspinPath
from upspin.types.results import CommandResult, DownloadResult

__all__ = [
    "SEPARATOR",
    "UpspinPath",
    "CommandResult",
    "DownloadResult",
]
