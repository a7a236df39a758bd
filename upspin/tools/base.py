"""
Abstract Tool Interface

The upspin program does all network and storage work. This interface is the
seam between it and the rest of the package, so tests can substitute a fake.
"""

from abc import ABC, abstractmethod
from typing import BinaryIO

from upspin.types.results import CommandResult


class UpspinTool(ABC):
    """
    Abstract interface for something that runs upspin operations.

    A non-zero exit status is reported through CommandResult.returncode.
    Implementations raise InvocationError only when the program cannot be
    started at all.
    """

    @abstractmethod
    def query_access(self, full_path: str) -> CommandResult:
        """Run `info <full_path>` and capture its standard output."""
        ...

    @abstractmethod
    def fetch_bytes(self, full_path: str, out: BinaryIO) -> CommandResult:
        """Run `get <full_path>` with standard output written to `out`."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Short name used in log messages."""
        ...
