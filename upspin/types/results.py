"""
Result Types

Models returned by the external-program layer and by downloads.

    - CommandResult: Outcome of one upspin program invocation
    - DownloadResult: Summary of a completed download
"""

from pathlib import Path

from pydantic import BaseModel

from upspin.types.path import UpspinPath


class CommandResult(BaseModel):
    """
    Outcome of one run of the upspin program.

    Attributes:
        argv: The full command line that was executed
        returncode: Process exit status
        stdout: Captured standard output (empty when redirected to a file)
        stderr: Captured standard error, decoded leniently
    """

    argv: list[str]
    returncode: int
    stdout: bytes = b""
    stderr: str = ""

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def text(self) -> str:
        """Standard output as UTF-8. Raises UnicodeDecodeError if it is not."""
        return self.stdout.decode("utf-8")


class DownloadResult(BaseModel):
    """
    Result of downloading an Upspin file.

    Attributes:
        path: The Upspin path that was fetched
        output_path: Local file the bytes were written to
        bytes_written: Size of the local file after the download
    """

    path: UpspinPath
    output_path: Path
    bytes_written: int

    @property
    def file_name(self) -> str:
        return self.output_path.name
