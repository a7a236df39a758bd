"""
Upspin Errors

Every failure surfaced by this package derives from UpspinError, so callers
can catch one type and print the message.

Hierarchy:
    UpspinError
    ├── ParseError            - malformed path notation (ValueError)
    │   └── EmptyPathError    - file name requested for a path with no segments
    ├── NotPublicError        - the path is not readable by everyone
    ├── OutputFileError       - the local destination could not be created (OSError)
    ├── InvocationError       - the upspin program could not be started
    └── DownloadFailedError   - the upspin program ran but exited non-zero
"""

from __future__ import annotations

from pathlib import Path


class UpspinError(Exception):
    """Base class for all upspin-get errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ParseError(UpspinError, ValueError):
    """Raised when a path cannot be interpreted."""


class EmptyPathError(ParseError):
    """Raised when a file name is requested from a path that has none."""

    def __init__(self, full_path: str):
        super().__init__(f"Path {full_path} has no file name")
        self.full_path = full_path


class NotPublicError(UpspinError):
    """Raised when a download is attempted for a path not readable by everyone."""

    def __init__(self, full_path: str):
        super().__init__(f"Path {full_path} is not public")
        self.full_path = full_path


class OutputFileError(UpspinError, OSError):
    """Raised when the local output file cannot be created."""

    def __init__(self, output_path: Path, reason: str):
        super().__init__(f"Could not create output file {output_path}: {reason}")
        self.output_path = output_path


class InvocationError(UpspinError):
    """Raised when the upspin program cannot be started at all."""

    def __init__(self, command: list[str], reason: str):
        super().__init__(f"Could not run {' '.join(command)}: {reason}")
        self.command = command


class DownloadFailedError(UpspinError):
    """Raised when `upspin get` exits with a non-zero status."""

    def __init__(self, full_path: str, returncode: int, stderr: str = ""):
        message = f"Could not download {full_path} (exit={returncode})"
        if stderr.strip():
            message += f": {stderr.strip()}"
        super().__init__(message)
        self.full_path = full_path
        self.returncode = returncode
        self.stderr = stderr
