"""
Upspin - Main Entry Point

Checks whether Upspin paths are public and downloads public files by driving
the upspin program through an UpspinTool.

Example:
    >>> from upspin import Upspin
    >>> client = Upspin()
    >>> client.is_public("augie@upspin.io/Images/Augie/small.jpg")
    True
    >>> result = client.get("augie@upspin.io/Images/Augie/small.jpg")
    >>> result.output_path
    PosixPath('small.jpg')

Only files readable by everyone are downloaded. Each call runs the program
once (twice for get) and blocks until it exits; nothing is retried.
"""

from __future__ import annotations

import logging
from pathlib import Path

from upspin.config import UpspinConfig
from upspin.errors import DownloadFailedError, InvocationError, NotPublicError, OutputFileError
from upspin.tools.base import UpspinTool
from upspin.types.path import UpspinPath
from upspin.types.results import DownloadResult

logger = logging.getLogger(__name__)


class Upspin:
    """
    Access checks and downloads for Upspin paths.

    The tool is created from the configuration on first use unless one is
    passed in.
    """

    def __init__(
        self,
        config: UpspinConfig | None = None,
        tool: UpspinTool | None = None,
    ) -> None:
        """
        Args:
            config: Configuration (default: UpspinConfig() from environment)
            tool: Tool to run operations with (default: built from config)
        """
        self._config = config or UpspinConfig()
        self._tool = tool

    @property
    def config(self) -> UpspinConfig:
        return self._config

    @property
    def tool(self) -> UpspinTool:
        if self._tool is None:
            from upspin.tools import create_tool

            self._tool = create_tool(self._config)
        return self._tool

    def is_public(self, path: UpspinPath | str) -> bool:
        """
        Check whether everyone may read `path`.

        True only if `upspin info` succeeds and one line of its output holds
        both the read marker and the everyone marker. Any failure to run the
        program or read its output gives False; this never raises.
        """
        path = _as_path(path)
        full_path = path.full_path

        try:
            result = self.tool.query_access(full_path)
        except InvocationError as e:
            logger.warning(f"Access check for {full_path} failed: {e}")
            return False

        if not result.success:
            logger.debug(f"{self.tool.name} info {full_path} exited with {result.returncode}")
            return False

        try:
            lines = result.text.splitlines()
        except UnicodeDecodeError:
            logger.warning(f"Could not parse access information for {full_path}")
            return False

        public = any(self._grants_everyone_read(line) for line in lines)
        logger.debug(f"{full_path} public={public}")
        return public

    def get(
        self,
        path: UpspinPath | str,
        output_path: str | Path | None = None,
    ) -> DownloadResult:
        """
        Download a public file.

        Args:
            path: Upspin path to fetch
            output_path: Local destination (default: the path's file name in
                the current directory). Created or truncated.

        Returns:
            DownloadResult describing the written file

        Raises:
            NotPublicError: If the path is not readable by everyone
            EmptyPathError: If no output_path is given and the path has no file name
            OutputFileError: If the destination cannot be created
            InvocationError: If the upspin program cannot be started
            DownloadFailedError: If the upspin program exits non-zero
        """
        path = _as_path(path)
        full_path = path.full_path

        if not self.is_public(path):
            raise NotPublicError(full_path)

        destination = Path(output_path) if output_path is not None else Path(path.file_name)

        try:
            out = destination.open("wb")
        except OSError as e:
            raise OutputFileError(destination, e.strerror or str(e)) from e

        with out:
            logger.debug(f"Downloading {full_path} to {destination}")
            result = self.tool.fetch_bytes(full_path, out)

        if not result.success:
            raise DownloadFailedError(full_path, result.returncode, result.stderr)

        return DownloadResult(
            path=path,
            output_path=destination,
            bytes_written=destination.stat().st_size,
        )

    def _grants_everyone_read(self, line: str) -> bool:
        return self._config.read_marker in line and self._config.everyone_marker in line


def _as_path(path: UpspinPath | str) -> UpspinPath:
    if isinstance(path, UpspinPath):
        return path
    return UpspinPath.parse(path)
