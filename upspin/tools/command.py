"""
Command-Line Tool

Implements UpspinTool by running the upspin executable as a subprocess.

Invocations:
    upspin [-config <file>] info <full path>   -> access information on stdout
    upspin [-config <file>] get <full path>    -> file bytes on stdout

Each call blocks until the program exits. There is no timeout: a hung
program hangs the caller.

Example:
    >>> tool = CommandLineTool(command="upspin")
    >>> result = tool.query_access("augie@upspin.io/Images/Augie/small.jpg")
    >>> print(result.text)
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from typing import BinaryIO

from upspin.errors import InvocationError
from upspin.tools.base import UpspinTool
from upspin.types.results import CommandResult

logger = logging.getLogger(__name__)


class CommandLineTool(UpspinTool):
    """Runs operations through the upspin command-line program."""

    def __init__(
        self,
        command: str = "upspin",
        *,
        config_file: str | None = None,
        extra_args: Sequence[str] = (),
    ) -> None:
        """
        Args:
            command: Executable name or path
            config_file: Optional upspin config file (global `-config` flag)
            extra_args: Further global flags placed before the subcommand
        """
        self._command = command
        self._config_file = config_file
        self._extra_args = list(extra_args)

    @property
    def name(self) -> str:
        return self._command

    def build_argv(self, operation: str, full_path: str) -> list[str]:
        """Command line for one operation, global flags first."""
        argv = [self._command]
        if self._config_file:
            argv.extend(["-config", self._config_file])
        argv.extend(self._extra_args)
        argv.extend([operation, full_path])
        return argv

    def query_access(self, full_path: str) -> CommandResult:
        argv = self.build_argv("info", full_path)
        proc = self._run(argv, stdout=subprocess.PIPE)
        return CommandResult(
            argv=argv,
            returncode=proc.returncode,
            stdout=proc.stdout or b"",
            stderr=_decode_stderr(proc.stderr),
        )

    def fetch_bytes(self, full_path: str, out: BinaryIO) -> CommandResult:
        argv = self.build_argv("get", full_path)
        proc = self._run(argv, stdout=out)
        return CommandResult(
            argv=argv,
            returncode=proc.returncode,
            stderr=_decode_stderr(proc.stderr),
        )

    def _run(self, argv: list[str], stdout: int | BinaryIO) -> subprocess.CompletedProcess[bytes]:
        logger.debug(f"Running {' '.join(argv)}")
        try:
            proc = subprocess.run(argv, stdout=stdout, stderr=subprocess.PIPE)
        except (OSError, ValueError) as e:
            # ValueError: arguments the OS cannot pass, e.g. an embedded NUL
            raise InvocationError(argv, str(e)) from e

        if proc.returncode != 0:
            logger.debug(f"{argv[0]} exited with {proc.returncode}: {_decode_stderr(proc.stderr).strip()}")
        return proc


def _decode_stderr(stderr: bytes | None) -> str:
    if not stderr:
        return ""
    return stderr.decode("utf-8", errors="replace")
