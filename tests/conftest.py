"""Shared test helpers: a stand-in for the upspin program."""

from typing import BinaryIO

import pytest

from upspin.errors import InvocationError
from upspin.tools.base import UpspinTool
from upspin.types.results import CommandResult

PUBLIC_INFO = (
    b"augie@upspin.io/Images/Augie/small.jpg\n"
    b"\tpacking:\tee\n"
    b"\tcan read:\taugie@upspin.io, All\n"
    b"\tcan write:\taugie@upspin.io\n"
)

PRIVATE_INFO = (
    b"augie@upspin.io/Private/notes.txt\n"
    b"\tcan read:\taugie@upspin.io\n"
    b"\tcan write:\taugie@upspin.io\n"
)


class FakeTool(UpspinTool):
    """Records calls and replays canned output."""

    def __init__(
        self,
        info_output: bytes = PUBLIC_INFO,
        info_returncode: int = 0,
        content: bytes = b"\xff\xd8jpeg-bytes",
        get_returncode: int = 0,
        missing: bool = False,
    ) -> None:
        self.info_output = info_output
        self.info_returncode = info_returncode
        self.content = content
        self.get_returncode = get_returncode
        self.missing = missing
        self.calls: list[tuple[str, str]] = []

    @property
    def name(self) -> str:
        return "fake-upspin"

    def query_access(self, full_path: str) -> CommandResult:
        self.calls.append(("info", full_path))
        argv = ["fake-upspin", "info", full_path]
        if self.missing:
            raise InvocationError(argv, "No such file or directory")
        return CommandResult(argv=argv, returncode=self.info_returncode, stdout=self.info_output)

    def fetch_bytes(self, full_path: str, out: BinaryIO) -> CommandResult:
        self.calls.append(("get", full_path))
        argv = ["fake-upspin", "get", full_path]
        if self.missing:
            raise InvocationError(argv, "No such file or directory")
        if self.get_returncode == 0:
            out.write(self.content)
            return CommandResult(argv=argv, returncode=0)
        return CommandResult(argv=argv, returncode=self.get_returncode, stderr="item does not exist\n")

    @property
    def operations(self) -> list[str]:
        return [op for op, _ in self.calls]


@pytest.fixture
def fake_tool():
    return FakeTool()


@pytest.fixture
def make_tool():
    """Factory for FakeTool instances with custom canned output."""
    return FakeTool


@pytest.fixture
def private_info():
    """`upspin info` output for a path only its owner can read."""
    return PRIVATE_INFO


@pytest.fixture(autouse=True)
def clean_upspin_env(monkeypatch):
    """Keep the developer's UPSPIN_* variables out of the tests."""
    for var in (
        "UPSPIN_TOOL",
        "UPSPIN_COMMAND",
        "UPSPIN_CONFIG_FILE",
        "UPSPIN_READ_MARKER",
        "UPSPIN_EVERYONE_MARKER",
    ):
        monkeypatch.delenv(var, raising=False)
