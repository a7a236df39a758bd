"""
Upspin Path Type

An Upspin path names a file as `<owner>/<segment>/.../<file name>`, where the
owner is the user name (an email-like string) whose tree holds the file.

Example:
    >>> p = UpspinPath.parse("augie@upspin.io/Images/Augie/small.jpg")
    >>> p.owner
    'augie@upspin.io'
    >>> p.path
    'Images/Augie/small.jpg'
    >>> p.file_name
    'small.jpg'
    >>> p.full_path
    'augie@upspin.io/Images/Augie/small.jpg'

Parsing is total: no character set or segment count is checked, so any
string yields a path. Problems surface later, when the upspin program is
asked about an address it does not understand.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from upspin.errors import EmptyPathError

if TYPE_CHECKING:
    from upspin.tools.base import UpspinTool
    from upspin.types.results import DownloadResult

SEPARATOR = "/"


class UpspinPath(BaseModel):
    """
    A parsed Upspin path.

    Attributes:
        owner: Everything before the first separator
        path: The remaining segments joined by the separator (may be empty)
    """

    model_config = ConfigDict(frozen=True)

    owner: str
    path: str = ""

    @classmethod
    def parse(cls, text: str) -> "UpspinPath":
        """Split `text` into owner and path at the first separator."""
        owner, _, path = text.partition(SEPARATOR)
        return cls(owner=owner, path=path)

    @property
    def segments(self) -> list[str]:
        """Path components below the owner."""
        if not self.path:
            return []
        return self.path.split(SEPARATOR)

    @property
    def file_name(self) -> str:
        """
        Final segment of the path.

        Raises:
            EmptyPathError: If the path has no segments (owner only)
        """
        if not self.path:
            raise EmptyPathError(self.full_path)
        return self.path.rsplit(SEPARATOR, 1)[-1]

    @property
    def full_path(self) -> str:
        """The address handed to the upspin program."""
        return f"{self.owner}{SEPARATOR}{self.path}"

    def __str__(self) -> str:
        return self.full_path

    # === Remote operations ===

    def is_public(self, tool: "UpspinTool | None" = None) -> bool:
        """Check whether everyone may read this path. See Upspin.is_public."""
        from upspin.api.client import Upspin

        return Upspin(tool=tool).is_public(self)

    def get(
        self,
        output_path: str | Path | None = None,
        tool: "UpspinTool | None" = None,
    ) -> "DownloadResult":
        """Download this path to `output_path`. See Upspin.get."""
        from upspin.api.client import Upspin

        return Upspin(tool=tool).get(self, output_path)
