"""
Convenience Functions

Top-level functions for common operations without explicit Upspin
instantiation. These are designed for quick scripts and REPL usage.

Example:
    >>> from upspin import get, is_public
    >>> is_public("augie@upspin.io/Images/Augie/small.jpg")
    True
    >>> get("augie@upspin.io/Images/Augie/small.jpg", "augie.jpg")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from upspin.types.results import DownloadResult


def is_public(path: str, **config: Any) -> bool:
    """
    Check whether an Upspin path is readable by everyone.

    Args:
        path: Upspin path, e.g. "augie@upspin.io/Images/Augie/small.jpg"
        **config: UpspinConfig overrides
    """
    from upspin.api.client import Upspin
    from upspin.config import UpspinConfig

    return Upspin(UpspinConfig(**config)).is_public(path)


def get(
    path: str,
    output_path: str | Path | None = None,
    **config: Any,
) -> "DownloadResult":
    """Download a public Upspin file. See Upspin.get."""
    from upspin.api.client import Upspin
    from upspin.config import UpspinConfig

    return Upspin(UpspinConfig(**config)).get(path, output_path)
