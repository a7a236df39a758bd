"""
Public API

    client: Upspin class (access checks and downloads)
    convenience: Module-level is_public() and get()
"""

from upspin.api.client import Upspin
from upspin.api.convenience import get, is_public

__all__ = ["Upspin", "get", "is_public"]
