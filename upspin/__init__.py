"""
upspin-get - Download public files from Upspin

A small Python wrapper around the `upspin` command-line program. Paths are
parsed locally; access checks and downloads are delegated to the program.

Example:
    >>> from upspin import UpspinPath
    >>> path = UpspinPath.parse("augie@upspin.io/Images/Augie/small.jpg")
    >>> path.file_name
    'small.jpg'
    >>> path.get()  # requires the upspin program on PATH
    DownloadResult(...)

Main Classes:
    Upspin: Access checks and downloads
    UpspinPath: Parsed `<owner>/<path>` address
    UpspinConfig: Configuration management
"""

__version__ = "0.1.0"

# Public API - lazy imports keep `import upspin` cheap for the CLI
def __getattr__(name: str):
    """Lazy import public API components."""

    if name == "Upspin":
        from upspin.api.client import Upspin
        return Upspin

    if name == "UpspinConfig":
        from upspin.config.settings import UpspinConfig
        return UpspinConfig

    # Convenience functions
    if name in ("get", "is_public"):
        from upspin.api import convenience
        return getattr(convenience, name)

    # Types
    if name in ("UpspinPath", "CommandResult", "DownloadResult"):
        from upspin import types
        return getattr(types, name)

    # Tools
    if name in ("UpspinTool", "CommandLineTool"):
        from upspin import tools
        return getattr(tools, name)

    # Errors
    if name in (
        "UpspinError",
        "ParseError",
        "EmptyPathError",
        "NotPublicError",
        "OutputFileError",
        "InvocationError",
        "DownloadFailedError",
    ):
        from upspin import errors
        return getattr(errors, name)

    raise AttributeError(f"module 'upspin' has no attribute {name!r}")


__all__ = [
    # Main classes
    "Upspin",
    "UpspinConfig",

    # Convenience functions
    "get",
    "is_public",

    # Types
    "UpspinPath",
    "CommandResult",
    "DownloadResult",

    # Tools
    "UpspinTool",
    "CommandLineTool",

    # Errors
    "UpspinError",
    "ParseError",
    "EmptyPathError",
    "NotPublicError",
    "OutputFileError",
    "InvocationError",
    "DownloadFailedError",

    # Version
    "__version__",
]
