"""
settingstree package initialisation.

Parses indentation-structured settings files into nested mappings and exposes
key-path lookups through the Settings object.
"""

from importlib import metadata

from settingstree.lexer import MalformedIndentationError
from settingstree.settings import KeyNotFoundError, Settings, parse_settings
from settingstree.sources import NoFileLoadedError


def get_version() -> str:
    """Return the installed package version, falling back to source version during development."""
    try:
        return metadata.version("settingstree")
    except metadata.PackageNotFoundError:  # pragma: no cover - only occurs during dev
        return "0.1.0"


__all__ = [
    "KeyNotFoundError",
    "MalformedIndentationError",
    "NoFileLoadedError",
    "Settings",
    "get_version",
    "parse_settings",
]
