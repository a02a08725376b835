"""LingoAssist: locale-aware link checking for translated documentation."""

from ._version import __version__

__all__ = ["__version__"]
