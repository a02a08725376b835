"""
Version import for the LingoAssist backend.

Single source of truth: lingoassist/_version.py
"""

from lingoassist._version import __version__, __release_date__

__all__ = ["__version__", "__release_date__"]
