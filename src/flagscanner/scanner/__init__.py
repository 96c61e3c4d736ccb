"""
This facade exposes the public API for the scanner module.
Other parts of the application should only import from here,
not from internal modules.
"""
from .facade import Scanner, scan, sort_prefixes

__all__ = ["Scanner", "scan", "sort_prefixes"]
