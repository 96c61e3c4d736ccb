"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from flagscanner.cli import scanning, settings

__all__ = ['scanning', 'settings']
