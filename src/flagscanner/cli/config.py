"""
CLI Configuration

Centralized output-mode configuration for the flagscanner CLI.
"""

import os
from typing import Optional


class CLIConfig:
    """Configuration for CLI commands"""

    # Machine mode (plain output, no tables or colors)
    _machine_mode: Optional[bool] = None

    @classmethod
    def set_machine_mode(cls, enabled: Optional[bool]) -> None:
        """Set machine mode (pure data output, no presentation)"""
        cls._machine_mode = enabled

    @classmethod
    def is_machine_mode(cls) -> bool:
        """
        Check if machine mode is active.

        Machine mode is the DEFAULT. Returns False only if human mode
        is explicitly requested.
        """
        if cls._machine_mode is not None:
            return cls._machine_mode
        if os.getenv("FLAGSCANNER_HUMAN_MODE", "").lower() in ("1", "true", "yes"):
            return False
        return True
