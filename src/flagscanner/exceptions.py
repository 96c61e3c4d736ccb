# Custom exceptions for flagscanner

from typing import List


class FlagScannerError(Exception):
    """Base exception for all application-specific errors."""
    pass


class ConfigError(FlagScannerError):
    """Raised for configuration-related problems."""
    pass


class UnknownStyleError(ConfigError):
    """Raised when a command-line style preset does not exist."""
    def __init__(self, style: str, available: List[str]):
        self.style = style
        self.available = available
        super().__init__(
            f"Unknown style '{style}'. Available styles: {', '.join(available)}"
        )
