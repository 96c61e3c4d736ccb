"""
flagscanner - Command-line argument tokenizer

Breaks raw command-line arguments into option, separator and positional
tokens so higher-level flag parsers can bind semantics on top.
"""

__version__ = "0.1.0"

# Core exports
from flagscanner.schemas import (
    OptionToken,
    OptionsArgumentsSeparatorToken,
    PositionalArgumentToken,
    Token,
    TokenList,
)
from flagscanner.scanner import Scanner, scan
from flagscanner.scanner.config import StylePreset, get_style, list_styles

__all__ = [
    "__version__",
    "Scanner",
    "scan",
    "Token",
    "TokenList",
    "OptionToken",
    "OptionsArgumentsSeparatorToken",
    "PositionalArgumentToken",
    "StylePreset",
    "get_style",
    "list_styles",
]
