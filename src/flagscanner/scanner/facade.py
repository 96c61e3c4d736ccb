"""
Command-line scanner.

Breaks command-line arguments into tokens:

1. OptionToken: arguments started by any configured prefix (-v, --verbose, +trace)
2. OptionsArgumentsSeparatorToken: the separator that stops option parsing (--)
3. PositionalArgumentToken: everything else

Given the "-" and "--" prefixes and the "--" separator,

    --verbose -k4 -- othercommand -v --trace file.txt

scans as Option(--, verbose), Option(-, k4), Separator(--) followed by four
positional arguments: everything after the separator is positional.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from flagscanner.logging_config import logger
from flagscanner.schemas import (
    OptionToken,
    OptionsArgumentsSeparatorToken,
    PositionalArgumentToken,
    Token,
)
from flagscanner.tracing import trace
from .config import DEFAULT_STYLE, get_style


def sort_prefixes(prefixes: Iterable[str]) -> List[str]:
    """
    Return a new list of prefixes in matching order.

    Longest first, so "--" wins over "-"; equal lengths are sorted
    alphabetically so the output does not depend on the caller's order.
    """
    return sorted(prefixes, key=lambda p: (-len(p), p))


@dataclass(frozen=True)
class Scanner:
    """
    Command line scanner.

    We check for the separator first. Then for option prefixes
    sorted by length (longest first).

    Attributes:
        prefixes: Prefixes delimiting options. If empty, no argument is an option.
        separator: Separator between options and arguments. If empty, no
                   separator is recognized.
    """
    prefixes: Tuple[str, ...] = field(default_factory=tuple)
    separator: str = ""

    def __post_init__(self):
        # A bare string would otherwise be split into one-character prefixes
        if isinstance(self.prefixes, str):
            raise TypeError("prefixes must be a collection of strings, not a single string")
        # Accept lists/sets from callers but keep the configuration immutable
        object.__setattr__(self, "prefixes", tuple(self.prefixes))

    @classmethod
    def from_style(cls, name: str) -> "Scanner":
        """
        Build a scanner from a named style preset (see ``list_styles``).

        Raises:
            UnknownStyleError: If the style does not exist.
        """
        preset = get_style(name)
        return cls(prefixes=preset.prefixes, separator=preset.separator)

    def scan(self, args: Sequence[str]) -> List[Token]:
        """
        Scan the command line arguments and return one token per argument.

        The args MUST NOT include the program name as the first argument.

        This method does not mutate the scanner and is safe to call
        concurrently.
        """
        tokens: List[Token] = []

        # Scan-local working copy; empty prefixes never name an option
        prefixes = [p for p in sort_prefixes(self.prefixes) if p]

        for idx, arg in enumerate(args):
            # Check for separator first
            if self.separator and arg == self.separator:
                tokens.append(OptionsArgumentsSeparatorToken(idx=idx, separator=arg))
                for tail_idx in range(idx + 1, len(args)):
                    tokens.append(PositionalArgumentToken(idx=tail_idx, value=args[tail_idx]))
                logger.debug(f"Separator at index {idx}, {len(args) - idx - 1} trailing arguments")
                return tokens

            # Then, check for (sorted) prefixes with actual names
            for prefix in prefixes:
                if arg.startswith(prefix) and len(arg) > len(prefix):
                    tokens.append(OptionToken(idx=idx, prefix=prefix, name=arg[len(prefix):]))
                    break
            else:
                # Everything else is an argument
                tokens.append(PositionalArgumentToken(idx=idx, value=arg))

        return tokens


@trace
def scan(
    args: Sequence[str],
    prefixes: Optional[Iterable[str]] = None,
    separator: Optional[str] = None,
    style: str = DEFAULT_STYLE,
) -> List[Token]:
    """
    Scan arguments using a style preset, optionally overriding its settings.

    Args:
        args: Command line arguments, without the program name.
        prefixes: Option prefixes. If None, the style's prefixes are used.
        separator: Options/arguments separator. If None, the style's separator
                   is used; "" disables separator recognition.
        style: Name of the style preset providing defaults.

    Returns:
        The list of tokens, one per argument.

    Raises:
        UnknownStyleError: If the style does not exist.
    """
    preset = get_style(style)
    scanner = Scanner(
        prefixes=preset.prefixes if prefixes is None else prefixes,
        separator=preset.separator if separator is None else separator,
    )
    logger.debug(
        f"Scanning {len(args)} arguments with prefixes={list(scanner.prefixes)} "
        f"separator={scanner.separator!r}"
    )
    return scanner.scan(args)
