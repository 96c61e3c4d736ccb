from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from flagscanner.exceptions import ConfigError, UnknownStyleError


@dataclass(frozen=True)
class StylePreset:
    """
    A named command-line convention (prefixes plus separator).
    """
    name: str
    prefixes: Tuple[str, ...]
    separator: str
    description: str


# Declaration order is the listing order
STYLES: Dict[str, StylePreset] = {
    preset.name: preset
    for preset in (
        StylePreset(
            name="gnu",
            prefixes=("-", "--"),
            separator="--",
            description="Short options with '-', long options with '--' (e.g. -v, --verbose)",
        ),
        StylePreset(
            name="dig",
            prefixes=("-", "--", "+"),
            separator="--",
            description="GNU options plus '+' query options (e.g. -v, --verbose, +trace)",
        ),
        StylePreset(
            name="go",
            prefixes=("-",),
            separator="--",
            description="Single dash for short and long options (e.g. -v, -verbose)",
        ),
        StylePreset(
            name="unix",
            prefixes=("-",),
            separator="",
            description="Traditional single-dash short options, no separator",
        ),
        StylePreset(
            name="windows",
            prefixes=("/",),
            separator="",
            description="Slash options (e.g. /v, /verbose), no separator",
        ),
    )
}

DEFAULT_STYLE = "gnu"


def get_style(name: str) -> StylePreset:
    """
    Look up a style preset by name.

    Raises:
        UnknownStyleError: If no preset has that name.
    """
    try:
        return STYLES[name]
    except KeyError:
        raise UnknownStyleError(name, list(STYLES)) from None


def list_styles() -> List[StylePreset]:
    return list(STYLES.values())


def validate_prefixes(prefixes: Iterable[str]) -> None:
    """
    Strict validation of option prefixes.

    The Scanner itself accepts any prefixes; parsers built on top of it
    call this to reject configurations they consider invalid.

    Args:
        prefixes: Option prefixes to validate.

    Raises:
        ConfigError: If a prefix is not a string, empty, contains
                     whitespace, or is listed twice.
    """
    if isinstance(prefixes, str):
        raise ConfigError("Prefixes must be a collection of strings, not a single string")

    seen = set()
    for prefix in prefixes:
        if not isinstance(prefix, str):
            raise ConfigError(f"Invalid prefix: {prefix!r} (must be a string)")
        if not prefix:
            raise ConfigError("Prefixes cannot be empty strings")
        if any(ch.isspace() for ch in prefix):
            raise ConfigError(f"Prefix {prefix!r} cannot contain whitespace")
        if prefix in seen:
            raise ConfigError(f"Duplicate prefix: {prefix!r}")
        seen.add(prefix)


def validate_separator(separator: str) -> None:
    """
    Strict validation of the options/arguments separator.

    An empty separator is valid and disables separator recognition.

    Raises:
        ConfigError: If the separator is not a string or contains whitespace.
    """
    if not isinstance(separator, str):
        raise ConfigError(f"Separator must be a string, got {type(separator).__name__}")
    if any(ch.isspace() for ch in separator):
        raise ConfigError(f"Separator {separator!r} cannot contain whitespace")
