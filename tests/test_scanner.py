"""Unit tests for the scanner module."""

import threading

import pytest

pytestmark = pytest.mark.fast

from flagscanner.scanner import Scanner, scan, sort_prefixes
from flagscanner.schemas import (
    OptionToken,
    OptionsArgumentsSeparatorToken,
    PositionalArgumentToken,
)


def Opt(idx, prefix, name):
    return OptionToken(idx=idx, prefix=prefix, name=name)


def Sep(idx, separator="--"):
    return OptionsArgumentsSeparatorToken(idx=idx, separator=separator)


def Pos(idx, value):
    return PositionalArgumentToken(idx=idx, value=value)


def test_scan_options_separator_and_tail(gnu_scanner):
    """
    Tests the canonical example: options, then the separator, then a tail
    of positionals that would otherwise look like options.
    """
    args = ["--verbose", "-k4", "--", "othercommand", "-v", "--trace", "file.txt"]
    tokens = gnu_scanner.scan(args)

    assert tokens == [
        Opt(0, "--", "verbose"),
        Opt(1, "-", "k4"),
        Sep(2),
        Pos(3, "othercommand"),
        Pos(4, "-v"),
        Pos(5, "--trace"),
        Pos(6, "file.txt"),
    ]


def test_no_prefixes_no_separator_everything_positional():
    scanner = Scanner(prefixes=[], separator="")
    assert scanner.scan(["a", "-b", "--", "--c"]) == [
        Pos(0, "a"),
        Pos(1, "-b"),
        Pos(2, "--"),
        Pos(3, "--c"),
    ]


def test_default_scanner_recognizes_nothing():
    scanner = Scanner()
    assert scanner.prefixes == ()
    assert scanner.separator == ""
    assert scanner.scan(["-v"]) == [Pos(0, "-v")]


def test_bare_prefix_is_positional():
    """
    Tests that '-' (commonly stdin/stdout) is a positional argument,
    not an option with an empty name.
    """
    scanner = Scanner(prefixes=["-"], separator="")
    tokens = scanner.scan(["-"])
    assert len(tokens) == 1
    assert isinstance(tokens[0], PositionalArgumentToken)
    assert tokens[0].value == "-"


def test_bare_long_prefix_falls_back_to_shorter_prefix():
    """
    '--' is a bare '--' prefix but '-' followed by the name '-' when no
    separator is configured.
    """
    scanner = Scanner(prefixes=["-", "--"], separator="")
    assert scanner.scan(["--"]) == [Opt(0, "-", "-")]


def test_mixed_prefixes(dig_scanner):
    assert dig_scanner.scan(["-v", "+trace", "--", "x"]) == [
        Opt(0, "-", "v"),
        Opt(1, "+", "trace"),
        Sep(2),
        Pos(3, "x"),
    ]


def test_empty_input(gnu_scanner):
    assert gnu_scanner.scan([]) == []


def test_longest_prefix_wins_regardless_of_order():
    for prefixes in (["-", "--"], ["--", "-"], {"-", "--"}):
        scanner = Scanner(prefixes=prefixes, separator="")
        assert scanner.scan(["--verbose"]) == [Opt(0, "--", "verbose")]


def test_separator_is_irrevocable(gnu_scanner):
    """
    After the separator, even a second separator and option-looking
    arguments are positional.
    """
    tokens = gnu_scanner.scan(["-a", "--", "--", "-b", "--long"])
    assert isinstance(tokens[1], OptionsArgumentsSeparatorToken)
    assert all(isinstance(t, PositionalArgumentToken) for t in tokens[2:])
    assert [t.value for t in tokens[2:]] == ["--", "-b", "--long"]


def test_separator_first_argument(gnu_scanner):
    tokens = gnu_scanner.scan(["--", "-v", "--trace", "file.txt"])
    assert len(tokens) == 4
    assert isinstance(tokens[0], OptionsArgumentsSeparatorToken)
    for token in tokens[1:]:
        assert isinstance(token, PositionalArgumentToken)


def test_separator_last_argument(gnu_scanner):
    assert gnu_scanner.scan(["-v", "--"]) == [Opt(0, "-", "v"), Sep(1)]


def test_separator_checked_before_prefixes():
    """A separator that also starts with a prefix is still the separator."""
    scanner = Scanner(prefixes=["-"], separator="--")
    assert scanner.scan(["--", "-x"]) == [Sep(0), Pos(1, "-x")]


def test_custom_separator():
    scanner = Scanner(prefixes=["-"], separator=";;")
    assert scanner.scan(["-a", ";;", "-b"]) == [
        Opt(0, "-", "a"),
        Sep(1, ";;"),
        Pos(2, "-b"),
    ]


def test_name_keeps_embedded_structure(gnu_scanner):
    """The scanner does not split '=value' or bundled short options."""
    tokens = gnu_scanner.scan(["--file=config.txt", "-abc"])
    assert tokens == [Opt(0, "--", "file=config.txt"), Opt(1, "-", "abc")]


def test_empty_string_argument_is_positional(gnu_scanner):
    assert gnu_scanner.scan([""]) == [Pos(0, "")]


def test_empty_prefix_is_inert():
    scanner = Scanner(prefixes=[""], separator="")
    assert scanner.scan(["abc", "", "-x"]) == [Pos(0, "abc"), Pos(1, ""), Pos(2, "-x")]


def test_empty_prefix_does_not_shadow_real_prefixes():
    scanner = Scanner(prefixes=["", "-"], separator="")
    assert scanner.scan(["-v", "file"]) == [Opt(0, "-", "v"), Pos(1, "file")]


def test_non_ascii_arguments():
    scanner = Scanner(prefixes=["¡", "-"], separator="")
    assert scanner.scan(["¡naïve", "-ü", "ファイル"]) == [
        Opt(0, "¡", "naïve"),
        Opt(1, "-", "ü"),
        Pos(2, "ファイル"),
    ]


def test_length_index_and_string_fidelity(dig_scanner):
    args = ["+short=yes", "-f", "config", "-", "--", "remaining", "-args", "--"]
    tokens = dig_scanner.scan(args)

    assert len(tokens) == len(args)
    assert [t.index for t in tokens] == list(range(len(args)))
    assert [str(t) for t in tokens] == args


def test_scan_does_not_mutate_configuration():
    prefixes = ["-", "+", "--"]
    scanner = Scanner(prefixes=prefixes, separator="--")
    scanner.scan(["--a", "+b", "-c"])
    assert scanner.prefixes == ("-", "+", "--")
    assert prefixes == ["-", "+", "--"]


def test_scanner_is_frozen():
    scanner = Scanner(prefixes=["-"], separator="--")
    with pytest.raises(AttributeError):
        scanner.separator = ""


def test_scanner_is_reusable(gnu_scanner):
    first = gnu_scanner.scan(["--", "-v"])
    second = gnu_scanner.scan(["-v"])
    assert first == [Sep(0), Pos(1, "-v")]
    assert second == [Opt(0, "-", "v")]


def test_concurrent_scans_share_scanner(dig_scanner):
    args = ["-v", "+trace", "--verbose", "--", "x"]
    expected = dig_scanner.scan(args)
    results = []

    def worker():
        for _ in range(50):
            results.append(dig_scanner.scan(args))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(results) == 400
    assert all(r == expected for r in results)


def test_sort_prefixes_length_then_alphabetical():
    assert sort_prefixes(["+", "-", "--", "/", "++"]) == ["++", "--", "+", "-", "/"]


def test_sort_prefixes_returns_new_list():
    original = ["-", "--"]
    result = sort_prefixes(original)
    assert result == ["--", "-"]
    assert original == ["-", "--"]


def test_scan_function_uses_style_defaults():
    assert scan(["-v", "+trace"], style="dig") == [Opt(0, "-", "v"), Opt(1, "+", "trace")]


def test_scan_function_overrides():
    tokens = scan(["/v", "--", "-x"], prefixes=["/"], separator="")
    assert tokens == [Opt(0, "/", "v"), Pos(1, "--"), Pos(2, "-x")]


def test_scan_function_empty_prefix_override_disables_options():
    assert scan(["-v"], prefixes=[]) == [Pos(0, "-v")]


def test_single_string_prefixes_rejected():
    """A bare string must not be split into one-character prefixes."""
    with pytest.raises(TypeError, match="single string"):
        Scanner(prefixes="--", separator="")


def test_scan_function_rejects_single_string_prefixes():
    with pytest.raises(TypeError):
        scan(["-v"], prefixes="-")
