import re

import pytest

from globre import Options, Platform, resolve_syntax
from globre.syntax import POSIX_CLASSES


@pytest.mark.parametrize(
    "value,expected",
    [
        ("posix", Platform.POSIX),
        ("linux", Platform.POSIX),
        ("Windows", Platform.WINDOWS),
        (Platform.WINDOWS, Platform.WINDOWS),
    ],
)
def test_platform_lookup(value, expected):
    assert Platform(value) is expected


def test_platform_unknown():
    with pytest.raises(ValueError):
        Platform("darwin")


def test_options_defaults():
    options = Options()
    assert options.extended is True
    assert options.globstar is True
    assert options.os is Platform.POSIX


def test_options_coerce_os():
    assert Options(os="windows").os is Platform.WINDOWS
    assert Options(os="windows") == Options(os=Platform.WINDOWS)


def test_resolve_syntax_cached():
    assert resolve_syntax(Platform.POSIX) is resolve_syntax(Platform.POSIX)
    assert resolve_syntax(Platform.WINDOWS) is resolve_syntax(Platform.WINDOWS)


def test_resolve_syntax_posix():
    syntax = resolve_syntax(Platform.POSIX)
    assert syntax.separators == frozenset("/")
    assert syntax.escape_prefix == "\\"
    assert re.fullmatch(syntax.separator, "//")
    assert re.fullmatch(syntax.separator_maybe, "")
    assert not re.fullmatch(syntax.wildcard, "a/b")


def test_resolve_syntax_windows():
    syntax = resolve_syntax(Platform.WINDOWS)
    assert syntax.separators == frozenset("\\/")
    assert syntax.escape_prefix == "`"
    assert re.fullmatch(syntax.separator, "\\/")
    assert not re.fullmatch(syntax.wildcard, "a\\b")
    assert re.fullmatch(syntax.globstar, "a\\b/")


test_posix_class_data = [
    ("alnum", "a1", "-\u0663\u00e9"),
    ("alpha", "Zz", "1"),
    ("ascii", "\x00~", "ä"),
    ("blank", "\t ", "\n"),
    ("cntrl", "\x01\x7f", "a"),
    ("digit", "09", "a\u0663\uff11"),
    ("graph", "!~", " "),
    ("lower", "az", "A"),
    ("print", " ~", "\t"),
    ("punct", "!`~[]\\-|&", "a"),
    ("space", " \t\n\r\f\v", "a\u00a0\u2003"),
    ("upper", "AZ", "a"),
    ("word", "a_1", "-\u00e9\u0663"),
    ("xdigit", "09afAF", "g\u0663"),
]


@pytest.mark.parametrize("name,members,non_members", test_posix_class_data)
def test_posix_classes(name, members, non_members):
    regex = re.compile(f"[{POSIX_CLASSES[name]}]")
    for char in members:
        assert regex.fullmatch(char), char
    for char in non_members:
        assert not regex.fullmatch(char), char
