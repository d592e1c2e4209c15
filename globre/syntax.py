"""pattern syntax by platform"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, NamedTuple


# characters with a special meaning in a regular expression
REGEX_ESCAPE_CHARS = frozenset("!$()*+.=?[\\^{|")

# characters with a special meaning inside a character class
RANGE_ESCAPE_CHARS = frozenset("-\\]")

# read by `re` as nested sets or set operations inside a character class
SET_OPERATION_CHARS = frozenset("[&~|")

POSIX_CLASSES = {
    "alnum": "0-9A-Za-z",
    "alpha": "A-Za-z",
    "ascii": r"\x00-\x7f",
    "blank": r"\t ",
    "cntrl": r"\x00-\x1f\x7f",
    "digit": "0-9",
    "graph": r"\x21-\x7e",
    "lower": "a-z",
    "print": r"\x20-\x7e",
    "punct": r"""!"#$%\&'()*+,\-./:;<=>?@\[\\\]^_`{\|}\~""",
    "space": r" \t\n\r\f\v",
    "upper": "A-Z",
    "word": "A-Za-z0-9_",
    "xdigit": "0-9A-Fa-f",
}


class Platform(str, Enum):
    """path flavour the glob is written for"""

    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            value = value.lower()
            if value == "linux":
                return cls.POSIX
            for member in cls:
                if member.value == value:
                    return member
        return None


@dataclass(frozen=True)
class Options:
    """translation options"""

    extended: bool = True
    globstar: bool = True
    os: Platform = Platform.POSIX

    def __post_init__(self):
        # raises ValueError for an unknown platform
        object.__setattr__(self, "os", Platform(self.os))


class ResolvedSyntax(NamedTuple):
    separator: str
    separator_maybe: str
    separators: FrozenSet[str]
    globstar: str
    wildcard: str
    any_char: str
    escape_prefix: str


@lru_cache(maxsize=None)
def resolve_syntax(platform: Platform) -> ResolvedSyntax:
    """pattern fragments used to translate globs written for `platform`"""

    if Platform(platform) is Platform.WINDOWS:
        return ResolvedSyntax(
            separator=r"(?:\\|/)+",
            separator_maybe=r"(?:\\|/)*",
            separators=frozenset("\\/"),
            globstar=r"(?:[^\\/]*(?:\\|/|\Z)+)*",
            wildcard=r"[^\\/]*",
            any_char=r"[^\\/]",
            escape_prefix="`",
        )

    return ResolvedSyntax(
        separator="/+",
        separator_maybe="/*",
        separators=frozenset("/"),
        globstar=r"(?:[^/]*(?:/|\Z)+)*",
        wildcard="[^/]*",
        any_char="[^/]",
        escape_prefix="\\",
    )
