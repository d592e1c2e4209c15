"""glob to regular expression

Translate a glob into a regular expression, matching bash glob expansion as
closely as possible.

Glob patterns can have the following syntax:
- `*` to match any characters without leaving the path segment
- `?` to match exactly one character in a path segment
- `{}` to group sub patterns into an OR expression. (e.g. `*.{ts,js}`
  matches TypeScript and JavaScript files)
- `[]` to declare a range of characters to match in a path segment
  (e.g., `example.[0-9]` to match on `example.0`, `example.1`, ...)
- `[!...]` to negate a range of characters to match in a path segment
- `[[:<class>:]]` to match any character belonging to a POSIX class
  (e.g., `[[:digit:]abc]` matches any digit, `a`, `b` or `c`)
- `\\` to escape the next character, or a backtick for `os="windows"`
- `/` as path separator, with `\\` as additional separator for
  `os="windows"`

Extended syntax, enabled with `extended=True`:
- `?(foo|bar)` to match zero or one instance of `{foo,bar}`
- `@(foo|bar)` to match exactly one instance of `{foo,bar}`
- `*(foo|bar)` to match any number of instances of `{foo,bar}`
- `+(foo|bar)` to match one or more instances of `{foo,bar}`
- `!(foo|bar)` to match anything other than `{foo,bar}`

Globstar syntax, enabled with `globstar=True`:
- `**` to match any number of path segments, including none. It must
  comprise its entire path segment.

The generated pattern is anchored at both start and end. Repeated separators
are tolerated and trailing separators are discarded. Absolute globs only
match absolute paths. An empty glob matches nothing.

A negated group is converted to a negative look-ahead followed by a
wildcard, so `!(foo).js` fails to match `foobar.js`. `!(foo|bar)` is
effectively treated like `!(@(foo|bar)*)`, which is only correct when the
group ends its segment.
"""

import re
from functools import lru_cache

from .segments import (
    GroupKind,
    Segment,
    SplitError,
    escape_literal,
    split_segments,
    translate_segment,
    trim_separators,
)
from .syntax import Options, Platform, ResolvedSyntax, resolve_syntax

__all__ = [
    "GlobPattern",
    "GroupKind",
    "Options",
    "Platform",
    "ResolvedSyntax",
    "Segment",
    "SplitError",
    "escape_literal",
    "glob_to_regex",
    "resolve_syntax",
    "split_segments",
    "translate",
    "translate_segment",
    "trim_separators",
]

# matches nothing, not even an empty string
MATCH_NOTHING = "(?!)"


@lru_cache(256)
def _translate(glob: str, options: Options) -> str:
    if not glob:
        return MATCH_NOTHING

    syntax = resolve_syntax(options.os)
    glob = trim_separators(glob, syntax.separators)

    pattern_block = ["^"]
    for segment in split_segments(glob, syntax.separators):
        fragment, ends_with_separator = translate_segment(segment.text, options, syntax)
        pattern_block.append(fragment)
        if not ends_with_separator:
            if segment.followed_by_separator:
                pattern_block.append(syntax.separator)
            else:
                pattern_block.append(syntax.separator_maybe)

    pattern_block.append(r"\Z")
    return "".join(pattern_block)


def translate(
    glob: str, extended: bool = True, globstar: bool = True, os: str = "posix"
) -> str:
    """convert glob to regular expression string"""
    return _translate(glob, Options(extended, globstar, os))


def glob_to_regex(
    glob: str, extended: bool = True, globstar: bool = True, os: str = "posix"
) -> re.Pattern:
    """convert glob to compiled regular expression"""
    return re.compile(translate(glob, extended, globstar, os))


class GlobPattern:
    """compiled glob pattern"""

    def __init__(
        self,
        pattern: str,
        extended: bool = True,
        globstar: bool = True,
        os: str = "posix",
    ):
        self.pattern = pattern
        self.options = Options(extended, globstar, os)
        self.regex_pattern = self._compile_pattern()

    def __repr__(self):
        return f"GlobPattern(pattern={repr(self.pattern)}, os={repr(self.options.os.value)})"

    def _compile_pattern(self) -> re.Pattern:
        return re.compile(_translate(self.pattern, self.options))

    def match(self, path: str) -> bool:
        return bool(self.regex_pattern.match(path))
