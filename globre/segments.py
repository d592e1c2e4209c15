"""path segment translation

A glob is translated one path segment at a time. Any special syntax must be
contained in a single segment: in `?(foo|bar/baz)` the separator takes
precedence and the first segment ends with an unclosed group.

If a segment ends with an unclosed group, an unterminated range or a dangling
escape prefix, every character of that segment is taken literally.
"""

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, NamedTuple, Tuple

from .syntax import (
    POSIX_CLASSES,
    RANGE_ESCAPE_CHARS,
    REGEX_ESCAPE_CHARS,
    SET_OPERATION_CHARS,
    Options,
    ResolvedSyntax,
)

logger = logging.getLogger(__name__)


class SplitError(RuntimeError):
    """segment splitting failed to make progress"""


class GroupKind(Enum):
    BRACE = "{"
    ZERO_OR_ONE = "?"
    EXACTLY_ONE = "@"
    ZERO_OR_MORE = "*"
    ONE_OR_MORE = "+"
    NEGATE = "!"


EXTGLOB_PREFIXES = "?@*+!"


class Segment(NamedTuple):
    text: str
    followed_by_separator: bool


@dataclass
class TranslationState:
    group_stack: List[GroupKind] = field(default_factory=list)
    in_bracket: bool = False
    in_escape: bool = False
    ends_with_separator: bool = False

    @property
    def in_extglob(self) -> bool:
        return bool(self.group_stack) and self.group_stack[-1] is not GroupKind.BRACE

    @property
    def in_brace(self) -> bool:
        return bool(self.group_stack) and self.group_stack[-1] is GroupKind.BRACE

    @property
    def unterminated(self) -> bool:
        return bool(self.group_stack) or self.in_bracket or self.in_escape


def trim_separators(glob: str, separators: Iterable[str]) -> str:
    """remove trailing separators, keeping at least one character"""

    end = len(glob)
    while end > 1 and glob[end - 1] in separators:
        end -= 1
    return glob[:end]


def split_segments(glob: str, separators: Iterable[str]) -> Iterator[Segment]:
    """split glob into segments

    Runs of separators are skipped as a block. A leading separator yields an
    empty first segment.
    """

    length = len(glob)
    start = 0
    while start < length:
        end = start
        while end < length and glob[end] not in separators:
            end += 1

        next_start = end
        while next_start < length and glob[next_start] in separators:
            next_start += 1

        if next_start <= start:
            raise SplitError(f"no progress splitting {glob!r} at index {start}")

        yield Segment(glob[start:end], end < length)
        start = next_start


def escape_char(char: str) -> str:
    return f"\\{char}" if char in REGEX_ESCAPE_CHARS else char


def escape_range_char(char: str) -> str:
    if char in RANGE_ESCAPE_CHARS or char in SET_OPERATION_CHARS:
        return f"\\{char}"
    return char


def escape_literal(text: str) -> str:
    """match every character of text literally"""
    return "".join(escape_char(char) for char in text)


def _translate_structured(
    text: str, options: Options, syntax: ResolvedSyntax
) -> Tuple[str, TranslationState]:
    state = TranslationState()
    fragment = []
    length = len(text)
    offset = 0

    while offset < length:
        char = text[offset]
        offset += 1
        lookahead = text[offset] if offset < length else None

        if state.in_escape:
            state.in_escape = False
            if state.in_bracket:
                fragment.append(escape_range_char(char))
            else:
                fragment.append(escape_char(char))
            continue

        if char == syntax.escape_prefix:
            state.in_escape = True
            continue

        if char == "[":
            if not state.in_bracket:
                state.in_bracket = True
                fragment.append("[")
                if lookahead == "!":
                    offset += 1
                    fragment.append("^")
                elif lookahead == "^":
                    # a caret is taken literally, only `!` negates
                    offset += 1
                    fragment.append(r"\^")
                continue

            if lookahead == ":":
                name_end = text.find(":", offset + 1)
                if name_end != -1 and text[name_end + 1 : name_end + 2] == "]":
                    name = text[offset + 1 : name_end]
                    if name in POSIX_CLASSES:
                        fragment.append(POSIX_CLASSES[name])
                        offset = name_end + 2
                        continue

        if char == "]" and state.in_bracket:
            state.in_bracket = False
            fragment.append("]")
            continue

        if state.in_bracket:
            if char == "\\":
                fragment.append(r"\\")
            elif char in SET_OPERATION_CHARS or (char == "-" and fragment[-1] == "-"):
                fragment.append(f"\\{char}")
            else:
                fragment.append(char)
            continue

        if char == ")" and state.in_extglob:
            kind = state.group_stack.pop()
            fragment.append(")")
            if kind is GroupKind.NEGATE:
                # over-matches unless the group ends the segment
                fragment.append(syntax.wildcard)
            elif kind is not GroupKind.EXACTLY_ONE:
                fragment.append(kind.value)
            continue

        if char == "|" and state.in_extglob:
            fragment.append("|")
            continue

        if options.extended and lookahead == "(" and char in EXTGLOB_PREFIXES:
            offset += 1
            state.group_stack.append(GroupKind(char))
            fragment.append("(?!" if char == "!" else "(?:")
            continue

        if char == "?":
            fragment.append(syntax.any_char)
            continue

        if char == "{":
            state.group_stack.append(GroupKind.BRACE)
            fragment.append("(?:")
            continue

        if char == "}" and state.in_brace:
            state.group_stack.pop()
            fragment.append(")")
            continue

        if char == "," and state.in_brace:
            fragment.append("|")
            continue

        if char == "*":
            star_start = offset - 1
            while offset < length and text[offset] == "*":
                offset += 1

            stars = offset - star_start
            if options.globstar and stars == 2 and star_start == 0 and offset == length:
                fragment.append(syntax.globstar)
                state.ends_with_separator = True
            else:
                fragment.append(syntax.wildcard)
            continue

        fragment.append(escape_char(char))

    return "".join(fragment), state


def _is_valid(fragment: str) -> bool:
    try:
        re.compile(fragment)
    except (re.error, RecursionError):
        return False
    return True


def translate_segment(
    text: str, options: Options, syntax: ResolvedSyntax
) -> Tuple[str, bool]:
    """translate one segment

    Returns the pattern fragment and whether it already ends with a
    separator (a globstar).
    """

    fragment, state = _translate_structured(text, options, syntax)
    if not state.unterminated and _is_valid(fragment):
        return fragment, state.ends_with_separator

    logger.debug("taking segment %r literally", text)
    return escape_literal(text), False
