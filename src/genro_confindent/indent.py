# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Indentation tokens.

An indentation token describes the leading whitespace of one line: its
style (none, tabs or spaces) and how many characters of that style it
holds. Depth is never absolute; the assembler only compares tokens
against each other.

Example:
    >>> parse_indent('\\t\\t')
    Indent.tabs(2)
    >>> str(Indent.spaces(4))
    '    '
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .exceptions import MixedIndentError, SpacesWithTabsError, TabsWithSpacesError

TAB = '\t'
SPACE = ' '


class IndentStyle(Enum):
    """Whitespace style of an indentation token."""

    NONE = ''
    TABS = TAB
    SPACES = SPACE


@dataclass(frozen=True)
class Indent:
    """An immutable indentation token.

    Attributes:
        style: The IndentStyle of the run.
        count: Number of characters in the run (0 only for NONE).
    """

    style: IndentStyle
    count: int = 0

    NONE: ClassVar[Indent]

    def __post_init__(self) -> None:
        if self.style is IndentStyle.NONE:
            if self.count != 0:
                raise ValueError("Indent NONE cannot have a count")
        elif self.count < 1:
            raise ValueError(f"Indent {self.style.name} needs a positive count")

    @classmethod
    def tabs(cls, count: int) -> Indent:
        return cls(IndentStyle.TABS, count)

    @classmethod
    def spaces(cls, count: int) -> Indent:
        return cls(IndentStyle.SPACES, count)

    def __repr__(self) -> str:
        if self.style is IndentStyle.NONE:
            return 'Indent.NONE'
        return f"Indent.{self.style.name.lower()}({self.count})"

    def __str__(self) -> str:
        return self.style.value * self.count

    def __add__(self, other: int) -> Indent:
        """Deepen by ``other`` characters of the same style.

        NONE deepens to tabs.
        """
        if not isinstance(other, int):
            return NotImplemented
        if other == 0:
            return self
        if self.style is IndentStyle.NONE:
            return Indent.tabs(other)
        return Indent(self.style, self.count + other)

    @property
    def is_empty(self) -> bool:
        """True for the NONE token (no leading whitespace)."""
        return self.style is IndentStyle.NONE

    def same_style(self, other: Indent) -> bool:
        return self.style is other.style

    def check_style(self, context: Indent) -> None:
        """Ensure this token may live in a block indented by ``context``.

        A NONE context accepts anything.

        Raises:
            TabsWithSpacesError: self is tabs, context is spaces.
            SpacesWithTabsError: self is spaces, context is tabs.
        """
        if context.is_empty or self.is_empty or self.same_style(context):
            return
        if self.style is IndentStyle.TABS:
            raise TabsWithSpacesError()
        raise SpacesWithTabsError()


Indent.NONE = Indent(IndentStyle.NONE)


def parse_indent(prefix: str) -> Indent:
    """Classify a whitespace-only prefix.

    Args:
        prefix: Leading whitespace of a line, made only of tabs and spaces.

    Returns:
        Indent.NONE for an empty prefix, otherwise tabs(n) or spaces(n).

    Raises:
        MixedIndentError: The prefix mixes tabs and spaces.
        ValueError: The prefix holds anything but tabs and spaces. This is
            a caller bug, not malformed input.
    """
    if not prefix:
        return Indent.NONE
    if prefix.strip(TAB + SPACE):
        raise ValueError(f"Indent prefix must hold only tabs and spaces: {prefix!r}")

    first = prefix[0]
    if prefix.count(first) != len(prefix):
        raise MixedIndentError()
    if first == TAB:
        return Indent.tabs(len(prefix))
    return Indent.spaces(len(prefix))
