# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Non-logical entries kept only to reproduce the original text.

Blank lines and comments sit in a container's entry list next to the
nodes, but they are skipped by every key lookup.
"""

from __future__ import annotations

from dataclasses import dataclass

from .indent import Indent

COMMENT_MARK = '#'


@dataclass
class BlankLine:
    """An empty or whitespace-only line, stored verbatim."""

    text: str = ''

    def render(self) -> str:
        return self.text


@dataclass
class CommentLine:
    """A comment line.

    Attributes:
        indent: Leading whitespace of the line.
        text: Everything after the '#' mark, untouched.
    """

    indent: Indent
    text: str

    def render(self) -> str:
        return f"{self.indent}{COMMENT_MARK}{self.text}"
