# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Line tokenizer.

Turns one raw line (without its newline) into a BlankLine, a CommentLine
or a ConfNode with no children. Lines are independent of each other here:
where a line attaches is decided by the assembler.

Example:
    >>> tokenize_line('\\tPort 22')
    ConfNode('Port', value='22', indent=Indent.tabs(1), children=0)
    >>> tokenize_line('  # note')
    CommentLine(indent=Indent.spaces(2), text=' note')
"""

from __future__ import annotations

from ..entries import COMMENT_MARK, BlankLine, CommentLine
from ..indent import SPACE, TAB, Indent, parse_indent
from ..node import ConfNode

KEY_SEPARATOR = ' '

Token = BlankLine | CommentLine | ConfNode


def is_blank(line: str) -> bool:
    """True if the line is empty or holds only whitespace."""
    return not line.strip()


def split_indent(line: str) -> tuple[Indent, str]:
    """Split off the leading run of tabs and spaces and classify it.

    Returns:
        Tuple of (indent, remainder).

    Raises:
        MixedIndentError: The leading run mixes tabs and spaces.
    """
    remainder = line.lstrip(TAB + SPACE)
    prefix = line[:len(line) - len(remainder)]
    return parse_indent(prefix), remainder


def split_key_value(text: str) -> tuple[str, str | None]:
    """Split at the first space into key and value.

    The value is None when there is no space or nothing follows it.
    """
    key, sep, value = text.partition(KEY_SEPARATOR)
    if not sep or not value:
        return key, None
    return key, value


def tokenize_line(line: str) -> Token:
    """Tokenize one line.

    Args:
        line: A raw line without its trailing newline.

    Returns:
        BlankLine for empty/whitespace-only lines (text kept verbatim),
        CommentLine when the text after the indent starts with '#',
        otherwise a childless ConfNode.

    Raises:
        MixedIndentError: The indentation mixes tabs and spaces.
    """
    if is_blank(line):
        return BlankLine(line)

    indent, remainder = split_indent(line)
    if remainder.startswith(COMMENT_MARK):
        return CommentLine(indent, remainder[len(COMMENT_MARK):])

    key, value = split_key_value(remainder)
    return ConfNode(key, value, indent)
