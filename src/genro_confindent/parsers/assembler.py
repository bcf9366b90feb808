# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tree assembler - builds a Confindent document from text.

Lines are consumed in file order. The assembler keeps the path of open
nodes: the last top-level node, its last child node, that node's last
child node and so on down to the most recently attached node. A new
indented line is placed by walking that path from the top:

- an open node with no child nodes yet takes the line as its first child;
- a node whose last child has exactly the line's indent takes the line as
  another child (a sibling of that last child);
- a last child indented with the other style is an error;
- a last child indented deeper than the line means the line dedents to a
  depth no open level uses, which is an error;
- otherwise the line is deeper still and the walk moves down one level.

Unindented lines always start a new top-level node. Blank lines and
comments never move the path: they are appended under the deepest open
node so that serialization puts them back where they were.

Example:
    >>> conf = parse_confindent('A 1\\n\\tB 2\\n\\t\\tC 3')
    >>> conf.get('A/B/C')
    '3'
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..entries import BlankLine, CommentLine
from ..exceptions import (
    ParseError,
    StartedIndentedError,
    UnmatchedDedentError,
)
from ..node import ConfNode
from .tokenizer import Token, tokenize_line

if TYPE_CHECKING:
    from ..document import Confindent

logger = logging.getLogger(__name__)

NEWLINE = '\n'
CARRIAGE_RETURN = '\r'


def split_lines(text: str) -> list[str]:
    """Split text on newlines, dropping one trailing '\\r' per line.

    A final newline ends the last line; it does not open an empty one.
    """
    if not text:
        return []
    lines = text.split(NEWLINE)
    if text.endswith(NEWLINE):
        lines.pop()
    return [line[:-1] if line.endswith(CARRIAGE_RETURN) else line for line in lines]


class TreeAssembler:
    """Incrementally attaches tokenized lines to a document.

    Attributes:
        document: The Confindent being filled.
    """

    def __init__(self, document: Confindent) -> None:
        self.document = document
        self._path: list[ConfNode] = []

    @property
    def open_path(self) -> list[ConfNode]:
        """Open nodes from the last top-level node down to the deepest."""
        return list(self._path)

    def push(self, token: Token) -> None:
        """Attach one token.

        Raises:
            StartedIndentedError: An indented node arrives before any
                top-level node.
            TabsWithSpacesError: A tab-indented node sits in a space block.
            SpacesWithTabsError: A space-indented node sits in a tab block.
            UnmatchedDedentError: A node dedents to no open level.
        """
        if isinstance(token, (BlankLine, CommentLine)):
            self._push_last(token)
        else:
            self._push_node(token)

    def _push_last(self, entry: BlankLine | CommentLine) -> None:
        # deepest open position
        if self._path:
            self._path[-1].append_entry(entry)
        else:
            self.document.append_entry(entry)

    def _push_node(self, node: ConfNode) -> None:
        indent = node.indent
        if indent.is_empty:
            self.document.append_entry(node)
            self._path = [node]
            return
        if not self._path:
            raise StartedIndentedError()

        for depth, parent in enumerate(self._path):
            if depth + 1 == len(self._path):
                # parent has no child nodes yet
                parent.append_entry(node)
                self._path.append(node)
                return

            last = self._path[depth + 1]
            indent.check_style(last.indent)
            if indent.count == last.indent.count:
                parent.append_entry(node)
                del self._path[depth + 1:]
                self._path.append(node)
                return
            if indent.count < last.indent.count:
                raise UnmatchedDedentError()

    def feed(self, text: str) -> Confindent:
        """Parse a whole text into the document and return it.

        Raises:
            ParseError: On the first invalid line, with ``line`` set to
                its 1-based number. Nothing is recovered.
        """
        lines = split_lines(text)
        for number, line in enumerate(lines, start=1):
            try:
                self.push(tokenize_line(line))
            except ParseError as exc:
                exc.line = number
                logger.debug("Parse failed at line %d: %s", number, exc)
                raise
        logger.debug(
            "Parsed %d lines into %d top-level nodes", len(lines), len(self.document)
        )
        return self.document


def parse_confindent(text: str) -> Confindent:
    """Parse Confindent text into a new document.

    Args:
        text: The whole configuration text.

    Returns:
        Confindent document.

    Raises:
        ParseError: The text is malformed.
    """
    from ..document import Confindent
    return TreeAssembler(Confindent()).feed(text)


def parse_confindent_file(filepath: str | Path, encoding: str = 'utf-8') -> Confindent:
    """Read and parse a Confindent file.

    Raises:
        OSError: The file cannot be read.
        ParseError: The file content is malformed.
    """
    from ..document import Confindent
    return Confindent.from_file(filepath, encoding=encoding)
