# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ConfParent - child-holding behaviour shared by documents and nodes.

The document root and every ConfNode own an ordered list of entries:
nodes, comments and blank lines. Lookups only ever see the nodes;
comments and blanks are kept so that serialization reproduces the
original text.

Example:
    >>> conf = Confindent('Host example.net\\n\\tPort 22\\n')
    >>> host = conf.child('Host')
    >>> host.value
    'example.net'
    >>> host.child_parse('Port', int)
    22
    >>> conf.get('Host/Port')
    '22'
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, TYPE_CHECKING, TypeVar

from .entries import BlankLine, CommentLine
from .exceptions import NoValueError
from .indent import Indent

if TYPE_CHECKING:
    from .node import ConfNode

Entry = Any
T = TypeVar('T')

PATH_DELIMITER = '/'


class ConfParent:
    """Mixin holding an ordered list of entries.

    Subclasses must set ``self._entries`` to a list.
    """

    __slots__ = ()

    _entries: list[Entry]

    # ==================== Special Methods ====================

    def __len__(self) -> int:
        """Return the number of direct child nodes."""
        return sum(1 for _ in self.iter_nodes())

    def __bool__(self) -> bool:
        """Always True, even when only comments or blanks are held."""
        return True

    def __iter__(self) -> Iterator[ConfNode]:
        """Iterate over direct child nodes in insertion order."""
        return self.iter_nodes()

    def __contains__(self, key: str) -> bool:
        return self.has_child(key)

    # ==================== Entries ====================

    @property
    def entries(self) -> list[Entry]:
        """All direct entries (nodes, comments, blanks) in order."""
        return list(self._entries)

    def iter_entries(self) -> Iterator[Entry]:
        yield from self._entries

    def append_entry(self, entry: Entry) -> Entry:
        """Append a node, comment or blank line and return it."""
        self._entries.append(entry)
        return entry

    def iter_nodes(self) -> Iterator[ConfNode]:
        """Yield direct child nodes, skipping comments and blanks."""
        from .node import ConfNode
        for entry in self._entries:
            if isinstance(entry, ConfNode):
                yield entry

    def nodes(self) -> list[ConfNode]:
        return list(self.iter_nodes())

    def keys(self) -> list[str]:
        """Return direct child keys in order, duplicates included."""
        return [node.key for node in self.iter_nodes()]

    def last_node(self) -> ConfNode | None:
        """Return the most recently appended child node, if any."""
        from .node import ConfNode
        for entry in reversed(self._entries):
            if isinstance(entry, ConfNode):
                return entry
        return None

    # ==================== Lookup ====================

    def child(self, key: str) -> ConfNode | None:
        """Return the first direct child node with ``key``, or None."""
        for node in self.iter_nodes():
            if node.key == key:
                return node
        return None

    def children(self, key: str) -> list[ConfNode]:
        """Return every direct child node with ``key``, in order."""
        return [node for node in self.iter_nodes() if node.key == key]

    def has_child(self, key: str) -> bool:
        return self.child(key) is not None

    def child_value(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the first child with ``key``.

        Args:
            key: Key to look for.
            default: Returned when there is no such child or it has no value.
        """
        node = self.child(key)
        if node is None or node.value is None:
            return default
        return node.value

    def child_parse(self, key: str, converter: Callable[[str], T]) -> T:
        """Convert the value of the first child with ``key``.

        Args:
            key: Key to look for.
            converter: Callable turning the value text into the wanted type,
                e.g. ``int`` or ``float``.

        Returns:
            The converted value.

        Raises:
            NoValueError: There is no such child, or it has no value.
            ValueParseError: The converter rejected the value.
        """
        node = self.child(key)
        if node is None:
            raise NoValueError(f"No child with key {key!r}")
        return node.parse(converter)

    def get_node(self, path: str, delimiter: str = PATH_DELIMITER) -> ConfNode | None:
        """Follow ``path`` through first-matching children.

        Args:
            path: Keys joined by ``delimiter``, e.g. 'Host/Port'.
            delimiter: Separator between keys.

        Returns:
            The node at the end of the path, or None if any key is missing.
        """
        current: ConfParent = self
        node = None
        for key in path.split(delimiter):
            node = current.child(key)
            if node is None:
                return None
            current = node
        return node

    def get(
        self,
        path: str,
        delimiter: str = PATH_DELIMITER,
        default: str | None = None,
    ) -> str | None:
        """Get the value at the end of a delimited key path.

        Example:
            >>> conf.get('Host/Port')
            '22'
            >>> conf.get('Host.Port', delimiter='.')
            '22'
        """
        node = self.get_node(path, delimiter)
        if node is None or node.value is None:
            return default
        return node.value

    # ==================== Walk ====================

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, ConfNode]]:
        """Yield ``(path, node)`` for every node below this one, depth first.

        Example:
            >>> for path, node in conf.walk():
            ...     print(path, node.value)
            Host example.net
            Host/Port 22
        """
        for node in self.iter_nodes():
            path = f"{_prefix}{PATH_DELIMITER}{node.key}" if _prefix else node.key
            yield path, node
            yield from node.walk(path)

    # ==================== Construction ====================

    def _default_child_indent(self) -> Indent:
        """Indent for a new child when no sibling node exists yet."""
        return Indent.NONE

    def _next_child_indent(self) -> Indent:
        last = self.last_node()
        if last is not None:
            return last.indent
        return self._default_child_indent()

    def create_child(
        self,
        key: str,
        value: str | None = None,
        indent: Indent | None = None,
    ) -> ConfNode:
        """Append a new child node and return it.

        Args:
            key: Key of the new node.
            value: Optional scalar value.
            indent: Explicit indentation. By default the new node lines up
                with the last child node, or sits one step deeper than
                this container when it has no child nodes yet.

        Example:
            >>> conf = Confindent()
            >>> host = conf.create_child('Host', 'example.net')
            >>> port = host.create_child('Port', '22')
            >>> str(conf)
            'Host example.net\\n\\tPort 22\\n'
        """
        from .node import ConfNode
        if indent is None:
            indent = self._next_child_indent()
        return self.append_entry(ConfNode(key, value, indent))

    def add_comment(self, text: str, indent: Indent | None = None) -> CommentLine:
        """Append a comment; ``text`` is what follows the '#' mark."""
        if indent is None:
            indent = self._next_child_indent()
        return self.append_entry(CommentLine(indent, text))

    def add_blank(self, text: str = '') -> BlankLine:
        return self.append_entry(BlankLine(text))
