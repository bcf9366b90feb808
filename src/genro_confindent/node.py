# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Confindent node class."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from .exceptions import NoValueError, ValueParseError
from .indent import Indent
from .parent import ConfParent

T = TypeVar('T')

LIST_SEPARATOR = ','


class ConfNode(ConfParent):
    """A configuration entry: one key, an optional value, ordered children.

    Each node has:
    - key: The text before the first space of its line
    - value: The text after that space, or None
    - indent: The indentation token of its line
    - entries: Child nodes, comments and blank lines, in file order

    Keys are not unique: several children may share one key.

    Example:
        >>> node = ConfNode('Host', 'example.net')
        >>> node.key
        'Host'
        >>> node.value
        'example.net'
    """

    __slots__ = ('key', 'value', 'indent', '_entries')

    def __init__(
        self,
        key: str,
        value: str | None = None,
        indent: Indent = Indent.NONE,
        entries: list[Any] | None = None,
    ) -> None:
        """Initialize a ConfNode.

        Args:
            key: The node's key.
            value: Optional scalar value.
            indent: Indentation token of the node's line.
            entries: Optional initial child entries.
        """
        self.key = key
        self.value = value
        self.indent = indent
        self._entries = list(entries) if entries else []

    def __repr__(self) -> str:
        return (
            f"ConfNode({self.key!r}, value={self.value!r}, "
            f"indent={self.indent!r}, children={len(self)})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfNode):
            return NotImplemented
        return (
            self.key == other.key
            and self.value == other.value
            and self.indent == other.indent
            and self._entries == other._entries
        )

    __hash__ = None  # type: ignore[assignment]

    def _default_child_indent(self) -> Indent:
        return self.indent + 1

    def set_value(self, value: str | None) -> ConfNode:
        """Set the value and return self for chaining."""
        self.value = value
        return self

    def parse(self, converter: Callable[[str], T]) -> T:
        """Convert this node's value with ``converter``.

        Raises:
            NoValueError: The node has no value.
            ValueParseError: The converter rejected the value.
        """
        if self.value is None:
            raise NoValueError(f"Key {self.key!r} has no value")
        try:
            return converter(self.value)
        except (TypeError, ValueError) as exc:
            raise ValueParseError(self.value, converter) from exc

    def value_list(
        self,
        converter: Callable[[str], T] = str,
        separator: str = LIST_SEPARATOR,
    ) -> list[T]:
        """Split the value on ``separator`` and convert each stripped item.

        Example:
            >>> ConfNode('Ports', '22, 80,443').value_list(int)
            [22, 80, 443]
        """
        if self.value is None:
            raise NoValueError(f"Key {self.key!r} has no value")
        result = []
        for item in self.value.split(separator):
            item = item.strip()
            try:
                result.append(converter(item))
            except (TypeError, ValueError) as exc:
                raise ValueParseError(item, converter) from exc
        return result

    def render(self) -> str:
        """Render this node's own line, without children or newline."""
        if self.value is None:
            return f"{self.indent}{self.key}"
        return f"{self.indent}{self.key} {self.value}"
