# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Serializer - writes a document or node back to text.

Every entry renders to exactly one line terminated by a newline. A node's
children follow it directly, recursively, in stored order. Indentation is
written from each entry's own token, so a parsed document comes back
byte for byte.
"""

from __future__ import annotations

from typing import IO, Iterable, Iterator

from .node import ConfNode
from .parent import ConfParent

NEWLINE = '\n'


def iter_lines(entries: Iterable) -> Iterator[str]:
    """Yield the rendered lines of ``entries`` and their descendants.

    Lines are yielded without their newline. Uses an explicit stack, so
    nesting depth is not bound by the recursion limit.
    """
    stack: list[Iterator] = [iter(entries)]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        yield entry.render()
        if isinstance(entry, ConfNode):
            stack.append(entry.iter_entries())


def _container_lines(container: ConfParent) -> Iterator[str]:
    if isinstance(container, ConfNode):
        return iter_lines([container])
    return iter_lines(container.iter_entries())


def dumps(container: ConfParent) -> str:
    """Serialize the entries of a document or node to a string.

    For a ConfNode the node's own line comes first.

    Example:
        >>> dumps(parse_confindent('A 1\\n\\tB\\n'))
        'A 1\\n\\tB\\n'
    """
    lines = _container_lines(container)
    return ''.join(line + NEWLINE for line in lines)


def dump(container: ConfParent, fp: IO[str]) -> None:
    """Write the serialized text of ``container`` to a text stream."""
    for line in _container_lines(container):
        fp.write(line + NEWLINE)
