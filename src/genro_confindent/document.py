# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Confindent - an indentation-nested key/value configuration document.

Each line holds a key and an optional value, separated by the first space.
A line indented deeper than the one above is its child; lines indented the
same amount are siblings. Indentation is either tabs or spaces, never both.

Example:
    Reading::

        conf = Confindent.from_file('example.conf')
        host = conf.child('Host')
        print(host.value, host.child_value('Username'))

    Building::

        conf = Confindent()
        host = conf.create_child('Host', 'example.net')
        host.create_child('Username', 'gerald')
        conf.save('example.conf')

    Text::

        Host example.net
        	Username gerald
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any

from .parent import ConfParent
from .serializer import dump, dumps

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = 'utf-8'


class Confindent(ConfParent):
    """The root of a configuration tree.

    Behaves like a ConfNode with no key, value or indentation of its own:
    it only holds top-level entries.

    Example:
        >>> conf = Confindent('Pet Dog\\n\\tName Brady\\n\\tAge 10\\n')
        >>> conf.child('Pet').child_parse('Age', int)
        10
        >>> str(conf)
        'Pet Dog\\n\\tName Brady\\n\\tAge 10\\n'
    """

    __slots__ = ('_entries',)

    def __init__(self, source: str | None = None) -> None:
        """Initialize a Confindent.

        Args:
            source: Optional configuration text to parse.

        Raises:
            ParseError: ``source`` is malformed.
        """
        self._entries: list[Any] = []
        if source is not None:
            from .parsers import TreeAssembler
            TreeAssembler(self).feed(source)

    @classmethod
    def from_string(cls, text: str) -> Confindent:
        """Parse ``text`` into a new document."""
        return cls(text)

    @classmethod
    def from_file(
        cls, filepath: str | Path, encoding: str = DEFAULT_ENCODING
    ) -> Confindent:
        """Read and parse a configuration file.

        Newlines are not translated on read, so a file parses exactly
        like the same text passed as a string.

        Raises:
            OSError: The file cannot be read.
            ParseError: The file content is malformed.
        """
        filepath = Path(filepath)
        logger.debug("Reading configuration from %s", filepath)
        return cls(filepath.read_bytes().decode(encoding))

    def __repr__(self) -> str:
        return f"Confindent({self.keys()})"

    def __str__(self) -> str:
        return dumps(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Confindent):
            return NotImplemented
        return self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def dumps(self) -> str:
        """Serialize to text."""
        return dumps(self)

    def dump(self, fp: IO[str]) -> None:
        dump(self, fp)

    def save(self, filepath: str | Path, encoding: str = DEFAULT_ENCODING) -> None:
        """Write the serialized document to ``filepath``.

        Lines end with '\\n' on every platform.

        Raises:
            OSError: The file cannot be written.
        """
        filepath = Path(filepath)
        filepath.write_text(dumps(self), encoding=encoding, newline='')
        logger.debug("Saved configuration to %s", filepath)
