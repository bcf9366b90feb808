# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Confindent - Indentation-nested key/value configuration files.

A lightweight, zero-dependency library that parses configuration text
into an ordered tree and writes it back byte for byte, comments and
blank lines included.
"""

__version__ = "0.1.0"

from .document import Confindent
from .entries import BlankLine, CommentLine
from .exceptions import (
    ConfindentError,
    MixedIndentError,
    NoValueError,
    ParseError,
    ParseErrorKind,
    SpacesWithTabsError,
    StartedIndentedError,
    TabsWithSpacesError,
    UnmatchedDedentError,
    ValueParseError,
)
from .indent import Indent, IndentStyle, parse_indent
from .node import ConfNode
from .parent import ConfParent
from .parsers import parse_confindent, parse_confindent_file
from .serializer import dump, dumps

__all__ = [
    # Core classes
    "Confindent",
    "ConfNode",
    "ConfParent",
    "BlankLine",
    "CommentLine",
    # Indentation
    "Indent",
    "IndentStyle",
    "parse_indent",
    # Parsing and serialization
    "parse_confindent",
    "parse_confindent_file",
    "dump",
    "dumps",
    # Exceptions
    "ConfindentError",
    "ParseError",
    "ParseErrorKind",
    "StartedIndentedError",
    "MixedIndentError",
    "TabsWithSpacesError",
    "SpacesWithTabsError",
    "UnmatchedDedentError",
    "NoValueError",
    "ValueParseError",
]
