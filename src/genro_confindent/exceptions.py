# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Confindent exceptions."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(Enum):
    """The kind of failure that aborted a parse."""

    STARTED_INDENTED = 'started_indented'
    MIXED_INDENT = 'mixed_indent'
    TABS_WITH_SPACES = 'tabs_with_spaces'
    SPACES_WITH_TABS = 'spaces_with_tabs'
    UNMATCHED_DEDENT = 'unmatched_dedent'


_MESSAGES = {
    ParseErrorKind.STARTED_INDENTED: "Cannot start document with an indented line",
    ParseErrorKind.MIXED_INDENT: "Indent mixed between tabs and spaces",
    ParseErrorKind.TABS_WITH_SPACES: "Tab indent in a space-indented block",
    ParseErrorKind.SPACES_WITH_TABS: "Space indent in a tab-indented block",
    ParseErrorKind.UNMATCHED_DEDENT: "Dedent does not match any outer indentation level",
}


class ConfindentError(Exception):
    """Base exception for Confindent errors."""

    pass


class ParseError(ConfindentError):
    """Raised when a document cannot be parsed.

    Attributes:
        line: 1-based number of the offending line, or None while the
            error has not yet been tied to a line.
        kind: The ParseErrorKind of this error.
    """

    kind: ParseErrorKind

    def __init__(self, line: int | None = None) -> None:
        self.line = line
        super().__init__(line)

    def __str__(self) -> str:
        message = _MESSAGES[self.kind]
        if self.line is None:
            return message
        return f"{message} (line {self.line})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(line={self.line!r})"


class StartedIndentedError(ParseError):
    """Raised when the first content line of a document is indented."""

    kind = ParseErrorKind.STARTED_INDENTED


class MixedIndentError(ParseError):
    """Raised when one indentation run mixes tabs and spaces."""

    kind = ParseErrorKind.MIXED_INDENT


class TabsWithSpacesError(ParseError):
    """Raised when a tab-indented line sits in a space-indented block."""

    kind = ParseErrorKind.TABS_WITH_SPACES


class SpacesWithTabsError(ParseError):
    """Raised when a space-indented line sits in a tab-indented block."""

    kind = ParseErrorKind.SPACES_WITH_TABS


class UnmatchedDedentError(ParseError):
    """Raised when a line dedents to a depth no open level uses."""

    kind = ParseErrorKind.UNMATCHED_DEDENT


class NoValueError(ConfindentError, LookupError):
    """Raised when a typed lookup finds no value to convert."""

    pass


class ValueParseError(ConfindentError, ValueError):
    """Raised when converting a value fails.

    The converter's own exception is chained as ``__cause__``.
    """

    def __init__(self, value: str, converter: object) -> None:
        self.value = value
        self.converter = converter
        name = getattr(converter, '__name__', repr(converter))
        super().__init__(f"Failed to parse configuration value {value!r} with {name}")
