# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating a Confindent document from text.

Example:
    >>> from genro_confindent.parsers import parse_confindent, parse_confindent_file
    >>> conf = parse_confindent_file('example.conf')
    >>> conf.get('Host/Username')
"""

from .assembler import TreeAssembler, parse_confindent, parse_confindent_file, split_lines
from .tokenizer import is_blank, split_indent, split_key_value, tokenize_line

__all__ = [
    'TreeAssembler',
    'parse_confindent',
    'parse_confindent_file',
    'split_lines',
    'is_blank',
    'split_indent',
    'split_key_value',
    'tokenize_line',
]
