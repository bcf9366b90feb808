# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for indentation, line tokenizing, tree assembly and serialization."""

import io

import pytest

from genro_confindent import (
    BlankLine,
    CommentLine,
    ConfNode,
    Confindent,
    Indent,
    IndentStyle,
    MixedIndentError,
    ParseError,
    ParseErrorKind,
    SpacesWithTabsError,
    StartedIndentedError,
    TabsWithSpacesError,
    UnmatchedDedentError,
    dump,
    dumps,
    parse_confindent,
    parse_confindent_file,
    parse_indent,
)
from genro_confindent.parsers import (
    TreeAssembler,
    is_blank,
    split_indent,
    split_key_value,
    split_lines,
    tokenize_line,
)


class TestIndent:
    """Tests for Indent tokens and parse_indent."""

    def test_empty_prefix_is_none(self):
        """Test empty prefix classifies as NONE."""
        assert parse_indent('') is Indent.NONE
        assert Indent.NONE.is_empty

    def test_tabs(self):
        """Test tab runs."""
        assert parse_indent('\t') == Indent.tabs(1)
        assert parse_indent('\t\t\t') == Indent.tabs(3)

    def test_spaces(self):
        """Test space runs."""
        assert parse_indent(' ') == Indent.spaces(1)
        assert parse_indent('    ') == Indent(IndentStyle.SPACES, 4)

    def test_mixed_raises(self):
        """Test a run mixing tabs and spaces."""
        with pytest.raises(MixedIndentError):
            parse_indent('\t ')
        with pytest.raises(MixedIndentError):
            parse_indent('  \t')

    def test_non_whitespace_is_programming_error(self):
        """Test non-whitespace input raises ValueError, not ParseError."""
        with pytest.raises(ValueError) as excinfo:
            parse_indent(' a')
        assert not isinstance(excinfo.value, ParseError)

    def test_str_renders_whitespace(self):
        """Test str() gives back the original run."""
        assert str(Indent.NONE) == ''
        assert str(Indent.tabs(2)) == '\t\t'
        assert str(Indent.spaces(3)) == '   '

    def test_repr(self):
        """Test repr of tokens."""
        assert repr(Indent.NONE) == 'Indent.NONE'
        assert repr(Indent.tabs(2)) == 'Indent.tabs(2)'
        assert repr(Indent.spaces(4)) == 'Indent.spaces(4)'

    def test_equality_by_style_and_count(self):
        """Test equality needs the same style and count."""
        assert Indent.tabs(2) == Indent.tabs(2)
        assert Indent.tabs(2) != Indent.spaces(2)
        assert Indent.tabs(1) != Indent.tabs(2)

    def test_invalid_counts(self):
        """Test counts are validated."""
        with pytest.raises(ValueError):
            Indent.tabs(0)
        with pytest.raises(ValueError):
            Indent(IndentStyle.NONE, 2)

    def test_add_deepens(self):
        """Test adding characters keeps the style."""
        assert Indent.tabs(1) + 1 == Indent.tabs(2)
        assert Indent.spaces(2) + 2 == Indent.spaces(4)
        assert Indent.NONE + 1 == Indent.tabs(1)
        assert Indent.spaces(2) + 0 == Indent.spaces(2)

    def test_check_style(self):
        """Test style conflicts name the offending side."""
        Indent.tabs(2).check_style(Indent.tabs(1))
        Indent.spaces(2).check_style(Indent.NONE)
        with pytest.raises(TabsWithSpacesError):
            Indent.tabs(1).check_style(Indent.spaces(2))
        with pytest.raises(SpacesWithTabsError):
            Indent.spaces(2).check_style(Indent.tabs(1))


class TestTokenizer:
    """Tests for the line tokenizer."""

    def test_is_blank(self):
        """Test blank detection."""
        assert is_blank('')
        assert is_blank('  \t ')
        assert not is_blank('  a')

    def test_split_indent(self):
        """Test splitting the leading run off."""
        assert split_indent('\t\tKey Value') == (Indent.tabs(2), 'Key Value')
        assert split_indent('Key') == (Indent.NONE, 'Key')

    def test_split_indent_mixed(self):
        """Test mixed leading run raises."""
        with pytest.raises(MixedIndentError):
            split_indent(' \tKey Value')

    def test_split_key_value(self):
        """Test key/value split at the first space only."""
        assert split_key_value('Key Value') == ('Key', 'Value')
        assert split_key_value('Key') == ('Key', None)
        assert split_key_value('Key ') == ('Key', None)
        assert split_key_value('Key a b  c') == ('Key', 'a b  c')
        assert split_key_value('Key\tValue') == ('Key\tValue', None)

    def test_blank_keeps_text(self):
        """Test blank lines keep their exact text."""
        assert tokenize_line('\t  ') == BlankLine('\t  ')
        assert tokenize_line('') == BlankLine('')

    def test_comment(self):
        """Test comment lines keep indent and text."""
        token = tokenize_line('\t# a comment')
        assert token == CommentLine(Indent.tabs(1), ' a comment')

    def test_comment_with_mixed_indent_raises(self):
        """Test indentation is classified before comment detection."""
        with pytest.raises(MixedIndentError):
            tokenize_line(' \t# comment')

    def test_node(self):
        """Test key/value lines become childless nodes."""
        token = tokenize_line('  Port 22')
        assert isinstance(token, ConfNode)
        assert token.key == 'Port'
        assert token.value == '22'
        assert token.indent == Indent.spaces(2)
        assert token.entries == []

    def test_hash_inside_value_is_not_comment(self):
        """Test '#' only marks a comment at the start of the text."""
        token = tokenize_line('Color #ff0000')
        assert isinstance(token, ConfNode)
        assert token.value == '#ff0000'


class TestSplitLines:
    """Tests for split_lines."""

    def test_trailing_newline_opens_no_line(self):
        """Test a final newline ends the last line."""
        assert split_lines('A\nB\n') == ['A', 'B']
        assert split_lines('A\nB') == ['A', 'B']

    def test_empty_text(self):
        """Test empty text has no lines."""
        assert split_lines('') == []

    def test_blank_lines_kept(self):
        """Test inner and trailing blank lines survive."""
        assert split_lines('A\n\n') == ['A', '']
        assert split_lines('\n') == ['']

    def test_carriage_return_dropped(self):
        """Test CRLF endings."""
        assert split_lines('A 1\r\n\tB 2\r\n') == ['A 1', '\tB 2']


class TestAssembler:
    """Tests for tree assembly."""

    def test_single(self):
        """Test a single top-level node."""
        conf = parse_confindent('Key Value')
        assert conf.nodes() == [ConfNode('Key', 'Value')]

    def test_depth(self):
        """Test each deeper line nests under the previous one."""
        conf = parse_confindent('A 1\n\tB 2\n\t\tC 3')
        assert conf.keys() == ['A']
        a = conf.child('A')
        assert a.value == '1'
        assert a.keys() == ['B']
        b = a.child('B')
        assert b.value == '2'
        assert b.indent == Indent.tabs(1)
        assert b.keys() == ['C']
        c = b.child('C')
        assert c.value == '3'
        assert c.indent == Indent.tabs(2)
        assert len(c) == 0

    def test_siblings(self):
        """Test equal indentation makes siblings in order."""
        conf = parse_confindent('A 1\n\tB 2\n\tC 3')
        a = conf.child('A')
        assert a.keys() == ['B', 'C']
        assert a.child('B').nodes() == []

    def test_dedent_to_root(self):
        """Test an unindented line returns to the top level."""
        conf = parse_confindent('A 1\n\tB 2\nC 3')
        assert conf.keys() == ['A', 'C']
        assert conf.child('A').keys() == ['B']
        assert conf.child('C').nodes() == []

    def test_dedent_to_middle_level(self):
        """Test dedenting to an intermediate open level."""
        conf = parse_confindent('A\n  B\n    C\n      D\n    E\n  F\n')
        a = conf.child('A')
        assert a.keys() == ['B', 'F']
        assert a.child('B').keys() == ['C', 'E']
        assert a.child('B').child('C').keys() == ['D']

    def test_irregular_depths_are_relative(self):
        """Test depth is relative, not a fixed tab width."""
        conf = parse_confindent('A\n\t\t\tB\n\t\t\t\tC\n\t\t\tD\n')
        a = conf.child('A')
        assert a.keys() == ['B', 'D']
        assert a.child('B').keys() == ['C']

    def test_spaces_document(self):
        """Test a space-indented document."""
        conf = parse_confindent('Host x\n    User y\n    Port 22\n')
        assert conf.child('Host').keys() == ['User', 'Port']

    def test_independent_subtrees_may_differ_in_style(self):
        """Test each top-level subtree picks its own style."""
        conf = parse_confindent('A\n\tB\nC\n  D\n')
        assert conf.child('A').child('B').indent == Indent.tabs(1)
        assert conf.child('C').child('D').indent == Indent.spaces(2)

    def test_key_without_value(self):
        """Test a bare key has no value."""
        conf = parse_confindent('A')
        node = conf.child('A')
        assert node.key == 'A'
        assert node.value is None
        assert str(conf) == 'A\n'

    def test_duplicate_keys_preserved(self):
        """Test duplicate keys stay distinct and ordered."""
        conf = parse_confindent('A 1\nA 2')
        assert len(conf) == 2
        assert [node.value for node in conf.children('A')] == ['1', '2']
        assert conf.child('A').value == '1'

    def test_blank_and_comment_attach_deepest(self):
        """Test blanks and comments go under the deepest open node."""
        conf = parse_confindent('A\n\tB\n\n# note\nC\n')
        b = conf.child('A').child('B')
        assert b.entries == [BlankLine(''), CommentLine(Indent.NONE, ' note')]
        assert conf.keys() == ['A', 'C']

    def test_leading_comments_and_blanks_at_top(self):
        """Test comments before any node sit at top level."""
        conf = parse_confindent('\t# indented comment\n\nA 1\n')
        entries = conf.entries
        assert entries[0] == CommentLine(Indent.tabs(1), ' indented comment')
        assert entries[1] == BlankLine('')
        assert conf.keys() == ['A']

    def test_comments_do_not_change_depth(self):
        """Test a deeply indented comment leaves nesting alone."""
        conf = parse_confindent('A\n\tB\n\t\t\t# deep\n\tC\n')
        assert conf.child('A').keys() == ['B', 'C']

    def test_comments_are_not_nodes(self):
        """Test lookups skip comments and blanks."""
        conf = parse_confindent('A\n\t# B\n\n\tC\n')
        a = conf.child('A')
        assert a.keys() == ['C']
        assert a.child('#') is None
        assert len(a.entries) == 3

    def test_empty_document(self):
        """Test empty text parses to an empty document."""
        conf = parse_confindent('')
        assert len(conf) == 0
        assert conf.entries == []

    def test_open_path(self):
        """Test the open path follows the last attached node."""
        document = Confindent()
        assembler = TreeAssembler(document)
        for line in ['A', '\tB', '\t\tC', '\tD']:
            assembler.push(tokenize_line(line))
        assert [node.key for node in assembler.open_path] == ['A', 'D']
        assembler.push(tokenize_line('E'))
        assert [node.key for node in assembler.open_path] == ['E']


class TestAssemblerErrors:
    """Tests for parse failures."""

    def test_started_indented(self):
        """Test an indented first line."""
        with pytest.raises(StartedIndentedError) as excinfo:
            parse_confindent('\tA 1')
        assert excinfo.value.line == 1
        assert excinfo.value.kind is ParseErrorKind.STARTED_INDENTED

    def test_started_indented_after_comment(self):
        """Test comments and blanks do not count as the first node."""
        with pytest.raises(StartedIndentedError) as excinfo:
            parse_confindent('# header\n\n  A 1\n')
        assert excinfo.value.line == 3

    def test_mixed_indent(self):
        """Test a mixed run reports its line."""
        with pytest.raises(MixedIndentError) as excinfo:
            parse_confindent('A 1\n \tB 2')
        assert excinfo.value.line == 2
        assert excinfo.value.kind is ParseErrorKind.MIXED_INDENT

    def test_spaces_with_tabs_sibling(self):
        """Test spaces where a tab-indented sibling level exists."""
        with pytest.raises(SpacesWithTabsError) as excinfo:
            parse_confindent('A 1\n\tB 2\n  C 3')
        assert excinfo.value.line == 3

    def test_tabs_with_spaces_sibling(self):
        """Test tabs where a space-indented sibling level exists."""
        with pytest.raises(TabsWithSpacesError) as excinfo:
            parse_confindent('A 1\n  B 2\n\tC 3')
        assert excinfo.value.line == 3
        assert excinfo.value.kind is ParseErrorKind.TABS_WITH_SPACES

    def test_tabs_below_space_child(self):
        """Test a deeper tab line below a space-indented child."""
        with pytest.raises(TabsWithSpacesError) as excinfo:
            parse_confindent('A\n  B\n\t\t\tC\n')
        assert excinfo.value.line == 3

    def test_spaces_under_tab_parent(self):
        """Test a space child below a tab parent."""
        with pytest.raises(SpacesWithTabsError) as excinfo:
            parse_confindent('A\n\tB\n\t\tC\n      D\n')
        assert excinfo.value.line == 4

    def test_unmatched_dedent(self):
        """Test a dedent between two open levels."""
        with pytest.raises(UnmatchedDedentError) as excinfo:
            parse_confindent('A\n    B\n  C\n')
        assert excinfo.value.line == 3
        assert excinfo.value.kind is ParseErrorKind.UNMATCHED_DEDENT

    def test_error_message_has_line(self):
        """Test the message names the line."""
        with pytest.raises(ParseError, match='line 2'):
            parse_confindent('A 1\n \tB 2')

    def test_first_error_wins(self):
        """Test the parse stops at the first bad line."""
        with pytest.raises(MixedIndentError) as excinfo:
            parse_confindent('A\n \tB\n\tC\n  D\n')
        assert excinfo.value.line == 2

    def test_constructor_raises(self):
        """Test Confindent(text) propagates parse errors."""
        with pytest.raises(StartedIndentedError):
            Confindent('  A')


ROUNDTRIP = """# Top of the file!
Root value
\tKey v
\t
\t# Comment
\tKey otherV
\t\tChildKey nested again!
\t
# Comment
MoreRoot value
"""


class TestSerializer:
    """Tests for serialization."""

    def test_roundtrip(self):
        """Test parse then serialize gives the exact text."""
        assert str(parse_confindent(ROUNDTRIP)) == ROUNDTRIP

    def test_roundtrip_spaces_and_whitespace_blanks(self):
        """Test space indents and whitespace-only blanks come back."""
        text = 'A 1\n   \n  B two words\n    C\n  #c\n\n  D  x\nE\n'
        assert dumps(parse_confindent(text)) == text

    def test_roundtrip_structure(self):
        """Test reparsing serialized output gives an equal document."""
        conf = parse_confindent(ROUNDTRIP)
        assert parse_confindent(str(conf)) == conf

    def test_missing_final_newline_is_added(self):
        """Test every emitted line ends with a newline."""
        assert str(parse_confindent('A 1\n\tB 2')) == 'A 1\n\tB 2\n'

    def test_value_separated_by_one_space(self):
        """Test node lines render with a single separator."""
        assert ConfNode('A', 'x y', Indent.spaces(2)).render() == '  A x y'
        assert ConfNode('A').render() == 'A'

    def test_comment_render(self):
        """Test comments render as indent, mark, text."""
        assert CommentLine(Indent.tabs(2), ' hi').render() == '\t\t# hi'

    def test_dumps_node_includes_own_line(self):
        """Test serializing a single node."""
        conf = parse_confindent('A 1\n\tB 2\n\t\tC\nD\n')
        assert dumps(conf.child('A')) == 'A 1\n\tB 2\n\t\tC\n'

    def test_dump_to_stream(self):
        """Test writing to a text stream."""
        buffer = io.StringIO()
        dump(parse_confindent(ROUNDTRIP), buffer)
        assert buffer.getvalue() == ROUNDTRIP

    def test_deep_nesting(self):
        """Test serialization of a very deep tree."""
        text = ''.join('\t' * depth + f'K{depth}\n' for depth in range(1500))
        assert dumps(parse_confindent(text)) == text

    def test_empty_document(self):
        """Test an empty document serializes to nothing."""
        assert str(Confindent()) == ''


class TestFiles:
    """Tests for reading and writing files."""

    def test_parse_file(self, tmp_path):
        """Test parsing from a file path."""
        path = tmp_path / 'example.conf'
        path.write_text(ROUNDTRIP, encoding='utf-8')
        conf = parse_confindent_file(path)
        assert conf.get('MoreRoot') == 'value'
        second_key = conf.child('Root').children('Key')[1]
        assert second_key.child_value('ChildKey') == 'nested again!'

    def test_parse_missing_file_raises(self, tmp_path):
        """Test missing files raise OSError."""
        with pytest.raises(OSError):
            parse_confindent_file(tmp_path / 'missing.conf')
