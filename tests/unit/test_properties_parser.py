"""
Unit tests for the properties parser.

Tests separators, comments, continuations and escape handling of the
`.properties` text format.
"""

import io
import pytest

from poweragent.config.properties import (
    PropertiesSyntaxError,
    parse_properties,
    load_properties
)


class TestSeparators:
    """Test cases for key/value separation."""

    def test_equals_separator(self):
        """Test key=value pairs."""
        assert parse_properties("a=1\nb=2") == {'a': '1', 'b': '2'}

    def test_colon_separator(self):
        """Test key:value pairs."""
        assert parse_properties("a:1") == {'a': '1'}

    def test_whitespace_around_separator(self):
        """Test whitespace surrounding the separator is dropped."""
        assert parse_properties("key  =  value") == {'key': 'value'}
        assert parse_properties("key\t:\tvalue") == {'key': 'value'}

    def test_whitespace_separator(self):
        """Test whitespace alone separates key and value."""
        assert parse_properties("key value") == {'key': 'value'}

    def test_second_separator_belongs_to_value(self):
        """Test only the first separator is consumed."""
        assert parse_properties("a = = b") == {'a': '= b'}
        assert parse_properties("url=http://host:80") == {'url': 'http://host:80'}

    def test_key_without_value(self):
        """Test a bare key yields an empty value."""
        assert parse_properties("flag") == {'flag': ''}
        assert parse_properties("flag=") == {'flag': ''}

    def test_trailing_whitespace_kept_in_value(self):
        """Test trailing whitespace is part of the value."""
        assert parse_properties("a=1  ") == {'a': '1  '}

    def test_leading_whitespace_ignored(self):
        """Test indentation before a key is ignored."""
        assert parse_properties("   a=1") == {'a': '1'}

    def test_duplicate_key_last_wins(self):
        """Test later definitions replace earlier ones."""
        assert parse_properties("a=1\na=2") == {'a': '2'}

    def test_line_endings(self):
        """Test LF, CR and CRLF line endings."""
        assert parse_properties("a=1\r\nb=2\rc=3\n") == {'a': '1', 'b': '2', 'c': '3'}


class TestCommentsAndBlankLines:
    """Test cases for ignored lines."""

    def test_empty_content(self):
        """Test empty content yields no properties."""
        assert parse_properties("") == {}

    def test_blank_lines_ignored(self):
        """Test blank and whitespace-only lines are skipped."""
        assert parse_properties("\n  \n\ta=1\n\n") == {'a': '1'}

    def test_hash_and_bang_comments(self):
        """Test both comment markers."""
        content = "# comment\n! another\n  # indented\na=1"
        assert parse_properties(content) == {'a': '1'}

    def test_hash_inside_value_is_kept(self):
        """Test comment markers only count at the start of a line."""
        assert parse_properties("a=1 # not a comment") == {'a': '1 # not a comment'}

    def test_comment_line_does_not_continue(self):
        """Test a trailing backslash on a comment line is ignored."""
        assert parse_properties("# comment \\\na=1") == {'a': '1'}


class TestContinuations:
    """Test cases for backslash line continuations."""

    def test_continuation_joins_value(self):
        """Test a trailing backslash joins the next line."""
        assert parse_properties("a=x,\\\ny,z") == {'a': 'x,y,z'}

    def test_continuation_strips_next_indent(self):
        """Test leading whitespace of continued lines is dropped."""
        assert parse_properties("a=one \\\n     two") == {'a': 'one two'}

    def test_multiple_continuations(self):
        """Test several continued lines."""
        assert parse_properties("a=1\\\n2\\\n3\nb=4") == {'a': '123', 'b': '4'}

    def test_escaped_backslash_does_not_continue(self):
        """Test an even number of trailing backslashes is literal."""
        assert parse_properties("a=c:\\\\\nb=2") == {'a': 'c:\\', 'b': '2'}

    def test_continuation_at_end_of_input(self):
        """Test a dangling continuation ends the value."""
        assert parse_properties("a=1\\") == {'a': '1'}

    def test_continuation_into_blank_line(self):
        """Test a blank continued line ends the logical line."""
        assert parse_properties("a=1\\\n\nb=2") == {'a': '1', 'b': '2'}

    def test_continued_line_starting_with_hash(self):
        """Test a continued line is never treated as a comment."""
        assert parse_properties("a=1\\\n#2") == {'a': '1#2'}


class TestEscapes:
    """Test cases for escape sequences."""

    def test_control_escapes(self):
        """Test \\n, \\r, \\t and \\f."""
        assert parse_properties("a=1\\n2\\r3\\t4\\f5") == {'a': '1\n2\r3\t4\f5'}

    def test_separator_escapes(self):
        """Test escaped separators and spaces are literal."""
        assert parse_properties("a\\=b=c\\:d") == {'a=b': 'c:d'}
        assert parse_properties("my\\ key=v") == {'my key': 'v'}

    def test_escaped_backslash(self):
        """Test \\\\ yields one backslash."""
        assert parse_properties("path=C:\\\\tools") == {'path': 'C:\\tools'}

    def test_unknown_escape_drops_backslash(self):
        """Test unknown escapes yield the character itself."""
        assert parse_properties("a=\\q\\ ") == {'a': 'q '}

    def test_unicode_escape(self):
        """Test \\uXXXX escapes."""
        assert parse_properties("a=caf\\u00e9") == {'a': 'café'}

    def test_unicode_surrogate_pair(self):
        """Test escaped surrogate pairs combine into one character."""
        assert parse_properties("a=\\uD83D\\uDE00") == {'a': '\U0001F600'}

    def test_lone_surrogate_kept(self):
        """Test an unpaired escaped surrogate is kept as is."""
        assert parse_properties("a=\\uD83D") == {'a': '\ud83d'}
        assert parse_properties("a=x\\uDE00y") == {'a': 'x\ude00y'}

    def test_malformed_unicode_escape(self):
        """Test malformed \\u escapes are rejected with a line number."""
        with pytest.raises(PropertiesSyntaxError, match="line 2: Malformed") as excinfo:
            parse_properties("a=1\nb=\\u12G4")
        assert excinfo.value.line_number == 2

    def test_truncated_unicode_escape(self):
        """Test \\u escapes shorter than four digits are rejected."""
        with pytest.raises(PropertiesSyntaxError):
            parse_properties("a=\\u12")


class TestLoadProperties:
    """Test cases for reading from streams."""

    def test_load_from_stream(self):
        """Test reading UTF-8 bytes."""
        stream = io.BytesIO("name=énergie\n".encode('utf-8'))
        assert load_properties(stream) == {'name': 'énergie'}

    def test_load_with_explicit_encoding(self):
        """Test reading Latin-1 bytes."""
        stream = io.BytesIO("name=énergie\n".encode('latin-1'))
        assert load_properties(stream, encoding='latin-1') == {'name': 'énergie'}

    def test_invalid_utf8_raises(self):
        """Test undecodable content raises UnicodeDecodeError."""
        with pytest.raises(UnicodeDecodeError):
            load_properties(io.BytesIO(b"a=\xff\xfe"))

    def test_byte_order_mark_skipped(self):
        """Test a leading UTF-8 BOM is not part of the first key."""
        stream = io.BytesIO(b"\xef\xbb\xbflogger-level=OFF\n")
        assert load_properties(stream) == {'logger-level': 'OFF'}
