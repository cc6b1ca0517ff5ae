"""
Parser for the flat key/value `.properties` text format.

The syntax is the classic `.properties` layout read from `config.properties`:
`key=value` or `key:value` pairs (or a bare whitespace separator), `#` and `!`
comment lines, backslash line continuations and backslash escapes including
`\\uXXXX`. Values are returned as plain strings; interpreting them is up to
the caller.
"""

import re
import string
import logging
from typing import BinaryIO, Dict, Iterator, Tuple


logger = logging.getLogger(__name__)

_NEWLINE = re.compile(r'\r\n|\r|\n')

# Whitespace recognised around keys and separators
_WHITESPACE = ' \t\f'
_SEPARATORS = '=:'
_COMMENT_MARKERS = '#!'

_ESCAPES = {
    't': '\t',
    'n': '\n',
    'r': '\r',
    'f': '\f',
}

_SURROGATE_PAIR = re.compile('[\ud800-\udbff][\udc00-\udfff]')


class PropertiesSyntaxError(ValueError):
    """Raised when properties content cannot be parsed."""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


def _join_surrogates(match) -> str:
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def _logical_lines(text: str) -> Iterator[Tuple[int, str]]:
    """
    Join natural lines into logical lines.

    Yields:
        Tuples of (line number where the logical line starts, logical line)
    """
    pending = None
    start = 0

    for number, raw in enumerate(_NEWLINE.split(text), start=1):
        line = raw.lstrip(_WHITESPACE)

        if pending is None:
            if not line or line[0] in _COMMENT_MARKERS:
                continue
            start = number
            current = line
        else:
            current = pending + line

        trailing = len(line) - len(line.rstrip('\\'))
        if trailing % 2 == 1:
            pending = current[:-1]
            continue

        pending = None
        yield start, current

    # Continuation on the last line of input
    if pending is not None:
        yield start, pending


def _split_pair(line: str) -> Tuple[str, str]:
    """Split a logical line into its raw (still escaped) key and value."""
    length = len(line)
    index = 0
    escaped = False

    while index < length:
        char = line[index]
        if escaped:
            escaped = False
        elif char == '\\':
            escaped = True
        elif char in _SEPARATORS or char in _WHITESPACE:
            break
        index += 1

    key = line[:index]

    has_separator = False
    if index < length and line[index] in _SEPARATORS:
        has_separator = True
        index += 1

    while index < length:
        char = line[index]
        if char in _WHITESPACE:
            index += 1
        elif not has_separator and char in _SEPARATORS:
            has_separator = True
            index += 1
        else:
            break

    return key, line[index:]


def _unescape(text: str, line_number: int) -> str:
    """Resolve backslash escapes in a key or value."""
    if '\\' not in text:
        return text

    chars = []
    index = 0
    length = len(text)

    while index < length:
        char = text[index]
        index += 1

        if char != '\\':
            chars.append(char)
            continue

        if index >= length:
            break

        char = text[index]
        index += 1

        if char == 'u':
            digits = text[index:index + 4]
            if len(digits) < 4 or any(d not in string.hexdigits for d in digits):
                raise PropertiesSyntaxError(f"Malformed \\uxxxx encoding: \\u{digits}", line_number)
            chars.append(chr(int(digits, 16)))
            index += 4
        else:
            chars.append(_ESCAPES.get(char, char))

    result = ''.join(chars)

    # Escaped surrogate pairs combine into one code point; lone halves are kept
    return _SURROGATE_PAIR.sub(_join_surrogates, result)


def parse_properties(text: str) -> Dict[str, str]:
    """
    Parse properties text into a dictionary.

    Args:
        text: Full properties file content

    Returns:
        Mapping of keys to values; later duplicates replace earlier ones

    Raises:
        PropertiesSyntaxError: If an escape sequence is malformed
    """
    properties = {}

    for line_number, line in _logical_lines(text):
        raw_key, raw_value = _split_pair(line)
        key = _unescape(raw_key, line_number)
        value = _unescape(raw_value, line_number)

        if key in properties:
            logger.debug(f"Property '{key}' redefined on line {line_number}")
        properties[key] = value

    return properties


def load_properties(stream: BinaryIO, encoding: str = 'utf-8') -> Dict[str, str]:
    """
    Read and parse properties from a binary stream.

    Args:
        stream: Open stream positioned at the start of the content
        encoding: Text encoding of the stream

    Returns:
        Parsed key/value mapping

    Raises:
        UnicodeDecodeError: If the content is not valid in the given encoding
        PropertiesSyntaxError: If the content cannot be parsed
    """
    text = stream.read().decode(encoding)
    return parse_properties(text[1:] if text.startswith('\ufeff') else text)
