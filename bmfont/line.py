'''Line module

This module splits one line of a BMFont text file into its header tag and
its `key=value` fields. It knows nothing about the meaning of the fields:
values stay raw text until the parser asks for a type.
'''
from collections import OrderedDict, namedtuple
import re

import numpy as np

from bmfont.exception import MalformedLine


Line = namedtuple('Line', ['header', 'fields'])

INTEGER = re.compile(r"-?[0-9]+")
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


class FieldValue():
    '''Raw text of a field with typed accessors

    Conversions are done on demand and raise `ValueError` when the text
    doesn't match the requested type.
    '''
    def __init__(self, text):
        self.text = text

    def __eq__(self, other):
        if isinstance(other, FieldValue):
            return self.text == other.text
        return self.text == other

    def __hash__(self):
        return hash(self.text)

    def __str__(self):
        return self.text

    def __repr__(self):
        return 'FieldValue[{!r}]'.format(self.text)

    def as_str(self):
        return self.text

    def as_int(self):
        '''Return the value as a decimal 32-bit integer (may be negative)'''
        return to_int(self.text)

    def as_bool(self):
        '''Return True if the integer value is not zero'''
        return self.as_int() != 0

    def as_int_array(self, separator=',', count=None):
        '''Split the value and convert each element to integer

        Args:
            separator (str): Element delimiter
            count (int): Exact number of elements expected, None to accept
                         any number

        Returns:
            numpy array of int32
        '''
        parts = self.text.split(separator)
        if count is not None and len(parts) != count:
            raise ValueError("expected {} values, got {}".format(
                count, len(parts)))

        return np.fromiter((to_int(x) for x in parts), dtype=np.int32,
                           count=len(parts))


def to_int(text):
    """Convert BMFont integer text

    Only ASCII digits with an optional leading minus are accepted, in the
    range of a signed 32-bit integer.

    Raises:
        ValueError: if the text is not a valid integer
    """
    text = text.strip()
    if not INTEGER.fullmatch(text):
        raise ValueError("invalid integer: {!r}".format(text))

    value = int(text, 10)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError("integer out of range: {}".format(text))

    return value


def decode_line(line):
    """Decode one BMFont line

    A blank line gives `Line(None, {})`, the caller must skip it.

    Args:
        line (str): Line without trailing newline

    Returns:
        Line(header, fields) where fields is an OrderedDict of FieldValue
    """
    stripped = line.strip()
    if not stripped:
        return Line(None, OrderedDict())

    values = stripped.split(None, 1)
    if len(values) < 2:
        raise MalformedLine("Line has no fields", header=values[0],
                            line=line)

    return Line(values[0], decode_fields(values[1]))


def decode_fields(pairs):
    """Split the body of a line into its `key=value` pairs

    Double quotes protect spaces and are removed from the value. A space
    outside quotes closes the current pair only once its `=` was found.

    Args:
        pairs (str): Line content after the header

    Returns:
        OrderedDict of FieldValue, in order of appearance
    """
    fields = OrderedDict()
    key = []
    value = []
    quotes = False
    reading_value = False

    for c in pairs:
        if c == '"':
            quotes = not quotes
        elif c.isspace() and not quotes:
            if reading_value:
                if key:
                    fields[''.join(key)] = FieldValue(''.join(value))
                key = []
                value = []
                reading_value = False
        elif c == '=' and not quotes and not reading_value:
            reading_value = True
        elif reading_value:
            value.append(c)
        else:
            key.append(c)

    if reading_value and key:
        fields[''.join(key)] = FieldValue(''.join(value))

    return fields
