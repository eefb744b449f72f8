# This file is part of Promptline.
# 
# Promptline is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
# 
# Promptline is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
# 
# You should have received a copy of the GNU General Public License
# along with Promptline.  If not, see <https://www.gnu.org/licenses/>.

import collections.abc

import promptline.exception
import promptline.style
from promptline.structish import Table

VALUE = 'value'
STYLE = 'style'
FIELDS = (VALUE, STYLE)


# ----------------------------------------------------------------------------------------------------------------------

# Decoding errors

class DecodeError(promptline.exception.ConfigError):

    def __init__(self, field, node, message):
        super().__init__(message)
        self.field = field
        self.node = node
        # Path of the node within the configuration, e.g. hostname.prefix. Filled in by
        # whoever knows where the node came from.
        self.location = None

    def __str__(self):
        return (f'{self.location}: {self.message}' if self.location else
                self.message)


class UnknownField(DecodeError):

    def __init__(self, field, node):
        super().__init__(field, node, f'Unknown field `{field}`, expected one of {_expected()}')


class DuplicateField(DecodeError):

    def __init__(self, field, node):
        super().__init__(field, node, f'Duplicate field `{field}`')


class MissingField(DecodeError):

    def __init__(self, field, node):
        super().__init__(field, node, f'Missing field `{field}`')


class InvalidShape(DecodeError):

    def __init__(self, node, message, field=None):
        super().__init__(field, node, message)


def _expected():
    return ', '.join(f'`{field}`' for field in FIELDS)


# ----------------------------------------------------------------------------------------------------------------------

# Segments

class Segment(object):
    """Text to display, and the Style to display it with.

    style is None if the segment should be displayed with whatever style surrounds it.
    """

    def __init__(self, text, style=None):
        assert type(text) is str, text
        self.__dict__['text'] = text
        self.__dict__['style'] = style

    def __repr__(self):
        return f'Segment({self.text!r}, {self.style})'

    def __setattr__(self, key, value):
        raise AttributeError('Segment is immutable')

    def __delattr__(self, key):
        raise AttributeError('Segment is immutable')

    def __eq__(self, other):
        return (isinstance(other, Segment) and
                self.text == other.text and
                self.style == other.style)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.text, self.style))


def _is_record(node):
    return isinstance(node, (Table, collections.abc.Mapping))


def _string_field(record, field, x):
    if type(x) is not str:
        raise InvalidShape(record, f'Field `{field}` must be a string, not {type(x).__name__}: {x!r}', field)
    return x


def _decode_record(record):
    fields = {}
    for field, x in record.items():
        if field not in FIELDS:
            raise UnknownField(field, record)
        if field in fields:
            raise DuplicateField(field, record)
        fields[field] = _string_field(record, field, x)
    for field in FIELDS:
        if field not in fields:
            raise MissingField(field, record)
    return Segment(fields[VALUE], promptline.style.parse_style(fields[STYLE]))


def decode_segment(node):
    """Decode a configuration node into a Segment.

    The node is either a string, which is the segment's text, or a record with exactly two
    fields: value (the text) and style (a style specification). A string produces a segment
    without a style. A record's style is whatever parse_style makes of the specification,
    which may also be None.

    Raises a DecodeError for anything else.
    """
    if type(node) is str:
        return Segment(node)
    elif _is_record(node):
        return _decode_record(node)
    else:
        raise InvalidShape(node, f'Expected a string, or a record with fields {_expected()}, '
                                 f'not {type(node).__name__}: {node!r}')
