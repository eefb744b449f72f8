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

import logging
import string
from enum import Enum

_log = logging.getLogger(__name__)


class Hue(Enum):
    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def index(self):
        return self.value


# Color values are immutable and compare by value, so that two parses of the same
# token, or of equivalent tokens, produce equal results.
class Color(object):

    def __setattr__(self, key, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, key):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other):
        return type(self) is type(other) and self.key() == other.key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + self.key())

    def key(self):
        assert False

    # SGR parameters selecting this color, for the foreground if foreground is True,
    # the background otherwise.
    def sgr_params(self, foreground):
        assert False


class NamedColor(Color):

    def __init__(self, hue):
        assert isinstance(hue, Hue), hue
        self.__dict__['hue'] = hue

    def __repr__(self):
        return f'NamedColor({self.hue.name})'

    def key(self):
        return (self.hue,)

    def sgr_params(self, foreground):
        return [(30 if foreground else 40) + self.hue.index()]


class FixedColor(Color):

    def __init__(self, code):
        if type(code) is not int or code < 0 or code > 255:
            raise ValueError(f'Fixed color code must be an int in 0-255: {code}')
        self.__dict__['code'] = code

    def __repr__(self):
        return f'FixedColor({self.code})'

    def key(self):
        return (self.code,)

    def sgr_params(self, foreground):
        return [38 if foreground else 48, 5, self.code]


class RgbColor(Color):

    def __init__(self, r, g, b):
        for c in (r, g, b):
            if type(c) is not int or c < 0 or c > 255:
                raise ValueError(f'RGB components must be ints in 0-255: ({r}, {g}, {b})')
        self.__dict__['r'] = r
        self.__dict__['g'] = g
        self.__dict__['b'] = b

    def __repr__(self):
        return f'RgbColor({self.r}, {self.g}, {self.b})'

    def key(self):
        return self.r, self.g, self.b

    def sgr_params(self, foreground):
        return [38 if foreground else 48, 2, self.r, self.g, self.b]


BRIGHT_PREFIX = 'bright-'

# The terminal palette has no names for the bright hues, so they are the fixed colors 8-15,
# in the same order as the base hues.
NAMED_COLORS = {}
for _hue in Hue:
    NAMED_COLORS[_hue.name.lower()] = NamedColor(_hue)
    NAMED_COLORS[BRIGHT_PREFIX + _hue.name.lower()] = FixedColor(8 + _hue.index())


def _parse_hex(digits):
    # Characters following the six digits are ignored.
    if len(digits) < 6:
        return None
    digits = digits[:6]
    if any(c not in string.hexdigits for c in digits):
        return None
    return RgbColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _parse_fixed(token):
    if len(token) == 0 or any(c not in string.digits for c in token):
        return None
    code = int(token)
    return FixedColor(code) if code <= 255 else None


def parse_color(token):
    """Parse a single color token, returning a Color, or None if the token isn't a color.

    Three forms are accepted, tried in this order:
        - #RRGGBB: a hash followed by exactly six hex digits.
        - N: a decimal integer in 0-255, selecting a fixed terminal color.
        - One of the 16 color names, e.g. green or bright-green (case-insensitive).
    """
    _log.debug('Parsing color: %s', token)
    if token.startswith('#'):
        color = _parse_hex(token[1:])
        if color is None:
            _log.debug('Invalid hex color: %s', token)
        return color
    color = _parse_fixed(token)
    if color is None:
        color = NAMED_COLORS.get(token.lower(), None)
    if color is None:
        _log.debug('Could not parse color: %s', token)
    return color
