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

import promptline.color

FG_PREFIX = 'fg:'
BG_PREFIX = 'bg:'
NONE = 'none'


class Style(object):
    """Visual attributes of a segment: four flags, and optional foreground and background colors.

    A Style is immutable. bold(), fg(), etc. return a new Style with one attribute changed.
    Style() has every flag off and no colors. It is a real style, applying nothing, which is
    not the same thing as a segment having no style (None).
    """

    FLAGS = ('bold', 'italic', 'underline', 'dimmed')

    def __init__(self,
                 bold=False,
                 italic=False,
                 underline=False,
                 dimmed=False,
                 foreground=None,
                 background=None):
        for color in (foreground, background):
            if color is not None and not isinstance(color, promptline.color.Color):
                raise ValueError(f'Not a color: {color}')
        self.__dict__['is_bold'] = bool(bold)
        self.__dict__['is_italic'] = bool(italic)
        self.__dict__['is_underline'] = bool(underline)
        self.__dict__['is_dimmed'] = bool(dimmed)
        self.__dict__['foreground'] = foreground
        self.__dict__['background'] = background

    def __repr__(self):
        buffer = [flag for flag in Style.FLAGS if self.has_flag(flag)]
        if self.foreground is not None:
            buffer.append(f'fg={self.foreground}')
        if self.background is not None:
            buffer.append(f'bg={self.background}')
        return f'Style({", ".join(buffer)})'

    def __setattr__(self, key, value):
        raise AttributeError('Style is immutable')

    def __delattr__(self, key):
        raise AttributeError('Style is immutable')

    def __eq__(self, other):
        return isinstance(other, Style) and self.key() == other.key()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self.key())

    def key(self):
        return (self.is_bold,
                self.is_italic,
                self.is_underline,
                self.is_dimmed,
                self.foreground,
                self.background)

    def has_flag(self, flag):
        return self.__dict__['is_' + flag]

    def is_plain(self):
        return self == Style()

    def bold(self):
        return self._replace(bold=True)

    def italic(self):
        return self._replace(italic=True)

    def underline(self):
        return self._replace(underline=True)

    def dimmed(self):
        return self._replace(dimmed=True)

    def with_flag(self, flag):
        assert flag in Style.FLAGS, flag
        return self._replace(**{flag: True})

    def fg(self, color):
        return self._replace(foreground=color)

    def on(self, color):
        return self._replace(background=color)

    def _replace(self, **changes):
        attributes = {
            'bold': self.is_bold,
            'italic': self.is_italic,
            'underline': self.is_underline,
            'dimmed': self.is_dimmed,
            'foreground': self.foreground,
            'background': self.background
        }
        attributes.update(changes)
        return Style(**attributes)


def tokenize(spec):
    return spec.split()


# Returns (remainder, foreground), where foreground is False iff the token targets the background.
def _channel(token):
    if token.startswith(FG_PREFIX):
        return token[len(FG_PREFIX):], True
    elif token.startswith(BG_PREFIX):
        return token[len(BG_PREFIX):], False
    else:
        # Bare colors are foreground colors
        return token, True


def apply_token(style, token):
    """Returns the Style resulting from applying token to style, or None if token is none,
    or is not recognized.
    """
    body, foreground = _channel(token.lower())
    if body in Style.FLAGS:
        return style.with_flag(body)
    if body == NONE:
        return None
    color = promptline.color.parse_color(body)
    if color is None:
        return None
    return style.fg(color) if foreground else style.on(color)


def parse_style(spec):
    """Parse a style specification, e.g. 'bold fg:green bg:#050505', into a Style.

    Tokens are separated by whitespace and applied left to right, so the last token
    setting a color channel wins. Returns None if the specification contains 'none' or
    any token that isn't understood. Evaluation stops at the first such token: the tokens
    that follow it are never examined.
    """
    style = Style()
    for token in tokenize(spec):
        style = apply_token(style, token)
        if style is None:
            break
    return style
