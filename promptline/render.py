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

import prompt_toolkit

RESET = '\033[0m'

# SGR parameter for each flag, in the order emitted.
_FLAG_PARAMS = (
    ('bold', 1),
    ('dimmed', 2),
    ('italic', 3),
    ('underline', 4)
)


def sgr(style):
    """Returns the escape sequence turning on style. An empty style needs no escape sequence."""
    params = [param for flag, param in _FLAG_PARAMS if style.has_flag(flag)]
    if style.foreground is not None:
        params.extend(style.foreground.sgr_params(True))
    if style.background is not None:
        params.extend(style.background.sgr_params(False))
    return f'\033[{";".join(str(p) for p in params)}m' if params else ''


def paint(text, style):
    if style is None:
        return text
    start = sgr(style)
    return f'{start}{text}{RESET}' if start else text


def paint_segment(segment, default_style=None):
    return paint(segment.text, segment.style if segment.style is not None else default_style)


# For prompts read through prompt_toolkit, which interprets the escapes itself.
def formatted(ansi_text):
    return prompt_toolkit.ANSI(ansi_text)


def print_formatted(ansi_text, end='\n'):
    prompt_toolkit.print_formatted_text(formatted(ansi_text), end=end)
