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
from promptline.color import FixedColor, Hue, NamedColor, RgbColor


def fail():
    assert False


def check_color(token, expected):
    actual = promptline.color.parse_color(token)
    assert actual == expected, f'{token}: actual: {actual}, expected: {expected}'


def test_hex():
    check_color('#050505', RgbColor(5, 5, 5))
    check_color('#ff8000', RgbColor(255, 128, 0))
    check_color('#FF8000', RgbColor(255, 128, 0))
    check_color('#aBcDeF', RgbColor(0xab, 0xcd, 0xef))
    # Too short, or extra characters after six hex digits
    check_color('#', None)
    check_color('#12345', None)
    check_color('#1234567', RgbColor(0x12, 0x34, 0x56))
    check_color('#abcdefxyz', RgbColor(0xab, 0xcd, 0xef))
    check_color('#abcdxfff', None)
    # Not hex digits
    check_color('#12345g', None)
    check_color('#+12345', None)
    check_color('# 12345', None)
    check_color('#-12345', None)


def test_fixed():
    check_color('0', FixedColor(0))
    check_color('120', FixedColor(120))
    check_color('255', FixedColor(255))
    check_color('007', FixedColor(7))
    check_color('256', None)
    check_color('-1', None)
    check_color('+1', None)
    check_color('1.5', None)
    check_color('', None)


def test_named():
    check_color('black', NamedColor(Hue.BLACK))
    check_color('red', NamedColor(Hue.RED))
    check_color('green', NamedColor(Hue.GREEN))
    check_color('yellow', NamedColor(Hue.YELLOW))
    check_color('blue', NamedColor(Hue.BLUE))
    check_color('purple', NamedColor(Hue.PURPLE))
    check_color('cyan', NamedColor(Hue.CYAN))
    check_color('white', NamedColor(Hue.WHITE))
    check_color('GrEeN', NamedColor(Hue.GREEN))
    check_color('magenta', None)
    check_color('bright', None)


def test_bright():
    names = ['black', 'red', 'green', 'yellow', 'blue', 'purple', 'cyan', 'white']
    for i, name in enumerate(names):
        check_color(f'bright-{name}', FixedColor(8 + i))
    check_color('BRIGHT-WHITE', FixedColor(15))
    check_color('bright-', None)
    check_color('bright-pink', None)


def test_values():
    assert RgbColor(1, 2, 3) == RgbColor(1, 2, 3)
    assert RgbColor(1, 2, 3) != RgbColor(3, 2, 1)
    assert FixedColor(1) != NamedColor(Hue.RED)
    assert len({FixedColor(9), FixedColor(9), NamedColor(Hue.RED)}) == 2
    try:
        FixedColor(256)
        fail()
    except ValueError:
        pass
    try:
        RgbColor(0, 0, -1)
        fail()
    except ValueError:
        pass
    color = FixedColor(3)
    try:
        color.code = 4
        fail()
    except AttributeError:
        pass
    assert color.code == 3


def test_sgr_params():
    assert NamedColor(Hue.CYAN).sgr_params(True) == [36]
    assert NamedColor(Hue.CYAN).sgr_params(False) == [46]
    assert FixedColor(120).sgr_params(True) == [38, 5, 120]
    assert FixedColor(120).sgr_params(False) == [48, 5, 120]
    assert RgbColor(5, 6, 7).sgr_params(True) == [38, 2, 5, 6, 7]
    assert RgbColor(5, 6, 7).sgr_params(False) == [48, 2, 5, 6, 7]


def main():
    test_hex()
    test_fixed()
    test_named()
    test_bright()
    test_values()
    test_sgr_params()


main()
