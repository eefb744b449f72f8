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

import contextlib
import io
import pathlib
import socket
import tempfile

import promptline.cliargs
import promptline.exception
import promptline.main
import promptline.render
from promptline.style import parse_style


def fail():
    assert False


def check_match(actual, expected):
    assert actual == expected, f'actual: {actual!r}\nexpected: {expected!r}'


def run(*argv):
    stdout = io.StringIO()
    stderr = io.StringIO()
    exit_code = 0
    with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stderr):
        try:
            promptline.main.main(list(argv))
        except SystemExit as e:
            exit_code = e.code
    return exit_code, stdout.getvalue(), stderr.getvalue()


def test_command_line():
    command_line = promptline.cliargs.CommandLine(
        'usage',
        config=promptline.cliargs.flag('-c', '--config'),
        verbose=promptline.cliargs.boolean_flag('-v', '--verbose'))
    check_match(command_line.parse([]), ({'config': None, 'verbose': False}, []))
    check_match(command_line.parse(['-c', 'x.json', 'hostname']),
                ({'config': 'x.json', 'verbose': False}, ['hostname']))
    check_match(command_line.parse(['a', '--verbose', '--config', 'y', 'b']),
                ({'config': 'y', 'verbose': True}, ['a', 'b']))
    check_match(command_line.parse(['--', '-v']), ({'config': None, 'verbose': False}, ['-v']))
    for argv in (['-x'], ['-c'], ['-c', '-v']):
        try:
            command_line.parse(argv)
            fail()
        except promptline.cliargs.UsageError as e:
            assert str(e).endswith('usage')
    try:
        promptline.cliargs.CommandLine('usage',
                                       a=promptline.cliargs.flag('-a'),
                                       b=promptline.cliargs.flag('-a', '--bbb'))
        fail()
    except promptline.exception.KillShellException as e:
        check_match(str(e), 'Duplicated flag: -a')


def test_style():
    exit_code, out, err = run('--style', 'bold fg:green')
    check_match(exit_code, 0)
    check_match(out, promptline.render.paint(promptline.main.STYLE_SAMPLE, parse_style('bold green')) + '\n')
    exit_code, out, err = run('-s', 'bold fg:mauve')
    check_match(exit_code, 1)
    check_match(out, '')
    check_match(err, 'Invalid style: bold fg:mauve\n')


def test_modules():
    with tempfile.TemporaryDirectory() as dir:
        path = pathlib.Path(dir) / 'config.json'
        with open(path, 'w') as config_file:
            config_file.write('{"hostname": {"ssh_only": false, "style": "", "prefix": "[", "suffix": "]"}}')
        exit_code, out, err = run('-c', str(path))
        check_match(exit_code, 0)
        check_match(out, f'[{socket.gethostname()}]')
        exit_code, out, err = run('--config', str(path), 'hostname', 'hostname')
        check_match(out, f'[{socket.gethostname()}]' * 2)
        with open(path, 'w') as config_file:
            config_file.write('{"hostname": {"ssh_only": true}}')
        exit_code, out, err = run('-c', str(path), '--', 'hostname')
        check_match(out, '')


def test_errors():
    with tempfile.TemporaryDirectory() as dir:
        path = pathlib.Path(dir) / 'config.json'
        with open(path, 'w') as config_file:
            config_file.write('{"hostname": {"ssh_only": false, "prefix": {"value": "["}}}')
        try:
            promptline.main.main(['-c', str(path)])
            fail()
        except promptline.exception.ConfigError as e:
            check_match(str(e), 'hostname.prefix: Missing field `style`')
    try:
        promptline.main.main(['-c', '/nonexistent/promptline.json'])
        fail()
    except promptline.exception.ConfigFileError as e:
        assert 'no such file' in str(e)
    try:
        promptline.main.main(['nope'])
        fail()
    except promptline.exception.UnknownModuleError:
        pass


def main():
    test_command_line()
    test_style()
    test_modules()
    test_errors()


main()
