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
import pathlib
import sys

import promptline.cliargs
import promptline.config
import promptline.exception
import promptline.module
import promptline.modules
import promptline.render
import promptline.style
import promptline.version

USAGE = f'''promptline {promptline.version.VERSION}

Usage: promptline [-c|--config FILE] [-p|--preview] [-v|--verbose] [MODULE ...]
       promptline -s|--style SPEC

Renders the named modules (default: {", ".join(promptline.modules.DEFAULT)}).
Modules: {", ".join(promptline.modules.names())}

    -c, --config FILE   Configuration file, overriding $PROMPTLINE_CONFIG and
                        ~/.config/promptline/config.json.
    -p, --preview       Print through prompt_toolkit, followed by a newline.
    -s, --style SPEC    Show a sample of text in the style SPEC, e.g. "bold fg:green".
    -v, --verbose       Log diagnostics to stderr.
'''

STYLE_SAMPLE = 'The quick brown fox jumps over the lazy dog'


def fail(message):
    print(message, file=sys.stderr)
    sys.exit(1)


def show_style(spec, preview):
    style = promptline.style.parse_style(spec)
    if style is None:
        fail(f'Invalid style: {spec}')
    output = promptline.render.paint(STYLE_SAMPLE, style)
    if preview:
        promptline.render.print_formatted(output)
    else:
        print(output)


def render_modules(config, module_names):
    context = promptline.module.Context(config)
    buffer = []
    for name in module_names:
        module = promptline.modules.handle(name, context)
        if module is not None and not module.is_empty():
            buffer.append(module.render())
    return ''.join(buffer)


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    command_line = promptline.cliargs.CommandLine(
        USAGE,
        config=promptline.cliargs.flag('-c', '--config'),
        style=promptline.cliargs.flag('-s', '--style'),
        preview=promptline.cliargs.boolean_flag('-p', '--preview'),
        verbose=promptline.cliargs.boolean_flag('-v', '--verbose'))
    args, module_names = command_line.parse(argv)
    if args['verbose']:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)
    if args['style'] is not None:
        show_style(args['style'], args['preview'])
        return
    config_path = pathlib.Path(args['config']).expanduser() if args['config'] else None
    config = promptline.config.Config.load(config_path)
    output = render_modules(config, module_names or promptline.modules.DEFAULT)
    if args['preview']:
        promptline.render.print_formatted(output)
    else:
        sys.stdout.write(output)
        sys.stdout.flush()


def run():
    try:
        main()
    except (promptline.exception.KillShellException,
            promptline.exception.ConfigError) as e:
        fail(str(e))


if __name__ == '__main__':
    run()
