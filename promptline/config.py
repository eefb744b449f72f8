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
import logging

import promptline.exception
import promptline.locations
import promptline.segment
import promptline.style
from promptline.jsonutil import JSONUtil
from promptline.structish import Table

_log = logging.getLogger(__name__)


def _is_table(x):
    return isinstance(x, (Table, collections.abc.Mapping))


def _check_no_duplicates(table, description):
    if isinstance(table, Table):
        duplicates = table.duplicate_keys()
        if duplicates:
            raise promptline.exception.ConfigError(
                f'{description} repeats {", ".join(duplicates)}')


class Config(object):
    """The user's configuration: a table of module configurations, keyed by module name."""

    def __init__(self, table=None, path=None):
        if table is None:
            table = Table()
        if not _is_table(table):
            raise promptline.exception.ConfigError(
                f'Configuration must be an object, not {type(table).__name__}')
        _check_no_duplicates(table, 'Configuration')
        self.table = table
        self.path = path

    def __repr__(self):
        return f'Config({self.path})'

    def module_names(self):
        return list(self.table.keys())

    def module_config(self, module_name):
        module_table = self.table.get(module_name, None)
        if module_table is None:
            module_table = Table()
        elif not _is_table(module_table):
            raise promptline.exception.ConfigError(
                f'Configuration of module {module_name} must be an object, '
                f'not {type(module_table).__name__}')
        _check_no_duplicates(module_table, f'Configuration of module {module_name}')
        return ModuleConfig(module_name, module_table)

    @staticmethod
    def load(path=None, locations=None):
        # A file named explicitly must exist. Otherwise, no file means no configuration.
        if path is not None:
            if not path.exists():
                raise promptline.exception.ConfigFileError(path, 'no such file')
        else:
            if locations is None:
                locations = promptline.locations.Locations()
            path = locations.config_file()
        if not path.exists():
            _log.debug('No configuration file at %s', path)
            return Config(path=path)
        try:
            with open(path, 'r', encoding='utf-8') as config_file:
                text = config_file.read()
        except (OSError, UnicodeDecodeError) as e:
            raise promptline.exception.ConfigFileError(path, e)
        try:
            table = JSONUtil().decode(text)
        except ValueError as e:
            raise promptline.exception.ConfigFileError(path, e)
        if not isinstance(table, Table):
            raise promptline.exception.ConfigFileError(path, 'top level must be an object')
        _log.debug('Loaded configuration from %s', path)
        return Config(table, path)


class ModuleConfig(object):

    def __init__(self, module_name, table):
        self.module_name = module_name
        self.table = table

    def __repr__(self):
        return f'ModuleConfig({self.module_name}: {self.table})'

    def value(self, key, default=None):
        return self.table.get(key, default)

    def value_bool(self, key):
        x = self.value(key)
        if x is not None and type(x) is not bool:
            _log.debug('%s.%s is not a boolean: %r', self.module_name, key, x)
            return None
        return x

    def value_str(self, key):
        x = self.value(key)
        if x is not None and type(x) is not str:
            _log.debug('%s.%s is not a string: %r', self.module_name, key, x)
            return None
        return x

    # A style specification that doesn't parse is treated as absent.
    def value_style(self, key):
        spec = self.value_str(key)
        if spec is None:
            return None
        style = promptline.style.parse_style(spec)
        if style is None:
            _log.debug('%s.%s: no style from %r', self.module_name, key, spec)
        return style

    def value_segment(self, key, default=None):
        if key not in self.table:
            return default
        try:
            return promptline.segment.decode_segment(self.table[key])
        except promptline.segment.DecodeError as e:
            e.location = f'{self.module_name}.{key}'
            raise
