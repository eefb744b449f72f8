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

import os
import pathlib

import promptline.exception


# Location structure -> interface
#
#     $PROMPTLINE_CONFIG                          config_file(), if set
#
#     .config/promptline/                         config()
#         config.json                             config_file(), otherwise

class Locations(object):
    PROMPTLINE_DIR_NAME = 'promptline'
    CONFIG_FILE_NAME = 'config.json'
    CONFIG_ENV_VAR = 'PROMPTLINE_CONFIG'

    def __init__(self, env=None):
        if env is None:
            env = os.environ
        self.env = env
        self.home = Locations.normalize_dir(
            'home directory',
            env.get('HOME', None),
            pathlib.Path.home())
        self.config_base = Locations.normalize_dir(
            'application configuration directory (e.g. XDG_CONFIG_HOME)',
            env.get('XDG_CONFIG_HOME', None),
            self.home / '.config')

    def config(self):
        return self.config_base / Locations.PROMPTLINE_DIR_NAME

    def config_file(self):
        override = self.env.get(Locations.CONFIG_ENV_VAR, None)
        if override:
            return Locations.normalize_dir(Locations.CONFIG_ENV_VAR, override)
        return self.config() / Locations.CONFIG_FILE_NAME

    @staticmethod
    def normalize_dir(description, provided, *defaults):
        dir = provided
        d = 0
        while dir is None and d < len(defaults):
            dir = defaults[d]
            d += 1
        if dir is None:
            raise promptline.exception.KillShellException(
                f'Unable to start because value of {description} cannot be determined.')
        try:
            if not isinstance(dir, pathlib.Path):
                dir = pathlib.Path(dir)
            dir = dir.expanduser()
        except Exception as e:
            raise promptline.exception.KillShellException(
                f'Unable to start because value of {description} cannot be determined: {e}')
        return dir
