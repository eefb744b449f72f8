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

"""Exceptions shared across promptline.

Style specifications never raise: a bad style resolves to None. Everything that
aborts loading a configuration entry, or the whole program, is defined here
or derives from something defined here.
"""


# Fatal error: reported by the command line entry point, which then exits.
class KillShellException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause)


# The configuration file, or some entry of it, cannot be used.
class ConfigError(BaseException):

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return str(self.message)


class ConfigFileError(ConfigError):

    def __init__(self, path, cause):
        super().__init__(f'Unable to load configuration file {path}: {cause}')
        self.path = path
        self.cause = cause


class UnknownModuleError(KillShellException):

    def __init__(self, module_name):
        super().__init__(module_name)
        self.module_name = module_name

    def __str__(self):
        return f'Unknown module: {self.module_name}'
