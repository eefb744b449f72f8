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

import promptline.exception
from promptline.modules import hostname

ALL = {
    'hostname': hostname.module
}

DEFAULT = ['hostname']


def names():
    return sorted(ALL.keys())


# Returns the Module produced by the named module, or None if it has nothing to display.
def handle(name, context):
    try:
        module = ALL[name]
    except KeyError:
        raise promptline.exception.UnknownModuleError(name)
    return module(context)
