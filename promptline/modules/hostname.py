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
import socket

from promptline.color import Hue, NamedColor
from promptline.segment import Segment
from promptline.style import Style

_log = logging.getLogger(__name__)

DEFAULT_STYLE = Style(bold=True, dimmed=True, foreground=NamedColor(Hue.GREEN))
DEFAULT_PREFIX = Segment('on ')
DEFAULT_SUFFIX = Segment(' ')


def module(context):
    """Creates a module with the system hostname.

    The hostname is displayed if:
        - hostname.disabled is absent or false, and
        - hostname.ssh_only is false, or this is an ssh session ($SSH_CONNECTION is set).
    ssh_only defaults to true.
    """
    module = context.new_module('hostname')
    if module.config_value_bool('disabled'):
        return None
    ssh_only = module.config_value_bool('ssh_only')
    if ssh_only is None:
        ssh_only = True
    if ssh_only and context.getenv('SSH_CONNECTION') is None:
        _log.debug('hostname: not an ssh session')
        return None
    try:
        host = socket.gethostname()
    except OSError as e:
        _log.debug('hostname: unable to get hostname: %s', e)
        return None
    if not host:
        _log.debug('hostname: empty hostname')
        return None
    style = module.config_value_style('style')
    module.set_style(style if style is not None else DEFAULT_STYLE)
    module.set_prefix(module.config_segment('prefix', DEFAULT_PREFIX))
    module.set_suffix(module.config_segment('suffix', DEFAULT_SUFFIX))
    module.new_segment('hostname', host)
    return module
