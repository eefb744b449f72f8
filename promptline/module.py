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

import promptline.config
import promptline.render
from promptline.segment import Segment


class Context(object):
    """What a module needs to know to decide whether, and what, to display."""

    def __init__(self, config=None, env=None):
        self.config = config if config is not None else promptline.config.Config()
        self.env = env if env is not None else os.environ

    def new_module(self, name):
        return Module(name, self.config.module_config(name))

    def getenv(self, name, default=None):
        return self.env.get(name, default)


class Module(object):
    """Output of one module: a prefix, named segments, and a suffix.

    Segments without a style of their own are displayed in the module's style. The prefix and
    suffix have no style unless one was configured for them.
    """

    def __init__(self, name, config):
        self.name = name
        self.config = config
        self.style = None
        self.prefix = Segment('')
        self.suffix = Segment('')
        self.segments = []

    def __repr__(self):
        return f'Module({self.name}: {self.prefix}, {self.segments}, {self.suffix})'

    def config_value_bool(self, key):
        return self.config.value_bool(key)

    def config_value_str(self, key):
        return self.config.value_str(key)

    def config_value_style(self, key):
        return self.config.value_style(key)

    def config_segment(self, key, default=None):
        return self.config.value_segment(key, default)

    def set_style(self, style):
        self.style = style

    def set_prefix(self, segment):
        self.prefix = segment

    def set_suffix(self, segment):
        self.suffix = segment

    def new_segment(self, name, text):
        segment = Segment(text)
        self.segments.append((name, segment))
        return segment

    def segment(self, name):
        for segment_name, segment in self.segments:
            if segment_name == name:
                return segment
        return None

    def is_empty(self):
        return len(self.segments) == 0

    def render(self):
        body = ''.join(promptline.render.paint_segment(segment, self.style)
                       for _, segment in self.segments)
        return (promptline.render.paint_segment(self.prefix) +
                body +
                promptline.render.paint_segment(self.suffix))
