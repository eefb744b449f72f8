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

import json

from promptline.structish import Table


class JSONUtil(object):

    class CustomDecoder(json.JSONDecoder):

        def __init__(self):
            super().__init__(object_pairs_hook=Table)

    def __init__(self):
        self.decoder = JSONUtil.CustomDecoder()

    def decode(self, text):
        return self.decoder.decode(text)
