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


# A JSON object as read from a configuration file. Unlike a dict, a Table remembers every
# key/value pair in the order written, including repeated keys, so that a repeated key can be
# reported instead of silently replacing an earlier value. Lookups see the last value
# written for a key, which is what a dict would have done.
class Table(object):

    def __init__(self, pairs=()):
        self._pairs = list(pairs)

    def __repr__(self):
        return '{' + ', '.join(f'{k!r}: {v!r}' for k, v in self._pairs) + '}'

    def __eq__(self, other):
        return isinstance(other, Table) and self._pairs == other._pairs

    def __len__(self):
        return len(self._pairs)

    def __contains__(self, key):
        return any(k == key for k, _ in self._pairs)

    def __getitem__(self, key):
        for k, v in reversed(self._pairs):
            if k == key:
                return v
        raise KeyError(key)

    def __iter__(self):
        return iter(self.keys())

    def get(self, key, default=None):
        try:
            return self[key]
        except KeyError:
            return default

    def keys(self):
        return [k for k, _ in self._pairs]

    def items(self):
        return list(self._pairs)

    def duplicate_keys(self):
        seen = set()
        duplicates = []
        for k, _ in self._pairs:
            if k in seen and k not in duplicates:
                duplicates.append(k)
            seen.add(k)
        return duplicates
