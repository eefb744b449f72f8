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

from promptline.exception import KillShellException


class UsageError(KillShellException):

    def __init__(self, usage, message):
        super().__init__(message)
        self.usage = usage

    def __str__(self):
        return f'{self.cause}\n{self.usage}' if self.usage else str(self.cause)


class Flag(object):

    def __init__(self, f1, f2, default, boolean):
        self.short = None
        self.long = None
        for f in (f1, f2):
            if f is None:
                continue
            if Flag.is_long(f):
                self.long = f
            elif Flag.is_short(f):
                self.short = f
            else:
                raise KillShellException(f'Invalid flag: {f}')
        if f1 is None or (f2 is not None and (self.short is None or self.long is None)):
            raise KillShellException(
                f'If two flags are specified, one must be long and one must be short: {f1}, {f2}')
        self.default = default
        self.boolean = boolean
        self.var = None  # Filled in by CommandLine

    def __repr__(self):
        return (f'{self.short}|{self.long}' if self.short and self.long else
                self.short if self.short else
                self.long)

    def has_flag(self, f):
        return f in (self.short, self.long)

    @staticmethod
    def is_short(f):
        return len(f) == 2 and f[0] == '-' and f[1] != '-'

    @staticmethod
    def is_long(f):
        return len(f) > 2 and f.startswith('--')


class CommandLine(object):
    """Parses command line arguments: flags, with or without values, and anonymous args.

    Each flag is assigned to a variable by keyword, e.g. CommandLine(usage, config=flag('-c', '--config')).
    parse() returns a dict mapping each variable to its value (or default), and the list of
    anonymous args.
    """

    def __init__(self, usage, **var_flag):
        self.usage = usage
        self.var_flag = var_flag
        all_flags = set()
        for var, f in var_flag.items():
            if not (type(var) is str and var.isidentifier()):
                raise KillShellException(f'Var must be valid as a Python identifier: {var}')
            f.var = var
            for x in (f.short, f.long):
                if x is None:
                    continue
                if x in all_flags:
                    raise KillShellException(f'Duplicated flag: {x}')
                all_flags.add(x)

    def parse(self, argv):
        def isflag(arg):
            return arg.startswith('-') and len(arg) > 1

        def flag_of(arg):
            for f in self.var_flag.values():
                if f.has_flag(arg):
                    return f
            raise UsageError(self.usage, f'Unrecognized flag: {arg}')

        values = {var: f.default for var, f in self.var_flag.items()}
        anon = []
        a = 0
        while a < len(argv):
            arg = argv[a]
            a += 1
            if arg == '--':
                anon.extend(argv[a:])
                break
            elif isflag(arg):
                f = flag_of(arg)
                if f.boolean:
                    values[f.var] = True
                elif a == len(argv) or isflag(argv[a]):
                    raise UsageError(self.usage, f'Value missing for flag: {arg}')
                else:
                    values[f.var] = argv[a]
                    a += 1
            else:
                anon.append(arg)
        return values, anon


def flag(f1, f2=None, default=None):
    return Flag(f1, f2, default=default, boolean=False)


def boolean_flag(f1, f2=None):
    return Flag(f1, f2, default=False, boolean=True)
