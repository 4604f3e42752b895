""" Shell option flags toggled by `set`. """
import enum
from types import MappingProxyType


class Flags(enum.Flag):
    PEXEC = enum.auto()       # print every command before running it
    LPEXEC = enum.auto()      # limited print exec; no conditionals exist, same as PEXEC
    EXITONFAIL = enum.auto()
    ERRUNSET = enum.auto()    # registered only; nothing expands variables yet


NO_FLAGS = Flags(0)
ECHO_FLAGS = Flags.PEXEC | Flags.LPEXEC


def flag_table():
    """ Build the read-only mapping of `set` option characters to flags. """
    return MappingProxyType({
        "x": Flags.PEXEC,
        "X": Flags.LPEXEC,
        "e": Flags.EXITONFAIL,
        "u": Flags.ERRUNSET,
    })
