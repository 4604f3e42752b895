""" Current state of the shell. """
import os
from dataclasses import dataclass

from flags import Flags, NO_FLAGS, flag_table


@dataclass(frozen=True)
class AwaitingCommand:
    """ Show the primary prompt and wait for a line. """


@dataclass(frozen=True)
class Executing:
    """ A line has been read and is waiting to be run. """
    line: str


class ShellContext:
    """ Everything the main loop mutates, in one place. """
    def __init__(self, environ=None, flag_codes=None):
        self.environ = os.environ if environ is None else environ
        self.flag_codes = flag_table() if flag_codes is None else flag_codes
        self.flags = NO_FLAGS
        self.last_status = 0
        self.command_count = 0
        self.history_length = 0
        self.state = AwaitingCommand()

    def set_status(self, status: int):
        # normalize like shells do
        self.last_status = int(status) if status is not None else 0

    def enable(self, flag: Flags):
        self.flags |= flag

    def disable(self, flag: Flags):
        self.flags &= ~flag

    def is_set(self, flag: Flags) -> bool:
        return bool(self.flags & flag)
