""" Where the shell gets its input lines from. """
import readline

from constants import MAX_HISTORY


class LineSource:
    """
    Base class for line readers.

    `read_line` returns the next line, raising KeyboardInterrupt when the user
    interrupts and EOFError at end of input.
    """
    def read_line(self, prompt: str) -> str:
        raise NotImplementedError

    def record(self, line: str):
        raise NotImplementedError

    def history_length(self) -> int:
        raise NotImplementedError


class ReadlineSource(LineSource):
    """ Interactive input with GNU readline editing and in-memory history. """
    def __init__(self, max_history: int = MAX_HISTORY):
        self.max_history = max_history
        readline.set_auto_history(False)
        readline.parse_and_bind("set bell-style audible")
        readline.parse_and_bind("set completion-query-items 75")

    def read_line(self, prompt: str) -> str:
        return input(prompt)

    def record(self, line: str):
        # like HISTCONTROL=ignoreboth
        if not line.strip() or line.startswith(" "):
            return
        length = readline.get_current_history_length()
        if length and readline.get_history_item(length) == line:
            return
        readline.add_history(line)
        while readline.get_current_history_length() > self.max_history:
            readline.remove_history_item(0)

    def history_length(self) -> int:
        return readline.get_current_history_length()
