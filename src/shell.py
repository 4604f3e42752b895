""" Implement the core of the shell. """
import sys

from constants import PROGRAM_NAME, PS1_VAR, PS1_DEFAULT, PS4_VAR, PS4_DEFAULT
from exceptions import ShellExit
from flags import Flags, ECHO_FLAGS
from lexer import tokenize, join, split_error_message
from line_source import ReadlineSource
from prompt import build_substitutions, render_prompt
from shell_builtins import BUILTINS
from shell_state import ShellContext, AwaitingCommand, Executing


class Shell:
    def __init__(self, line_source=None, environ=None):
        self.lines = ReadlineSource() if line_source is None else line_source
        self.ctx = ShellContext(environ=environ)

    def run(self) -> int:
        while True:
            try:
                self.ctx.state = self.step(self.ctx.state)
            except ShellExit as e:
                return e.status

            except EOFError:
                print("^D")
                return 0

            except KeyboardInterrupt:
                print("^C")
                self.ctx.state = AwaitingCommand()

    def step(self, current):
        """ Advance the loop by one state; returns the next state. """
        if isinstance(current, AwaitingCommand):
            return self.read_command()
        if isinstance(current, Executing):
            return self.execute(current.line)
        raise TypeError(f"unknown shell state: {current!r}")

    def prompt(self, var_name: str, default: str) -> str:
        table = build_substitutions(self.ctx)
        return render_prompt(var_name, default, table, environ=self.ctx.environ)

    def read_command(self):
        """ Show the primary prompt and read one line. """
        self.ctx.history_length = self.lines.history_length()
        line = self.lines.read_line(self.prompt(PS1_VAR, PS1_DEFAULT))
        self.lines.record(line)
        self.ctx.command_count += 1
        return Executing(line)

    def execute(self, line: str):
        """ Tokenize and dispatch one line. """
        self.ctx.history_length = self.lines.history_length()
        try:
            argv = tokenize(line)
        except ValueError:
            print(f"{PROGRAM_NAME}: {split_error_message(line)}", file=sys.stderr)
            self.ctx.set_status(1)
            return self.finish()

        if not argv:
            return AwaitingCommand()

        if self.ctx.is_set(ECHO_FLAGS):
            print(self.prompt(PS4_VAR, PS4_DEFAULT) + join(argv))

        handler = BUILTINS.get(argv[0])
        status = handler(argv[1:], self.ctx) if handler else 0
        self.ctx.set_status(status)
        return self.finish()

    def finish(self):
        if self.ctx.is_set(Flags.EXITONFAIL) and self.ctx.last_status != 0:
            raise ShellExit(self.ctx.last_status)
        return AwaitingCommand()
