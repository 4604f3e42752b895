""" Registry of builtin commands. """
import sys

from constants import PROGRAM_NAME
from exceptions import ShellExit, TemplateError
from prompt import build_substitutions, render_template

BUILTINS = {}


def builtin(name):
    """Decorator to register builtins"""
    def wrapper(func):
        BUILTINS[name] = func
        return func
    return wrapper


@builtin("exit")
def builtin_exit(args, ctx):
    try:
        status = int(args[0]) if args else 0
    except ValueError:
        print("exit: numeric argument required", file=sys.stderr)
        status = 2
    raise ShellExit(status)


@builtin("format")
def builtin_format(args, ctx):
    """
    format TEXT...
    Print TEXT after expanding %D{...}, escapes and prompt placeholders.
    """
    try:
        text = render_template(" ".join(args), build_substitutions(ctx))
    except TemplateError as e:
        print(f"{PROGRAM_NAME}: format: {e}", file=sys.stderr)
        return 1
    print(text)
    return 0


@builtin("set")
def builtin_set(args, ctx):
    """
    set -FLAGS   turn flags on
    set +FLAGS   turn flags off
    Stops at the first bad argument; flags already applied stay applied.
    """
    for arg in args:
        if not arg or arg[0] not in "-+":
            print(f"{PROGRAM_NAME}: set: invalid argument; not a flag: {arg}", file=sys.stderr)
            return 1

        apply = ctx.enable if arg[0] == "-" else ctx.disable
        for code in arg[1:]:
            flag = ctx.flag_codes.get(code)
            if flag is None:
                print(f"{PROGRAM_NAME}: set: invalid flag: {code}", file=sys.stderr)
                return 1
            apply(flag)

    return 0
