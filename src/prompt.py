""" Build placeholder tables and render prompt templates. """
import os
import socket
import sys
import time

import psutil

from constants import (PROGRAM_NAME, VERSION, LOOKUP_FALLBACK, CWD_FALLBACK,
                       WEEKDAY_FALLBACK, CLOCK_FALLBACK, CLOCK_12H_SHORT_FALLBACK,
                       CLOCK_24H_SHORT_FALLBACK)
from date_expand import expand
from exceptions import TemplateError
from shell_state import ShellContext
from unescape import decode

# placeholder -> (strftime pattern, value used when the clock is unavailable)
TIME_FIELDS = {
    "d": ("%A, %b %d", WEEKDAY_FALLBACK),
    "t": ("%H:%M:%S", CLOCK_FALLBACK),
    "T": ("%I:%M:%S %p", CLOCK_FALLBACK),
    "@": ("%I:%M %p", CLOCK_12H_SHORT_FALLBACK),
    "A": ("%H:%M", CLOCK_24H_SHORT_FALLBACK),
}


def _prompt_symbol() -> str:
    try:
        return "#" if os.geteuid() == 0 else "$"
    except AttributeError:
        # no effective uid on this platform
        return "$"


def _username() -> str:
    # psutil names the real uid, so the numeric fallback uses it too
    try:
        return psutil.Process().username()
    except (psutil.Error, KeyError):
        pass
    try:
        return str(os.getuid())
    except AttributeError:
        return LOOKUP_FALLBACK


def _hostname() -> str | None:
    try:
        return socket.gethostname()
    except OSError:
        return None


def _tty_name() -> str:
    try:
        terminal = psutil.Process().terminal()
    except (psutil.Error, AttributeError):
        # terminal() is not available on every platform
        return LOOKUP_FALLBACK
    if not terminal:
        return LOOKUP_FALLBACK
    return os.path.basename(terminal)


def _program_name() -> str:
    name = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else ""
    return name or PROGRAM_NAME


def collapse_home(path: str, home: str | None) -> str:
    """ Show `home` (and anything under it) with a leading `~`. """
    if not home:
        return path
    home = home.rstrip("/")
    if not home:
        return path
    if path == home:
        return "~"
    if path.startswith(home + "/"):
        return "~" + path[len(home):]
    return path


def _dir_basename(path: str) -> str:
    if path in ("~", "/"):
        return path
    return os.path.basename(path.rstrip("/")) or path


def _local_now():
    try:
        return time.localtime()
    except (OverflowError, OSError):
        return None


def _clock(fmt: str, now, fallback: str) -> str:
    if now is None:
        return fallback
    try:
        return time.strftime(fmt, now)
    except (ValueError, OverflowError, OSError):
        return fallback


def build_substitutions(ctx: ShellContext) -> dict[str, str]:
    """
    Collect the live values available to `%x` placeholders.

    Every lookup that can fail has its own fallback, so a broken lookup only
    affects its own placeholder.
    """
    hostname = _hostname()
    try:
        cwd = collapse_home(os.getcwd(), ctx.environ.get("HOME") or os.path.expanduser("~"))
    except OSError:
        cwd = CWD_FALLBACK
    major, minor = VERSION.split(".")[:2]

    table = {
        "$": _prompt_symbol(),
        "u": _username(),
        "#": str(ctx.command_count),
        "!": str(ctx.history_length),
        "v": f"{major}.{minor}",
        "V": VERSION,
        "h": hostname.split(".")[0] if hostname else LOOKUP_FALLBACK,
        "H": hostname or LOOKUP_FALLBACK,
        "l": _tty_name(),
        "s": _program_name(),
        "w": cwd,
        "W": _dir_basename(cwd),
        "%": "%",
    }

    now = _local_now()
    for key, (fmt, fallback) in TIME_FIELDS.items():
        table[key] = _clock(fmt, now, fallback)

    return table


def render_template(text: str, table, strftime=None) -> str:
    """ Expand date tokens, then decode escapes and placeholders. """
    return decode(expand(text, strftime=strftime), table)


def render_prompt(var_name: str, default: str, table, environ=None) -> str:
    """
    Render the template held in `var_name`, falling back on `default`.

    A template that fails to render is reported on stderr and the default is
    returned exactly as given, without decoding it.
    """
    if environ is None:
        environ = os.environ
    template = environ.get(var_name, default)
    try:
        return render_template(template, table)
    except TemplateError as e:
        print(f"{PROGRAM_NAME}: ${var_name}: {e}", file=sys.stderr)
        return default
