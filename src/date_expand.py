""" Expand %D{format} date tokens before escape decoding. """
import time

from constants import DATE_FORMAT_FALLBACK
from exceptions import UnterminatedDateIntroducer, UnterminatedFormat

NORMAL = "normal"
PERCENT_SEEN = "percent"
AWAITING_BRACE = "brace"
IN_FORMAT = "format"


def local_strftime(fmt: str) -> str:
    return time.strftime(fmt, time.localtime())


def _format_now(fmt: str, strftime) -> str:
    try:
        return strftime(fmt)
    except (ValueError, OverflowError, OSError):
        return DATE_FORMAT_FALLBACK


def expand(text: str, strftime=None) -> str:
    """
    Replace each %D{fmt} in `text` with the current time formatted by `fmt`.

    `%%` is copied through untouched, so `%%D{...}` is not a date token.
    Any other `%x` sequence is left for the placeholder decoder.
    """
    if strftime is None:
        strftime = local_strftime

    out = []
    fmt = ""
    state = NORMAL

    for ch in text:
        if state == NORMAL:
            if ch == "%":
                state = PERCENT_SEEN
            else:
                out.append(ch)
        elif state == PERCENT_SEEN:
            if ch == "D":
                state = AWAITING_BRACE
            else:
                # %% and %x both pass through as written
                out.append("%" + ch)
                state = NORMAL
        elif state == AWAITING_BRACE:
            if ch != "{":
                raise UnterminatedDateIntroducer()
            fmt = ""
            state = IN_FORMAT
        elif state == IN_FORMAT:
            if ch == "}":
                out.append(_format_now(fmt, strftime))
                state = NORMAL
            else:
                fmt += ch

    if state == PERCENT_SEEN:
        out.append("%")
    elif state == AWAITING_BRACE:
        raise UnterminatedDateIntroducer()
    elif state == IN_FORMAT:
        raise UnterminatedFormat(fmt)

    return "".join(out)
