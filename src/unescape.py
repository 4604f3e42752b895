""" Decode backslash escapes and %-placeholders in prompt templates. """
import enum
import string

from constants import (HEX_ESCAPE_MAX_DIGITS, OCTAL_ESCAPE_MAX_DIGITS,
                       ZERO_WIDTH_START, ZERO_WIDTH_END)
from exceptions import UnknownPlaceholder, InvalidHexEscape, InvalidOctalEscape

SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "v": "\v",
    "e": "\x1b",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "\\": "\\",
    "[": ZERO_WIDTH_START,
    "]": ZERO_WIDTH_END,
}

HEX_DIGITS = set(string.hexdigits)
OCT_DIGITS = set(string.octdigits)


class DecoderState(enum.Enum):
    NORMAL = enum.auto()
    ESCAPED = enum.auto()
    AWAITING_PLACEHOLDER = enum.auto()
    HEX = enum.auto()
    OCTAL = enum.auto()


def _code_point(digits: str, base: int) -> str | None:
    """ Return the character for `digits`, or None if they don't name one. """
    try:
        value = int(digits, base)
    except ValueError:
        return None
    if value > 0x10FFFF or 0xD800 <= value <= 0xDFFF:
        return None
    return chr(value)


def decode(text: str, table) -> str:
    """
    Expand escapes and placeholders in `text`.

    `table` maps single characters to the text substituted for `%<char>`.
    A numeric escape ends at the first character that is not one of its digits;
    that character is then read again as ordinary input. Digits still pending
    when the input runs out are dropped.
    """
    out = []
    buf = ""
    state = DecoderState.NORMAL
    i = 0
    n = len(text)

    while i < n:
        ch = text[i]

        if state is DecoderState.NORMAL:
            if ch == "\\":
                state = DecoderState.ESCAPED
            elif ch == "%":
                state = DecoderState.AWAITING_PLACEHOLDER
            else:
                out.append(ch)

        elif state is DecoderState.ESCAPED:
            if ch in SIMPLE_ESCAPES:
                out.append(SIMPLE_ESCAPES[ch])
                state = DecoderState.NORMAL
            elif ch in string.digits:
                buf = ch
                state = DecoderState.OCTAL
            elif ch == "x":
                buf = ""
                state = DecoderState.HEX
            else:
                out.append(ch)
                state = DecoderState.NORMAL

        elif state is DecoderState.AWAITING_PLACEHOLDER:
            if ch not in table:
                raise UnknownPlaceholder(ch)
            out.append(table[ch])
            state = DecoderState.NORMAL

        elif state is DecoderState.HEX:
            if ch in HEX_DIGITS:
                buf += ch
                if len(buf) == HEX_ESCAPE_MAX_DIGITS:
                    out.append(_flush(buf, 16))
                    buf = ""
                    state = DecoderState.NORMAL
            else:
                out.append(_flush(buf, 16))
                buf = ""
                state = DecoderState.NORMAL
                # reprocess the terminating character
                continue

        elif state is DecoderState.OCTAL:
            if ch in OCT_DIGITS and buf[0] in OCT_DIGITS:
                buf += ch
                if len(buf) == OCTAL_ESCAPE_MAX_DIGITS:
                    out.append(_flush(buf, 8))
                    buf = ""
                    state = DecoderState.NORMAL
            else:
                out.append(_flush(buf, 8))
                buf = ""
                state = DecoderState.NORMAL
                continue

        i += 1

    return "".join(out)


def _flush(digits: str, base: int) -> str:
    ch = _code_point(digits, base) if digits else None
    if ch is None:
        if base == 16:
            raise InvalidHexEscape(digits)
        raise InvalidOctalEscape(digits)
    return ch

