""" Lexical analysis for shell commands. """
import shlex


def tokenize(line: str) -> list[str]:
    """ Split `line` with POSIX quoting rules; raises ValueError if it can't. """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace_split = True
    lex.commenters = ""
    return list(lex)


def join(argv: list[str]) -> str:
    """ Re-quote `argv` so it reads back as the same tokens. """
    return shlex.join(argv)


def has_unclosed_quote(line: str) -> bool:
    return line.count('"') % 2 != 0 or line.count("'") % 2 != 0


def split_error_message(line: str) -> str:
    if has_unclosed_quote(line):
        return f"unclosed quote: {line}"
    return f"invalid syntax; cannot split: {line}"
