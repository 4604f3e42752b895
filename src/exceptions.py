""" Exceptions raised by the shell core. """


class ShellExit(Exception):
    """ Raised to leave the main loop with the given status. """
    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status


class TemplateError(Exception):
    """ A prompt template (or `format` argument) could not be rendered. """


class DecodeError(TemplateError):
    pass


class UnknownPlaceholder(DecodeError):
    def __init__(self, char: str):
        super().__init__(f"invalid formatting string: %{char}")
        self.char = char


class InvalidHexEscape(DecodeError):
    def __init__(self, digits: str):
        super().__init__(f"invalid hex escape: \\x{digits}")
        self.digits = digits


class InvalidOctalEscape(DecodeError):
    def __init__(self, digits: str):
        super().__init__(f"invalid octal escape: \\{digits}")
        self.digits = digits


class DateError(TemplateError):
    pass


class UnterminatedDateIntroducer(DateError):
    def __init__(self):
        super().__init__("%D: unopened date expression; use like %D{format}")


class UnterminatedFormat(DateError):
    def __init__(self, fmt: str):
        super().__init__(f"%D: unclosed date expression: {{{fmt}")
        self.fmt = fmt
