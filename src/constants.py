PROGRAM_NAME = "rush"
VERSION = "0.1.0"

# Prompt template variables and their defaults. PS0 and PS2 are reserved.
PS0_VAR, PS0_DEFAULT = "PS0", ""
PS1_VAR, PS1_DEFAULT = "PS1", "rush$ "
PS2_VAR, PS2_DEFAULT = "PS2", "> "
PS4_VAR, PS4_DEFAULT = "PS4", "+ "

# readline markers for the start/end of invisible prompt text
ZERO_WIDTH_START = "\x01"
ZERO_WIDTH_END = "\x02"

HEX_ESCAPE_MAX_DIGITS = 8
OCTAL_ESCAPE_MAX_DIGITS = 3

MAX_HISTORY = 5000

# Substituted when a lookup for a prompt field fails
DATE_FORMAT_FALLBACK = "???"
LOOKUP_FALLBACK = "err"
CWD_FALLBACK = "???"
WEEKDAY_FALLBACK = "???, ??? ??"
CLOCK_FALLBACK = "??:??:??"
CLOCK_12H_SHORT_FALLBACK = "??:?? ?M"
CLOCK_24H_SHORT_FALLBACK = "??:??"
